"""Tests for port interfaces and the in-memory adapter."""

from pathlib import Path

import pytest

from evaldash.adapters.storage.in_memory import InMemoryMetricLog
from evaldash.adapters.storage.jsonl import JsonlMetricLog
from evaldash.core.models import MetricRecord, ProactivityReport
from evaldash.core.ports import MetricLogPort, ProactivityEvaluatorPort

TS = "2026-02-21T10:00:00.000Z"


class TestMetricLogPort:
    """Tests for MetricLogPort protocol."""

    @pytest.mark.core
    def test_protocol_has_append_and_read_all(self) -> None:
        """MetricLogPort defines append() and read_all()."""
        assert hasattr(MetricLogPort, "append")
        assert hasattr(MetricLogPort, "read_all")

    @pytest.mark.core
    def test_class_implementing_protocol_is_recognized(self) -> None:
        """A class with append and read_all satisfies MetricLogPort."""

        class FakeLog:
            def append(self, record: MetricRecord) -> None:
                pass

            def read_all(self) -> list[MetricRecord]:
                return []

        assert isinstance(FakeLog(), MetricLogPort)

    @pytest.mark.storage
    @pytest.mark.parametrize("factory", [InMemoryMetricLog, JsonlMetricLog])
    def test_adapters_implement_port(self, factory: type, tmp_path: Path) -> None:
        """Both storage adapters satisfy MetricLogPort."""
        log = factory(tmp_path / "m.jsonl") if factory is JsonlMetricLog else factory()
        assert isinstance(log, MetricLogPort)


class TestProactivityEvaluatorPort:
    """Tests for ProactivityEvaluatorPort protocol."""

    @pytest.mark.core
    def test_class_implementing_protocol_is_recognized(self) -> None:
        """A class with generate_report satisfies the port."""

        class FakeEvaluator:
            def generate_report(self, workspace: Path) -> ProactivityReport | None:
                return None

        assert isinstance(FakeEvaluator(), ProactivityEvaluatorPort)


class TestInMemoryMetricLog:
    """Tests for InMemoryMetricLog adapter."""

    @pytest.mark.storage
    def test_read_returns_empty_when_no_records(self) -> None:
        """Read returns an empty list when storage is empty."""
        assert InMemoryMetricLog().read_all() == []

    @pytest.mark.storage
    def test_append_preserves_order(self) -> None:
        """Records come back in append order, not timestamp order."""
        log = InMemoryMetricLog()
        later = MetricRecord(timestamp="2026-02-22T00:00:00.000Z", type="t", value=1.0)
        earlier = MetricRecord(timestamp=TS, type="t", value=2.0)

        log.append(later)
        log.append(earlier)

        assert log.read_all() == [later, earlier]

    @pytest.mark.storage
    def test_read_all_returns_a_copy(self) -> None:
        """Mutating the returned list does not change the log."""
        log = InMemoryMetricLog([MetricRecord(timestamp=TS, type="t", value=1.0)])

        log.read_all().clear()

        assert len(log.read_all()) == 1
