"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from evaldash.adapters.storage.in_memory import InMemoryMetricLog
from evaldash.adapters.storage.jsonl import JsonlMetricLog
from evaldash.config import Settings
from evaldash.core.models import MetricRecord, utc_timestamp

# Fixed "now" used by time-dependent tests
FIXED_NOW = datetime(2026, 2, 21, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide a temporary data directory (not created yet)."""
    return tmp_path / "data"


@pytest.fixture
def metrics_path(data_dir: Path) -> Path:
    """Provide a temporary metric log path."""
    return data_dir / "metrics.jsonl"


@pytest.fixture
def jsonl_log(metrics_path: Path) -> JsonlMetricLog:
    """Fixture providing an empty file-backed metric log."""
    return JsonlMetricLog(metrics_path)


@pytest.fixture
def memory_log() -> InMemoryMetricLog:
    """Fixture providing an empty in-memory metric log."""
    return InMemoryMetricLog()


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings pointing at the temporary data directory."""
    return Settings(data_dir=data_dir, log_level="DEBUG")


@pytest.fixture
def fixed_now() -> datetime:
    """The fixed reference time for time-dependent tests."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> Callable[[], datetime]:
    """Clock that always returns the fixed reference time."""
    return lambda: fixed_now


@pytest.fixture
def make_record(fixed_now: datetime) -> Callable[..., MetricRecord]:
    """Factory fixture for records stamped relative to the fixed time.

    Usage:
        def test_something(make_record):
            entry = make_record("build_time", 120, hours_ago=2)
    """

    def _make(
        metric_type: str,
        value: float,
        hours_ago: float = 0,
        **metadata: object,
    ) -> MetricRecord:
        moment = fixed_now - timedelta(hours=hours_ago)
        return MetricRecord(
            timestamp=utc_timestamp(moment),
            type=metric_type,
            value=float(value),
            metadata=dict(metadata),
        )

    return _make
