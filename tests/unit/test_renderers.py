"""Tests for HTML and text formatters."""

from collections.abc import Callable
from datetime import datetime

import pytest

from evaldash.adapters.rendering.html import format_local_time, render_dashboard
from evaldash.adapters.rendering.text import (
    render_empty_window,
    render_record_line,
    render_synthesis,
)
from evaldash.core.models import MetricRecord
from evaldash.core.report import build_dashboard, build_synthesis

MakeRecord = Callable[..., MetricRecord]


@pytest.mark.reporting
class TestHtmlRenderer:
    """Tests for render_dashboard()."""

    def test_renders_stat_card_per_type(
        self, make_record: MakeRecord, fixed_now: datetime
    ) -> None:
        """Each type gets a card with two-decimal statistics."""
        records = [make_record("build_time", 120), make_record("build_time", 80)]
        report = build_dashboard(records, generated_at=fixed_now)
        assert report is not None

        html = render_dashboard(report)

        assert html.startswith("<!DOCTYPE html>")
        assert html.count('class="stat-card"') == 1
        assert "<h2>Build Time</h2>" in html
        assert "100.00" in html
        assert "80.00 / 120.00" in html
        assert "Recent Metrics (Last 20)" in html

    def test_recent_entries_show_raw_values_and_local_time(
        self, make_record: MakeRecord, fixed_now: datetime
    ) -> None:
        """Recent rows show the raw value and the local timestamp."""
        entry = make_record("clarity_score", 92.5, hours_ago=1)
        report = build_dashboard([entry], generated_at=fixed_now)
        assert report is not None

        html = render_dashboard(report)

        assert '<div class="metric-value">92.5</div>' in html
        assert format_local_time(entry.parsed_timestamp()) in html
        assert f"Generated {format_local_time(fixed_now)}" in html

    def test_escapes_record_text(
        self, make_record: MakeRecord, fixed_now: datetime
    ) -> None:
        """Type names are HTML-escaped."""
        report = build_dashboard(
            [make_record("<script>_x", 1)], generated_at=fixed_now
        )
        assert report is not None

        html = render_dashboard(report)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


@pytest.mark.reporting
class TestTextRenderer:
    """Tests for plain-text formatters."""

    def test_record_line_normalizes_timestamp(self) -> None:
        """List lines use UTC ISO-8601 with milliseconds."""
        entry = MetricRecord(
            timestamp="2026-02-21T12:00:00+02:00", type="build_time", value=120.0
        )
        assert (
            render_record_line(entry)
            == "2026-02-21T10:00:00.000Z | build_time = 120"
        )

    def test_empty_window_notice(self) -> None:
        """The notice names the window length."""
        assert render_empty_window(7) == "No metrics in last 7 days."
        assert render_empty_window(0.5) == "No metrics in last 0.5 days."

    def test_synthesis_layout(
        self, make_record: MakeRecord, fixed_now: datetime
    ) -> None:
        """The synthesis lists totals and per-type statistics."""
        records = [
            make_record("build_time", 120, hours_ago=2),
            make_record("build_time", 80, hours_ago=1),
        ]
        report = build_synthesis(records, days=7, now=fixed_now)
        assert report is not None

        text = render_synthesis(report)

        assert "=== 7-Day Synthesis ===" in text
        assert "Total metrics: 2" in text
        assert "Build Time:\n  Count: 2\n  Mean: 100.00\n  Median: 120.00" in text
        assert "  Range: 80.00 - 120.00" in text
        assert text.splitlines()[3].startswith("Period: ")
