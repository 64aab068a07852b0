"""Report models built from metric records.

Aggregation lives here; formatters in ``evaldash.adapters.rendering`` turn
these models into HTML or text without recomputing anything.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from evaldash.core.models import MetricRecord
from evaldash.core.stats import Stats, stats_for_records

RECENT_LIMIT = 20

# Bounds for windows too long for datetime; a day of slack keeps both
# convertible to any local offset.
EARLIEST_CUTOFF = datetime.min.replace(tzinfo=UTC) + timedelta(days=1)
LATEST_CUTOFF = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def format_type_name(metric_type: str) -> str:
    """Turn ``build_time`` into ``Build Time``.

    Only the first letter of each underscore-separated token is changed.
    """
    return " ".join(word[:1].upper() + word[1:] for word in metric_type.split("_"))


def format_value(value: float) -> str:
    """Format a raw value without a trailing ``.0`` for integral numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def group_by_type(
    records: Iterable[MetricRecord],
) -> dict[str, list[MetricRecord]]:
    """Group records by type, in first-seen type order."""
    groups: dict[str, list[MetricRecord]] = {}
    for record in records:
        groups.setdefault(record.type, []).append(record)
    return groups


@dataclass(frozen=True)
class TypeSummary:
    """Statistics section for one metric type."""

    type: str
    stats: Stats

    @property
    def display_name(self) -> str:
        return format_type_name(self.type)


@dataclass(frozen=True)
class RecentEntry:
    """One row of the recent events list."""

    type: str
    timestamp: datetime
    value: float

    @property
    def display_name(self) -> str:
        return format_type_name(self.type)


@dataclass(frozen=True)
class DashboardReport:
    """Per-type summaries plus the most recent events, newest first."""

    generated_at: datetime
    summaries: list[TypeSummary] = field(default_factory=list)
    recent: list[RecentEntry] = field(default_factory=list)


@dataclass(frozen=True)
class SynthesisReport:
    """Per-type summaries for records inside a trailing window."""

    days: float
    period_start: datetime
    period_end: datetime
    total: int
    summaries: list[TypeSummary] = field(default_factory=list)


def summarize_by_type(records: Iterable[MetricRecord]) -> list[TypeSummary]:
    """Build one TypeSummary per type, in first-seen type order."""
    summaries = []
    for metric_type, group in group_by_type(records).items():
        stats = stats_for_records(group)
        if stats is not None:
            summaries.append(TypeSummary(type=metric_type, stats=stats))
    return summaries


def build_dashboard(
    records: list[MetricRecord],
    generated_at: datetime,
    recent_limit: int = RECENT_LIMIT,
) -> DashboardReport | None:
    """Build the dashboard model.

    Args:
        records: All records in append order.
        generated_at: Generation time shown in the footer.
        recent_limit: Number of trailing records in the recent list.

    Returns:
        DashboardReport, or None when there are no records.
    """
    if not records:
        return None

    recent = [
        RecentEntry(type=r.type, timestamp=r.parsed_timestamp(), value=r.value)
        for r in reversed(records[-recent_limit:])
    ]
    return DashboardReport(
        generated_at=generated_at,
        summaries=summarize_by_type(records),
        recent=recent,
    )


def window_cutoff(now: datetime, days: float) -> datetime:
    """Return the start of a trailing window of ``days`` ending at ``now``.

    Windows reaching past the datetime range are clamped, so an enormous
    window covers every record and an enormous negative one covers none.
    """
    try:
        return now - timedelta(days=days)
    except OverflowError:
        return EARLIEST_CUTOFF if days > 0 else LATEST_CUTOFF


def build_synthesis(
    records: Iterable[MetricRecord],
    days: float,
    now: datetime,
) -> SynthesisReport | None:
    """Build the synthesis model for records strictly after the cutoff.

    Args:
        records: All records in append order.
        days: Window length in days; fractions allowed.
        now: Aware end of the window (host local wall-clock time).

    Returns:
        SynthesisReport, or None when the window holds no records.
    """
    cutoff = window_cutoff(now, days)
    in_window = [r for r in records if r.parsed_timestamp() > cutoff]
    if not in_window:
        return None

    return SynthesisReport(
        days=days,
        period_start=cutoff,
        period_end=now,
        total=len(in_window),
        summaries=summarize_by_type(in_window),
    )
