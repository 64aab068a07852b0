"""Plain-text formatters for terminal output."""

from evaldash.core.models import MetricRecord, utc_timestamp
from evaldash.core.report import SynthesisReport, format_value

LOCAL_DATE_FORMAT = "%Y-%m-%d"


def _format_days(days: float) -> str:
    return format_value(days)


def render_record_line(record: MetricRecord) -> str:
    """Render ``<timestamp> | <type> = <value>`` with a normalized UTC timestamp."""
    timestamp = utc_timestamp(record.parsed_timestamp())
    return f"{timestamp} | {record.type} = {format_value(record.value)}"


def render_empty_window(days: float) -> str:
    return f"No metrics in last {_format_days(days)} days."


def render_synthesis(report: SynthesisReport) -> str:
    """Render the synthesis report.

    Dates in the period line are host local calendar dates.
    """
    start = report.period_start.astimezone().strftime(LOCAL_DATE_FORMAT)
    end = report.period_end.astimezone().strftime(LOCAL_DATE_FORMAT)
    lines = [
        "",
        f"=== {_format_days(report.days)}-Day Synthesis ===",
        "",
        f"Period: {start} - {end}",
        f"Total metrics: {report.total}",
        "",
    ]
    for summary in report.summaries:
        stats = summary.stats
        lines.extend(
            [
                f"{summary.display_name}:",
                f"  Count: {stats.count}",
                f"  Mean: {stats.mean:.2f}",
                f"  Median: {stats.median:.2f}",
                f"  Range: {stats.min:.2f} - {stats.max:.2f}",
                "",
            ]
        )
    return "\n".join(lines)
