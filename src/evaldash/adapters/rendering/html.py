"""Static HTML formatter for the dashboard report."""

from datetime import datetime
from html import escape

from evaldash.core.report import (
    RECENT_LIMIT,
    DashboardReport,
    RecentEntry,
    TypeSummary,
    format_value,
)

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DASHBOARD_STYLE = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, "Segoe UI", Roboto, sans-serif;
            background: #0a0a0a;
            color: #e0e0e0;
            padding: 2rem;
        }
        .container { max-width: 1200px; margin: 0 auto; }
        header {
            border-bottom: 1px solid #2a2a2a;
            padding-bottom: 2rem;
            margin-bottom: 3rem;
        }
        h1 { font-size: 2rem; margin-bottom: 0.5rem; }
        .tagline { color: #888; font-size: 1.1rem; }
        .stats-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 1.5rem;
            margin-bottom: 3rem;
        }
        .stat-card, .recent {
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            border-radius: 8px;
            padding: 1.5rem;
        }
        .stat-card h2, .recent h2 {
            font-size: 1.2rem;
            margin-bottom: 1rem;
            color: #00d4ff;
        }
        .stat-row, .metric-entry {
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 0.5rem 0;
            border-bottom: 1px solid #2a2a2a;
        }
        .stat-row:last-child, .metric-entry:last-child { border-bottom: none; }
        .stat-label, .metric-time { color: #888; }
        .metric-time { font-size: 0.85rem; }
        .stat-value { font-weight: 600; }
        .metric-type { font-weight: 600; color: #00d4ff; }
        .metric-value { font-size: 1.5rem; font-weight: 700; }
        footer {
            margin-top: 3rem;
            padding-top: 2rem;
            border-top: 1px solid #2a2a2a;
            text-align: center;
            color: #888;
            font-size: 0.9rem;
        }
"""


def format_local_time(moment: datetime) -> str:
    """Format an aware datetime in host local time."""
    return moment.astimezone().strftime(LOCAL_TIME_FORMAT)


def _stat_row(label: str, value: str) -> str:
    return (
        '                <div class="stat-row">\n'
        f'                    <span class="stat-label">{label}</span>\n'
        f'                    <span class="stat-value">{value}</span>\n'
        "                </div>\n"
    )


def render_summary_card(summary: TypeSummary) -> str:
    """Render one stat card for a metric type."""
    stats = summary.stats
    rows = (
        _stat_row("Mean", f"{stats.mean:.2f}")
        + _stat_row("Median", f"{stats.median:.2f}")
        + _stat_row("Min / Max", f"{stats.min:.2f} / {stats.max:.2f}")
        + _stat_row("Count", str(stats.count))
    )
    return (
        '            <div class="stat-card">\n'
        f"                <h2>{escape(summary.display_name)}</h2>\n"
        f"{rows}"
        "            </div>\n"
    )


def render_recent_entry(entry: RecentEntry) -> str:
    """Render one row of the recent events list."""
    name = escape(entry.display_name)
    when = format_local_time(entry.timestamp)
    return (
        '            <div class="metric-entry">\n'
        "                <div>\n"
        f'                    <div class="metric-type">{name}</div>\n'
        f'                    <div class="metric-time">{when}</div>\n'
        "                </div>\n"
        f'                <div class="metric-value">{format_value(entry.value)}</div>\n'
        "            </div>\n"
    )


def render_dashboard(report: DashboardReport) -> str:
    """Render the full dashboard document.

    Args:
        report: Dashboard model built by ``build_dashboard``.

    Returns:
        A standalone HTML5 document.
    """
    cards = "".join(render_summary_card(s) for s in report.summaries)
    recent = "".join(render_recent_entry(e) for e in report.recent)
    generated = format_local_time(report.generated_at)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Evaluation Dashboard</title>
    <style>{DASHBOARD_STYLE}    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>Evaluation Dashboard</h1>
            <p class="tagline">Performance tracking and metrics synthesis</p>
        </header>

        <div class="stats-grid">
{cards}        </div>

        <div class="recent">
            <h2>Recent Metrics (Last {RECENT_LIMIT})</h2>
{recent}        </div>

        <footer>
            <p>Evaluation Dashboard &bull; Generated {generated}</p>
        </footer>
    </div>
</body>
</html>
"""
