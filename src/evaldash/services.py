"""Application services wiring storage, aggregation and formatters.

Every service receives its collaborators at construction; nothing reads
configuration from the environment here.
"""

import logging
import sys
from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from evaldash.adapters.rendering.html import render_dashboard
from evaldash.adapters.rendering.text import render_empty_window, render_synthesis
from evaldash.core.models import MetricRecord, ProactivityReport, record
from evaldash.core.ports import MetricLogPort, ProactivityEvaluatorPort
from evaldash.core.report import SynthesisReport, build_dashboard, build_synthesis

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_WINDOW_DAYS = 7
PROACTIVITY_TYPE = "proactivity"
NO_METRICS_NOTICE = "No metrics logged yet. Use: eval-dashboard log <type> <value>"


def local_now() -> datetime:
    """Return the current host local time as an aware datetime."""
    return datetime.now().astimezone()


def log_metric(
    log: MetricLogPort,
    metric_type: str,
    value: float,
    metadata: Mapping[str, Any] | None = None,
) -> MetricRecord:
    """Create a record stamped with the current time and append it.

    Raises:
        RecordParseError: If the merged record is invalid; nothing is written.
        OSError: If the log cannot be written.
    """
    entry = record(metric_type, value, metadata)
    log.append(entry)
    return entry


class Dashboard:
    """Renders the static HTML dashboard for every logged record.

    Args:
        log: Source of records.
        output_path: File overwritten on each generation.
        out: Stream for the no-metrics notice (default: stdout).
        clock: Source of the generation time.
    """

    def __init__(
        self,
        log: MetricLogPort,
        output_path: Path,
        out: TextIO | None = None,
        clock: Clock = local_now,
    ) -> None:
        self._log = log
        self._output_path = Path(output_path)
        self._out = out
        self._clock = clock

    def generate(self) -> Path | None:
        """Write the dashboard.

        Returns:
            The written path, or None when there are no records. In that
            case nothing is written and a notice is printed instead.
        """
        report = build_dashboard(self._log.read_all(), generated_at=self._clock())
        if report is None:
            print(NO_METRICS_NOTICE, file=self._out or sys.stdout)
            return None

        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_text(render_dashboard(report), encoding="utf-8")
        logger.info(
            "Dashboard generated at %s (%d types)",
            self._output_path,
            len(report.summaries),
        )
        return self._output_path


class Synthesizer:
    """Prints per-type statistics for a trailing time window.

    Args:
        log: Source of records.
        out: Reporting sink (default: stdout).
        clock: Source of the window end, host local time.
    """

    def __init__(
        self,
        log: MetricLogPort,
        out: TextIO | None = None,
        clock: Clock = local_now,
    ) -> None:
        self._log = log
        self._out = out
        self._clock = clock

    def synthesize(self, days: float = DEFAULT_WINDOW_DAYS) -> SynthesisReport | None:
        """Print the synthesis for the last ``days`` days.

        Returns:
            The report, or None when the window holds no records.
        """
        out = self._out or sys.stdout
        report = build_synthesis(self._log.read_all(), days=days, now=self._clock())
        if report is None:
            print(render_empty_window(days), file=out)
            return None

        print(render_synthesis(report), file=out)
        return report


def evaluate_proactivity(
    log: MetricLogPort,
    evaluator: ProactivityEvaluatorPort,
    workspace: Path,
) -> ProactivityReport | None:
    """Run the evaluator and log its score as a ``proactivity`` record.

    Returns:
        The report, or None when no evaluator is available. Nothing is
        logged in that case.
    """
    report = evaluator.generate_report(workspace)
    if report is None:
        return None

    log_metric(
        log,
        PROACTIVITY_TYPE,
        report.proactivity_score,
        {
            "totalIssues": report.total_issues,
            "actionableIssues": report.actionable_issues,
            "criticalIssues": report.critical_issues,
        },
    )
    return report
