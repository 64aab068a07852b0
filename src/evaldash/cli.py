"""Command-line interface."""

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from evaldash import __version__
from evaldash.adapters.evaluators import load_proactivity_evaluator
from evaldash.adapters.rendering.text import render_record_line
from evaldash.adapters.storage.jsonl import JsonlMetricLog
from evaldash.config import Settings, configure_logging
from evaldash.core.errors import RecordParseError, UsageError
from evaldash.core.query import query_records
from evaldash.core.report import format_value
from evaldash.services import (
    DEFAULT_WINDOW_DAYS,
    Dashboard,
    Synthesizer,
    evaluate_proactivity,
    log_metric,
)

logger = logging.getLogger(__name__)

PROG = "eval-dashboard"

COMMAND_USAGE = {
    "log": f"{PROG} log <type> <value> [metadata-json]",
    "view": f"{PROG} view",
    "list": f"{PROG} list [type] [limit]",
    "synthesize": f"{PROG} synthesize [days]",
    "evaluate": f"{PROG} evaluate [workspace]",
}

USAGE = f"""
Evaluation Dashboard v{__version__}

Usage:
  {COMMAND_USAGE["log"]}
    Log a metric event

  {COMMAND_USAGE["view"]}
    Generate HTML dashboard

  {COMMAND_USAGE["list"]}
    List metrics (optionally filtered)

  {COMMAND_USAGE["synthesize"]}
    Generate synthesis report (default: {DEFAULT_WINDOW_DAYS} days)

  {COMMAND_USAGE["evaluate"]}
    Log a proactivity score (requires proactivity_evaluator)

Examples:
  {PROG} log efficiency_score 85
  {PROG} log clarity_score 92 '{{"file":"response.txt"}}'
  {PROG} log build_time 120 '{{"build":"010"}}'
  {PROG} view
  {PROG} synthesize 7

Metric Types:
  - efficiency_score (response monitor)
  - clarity_score (reasoning review)
  - cost_optimization (model router)
  - build_time (minutes)
  - test_coverage (%)
  - blog_posts (count)

Environment:
  EVAL_DATA_DIR          data directory (default: ./data)
  EVAL_LOG_LEVEL         diagnostic log level (default: WARNING)
  EVAL_EVALUATOR_MODULE  proactivity evaluator (default: proactivity_evaluator)
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False)
    sub = parser.add_subparsers(dest="command")

    log_parser = sub.add_parser("log", add_help=False)
    log_parser.add_argument("type", nargs="?")
    log_parser.add_argument("value", nargs="?")
    log_parser.add_argument("metadata", nargs="?")

    sub.add_parser("view", add_help=False)

    list_parser = sub.add_parser("list", add_help=False)
    list_parser.add_argument("type", nargs="?")
    list_parser.add_argument("limit", nargs="?")

    synth_parser = sub.add_parser("synthesize", add_help=False)
    synth_parser.add_argument("days", nargs="?")

    eval_parser = sub.add_parser("evaluate", add_help=False)
    eval_parser.add_argument("workspace", nargs="?")

    return parser


def parse_value(raw: str | None) -> float:
    """Parse a metric value, rejecting NaN and infinities."""
    try:
        value = float(raw) if raw is not None else math.nan
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise UsageError(f"value must be a number, got {raw!r}")
    return value


def parse_metadata(raw: str | None) -> dict[str, Any]:
    """Parse the optional metadata argument as a JSON object."""
    if not raw:
        return {}
    try:
        metadata = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RecordParseError(f"invalid metadata JSON: {e.msg}") from e
    if not isinstance(metadata, dict):
        raise RecordParseError("metadata must be a JSON object")
    return metadata


def parse_limit(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise UsageError(f"limit must be an integer, got {raw!r}") from e


def parse_days(raw: str | None) -> float:
    if not raw:
        return DEFAULT_WINDOW_DAYS
    try:
        days = float(raw)
    except ValueError as e:
        raise UsageError(f"days must be a number, got {raw!r}") from e
    if not math.isfinite(days):
        raise UsageError(f"days must be a number, got {raw!r}")
    return days


def cmd_log(args: argparse.Namespace, settings: Settings) -> int:
    if not args.type:
        raise UsageError("missing metric type")
    value = parse_value(args.value)
    metadata = parse_metadata(args.metadata)
    log = JsonlMetricLog(settings.metrics_file)
    entry = log_metric(log, args.type, value, metadata)
    print(f"✓ Logged: {entry.type} = {format_value(entry.value)}")
    return 0


def cmd_view(args: argparse.Namespace, settings: Settings) -> int:
    log = JsonlMetricLog(settings.metrics_file)
    dashboard = Dashboard(log, settings.dashboard_file)
    path = dashboard.generate()
    if path is not None:
        print(f"✓ Dashboard generated: {path}")
    return 0


def cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    limit = parse_limit(args.limit)
    records = query_records(
        JsonlMetricLog(settings.metrics_file).read_all(),
        type_filter=args.type,
        limit=limit,
    )
    if not records:
        print("No metrics found.")
        return 0
    for entry in records:
        print(render_record_line(entry))
    return 0


def cmd_synthesize(args: argparse.Namespace, settings: Settings) -> int:
    days = parse_days(args.days)
    Synthesizer(JsonlMetricLog(settings.metrics_file)).synthesize(days)
    return 0


def cmd_evaluate(args: argparse.Namespace, settings: Settings) -> int:
    evaluator = load_proactivity_evaluator(settings.evaluator_module)
    workspace = Path(args.workspace) if args.workspace else Path.cwd()
    report = evaluate_proactivity(
        JsonlMetricLog(settings.metrics_file), evaluator, workspace
    )
    if report is None:
        print("Proactivity report not available. Nothing logged.")
    else:
        score = format_value(report.proactivity_score)
        print(f"✓ Logged: proactivity = {score}")
    return 0


COMMANDS = {
    "log": cmd_log,
    "view": cmd_view,
    "list": cmd_list,
    "synthesize": cmd_synthesize,
    "evaluate": cmd_evaluate,
}


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the CLI and return the process exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("help", "-h", "--help"):
        print(USAGE)
        return 0

    command = argv[0]
    if command not in COMMANDS:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(f'Run "{PROG} help" for usage.', file=sys.stderr)
        return 1

    try:
        settings = settings or Settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    try:
        args = build_parser().parse_args(argv)
        return COMMANDS[command](args, settings)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Usage: {COMMAND_USAGE[command]}", file=sys.stderr)
        return 1
    except RecordParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("Filesystem error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
