"""evaldash - local metric logging, dashboards and synthesis reports."""

from evaldash.adapters.storage import InMemoryMetricLog, JsonlMetricLog
from evaldash.core.errors import EvalDashError, RecordParseError, UsageError
from evaldash.core.models import MetricRecord, record
from evaldash.core.query import query_records
from evaldash.core.stats import Stats, compute_stats
from evaldash.services import (
    Dashboard,
    Synthesizer,
    evaluate_proactivity,
    log_metric,
)

__version__ = "1.0.0"

__all__ = [
    "Dashboard",
    "EvalDashError",
    "InMemoryMetricLog",
    "JsonlMetricLog",
    "MetricRecord",
    "RecordParseError",
    "Stats",
    "Synthesizer",
    "UsageError",
    "compute_stats",
    "evaluate_proactivity",
    "log_metric",
    "query_records",
    "record",
]
