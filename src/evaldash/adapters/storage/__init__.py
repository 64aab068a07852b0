"""Storage adapters implementing MetricLogPort."""

from evaldash.adapters.storage.in_memory import InMemoryMetricLog
from evaldash.adapters.storage.jsonl import JsonlMetricLog

__all__ = [
    "InMemoryMetricLog",
    "JsonlMetricLog",
]
