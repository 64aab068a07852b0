"""In-memory storage adapter for metric records."""

from evaldash.core.models import MetricRecord


class InMemoryMetricLog:
    """In-memory implementation of MetricLogPort.

    Stores records in a list. Suitable for testing and for embedding
    callers that do not need persistence.
    """

    def __init__(self, records: list[MetricRecord] | None = None) -> None:
        self._records: list[MetricRecord] = list(records or [])

    def append(self, record: MetricRecord) -> None:
        """Append a record to the log."""
        self._records.append(record)

    def read_all(self) -> list[MetricRecord]:
        """Read every record in append order."""
        return list(self._records)
