"""Port interfaces for storage and evaluator adapters.

These protocols define the contracts that adapters must implement.
The core domain and services depend only on these interfaces, not on
concrete implementations.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from evaldash.core.models import MetricRecord, ProactivityReport


@runtime_checkable
class MetricLogPort(Protocol):
    """Port for append-only metric log operations.

    Adapters implementing this protocol store records and return them in
    append order. Examples: JsonlMetricLog, InMemoryMetricLog.
    """

    def append(self, record: MetricRecord) -> None:
        """Append a record to the log."""
        ...

    def read_all(self) -> list[MetricRecord]:
        """Read every record in append order.

        Returns:
            List of MetricRecord objects. Empty if nothing was logged.
        """
        ...


@runtime_checkable
class ProactivityEvaluatorPort(Protocol):
    """Port for the optional proactivity evaluator collaborator."""

    def generate_report(self, workspace: Path) -> ProactivityReport | None:
        """Evaluate a workspace.

        Returns:
            ProactivityReport, or None when no evaluator is available.
        """
        ...
