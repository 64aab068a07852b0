"""Core domain models for metric records."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from evaldash.core.errors import RecordParseError

# Keys written for every record; everything else is metadata.
BUILTIN_FIELDS = ("timestamp", "type", "value")


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as an ISO-8601 UTC string with millisecond precision.

    Args:
        moment: Aware or naive datetime. Naive values are treated as local
            time. Defaults to now.

    Returns:
        String such as ``2026-02-21T10:15:00.000Z``.
    """
    moment = (moment or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    Timestamps without an offset are interpreted as host local time.

    Raises:
        RecordParseError: If the string is not ISO-8601.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise RecordParseError(f"invalid timestamp: {value!r}") from e
    return parsed.astimezone()


@dataclass(frozen=True)
class MetricRecord:
    """A single logged metric event.

    Attributes:
        timestamp: ISO-8601 date-time string assigned at write time.
        type: Free-form metric type (e.g., build_time).
        value: The measured value.
        metadata: Additional free-form fields stored alongside the record.
    """

    timestamp: str
    type: str
    value: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetricRecord":
        """Build a record from its flat serialized form.

        Raises:
            RecordParseError: If timestamp, type or value are missing or
                have the wrong type.
        """
        if not isinstance(data, Mapping):
            raise RecordParseError("record must be a JSON object")

        timestamp = data.get("timestamp")
        metric_type = data.get("type")
        value = data.get("value")

        if not isinstance(timestamp, str) or not timestamp:
            raise RecordParseError("record timestamp must be a non-empty string")
        parse_timestamp(timestamp)
        if not isinstance(metric_type, str) or not metric_type:
            raise RecordParseError("record type must be a non-empty string")
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
        ):
            raise RecordParseError(
                f"record value must be a finite number, got {value!r}"
            )

        metadata = {k: v for k, v in data.items() if k not in BUILTIN_FIELDS}
        return cls(
            timestamp=timestamp,
            type=metric_type,
            value=float(value),
            metadata=metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the flat serialized form with metadata merged in."""
        return {
            "timestamp": self.timestamp,
            "type": self.type,
            "value": self.value,
            **self.metadata,
        }

    def parsed_timestamp(self) -> datetime:
        """Return the timestamp as an aware datetime."""
        return parse_timestamp(self.timestamp)


def record(
    metric_type: str,
    value: float,
    metadata: Mapping[str, Any] | None = None,
    timestamp: str | None = None,
) -> MetricRecord:
    """Create a metric record stamped with the current time.

    Metadata keys overwrite the built-in fields when they collide.

    Args:
        metric_type: Metric type (e.g., "build_time")
        value: Measured value
        metadata: Optional extra fields
        timestamp: Explicit ISO-8601 timestamp (default: now)

    Returns:
        MetricRecord ready to append

    Raises:
        RecordParseError: If the merged fields do not form a valid record.
    """
    data: dict[str, Any] = {
        "timestamp": timestamp or utc_timestamp(),
        "type": metric_type,
        "value": value,
        **(metadata or {}),
    }
    return MetricRecord.from_dict(data)


@dataclass(frozen=True)
class ProactivityReport:
    """Score summary produced by the proactivity evaluator.

    Attributes:
        proactivity_score: Overall score logged as the record value.
        total_issues: Number of issues found.
        actionable_issues: Issues with a suggested action.
        critical_issues: Issues flagged as critical.
    """

    proactivity_score: float
    total_issues: int = 0
    actionable_issues: int = 0
    critical_issues: int = 0
