"""Summary statistics over numeric series."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from evaldash.core.models import MetricRecord


@dataclass(frozen=True)
class Stats:
    """Summary statistics for one series.

    Attributes:
        mean: Arithmetic average.
        median: Element at index ``count // 2`` of the sorted series.
        min: Smallest value.
        max: Largest value.
        count: Number of values.
    """

    mean: float
    median: float
    min: float
    max: float
    count: int


def compute_stats(values: Sequence[float]) -> Stats | None:
    """Compute mean, median, min, max and count.

    The median is the upper median: for an even-length series it is the
    element just above the midpoint, not the average of the two middle
    elements. ``[1, 2, 3, 4]`` has median 3.

    Args:
        values: Numeric series.

    Returns:
        Stats, or None when the series is empty.
    """
    if not values:
        return None

    ordered = sorted(values)
    count = len(ordered)
    return Stats(
        mean=sum(values) / count,
        median=ordered[count // 2],
        min=ordered[0],
        max=ordered[-1],
        count=count,
    )


def stats_for_records(records: Iterable[MetricRecord]) -> Stats | None:
    """Compute statistics over the ``value`` field of records."""
    return compute_stats([r.value for r in records])
