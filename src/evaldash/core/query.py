"""Record filtering by type and count."""

from collections.abc import Iterable

from evaldash.core.models import MetricRecord


def query_records(
    records: Iterable[MetricRecord],
    type_filter: str | None = None,
    limit: int | None = None,
) -> list[MetricRecord]:
    """Filter records by type and keep only the most recent ones.

    Args:
        records: Records in append order.
        type_filter: Exact, case-sensitive type to keep. None or "" keeps
            every type.
        limit: Keep only the last ``limit`` records after filtering.
            None, zero and negative values mean unlimited.

    Returns:
        Matching records in their original order. Never None.
    """
    result = list(records)

    if type_filter:
        result = [r for r in result if r.type == type_filter]

    # Falsy or negative limits are unlimited
    if limit and limit > 0:
        result = result[-limit:]

    return result
