"""NDJSON codec for metric records."""

import json
from collections.abc import Iterable

from evaldash.core.errors import RecordParseError
from evaldash.core.models import MetricRecord


def encode_record(record: MetricRecord) -> str:
    """Encode one record as a single JSON line terminated by a newline."""
    return json.dumps(record.to_dict(), ensure_ascii=False) + "\n"


def encode_records(records: Iterable[MetricRecord]) -> str:
    """Encode records to newline-delimited JSON.

    Args:
        records: An iterable of MetricRecord objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    return "".join(encode_record(record) for record in records)


def decode_record(line: str) -> MetricRecord:
    """Decode one NDJSON line into a record.

    Raises:
        RecordParseError: If the line is not a JSON object describing a
            valid record.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise RecordParseError(f"invalid JSON: {e.msg}") from e
    return MetricRecord.from_dict(data)


def decode_records(text: str, source: str = "<string>") -> list[MetricRecord]:
    """Decode NDJSON text into records, skipping blank lines.

    A single malformed line aborts the whole decode.

    Args:
        text: NDJSON content.
        source: Name used in error messages (usually a file path).

    Raises:
        RecordParseError: Naming the source and 1-based line number of the
            first malformed line.
    """
    records = []
    # Only "\n" separates records; other Unicode line breaks may sit in strings.
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            records.append(decode_record(line))
        except RecordParseError as e:
            raise RecordParseError(f"{source}:{lineno}: {e}") from e
    return records
