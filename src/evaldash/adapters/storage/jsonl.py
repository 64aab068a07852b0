"""Append-only NDJSON file storage for metric records.

There is no locking. Each append is one append-mode write of one line,
so concurrent writer processes get no guarantee beyond what the platform
gives a single small append.
"""

import logging
from pathlib import Path

from evaldash.core.encoding.ndjson import decode_records, encode_record
from evaldash.core.models import MetricRecord

logger = logging.getLogger(__name__)


class JsonlMetricLog:
    """File-backed implementation of MetricLogPort.

    Args:
        path: Location of the NDJSON log. The file and its parent
            directory are created on first append.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: MetricRecord) -> None:
        """Append a record as one line.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        line = encode_record(record)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(line)
        logger.debug("Appended %s record to %s", record.type, self._path)

    def read_all(self) -> list[MetricRecord]:
        """Read every record in append order.

        Returns an empty list when the file does not exist.

        Raises:
            RecordParseError: If any non-blank line is malformed.
            OSError: If the file exists but cannot be read.
        """
        if not self._path.exists():
            return []
        text = self._path.read_text(encoding="utf-8")
        records = decode_records(text, source=str(self._path))
        logger.debug("Read %d records from %s", len(records), self._path)
        return records
