"""Record encodings."""

from evaldash.core.encoding.ndjson import (
    decode_record,
    decode_records,
    encode_record,
    encode_records,
)

__all__ = [
    "decode_record",
    "decode_records",
    "encode_record",
    "encode_records",
]
