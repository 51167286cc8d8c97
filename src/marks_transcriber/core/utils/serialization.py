"""
Serialization Utilities

Provides the lossless transport format of a record store.

Layout:
    {"schema_version": 1,
     "next_record_id": <int>,
     "records": [[<id-or-null>, <student_id>, [<marks>...]], ...]}

- `serialize_marks_records` / `deserialize_marks_records` work on dicts
- `dumps_transport` / `loads_transport` wrap them with JSON text and map
  failures to the typed core errors
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from ..errors import DeserializationError, SerializationFault
from ..models.record import Record, RecordId
from ..schemas.validator import (
    MARKS_RECORDS_SCHEMA_VERSION,
    ValidationError,
    validate_marks_records,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Dict Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_marks_records(
    next_record_id: RecordId,
    records: Iterable[Record],
) -> dict[str, Any]:
    """
    Serialize store state to a dictionary.

    Args:
        next_record_id: Identifier counter state
        records: Records in current store order

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": MARKS_RECORDS_SCHEMA_VERSION,
        "next_record_id": next_record_id,
        "records": [record.to_row() for record in records],
    }


def deserialize_marks_records(data: Any) -> tuple[RecordId, list[Record]]:
    """
    Deserialize store state from a dictionary.

    Args:
        data: Dictionary from JSON

    Returns:
        Tuple of (next_record_id, records in stored order)

    Raises:
        ValidationError: If data is invalid
    """
    validate_marks_records(data)
    records = [Record.from_row(row) for row in data["records"]]
    return data["next_record_id"], records


# ─────────────────────────────────────────────────────────────────────────────
# Transport Text
# ─────────────────────────────────────────────────────────────────────────────

def dumps_transport(next_record_id: RecordId, records: Iterable[Record]) -> str:
    """
    Encode store state as transport text.

    Raises:
        SerializationFault: If encoding fails (not expected for valid records)
    """
    data = serialize_marks_records(next_record_id, records)
    try:
        return json.dumps(data, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationFault(f"failed serialization: {e}") from e


def loads_transport(text: str) -> tuple[RecordId, list[Record]]:
    """
    Decode transport text into store state.

    Raises:
        DeserializationError: If the text is not JSON (including nesting
            too deep to decode) or fails validation
    """
    try:
        data = json.loads(text)
        return deserialize_marks_records(data)
    except (json.JSONDecodeError, ValidationError, TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Rejected marks records transport text: {e}")
        raise DeserializationError(text, e) from e
