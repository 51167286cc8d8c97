"""
Schema Validation Utilities

Validates decoded transport payloads before they are turned into a
record store.

Two passes:
1. JSON Schema (`marks_records.schema.json`) for shape and types
2. Semantic checks the schema cannot express: identifiers are unique,
   below the stored counter, and all numbers are real integers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
MARKS_RECORDS_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_marks_records(data: Any) -> None:
    """
    Validate a decoded transport payload.

    Args:
        data: Result of ``json.loads`` on transport text

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Transport payload must be an object, got {type(data).__name__}",
            path="",
        )

    version = data.get("schema_version")
    if version != MARKS_RECORDS_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported marks records schema version: {version} "
            f"(expected {MARKS_RECORDS_SCHEMA_VERSION})",
            path="schema_version",
        )

    schema = _load_schema("marks_records")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e

    _validate_records(data["records"], data["next_record_id"])


def _validate_records(records: list[list[Any]], next_record_id: int) -> None:
    """Check identifiers and marks beyond what the schema covers."""
    if not _is_int(next_record_id):
        raise ValidationError(
            f"Invalid next_record_id: {next_record_id!r}",
            path="next_record_id",
        )

    seen: set[int] = set()
    for i, (record_id, _student_id, marks) in enumerate(records):
        path = f"records.{i}"
        if record_id is not None:
            if not _is_int(record_id):
                raise ValidationError(
                    f"Invalid record id: {record_id!r}",
                    path=f"{path}.0",
                )
            if record_id >= next_record_id:
                raise ValidationError(
                    f"Record id {record_id} not below next_record_id {next_record_id}",
                    path=f"{path}.0",
                )
            if record_id in seen:
                raise ValidationError(
                    f"Duplicate record id: {record_id}",
                    path=f"{path}.0",
                )
            seen.add(record_id)
        for j, mark in enumerate(marks):
            if not _is_int(mark):
                raise ValidationError(
                    f"Invalid mark: {mark!r} (must be non-negative integer)",
                    path=f"{path}.2.{j}",
                )
