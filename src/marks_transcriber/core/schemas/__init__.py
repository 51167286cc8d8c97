"""
Schemas Package

JSON Schema for the transport format and its validator.
"""

from .validator import (
    validate_marks_records,
    ValidationError,
    MARKS_RECORDS_SCHEMA_VERSION,
)

__all__ = [
    "validate_marks_records",
    "ValidationError",
    "MARKS_RECORDS_SCHEMA_VERSION",
]
