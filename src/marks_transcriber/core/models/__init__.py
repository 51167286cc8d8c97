"""
Core Models Package

- Record: immutable student row (id, name, marks)
- MarksRecords: ordered mutable store of rows
"""

from .record import FIRST_RECORD_ID, Record
from .records import MarksRecords

__all__ = [
    "FIRST_RECORD_ID",
    "Record",
    "MarksRecords",
]
