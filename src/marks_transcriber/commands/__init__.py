"""
Commands Package

Typed parsing of the input line and of the student roster.
"""

from .parser import (
    AssignMarks,
    Clear,
    Command,
    Export,
    InvalidCommand,
    Query,
    parse_input,
    parse_marks,
)
from .roster import build_records, parse_roster

__all__ = [
    "AssignMarks",
    "Clear",
    "Command",
    "Export",
    "InvalidCommand",
    "Query",
    "parse_input",
    "parse_marks",
    "build_records",
    "parse_roster",
]
