"""
Module: commands.parser

Purpose:
    Classifies one typed line into a command. The set of commands is
    closed and every line maps to exactly one of them; parse failures
    come back as InvalidCommand instead of being raised.

Key Classes:
    - Query: Plain text used to re-sort rows
    - AssignMarks: ``<anything>=<space-separated integers>``
    - Export: ``:export``
    - Clear: ``:clear``
    - InvalidCommand: Carries MarksParseError or UnknownCommandError

Key Functions:
    - parse_input(line): Total classifier
    - parse_marks(text): Whitespace-separated non-negative integers

Used By:
    - session.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from marks_transcriber.core.errors import (
    MarksParseError,
    MarksTranscriberError,
    UnknownCommandError,
)
from marks_transcriber.core.models.record import Marks

ESCAPE = ":"
EXPORT_COMMAND = ":export"
CLEAR_COMMAND = ":clear"
ASSIGN_SEPARATOR = "="


@dataclass(frozen=True)
class Query:
    """Text to match against student ids."""
    text: str


@dataclass(frozen=True)
class AssignMarks:
    """Marks to write into the top row."""
    marks: Marks


@dataclass(frozen=True)
class Export:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class InvalidCommand:
    """A line that could not be classified, with the reason."""
    line: str
    error: MarksTranscriberError

    @property
    def message(self) -> str:
        return str(self.error)


Command = Union[Query, AssignMarks, Export, Clear, InvalidCommand]


def parse_marks(text: str) -> Marks:
    """
    Parse whitespace-separated marks.

    Args:
        text: Right-hand side of an assignment, e.g. ``" 1 2  3 "``

    Returns:
        Tuple of marks; empty for blank text

    Raises:
        MarksParseError: If a token is not a non-negative integer
    """
    marks = []
    for token in text.split():
        # isdigit() rejects signs, so "-1" and "+1" both fail here
        if not (token.isascii() and token.isdigit()):
            raise MarksParseError(f"invalid mark: {token!r}")
        marks.append(int(token))
    return tuple(marks)


def parse_input(line: str) -> Command:
    """
    Classify a typed line.

    Args:
        line: Raw text of the input box

    Returns:
        One of Query, AssignMarks, Export, Clear, InvalidCommand
    """
    if line == EXPORT_COMMAND:
        return Export()
    if line == CLEAR_COMMAND:
        return Clear()
    if line.startswith(ESCAPE):
        return InvalidCommand(line, UnknownCommandError(f"undefined escape: {line}"))
    if ASSIGN_SEPARATOR in line:
        fields = line.split(ASSIGN_SEPARATOR)
        if len(fields) != 2:
            return InvalidCommand(line, MarksParseError(f"invalid marks input: {line}"))
        try:
            return AssignMarks(parse_marks(fields[1]))
        except MarksParseError as e:
            return InvalidCommand(line, e)
    return Query(line)
