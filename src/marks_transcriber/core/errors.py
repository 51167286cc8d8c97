"""
Module: core.errors

Purpose:
    Typed exceptions for every failure the core, the command parser and
    the persistence layer can report. Callers catch these explicitly;
    nothing in the package raises a bare Exception for a data problem.

Key Classes:
    - MarksTranscriberError: Common base class
    - EmptyStoreError: Top mutation on a store with no records
    - SerializationFault: Transport encoding failed (unreachable for sane state)
    - DeserializationError: Transport text is malformed
    - MarksParseError: Marks assignment line could not be parsed
    - UnknownCommandError: Unrecognized ":" escape
    - StorageError: Key-value store could not persist a value

Used By:
    - core.models.records
    - core.utils.serialization
    - commands.parser
    - session.storage, session.controller
"""

from __future__ import annotations


class MarksTranscriberError(Exception):
    """Base class for all Marks Transcriber errors."""


class EmptyStoreError(MarksTranscriberError):
    """Raised when marks are recorded but the store holds no students."""

    def __init__(self, message: str = "no student record") -> None:
        super().__init__(message)


class SerializationFault(MarksTranscriberError):
    """Raised when the record store cannot be encoded to transport text."""


class DeserializationError(MarksTranscriberError):
    """
    Raised when transport text cannot be decoded into a record store.

    Attributes:
        input: The offending text, verbatim
        cause: The underlying exception (JSON decode or validation error)
    """

    def __init__(self, input: str, cause: BaseException) -> None:
        super().__init__(f"failed deserializing {input!r}: {cause}")
        self.input = input
        self.cause = cause


class MarksParseError(MarksTranscriberError):
    """Raised when a marks assignment line has a bad field count or token."""


class UnknownCommandError(MarksTranscriberError):
    """Raised for a ":" escape that is not a known command."""


class StorageError(MarksTranscriberError):
    """Raised when a key-value store fails to write."""
