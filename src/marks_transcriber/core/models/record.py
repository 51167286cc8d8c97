"""
Module: record

Purpose:
    Provides the Record dataclass - one student row of the transcription,
    holding the lazily assigned record identifier, the student name as
    typed in the roster, and the item marks read off the score sheet.

Key Functions:
    - Record.new(student_id): Fresh row with no identifier and no marks
    - Record.with_marks(marks, record_id): Copy with marks replaced
    - Record.to_row() / Record.from_row(row): Transport tuple conversion

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.records.MarksRecords
    - core.utils.serialization
    - core.utils.export
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Sequence

RecordId = int
StudentId = str
Marks = tuple[int, ...]

FIRST_RECORD_ID: RecordId = 1


@dataclass(frozen=True, slots=True)
class Record:
    """
    One student row.

    Attributes:
        record_id: Identifier assigned on first marks write, None before that
        student_id: Student name as declared in the roster
        marks: Item marks in sheet order (empty until recorded)

    Invariants:
        - Every mark is a non-negative integer
        - record_id, when set, is >= FIRST_RECORD_ID

    Example:
        >>> r = Record.new("student A").with_marks([1, 2, 3], record_id=1)
        >>> r.total_marks
        6
    """

    record_id: Optional[RecordId]
    student_id: StudentId
    marks: Marks = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if self.record_id is not None and self.record_id < FIRST_RECORD_ID:
            raise ValueError(f"Invalid record id: {self.record_id}")
        for mark in self.marks:
            if mark < 0:
                raise ValueError(f"Marks cannot be negative: {mark}")

    @classmethod
    def new(cls, student_id: StudentId) -> Record:
        """Create a row that has never had marks assigned."""
        return cls(record_id=None, student_id=student_id, marks=())

    def with_marks(self, marks: Iterable[int], record_id: RecordId) -> Record:
        """
        Return a copy with marks fully replaced.

        The identifier is only taken from ``record_id`` when this record
        does not already have one.
        """
        return replace(
            self,
            record_id=self.record_id if self.record_id is not None else record_id,
            marks=tuple(marks),
        )

    @property
    def has_id(self) -> bool:
        return self.record_id is not None

    @property
    def has_marks(self) -> bool:
        return bool(self.marks)

    @property
    def total_marks(self) -> int:
        """Sum of item marks, 0 when none are recorded."""
        return sum(self.marks)

    # ─────────────────────────────────────────────────────────────────────────
    # Transport Rows
    # ─────────────────────────────────────────────────────────────────────────

    def to_row(self) -> list[Any]:
        """Serialize as ``[record_id-or-null, student_id, [marks...]]``."""
        return [self.record_id, self.student_id, list(self.marks)]

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Record:
        """Inverse of to_row. Assumes the row already passed validation."""
        record_id, student_id, marks = row
        return cls(record_id=record_id, student_id=student_id, marks=tuple(marks))
