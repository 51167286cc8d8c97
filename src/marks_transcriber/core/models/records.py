"""
Module: records

Purpose:
    Provides MarksRecords - the ordered, mutable container of student
    rows. The row at index 0 ("the top record") is the implicit target
    of marks entry; typing a query re-sorts the rows by name similarity
    so the wanted student rises to the top.

Key Classes:
    - MarksRecords: add_student, set_marks_at_top, sort_with, clear,
      transport round trip, TSV export and display rendering

Dependencies:
    - core.similarity: Name scoring for sort_with
    - core.utils: Transport and export formats

Used By:
    - commands.roster
    - session.controller
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..errors import EmptyStoreError, MarksParseError
from ..similarity import score
from ..utils.export import export_text, render_display
from ..utils.serialization import dumps_transport, loads_transport
from .record import FIRST_RECORD_ID, Record, RecordId, StudentId

logger = logging.getLogger(__name__)


class MarksRecords:
    """
    Container of student marks.

    Rows keep insertion order until sort_with reorders them. Record ids
    come from a counter that only moves forward; clearing the rows does
    not rewind it, so an id is never handed out twice.

    Example:
        >>> store = MarksRecords()
        >>> store.add_student("student A")
        >>> store.add_student("student B")
        >>> store.sort_with("B")
        >>> store.set_marks_at_top([2, 2, 2])
        >>> store.top.student_id, store.top.record_id
        ('student B', 1)
    """

    def __init__(
        self,
        records: Optional[Iterable[Record]] = None,
        next_record_id: RecordId = FIRST_RECORD_ID,
    ) -> None:
        self._records: list[Record] = list(records or [])
        self._next_record_id = next_record_id

    # ─────────────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarksRecords):
            return NotImplemented
        return (
            self._next_record_id == other._next_record_id
            and self._records == other._records
        )

    def __repr__(self) -> str:
        return (
            f"MarksRecords(next_record_id={self._next_record_id}, "
            f"records={self._records!r})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def next_record_id(self) -> RecordId:
        return self._next_record_id

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of the rows in current order."""
        return tuple(self._records)

    @property
    def top(self) -> Optional[Record]:
        """The row that the next marks entry will update."""
        return self._records[0] if self._records else None

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add_student(self, student_id: StudentId) -> None:
        """Add student with empty marks."""
        self._records.append(Record.new(student_id))

    def set_marks_at_top(self, marks: Iterable[int]) -> None:
        """
        Update marks of the record at the top.

        Marks are replaced wholesale. The first write to a row also gives
        it the next record id; later writes keep that id.

        Raises:
            EmptyStoreError: If there are no rows
            MarksParseError: If a mark is negative (store left unchanged)
        """
        if not self._records:
            raise EmptyStoreError()

        top = self._records[0]
        try:
            updated = top.with_marks(marks, record_id=self._next_record_id)
        except ValueError as e:
            raise MarksParseError(str(e)) from e
        self._records[0] = updated
        if not top.has_id:
            self._next_record_id += 1
        logger.debug(
            f"Recorded marks {list(updated.marks)} for {updated.student_id!r} "
            f"(record {updated.record_id})"
        )

    def sort_with(self, query: str) -> None:
        """
        Sort records by descending similarity of student id with ``query``.

        The sort is stable, so rows with equal scores keep their previous
        relative order.
        """
        self._records.sort(
            key=lambda record: score(record.student_id, query),
            reverse=True,
        )

    def clear(self) -> None:
        """Drop every row. The record id counter is kept."""
        self._records.clear()

    # ─────────────────────────────────────────────────────────────────────────
    # Formats
    # ─────────────────────────────────────────────────────────────────────────

    def to_transport_string(self) -> str:
        """
        Lossless JSON text of the whole store.

        Raises:
            SerializationFault: If encoding fails
        """
        return dumps_transport(self._next_record_id, self._records)

    @classmethod
    def from_transport_string(cls, text: str) -> MarksRecords:
        """
        Rebuild a store from to_transport_string output.

        Raises:
            DeserializationError: If the text is malformed
        """
        next_record_id, records = loads_transport(text)
        return cls(records, next_record_id=next_record_id)

    def export_text(self) -> str:
        """Tab-separated table for pasting into a spreadsheet."""
        return export_text(self._records)

    def render(self, **widths: int) -> str:
        """Fixed-width listing for on-screen display."""
        return render_display(self._records, **widths)
