"""
Module: core.utils.export

Purpose:
    Text renderings of a record store: the tab-separated export pasted
    into a spreadsheet, and the fixed-width view shown while typing.
    Both are derived fresh from the records and hold no state.

Key Functions:
    - export_text(records): Header row plus one TSV row per record
    - render_display(records): Fixed-width listing for the output pane
"""

from __future__ import annotations

from typing import Iterable

from ..models.record import Record

EXPORT_HEADER = "Record Id\tStudent Id\tTotal Marks\tItem Marks\n"

# Column widths of the display view
ID_WIDTH = 4
NAME_WIDTH = 24
TOTAL_WIDTH = 10


def _itemize(marks: Iterable[int]) -> str:
    return "\t".join(str(mark) for mark in marks)


def export_line(record: Record) -> str:
    """One export row; the id column is blank until marks are recorded."""
    record_id = "" if record.record_id is None else str(record.record_id)
    return (
        f"{record_id}\t{record.student_id}\t{record.total_marks}"
        f"\t{_itemize(record.marks)}\n"
    )


def export_text(records: Iterable[Record]) -> str:
    """
    Render records as tab-separated text in current store order.

    A record without marks yields a total of 0 and an empty item field.
    """
    return EXPORT_HEADER + "".join(export_line(record) for record in records)


def display_line(
    record: Record,
    *,
    id_width: int = ID_WIDTH,
    name_width: int = NAME_WIDTH,
    total_width: int = TOTAL_WIDTH,
) -> str:
    """
    One display row.

    Identifier left-justified (blank when unassigned), name padded and
    truncated, then ``total = [marks]`` when marks exist.
    """
    if record.record_id is None:
        line = " " * id_width
    else:
        line = f"{record.record_id:<{id_width}}"
    line += f"{record.student_id:<{name_width}.{name_width}}"
    if record.has_marks:
        line += f" {record.total_marks:>{total_width}} = {list(record.marks)}"
    return line + "\n"


def render_display(records: Iterable[Record], **widths: int) -> str:
    """Render every record with display_line."""
    return "".join(display_line(record, **widths) for record in records)
