"""Parse the pasted student list into a fresh record store."""

from __future__ import annotations

import logging
from typing import List

from marks_transcriber.core.models.records import MarksRecords

logger = logging.getLogger(__name__)


def parse_roster(text: str) -> List[str]:
    """One student id per non-blank line, tabs turned into spaces."""
    students = []
    for line in text.splitlines():
        student_id = line.replace("\t", " ").rstrip()
        if student_id:
            students.append(student_id)
    return students


def build_records(text: str) -> MarksRecords:
    """Create a store with every student of the roster, in roster order."""
    records = MarksRecords()
    for student_id in parse_roster(text):
        records.add_student(student_id)
    logger.info(f"Declared {len(records)} students")
    return records
