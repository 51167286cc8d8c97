import os
import sys
from pathlib import Path

import pytest

# Headless Qt for the GUI tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import marks_transcriber
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from marks_transcriber.config import TranscriberConfig  # noqa: E402
from marks_transcriber.core.models.records import MarksRecords  # noqa: E402


# Common test fixtures
@pytest.fixture
def config(tmp_path: Path) -> TranscriberConfig:
    """Config whose storage file lives in a temp directory."""
    return TranscriberConfig(storage_path=tmp_path / "marks_records.json")


@pytest.fixture
def two_students() -> MarksRecords:
    """Store with "student A" and "student B", no marks yet."""
    records = MarksRecords()
    records.add_student("student A")
    records.add_student("student B")
    return records


@pytest.fixture
def marked_students(two_students: MarksRecords) -> MarksRecords:
    """student A = 1 1 1 (record 1), student B = 2 2 2 (record 2), A on top."""
    two_students.set_marks_at_top([1, 1, 1])
    two_students.sort_with("B")
    two_students.set_marks_at_top([2, 2, 2])
    two_students.sort_with("A")
    return two_students
