"""
Unit Tests for the Record Store

Tests for MarksRecords: counts, top mutation, similarity sort, clear,
transport round trip, export and display.
"""

import pytest

from marks_transcriber.core.errors import DeserializationError, EmptyStoreError, MarksParseError
from marks_transcriber.core.models.record import FIRST_RECORD_ID, Record
from marks_transcriber.core.models.records import MarksRecords


class TestCounts:
    """Length and emptiness."""

    def test_new_when_created_then_empty(self):
        records = MarksRecords()
        assert len(records) == 0
        assert records.is_empty
        assert records.top is None
        assert records.next_record_id == FIRST_RECORD_ID

    def test_add_student_when_two_added_then_two_rows_in_order(self, two_students):
        assert len(two_students) == 2
        assert not two_students.is_empty
        assert [r.student_id for r in two_students] == ["student A", "student B"]
        assert all(r.record_id is None and r.marks == () for r in two_students)


class TestSetMarksAtTop:
    """Tests for set_marks_at_top."""

    def test_set_marks_when_empty_then_raises_and_unchanged(self):
        """Empty store fails with EmptyStoreError and stays empty."""
        records = MarksRecords()
        with pytest.raises(EmptyStoreError):
            records.set_marks_at_top([1, 1, 1])
        assert records.is_empty
        assert records.next_record_id == FIRST_RECORD_ID

    def test_set_marks_when_first_write_then_assigns_first_id(self, two_students):
        """First identifier goes to the top row; the other stays unassigned."""
        two_students.set_marks_at_top([1, 1, 1])
        assert two_students[0].record_id == FIRST_RECORD_ID
        assert two_students[0].student_id == "student A"
        assert two_students[0].marks == (1, 1, 1)
        assert two_students[1].record_id is None

    def test_update_scenario(self, two_students):
        """Sort, record, re-sort and overwrite across both students."""
        records = two_students
        records.set_marks_at_top([1, 1, 1])

        records.sort_with("B")
        assert records[0].student_id == "student B"
        records.set_marks_at_top([2, 2, 2])
        assert records[0].marks != records[1].marks
        assert records[0].record_id == FIRST_RECORD_ID + 1

        records.sort_with("A")
        assert records[0].student_id == "student A"
        records.set_marks_at_top([2, 2, 2])
        assert records[0].marks == records[1].marks == (2, 2, 2)
        assert records[0].record_id == FIRST_RECORD_ID

        records.set_marks_at_top([3, 3, 3])
        assert records[0].marks == (3, 3, 3)
        assert records[1].marks == (2, 2, 2)
        assert records[1].record_id == FIRST_RECORD_ID + 1

    def test_set_marks_when_repeated_then_id_assigned_once(self, two_students):
        two_students.set_marks_at_top([1])
        two_students.set_marks_at_top([4, 5])
        assert two_students[0].record_id == FIRST_RECORD_ID
        assert two_students[0].marks == (4, 5)
        assert two_students.next_record_id == FIRST_RECORD_ID + 1

    def test_set_marks_when_negative_then_raises_and_unchanged(self, two_students):
        """A rejected write leaves both the row and the counter alone."""
        with pytest.raises(MarksParseError, match="cannot be negative") as exc_info:
            two_students.set_marks_at_top([1, -2])
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert two_students[0] == Record.new("student A")
        assert two_students.next_record_id == FIRST_RECORD_ID

    def test_set_marks_when_empty_marks_then_id_still_assigned(self, two_students):
        two_students.set_marks_at_top([])
        assert two_students[0].record_id == FIRST_RECORD_ID
        assert two_students[0].marks == ()


class TestSortWith:
    """Tests for sort_with."""

    def test_sort_with_when_empty_then_noop(self):
        records = MarksRecords()
        records.sort_with("anything")
        assert records.is_empty

    def test_sort_with_when_query_then_descending_score(self):
        records = MarksRecords()
        for name in ["Jane Doe", "John Smith", "Amy Smithers"]:
            records.add_student(name)
        records.sort_with("john smi")
        assert records[0].student_id == "John Smith"

    def test_sort_with_when_mixed_ids_then_keeps_all_rows(self, two_students):
        """Rows with and without ids are sorted together, none dropped."""
        two_students.set_marks_at_top([1])
        two_students.add_student("student C")
        two_students.sort_with("C")
        assert two_students[0].student_id == "student C"
        assert len(two_students) == 3
        assert {r.student_id for r in two_students} == {"student A", "student B", "student C"}

    def test_sort_with_when_case_differs_then_still_matches(self, two_students):
        two_students.sort_with("STUDENT b")
        assert two_students[0].student_id == "student B"


class TestClear:
    """Tests for clear."""

    def test_clear_when_populated_then_empty(self, marked_students):
        marked_students.clear()
        assert marked_students.is_empty

    def test_clear_when_student_added_after_then_fresh_record(self, marked_students):
        marked_students.clear()
        marked_students.add_student("student C")
        assert marked_students[0] == Record.new("student C")

    def test_clear_when_marks_recorded_after_then_ids_not_reused(self, marked_students):
        """The counter survives clear so ids stay unique."""
        marked_students.clear()
        marked_students.add_student("student C")
        marked_students.set_marks_at_top([1])
        assert marked_students[0].record_id == FIRST_RECORD_ID + 2


class TestTransport:
    """Tests for to_transport_string / from_transport_string."""

    def test_roundtrip_when_populated_then_equal(self, marked_students):
        """Ids, names, marks and order all survive."""
        marked_students.add_student("student C")
        restored = MarksRecords.from_transport_string(marked_students.to_transport_string())
        assert restored == marked_students
        assert restored.records == marked_students.records
        assert restored.next_record_id == marked_students.next_record_id
        assert restored[2].record_id is None

    def test_roundtrip_when_empty_then_equal(self):
        records = MarksRecords()
        assert MarksRecords.from_transport_string(records.to_transport_string()) == records

    def test_roundtrip_when_unicode_name_then_preserved(self):
        records = MarksRecords()
        records.add_student("Zoë Ng 张")
        restored = MarksRecords.from_transport_string(records.to_transport_string())
        assert restored[0].student_id == "Zoë Ng 张"

    def test_roundtrip_when_restored_then_counter_continues(self, marked_students):
        restored = MarksRecords.from_transport_string(marked_students.to_transport_string())
        restored.add_student("student C")
        restored.sort_with("C")
        restored.set_marks_at_top([0])
        assert restored[0].record_id == FIRST_RECORD_ID + 2

    @pytest.mark.parametrize("text", ["", "not json", "[]", '{"records": []}'])
    def test_from_transport_when_malformed_then_raises(self, text):
        with pytest.raises(DeserializationError) as exc_info:
            MarksRecords.from_transport_string(text)
        assert exc_info.value.input == text
        assert exc_info.value.cause is not None

    def test_from_transport_when_deeply_nested_then_raises(self):
        """Nesting too deep for the JSON decoder is still a typed error."""
        text = "[" * 100000 + "]" * 100000
        with pytest.raises(DeserializationError) as exc_info:
            MarksRecords.from_transport_string(text)
        assert isinstance(exc_info.value.cause, RecursionError)

    def test_from_transport_when_lone_surrogate_then_sortable(self):
        """A JSON surrogate escape decodes to a name the scorer accepts."""
        text = '{"schema_version":1,"next_record_id":1,"records":[[null,"\\ud800x",[]],[null,"y",[]]]}'
        records = MarksRecords.from_transport_string(text)
        assert records[0].student_id == "\ud800x"

        records.sort_with("y")
        assert records[0].student_id == "y"
        records.sort_with("x")
        assert records[0].student_id == "\ud800x"


class TestExport:
    """Tests for export_text."""

    def test_export_when_two_marked_then_exact_table(self, two_students):
        two_students.set_marks_at_top([1, 1, 1])
        two_students.sort_with("B")
        two_students.set_marks_at_top([2, 2, 2])
        two_students.sort_with("A")
        assert two_students.export_text() == (
            "Record Id\tStudent Id\tTotal Marks\tItem Marks\n"
            "1\tstudent A\t3\t1\t1\t1\n"
            "2\tstudent B\t6\t2\t2\t2\n"
        )

    def test_export_when_no_marks_then_blank_id_and_zero_total(self, two_students):
        assert two_students.export_text() == (
            "Record Id\tStudent Id\tTotal Marks\tItem Marks\n"
            "\tstudent A\t0\t\n"
            "\tstudent B\t0\t\n"
        )

    def test_export_when_empty_then_header_only(self):
        assert MarksRecords().export_text() == "Record Id\tStudent Id\tTotal Marks\tItem Marks\n"


class TestDisplay:
    """Tests for the fixed-width display."""

    def test_render_when_no_marks_then_padded_name_only(self):
        records = MarksRecords()
        records.add_student("student A")
        assert str(records) == "    " + "student A".ljust(24) + "\n"

    def test_render_when_marks_then_total_and_list(self):
        records = MarksRecords([Record(1, "student A", (1, 1, 1))], next_record_id=2)
        assert records.render() == "1   " + "student A".ljust(24) + " " + "3".rjust(10) + " = [1, 1, 1]\n"

    def test_render_when_long_name_then_truncated(self):
        records = MarksRecords()
        records.add_student("x" * 30)
        assert records.render() == "    " + "x" * 24 + "\n"

    def test_render_when_custom_widths_then_applied(self):
        records = MarksRecords([Record(12, "abcdef", (2,))], next_record_id=13)
        assert records.render(id_width=3, name_width=4, total_width=2) == "12 abcd  2 = [2]\n"
