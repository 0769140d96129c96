"""
Unit tests for row parsing into typed records.
"""

from datetime import date, datetime, timezone

import pytest

from data.models import Employee, EmployeeSummary, RowFormatError, SessionRecord


def _session_row(**overrides):
    row = {
        "id": 7,
        "created_at": "2024-06-01T09:00:00Z",
        "session_date": "2024-06-01",
        "duration_minutes": 45,
        "notes": "Quarterly check-in",
        "employee_id": 3,
        "employees": {"first_name": "Naomi", "last_name": "Nagata", "program": "Engineering", "avatar_url": None},
    }
    row.update(overrides)
    return row


class TestEmployeeFromRow:
    """Tests for Employee.from_row."""

    def test_full_row(self):
        row = {
            "id": 1,
            "first_name": "Ann",
            "last_name": "Lee",
            "program": "X",
            "email": "ann@example.com",
            "company_details": "Acme",
            "avatar_url": "https://example.com/a.png",
        }
        emp = Employee.from_row(row)
        assert emp.full_name == "Ann Lee"
        assert emp.email == "ann@example.com"
        assert emp.avatar_url == "https://example.com/a.png"

    def test_optional_fields_default_to_none(self):
        emp = Employee.from_row({"id": "uuid-1", "first_name": "Bo", "last_name": "Kim", "program": "Y"})
        assert emp.id == "uuid-1"
        assert emp.avatar_url is None
        assert emp.email is None

    def test_blank_avatar_is_none(self):
        emp = Employee.from_row({"id": 1, "first_name": "A", "last_name": "B", "program": "", "avatar_url": "  "})
        assert emp.avatar_url is None

    def test_missing_id_raises(self):
        with pytest.raises(RowFormatError):
            Employee.from_row({"first_name": "A", "last_name": "B", "program": "X"})


class TestSessionFromRow:
    """Tests for SessionRecord.from_row on the nested join shape."""

    def test_parses_joined_row(self):
        s = SessionRecord.from_row(_session_row())
        assert s.session_date == date(2024, 6, 1)
        assert s.duration_minutes == 45
        assert s.employee == EmployeeSummary("Naomi", "Nagata", "Engineering")
        assert s.created_at == datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

    def test_missing_join_returns_none(self):
        """An unresolved employee join is excluded rather than modeled as null."""
        assert SessionRecord.from_row(_session_row(employees=None)) is None
        row = _session_row()
        del row["employees"]
        assert SessionRecord.from_row(row) is None

    def test_single_element_list_embed(self):
        s = SessionRecord.from_row(_session_row(employees=[{"first_name": "A", "last_name": "B", "program": "P"}]))
        assert s.employee.full_name == "A B"

    def test_timestamp_session_date(self):
        s = SessionRecord.from_row(_session_row(session_date="2024-05-31T23:00:00+00:00"))
        assert s.session_date == date(2024, 5, 31)

    def test_null_notes_become_empty(self):
        assert SessionRecord.from_row(_session_row(notes=None)).notes == ""

    def test_integral_float_duration(self):
        assert SessionRecord.from_row(_session_row(duration_minutes=30.0)).duration_minutes == 30

    @pytest.mark.parametrize("bad", [-5, "abc", 12.5, True])
    def test_invalid_duration_raises(self, bad):
        with pytest.raises(RowFormatError):
            SessionRecord.from_row(_session_row(duration_minutes=bad))

    def test_invalid_date_raises(self):
        with pytest.raises(RowFormatError):
            SessionRecord.from_row(_session_row(session_date="not a date"))

    def test_missing_duration_raises(self):
        row = _session_row()
        del row["duration_minutes"]
        with pytest.raises(RowFormatError):
            SessionRecord.from_row(row)


class TestEmployeeSummary:
    """Tests for display helpers."""

    def test_initials(self):
        assert EmployeeSummary("ann", "lee", "X").initials == "AL"

    def test_initials_with_blank_names(self):
        assert EmployeeSummary("", "", "X").initials == ""
