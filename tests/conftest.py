"""Shared factories for dashboard tests."""

from datetime import date

import pytest

from data.models import Employee, EmployeeSummary, SessionRecord


def make_employee(emp_id, first, last, program, **kwargs):
    return Employee(id=emp_id, first_name=first, last_name=last, program=program, **kwargs)


def make_session(session_id, employee, duration, session_date=date(2024, 6, 1), notes=""):
    return SessionRecord(
        id=session_id,
        session_date=session_date,
        duration_minutes=duration,
        notes=notes,
        employee_id=employee.id,
        employee=EmployeeSummary(
            first_name=employee.first_name,
            last_name=employee.last_name,
            program=employee.program,
            avatar_url=employee.avatar_url,
        ),
    )


@pytest.fixture
def ann():
    return make_employee(1, "Ann", "Lee", "X")


@pytest.fixture
def bo():
    return make_employee(2, "Bo", "Kim", "Y")


@pytest.fixture
def roster(ann, bo):
    return [ann, bo]


@pytest.fixture
def two_sessions(ann, bo):
    return [
        make_session(10, ann, 30, session_date=date(2024, 6, 2)),
        make_session(11, bo, 45, session_date=date(2024, 6, 1)),
    ]
