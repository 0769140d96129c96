"""
Derived view for the sessions dashboard.

`compute` is pure: it takes the two fetched snapshots plus the current
search/program inputs and returns everything the page displays. It is re-run
on every Streamlit rerun, so it stays a single linear pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from data.models import Employee, SessionRecord, RecordId


ALL_PROGRAMS = "All"


@dataclass(frozen=True)
class ViewState:
    filtered_sessions: tuple[SessionRecord, ...]
    total_sessions: int
    total_duration_minutes: int
    unique_employee_count: int
    available_programs: tuple[str, ...]

    @property
    def total_hours(self) -> int:
        # Half-up, not banker's rounding: 90 minutes reads as "2 hrs"
        return (self.total_duration_minutes + 30) // 60

    @property
    def is_empty(self) -> bool:
        return not self.filtered_sessions


def matches(session: SessionRecord, search_term: str, program_filter: str) -> bool:
    name = session.employee.full_name.lower()
    if search_term.lower() not in name:
        return False
    return program_filter == ALL_PROGRAMS or session.employee.program == program_filter


def available_programs(employees: Sequence[Employee]) -> tuple[str, ...]:
    # dict preserves first-seen order
    seen = dict.fromkeys(e.program for e in employees if e.program)
    return (ALL_PROGRAMS, *seen)


def compute(
    sessions: Sequence[SessionRecord],
    employees: Sequence[Employee],
    search_term: str = "",
    program_filter: str = ALL_PROGRAMS,
) -> ViewState:
    filtered = tuple(s for s in sessions if matches(s, search_term, program_filter))
    employee_ids: set[RecordId] = {s.employee_id for s in filtered}
    return ViewState(
        filtered_sessions=filtered,
        total_sessions=len(filtered),
        total_duration_minutes=sum(s.duration_minutes for s in filtered),
        unique_employee_count=len(employee_ids),
        available_programs=available_programs(employees),
    )


def minutes_by_program(sessions: Sequence[SessionRecord]) -> dict[str, int]:
    """Summed minutes per program, in first-seen order."""
    out: dict[str, int] = {}
    for s in sessions:
        key = s.employee.program or "N/A"
        out[key] = out.get(key, 0) + s.duration_minutes
    return out
