from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


EMPLOYEES_TABLE = "employees"
SESSIONS_TABLE = "sessions"

# Columns embedded from `employees` into each session row
EMPLOYEE_SUMMARY_COLUMNS = ("first_name", "last_name", "program", "avatar_url")


@dataclass(frozen=True)
class TableQuery:
    table: str
    select: str
    order_by: Optional[str] = None
    descending: bool = False


def q_employee_roster() -> TableQuery:
    return TableQuery(table=EMPLOYEES_TABLE, select="*")


def q_sessions_with_employee() -> TableQuery:
    # `!inner` turns the PostgREST embed into an INNER JOIN:
    # sessions without a matching employee are filtered out server-side.
    embed = ", ".join(EMPLOYEE_SUMMARY_COLUMNS)
    return TableQuery(
        table=SESSIONS_TABLE,
        select=f"*, {EMPLOYEES_TABLE}!inner({embed})",
        order_by="session_date",
        descending=True,
    )
