"""
Typed records for the two tables the dashboard reads.

Rows arrive as plain dicts (PostgREST JSON, or the fixture set which uses the
same shape). The session query embeds the owning employee under the
`employees` key; that nested object is modeled as `EmployeeSummary` so the
inner-join guarantee is carried by the type instead of by optional lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

RecordId = Union[int, str]

EMPLOYEE_JOIN_KEY = "employees"


class RowFormatError(ValueError):
    pass


def _require(row: Mapping[str, Any], key: str) -> Any:
    if key not in row or row[key] is None:
        raise RowFormatError(f"Row is missing required field '{key}'")
    return row[key]


def _optional_str(row: Mapping[str, Any], key: str) -> Optional[str]:
    v = row.get(key)
    if v is None:
        return None
    v = str(v).strip()
    return v if v else None


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        # Accepts both "2024-05-01" and full timestamps ("2024-05-01T09:30:00+00:00")
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise RowFormatError(f"Invalid session_date: {value!r}") from e


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise RowFormatError(f"Invalid created_at: {value!r}") from e


def _parse_duration(value: Any) -> int:
    if isinstance(value, bool):
        raise RowFormatError(f"Invalid duration_minutes: {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        try:
            value = int(str(value))
        except ValueError as e:
            raise RowFormatError(f"Invalid duration_minutes: {value!r}") from e
    if value < 0:
        raise RowFormatError(f"duration_minutes must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class Employee:
    id: RecordId
    first_name: str
    last_name: str
    program: str
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    company_details: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        return cls(
            id=_require(row, "id"),
            first_name=str(row.get("first_name") or ""),
            last_name=str(row.get("last_name") or ""),
            program=str(row.get("program") or ""),
            avatar_url=_optional_str(row, "avatar_url"),
            email=_optional_str(row, "email"),
            company_details=_optional_str(row, "company_details"),
        )


@dataclass(frozen=True)
class EmployeeSummary:
    """Employee display fields embedded in a session row by the join."""

    first_name: str
    last_name: str
    program: str
    avatar_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "EmployeeSummary":
        return cls(
            first_name=str(row.get("first_name") or ""),
            last_name=str(row.get("last_name") or ""),
            program=str(row.get("program") or ""),
            avatar_url=_optional_str(row, "avatar_url"),
        )


@dataclass(frozen=True)
class SessionRecord:
    id: RecordId
    session_date: date
    duration_minutes: int
    notes: str
    employee_id: RecordId
    employee: EmployeeSummary
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Optional["SessionRecord"]:
        """
        Build a session from a joined row.

        Returns None when the embedded employee object is absent, i.e. the
        join did not resolve. Malformed fields raise RowFormatError.
        """
        embedded = row.get(EMPLOYEE_JOIN_KEY)
        # PostgREST renders a to-one embed as an object; tolerate a one-element list
        if isinstance(embedded, list):
            embedded = embedded[0] if embedded else None
        if not embedded:
            return None

        return cls(
            id=_require(row, "id"),
            session_date=_parse_date(_require(row, "session_date")),
            duration_minutes=_parse_duration(_require(row, "duration_minutes")),
            notes=str(row.get("notes") or ""),
            employee_id=_require(row, "employee_id"),
            employee=EmployeeSummary.from_row(embedded),
            created_at=_parse_timestamp(row.get("created_at")),
        )
