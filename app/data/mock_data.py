from __future__ import annotations

import copy
import random
from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from typing import Any

from faker import Faker


# Fixed anchor so the fixture set is identical on every load
ANCHOR_DATE = date(2024, 6, 28)
SEED = 7

PROGRAMS = ["Leadership", "Onboarding", "Sales Enablement", "Engineering Mentorship"]

EMPLOYEES = [
    (1, "Sarah", "Connor", "Leadership"),
    (2, "James", "Holden", "Engineering Mentorship"),
    (3, "Naomi", "Nagata", "Engineering Mentorship"),
    (4, "Amos", "Burton", "Onboarding"),
    (5, "Chrisjen", "Avasarala", "Leadership"),
    (6, "Alex", "Kamal", "Sales Enablement"),
    (7, "Bobbie", "Draper", "Onboarding"),
    (8, "Clarissa", "Mao", "Sales Enablement"),
]

# Weighted toward common session lengths
DURATIONS = [15, 30, 30, 45, 45, 60, 60, 90, 120]


@lru_cache(maxsize=1)
def _employee_rows() -> tuple[dict[str, Any], ...]:
    fake = Faker()
    fake.seed_instance(SEED)
    rows = []
    for emp_id, first, last, program in EMPLOYEES:
        rows.append(
            {
                "id": emp_id,
                "first_name": first,
                "last_name": last,
                "program": program,
                "email": f"{first}.{last}@example.com".lower(),
                "company_details": fake.company(),
                # Every third employee has an avatar; the rest render initials
                "avatar_url": f"https://i.pravatar.cc/150?u={emp_id}" if emp_id % 3 == 0 else None,
            }
        )
    return tuple(rows)


@lru_cache(maxsize=1)
def _session_rows(n_sessions: int = 24) -> tuple[dict[str, Any], ...]:
    rng = random.Random(SEED)
    fake = Faker()
    fake.seed_instance(SEED)
    by_id = {r["id"]: r for r in _employee_rows()}

    rows = []
    for i in range(n_sessions):
        emp = by_id[rng.choice(sorted(by_id))]
        # Newest first, roughly two sessions per working day
        d = ANCHOR_DATE - timedelta(days=i // 2 + rng.randint(0, 1))
        created = datetime.combine(d, time(hour=9 + rng.randint(0, 8)), tzinfo=timezone.utc)
        rows.append(
            {
                "id": 1000 + i,
                "created_at": created.isoformat(),
                "session_date": d.isoformat(),
                "duration_minutes": rng.choice(DURATIONS),
                "notes": fake.sentence(nb_words=10),
                "employee_id": emp["id"],
                "employees": {
                    "first_name": emp["first_name"],
                    "last_name": emp["last_name"],
                    "program": emp["program"],
                    "avatar_url": emp["avatar_url"],
                },
            }
        )
    # Same ordering the live query applies
    rows.sort(key=lambda r: r["session_date"], reverse=True)
    return tuple(rows)


def employee_roster_mock() -> list[dict[str, Any]]:
    return copy.deepcopy(list(_employee_rows()))


def dashboard_sessions_mock() -> list[dict[str, Any]]:
    return copy.deepcopy(list(_session_rows()))
