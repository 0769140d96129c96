from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable

from config import AppConfig
from data import mock_data, queries
from data.connection import FetchError, SupabaseClient, get_supabase_client
from data.models import Employee, RowFormatError, SessionRecord

logger = logging.getLogger(__name__)

RosterProvider = Callable[[], Awaitable[list[Employee]]]
SessionProvider = Callable[[], Awaitable[list[SessionRecord]]]


@dataclass(frozen=True)
class DataProviders:
    roster: RosterProvider
    sessions: SessionProvider
    source: str  # "mock" | "supabase"


@dataclass(frozen=True)
class DashboardData:
    sessions: list[SessionRecord]
    employees: list[Employee]
    source: str


def parse_roster(rows: Iterable[dict[str, Any]]) -> list[Employee]:
    return [Employee.from_row(r) for r in rows]


def parse_sessions(rows: Iterable[dict[str, Any]]) -> list[SessionRecord]:
    out = []
    for r in rows:
        s = SessionRecord.from_row(r)
        if s is None:
            logger.warning("Dropping session %s: employee join did not resolve", r.get("id"))
            continue
        out.append(s)
    return out


def _live_providers(client: SupabaseClient) -> DataProviders:
    async def fetch_roster() -> list[Employee]:
        try:
            rows = await asyncio.to_thread(client.query, queries.q_employee_roster())
            return parse_roster(rows)
        except Exception as e:
            logger.error("Error fetching employees: %s", e)
            raise FetchError.wrap(e) from e

    async def fetch_sessions() -> list[SessionRecord]:
        try:
            rows = await asyncio.to_thread(client.query, queries.q_sessions_with_employee())
            return parse_sessions(rows)
        except Exception as e:
            logger.error("Error fetching dashboard sessions: %s", e)
            raise FetchError.wrap(e) from e

    return DataProviders(roster=fetch_roster, sessions=fetch_sessions, source="supabase")


def _fixture_providers(cfg: AppConfig) -> DataProviders:
    async def fetch_roster() -> list[Employee]:
        logger.warning("Supabase keys missing. Returning MOCK data for Employees.")
        await asyncio.sleep(cfg.roster_delay_seconds)
        try:
            return parse_roster(mock_data.employee_roster_mock())
        except RowFormatError as e:
            raise FetchError.wrap(e) from e

    async def fetch_sessions() -> list[SessionRecord]:
        logger.warning("Supabase keys missing. Returning MOCK data for Sessions.")
        await asyncio.sleep(cfg.sessions_delay_seconds)
        try:
            return parse_sessions(mock_data.dashboard_sessions_mock())
        except RowFormatError as e:
            raise FetchError.wrap(e) from e

    return DataProviders(roster=fetch_roster, sessions=fetch_sessions, source="mock")


def select_providers(cfg: AppConfig) -> DataProviders:
    """Live Supabase providers when both credentials are set, fixture providers otherwise."""
    if cfg.demo_mode:
        return _fixture_providers(cfg)
    return _live_providers(get_supabase_client(cfg))


async def load_dashboard_data(providers: DataProviders) -> DashboardData:
    """
    Issue both reads concurrently. Either failure fails the whole load;
    nothing partial is returned.
    """
    try:
        sessions, employees = await asyncio.gather(providers.sessions(), providers.roster())
    except FetchError:
        raise
    except Exception as e:
        raise FetchError.wrap(e) from e
    return DashboardData(sessions=sessions, employees=employees, source=providers.source)


def get_dashboard_data(providers: DataProviders) -> DashboardData:
    return asyncio.run(load_dashboard_data(providers))
