"""
Supabase access.

No env var reads here (config-only). The client is created from AppConfig
and every failure surfaces as FetchError carrying the original exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from supabase import Client, create_client

from config import AppConfig
from data.queries import TableQuery

logger = logging.getLogger(__name__)

DEFAULT_FETCH_ERROR = "An unexpected error occurred while fetching data."


class SupabaseAuthError(RuntimeError):
    pass


class FetchError(RuntimeError):
    """A roster or session read failed. `str(err)` is shown to the user as-is."""

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message or DEFAULT_FETCH_ERROR)
        self.cause = cause

    @classmethod
    def wrap(cls, exc: BaseException) -> "FetchError":
        if isinstance(exc, FetchError):
            return exc
        message = getattr(exc, "message", None) or str(exc)
        return cls(message, cause=exc)


@dataclass
class SupabaseClient:
    cfg: AppConfig
    _client: Optional[Client] = field(default=None, repr=False)

    def _connect(self) -> Client:
        if self._client is None:
            if self.cfg.demo_mode:
                raise SupabaseAuthError(
                    "Missing SUPABASE_URL or SUPABASE_ANON_KEY for Supabase access. "
                    "Set both to read live data."
                )
            self._client = create_client(self.cfg.supabase_url, self.cfg.supabase_anon_key)
        return self._client

    def query(self, q: TableQuery) -> list[dict[str, Any]]:
        """
        Runs a read-only table query and returns the JSON rows.
        Blocking; callers on the event loop run it in a worker thread.
        """
        builder = self._connect().table(q.table).select(q.select)
        if q.order_by:
            builder = builder.order(q.order_by, desc=q.descending)
        response = builder.execute()
        return list(response.data or [])


def get_supabase_client(cfg: AppConfig) -> SupabaseClient:
    return SupabaseClient(cfg=cfg)
