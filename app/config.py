from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so components/styles.py and charts read one palette.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F9FAFB",     # page background (gray-50)
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#2563EB",    # blue-600
    "accent_secondary": "#1D4ED8",  # blue-700 (hover)
    "accent_soft": "#EFF6FF",       # blue-50 (program badge)
    "navy_900": "#111827",
    "navy_800": "#374151",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "#6B7280",
    "border_color": "#E5E7EB",
    "skeleton": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.08)",
    "shadow": "0 1px 2px rgba(16,24,40,0.06)",
    "radius_px": 12,
    # Status colors
    "success": "#059669",
    "warning": "#B45309",
    "warning_bg": "#FEF3C7",
    "danger": "#DC2626",
}

DEFAULT_ROSTER_DELAY_SECONDS = 0.8
DEFAULT_SESSIONS_DELAY_SECONDS = 1.2


@dataclass(frozen=True)
class AppConfig:
    # Required for live mode (Supabase). If either is unset the fixture providers are used.
    supabase_url: Optional[str]
    supabase_anon_key: Optional[str]

    # Simulated network delay of the fixture providers
    roster_delay_seconds: float = DEFAULT_ROSTER_DELAY_SECONDS
    sessions_delay_seconds: float = DEFAULT_SESSIONS_DELAY_SECONDS

    log_level: str = "INFO"

    @property
    def demo_mode(self) -> bool:
        return not (self.supabase_url and self.supabase_anon_key)

    @property
    def supabase_host(self) -> Optional[str]:
        if not self.supabase_url:
            return None
        return urlparse(self.supabase_url).netloc or self.supabase_url


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getenv_float(name: str, default: float) -> float:
    v = _getenv(name)
    if v is None:
        return default
    try:
        f = float(v)
    except ValueError:
        return default
    return f if f >= 0 else default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Accepts the NEXT_PUBLIC_* names used by a web frontend sharing the same env file
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL") or _getenv("NEXT_PUBLIC_SUPABASE_URL"),
        supabase_anon_key=_getenv("SUPABASE_ANON_KEY") or _getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        roster_delay_seconds=_getenv_float("MOCK_ROSTER_DELAY_SECONDS", DEFAULT_ROSTER_DELAY_SECONDS),
        sessions_delay_seconds=_getenv_float("MOCK_SESSIONS_DELAY_SECONDS", DEFAULT_SESSIONS_DELAY_SECONDS),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    # basicConfig is a no-op once the root logger has handlers (Streamlit reruns the script).
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
