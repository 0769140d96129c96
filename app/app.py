"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from config import AppConfig, configure_logging, get_config  # noqa: E402
from data.service import DataProviders, select_providers  # noqa: E402

from views import dashboard  # noqa: E402


@st.cache_resource
def _providers(cfg: AppConfig) -> DataProviders:
    # Chosen once per process: fixture providers when Supabase keys are absent
    return select_providers(cfg)


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg)
    render_sidebar(cfg)

    dashboard.render(cfg, _providers(cfg))


if __name__ == "__main__":
    main()
