from __future__ import annotations

import pandas as pd
import streamlit as st

from components.header import render_header
from components.metrics import Kpi, bar_chart, render_kpi_row
from components.session_table import render_session_table
from components.states import render_empty_row, render_error, render_loading_skeleton
from config import AppConfig
from data.aggregation import ALL_PROGRAMS, ViewState, available_programs, compute, minutes_by_program
from data.connection import FetchError
from data.service import DashboardData, DataProviders, get_dashboard_data


# Session-state keys; one load per browser session until Retry clears them
DATA_KEY = "dashboard_data"
ERROR_KEY = "dashboard_error"
SEARCH_KEY = "search_term"
PROGRAM_KEY = "program_filter"


def reset_load() -> None:
    st.session_state.pop(DATA_KEY, None)
    st.session_state.pop(ERROR_KEY, None)


def _ensure_loaded(providers: DataProviders) -> None:
    if DATA_KEY in st.session_state or ERROR_KEY in st.session_state:
        return

    placeholder = st.empty()
    with placeholder.container():
        render_loading_skeleton()
    try:
        st.session_state[DATA_KEY] = get_dashboard_data(providers)
    except FetchError as e:
        st.session_state[ERROR_KEY] = str(e)
    finally:
        placeholder.empty()


def kpis_for(view: ViewState) -> list[Kpi]:
    return [
        Kpi("Total Sessions", f"{view.total_sessions:,}"),
        Kpi("Active Employees", f"{view.unique_employee_count:,}", help="Distinct employees in the filtered sessions"),
        Kpi("Total Duration", f"{view.total_hours:,} hrs", sub_value=f"{view.total_duration_minutes:,} minutes"),
    ]


def _render_controls(view_programs: tuple[str, ...]) -> tuple[str, str]:
    c1, c2 = st.columns([3, 1])
    search_term = c1.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder="Search by employee name...",
        label_visibility="collapsed",
    )
    if st.session_state.get(PROGRAM_KEY) not in view_programs:
        st.session_state[PROGRAM_KEY] = ALL_PROGRAMS
    program_filter = c2.selectbox(
        "Program",
        view_programs,
        key=PROGRAM_KEY,
        label_visibility="collapsed",
    )
    return search_term or "", program_filter or ALL_PROGRAMS


def _render_loaded(cfg: AppConfig, data: DashboardData) -> None:
    render_header(
        title="Session Tracking",
        subtitle="Connected to Supabase PostgreSQL" if data.source == "supabase" else "Fixture data set",
        right_pill="Demo Mode (Using Mock Data)" if cfg.demo_mode else None,
    )

    # Programs come from the roster, so the select box is stable under any filter
    programs = available_programs(data.employees)
    kpi_slot = st.container()
    search_term, program_filter = _render_controls(programs)
    view = compute(data.sessions, data.employees, search_term, program_filter)

    with kpi_slot:
        render_kpi_row(kpis_for(view))

    if view.is_empty:
        render_empty_row()
        return

    render_session_table(view.filtered_sessions)

    by_program = minutes_by_program(view.filtered_sessions)
    df = pd.DataFrame({"program": list(by_program), "minutes": list(by_program.values())})
    bar_chart(df, x="program", y="minutes", title="Minutes by program", x_title="Program", y_title="Minutes")


def render(cfg: AppConfig, providers: DataProviders) -> None:
    _ensure_loaded(providers)

    error = st.session_state.get(ERROR_KEY)
    if error is not None:
        render_error(error, on_retry=reset_load)
        return

    _render_loaded(cfg, st.session_state[DATA_KEY])
