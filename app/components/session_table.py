from __future__ import annotations

from datetime import date
from typing import Sequence

import pandas as pd
import streamlit as st

from data.models import SessionRecord


COLUMNS = ["Date", "Employee", "Program", "Duration", "Notes"]


def format_session_date(d: date) -> str:
    return d.strftime("%b %d, %Y")


def format_duration(minutes: int) -> str:
    return f"{minutes} min"


def sessions_frame(sessions: Sequence[SessionRecord]) -> pd.DataFrame:
    rows = [
        {
            "Avatar": s.employee.avatar_url,
            "Initials": "" if s.employee.avatar_url else s.employee.initials,
            "Date": format_session_date(s.session_date),
            "Employee": s.employee.full_name,
            "Program": s.employee.program or "N/A",
            "Duration": format_duration(s.duration_minutes),
            "Notes": s.notes,
        }
        for s in sessions
    ]
    return pd.DataFrame(rows, columns=["Avatar", "Initials", *COLUMNS], index=[s.id for s in sessions])


def render_session_table(sessions: Sequence[SessionRecord]) -> None:
    df = sessions_frame(sessions)
    st.dataframe(
        df,
        width="stretch",
        hide_index=True,
        column_config={
            "Avatar": st.column_config.ImageColumn(" ", width="small"),
            "Initials": st.column_config.TextColumn(" ", width="small"),
            "Notes": st.column_config.TextColumn("Notes", width="large"),
        },
    )
