from __future__ import annotations

from typing import Optional

import streamlit as st


def render_header(title: str, subtitle: str, right_pill: Optional[str] = None) -> None:
    pill_html = f'<div class="pill pill-warning"><span class="dot"></span>{right_pill}</div>' if right_pill else ""

    st.markdown(
        f"""
<div class="app-header">
  <div>
    <div class="app-title">{title}</div>
    <div class="app-subtitle">🗄️ {subtitle}</div>
  </div>
  {pill_html}
</div>
        """,
        unsafe_allow_html=True,
    )
