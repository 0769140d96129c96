from __future__ import annotations

import html
from typing import Callable

import streamlit as st


def render_loading_skeleton() -> None:
    """Placeholder blocks shaped like the loaded page (title, three cards, table)."""
    st.markdown(
        """
<div class="skeleton">
  <div class="skeleton-block skeleton-title"></div>
  <div class="skeleton-row">
    <div class="skeleton-block skeleton-card"></div>
    <div class="skeleton-block skeleton-card"></div>
    <div class="skeleton-block skeleton-card"></div>
  </div>
  <div class="skeleton-block skeleton-table"></div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_error(message: str, on_retry: Callable[[], None]) -> None:
    st.markdown(
        f"""
<div class="error-state">
  <div class="error-icon">⚠️</div>
  <div class="error-title">Failed to Load Dashboard</div>
  <div class="error-body">{html.escape(message)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
    _, mid, _ = st.columns([2, 1, 2])
    with mid:
        st.button("Retry", on_click=on_retry, width="stretch")


def render_empty_row(message: str = "No sessions found matching your criteria.") -> None:
    st.markdown(f'<div class="empty-row">{message}</div>', unsafe_allow_html=True)
