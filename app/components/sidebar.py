from __future__ import annotations

import streamlit as st

from config import AppConfig


APP_NAME = "DashOne"


def render_sidebar(cfg: AppConfig) -> None:
    with st.sidebar:
        st.markdown(f"### 📊 {APP_NAME}")
        st.caption("Employee session tracking")

        with st.expander("⚙️ Data source", expanded=False):
            if cfg.demo_mode:
                st.markdown("**Mock data** (Supabase keys not set)")
                st.caption("Set SUPABASE_URL and SUPABASE_ANON_KEY to read live data.")
            else:
                st.markdown("**Supabase**")
                st.code(cfg.supabase_host or "", language="text")
