from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "DashOne · Session Tracking"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --accent-soft: __ACCENT_SOFT__;
  --navy-900: __NAVY_900__;
  --navy-800: __NAVY_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;
  --skeleton: __SKELETON__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}

[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

.block-container{
  padding-top: 1.5rem !important;
  padding-bottom: 2rem !important;
}

/* Page header */
.app-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  margin: 0 0 18px 0;
}
.app-title{
  font-size: 30px;
  font-weight: 700;
  color: var(--navy-900);
  letter-spacing: -0.02em;
}
.app-subtitle{
  font-size: 14px;
  color: var(--text-secondary);
  margin-top: 4px;
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  border-radius: 999px;
  padding: 4px 12px;
  font-size: 12px;
  font-weight: 600;
}
.pill-warning{
  background: __WARNING_BG__;
  color: __WARNING__;
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: __WARNING__;
  display:inline-block;
}

/* Stat cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 20px 22px;
}
.metric-label{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
  margin-bottom: 4px;
}
.metric-value{
  font-size: 30px;
  font-weight: 700;
  color: var(--text-primary);
  line-height: 1.2;
}
.metric-sub{
  margin-top: 4px;
  font-size: 14px;
  color: #9CA3AF;
}

/* Loading skeleton */
@keyframes pulse { 50% { opacity: .5; } }
.skeleton{ animation: pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite; }
.skeleton-block{
  background: var(--skeleton);
  border-radius: var(--radius);
  margin-bottom: 24px;
}
.skeleton-title{ height: 32px; width: 33%; border-radius: 6px; }
.skeleton-row{ display:flex; gap: 24px; }
.skeleton-card{ flex: 1; height: 128px; }
.skeleton-table{ height: 256px; }

/* Error state */
.error-state{
  display:flex;
  flex-direction:column;
  align-items:center;
  justify-content:center;
  text-align:center;
  padding: 64px 32px 16px 32px;
}
.error-icon{ font-size: 56px; margin-bottom: 12px; }
.error-title{
  font-size: 24px;
  font-weight: 700;
  color: var(--navy-800);
  margin-bottom: 8px;
}
.error-body{ color: var(--text-secondary); margin-bottom: 12px; }

/* Empty result row */
.empty-row{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  padding: 48px 24px;
  text-align: center;
  color: var(--text-secondary);
}

/* Buttons */
div.stButton > button{
  border-radius: 8px !important;
  font-weight: 600 !important;
  border: 1px solid transparent !important;
  background: var(--accent) !important;
  color: white !important;
}
div.stButton > button:hover{
  background: var(--accent-hover) !important;
}

div[data-baseweb="input"] input{
  border-radius: 8px !important;
}

/* Charts and tables render on card surface */
div[data-testid="stPlotlyChart"], div[data-testid="stDataFrame"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__ACCENT_SOFT__": str(THEME["accent_soft"]),
        "__NAVY_900__": str(THEME["navy_900"]),
        "__NAVY_800__": str(THEME["navy_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__SKELETON__": str(THEME["skeleton"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
        "__WARNING__": str(THEME["warning"]),
        "__WARNING_BG__": str(THEME["warning_bg"]),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
