from __future__ import annotations

from html import escape

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="store-header">
  <div>
    <div class="store-title">{escape(app_name)}</div>
    <div class="store-subtitle">{escape(subtitle)}</div>
  </div>
  <div class="pill"><span class="dot"></span>{escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
