"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st


def render_navbar(selected_count: int) -> None:
    """Render dashboard header with the current selection size."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Artwork Browser</div>
            <div class="navbar-meta">Selected: {selected_count}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
