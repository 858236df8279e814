"""Bulk select panel component."""

from __future__ import annotations

from typing import Tuple

import streamlit as st


def render_header_actions(selected_count: int, busy: bool) -> Tuple[bool, bool]:
    """Render the table header affordances and return (open_dialog, clear) clicks."""
    open_col, clear_col, _ = st.columns([2, 2, 6])
    with open_col:
        open_clicked = st.button("▾ Select rows…", key="bulk_select_open", disabled=busy)
    with clear_col:
        clear_clicked = st.button(
            "Clear selection",
            key="selection_clear",
            disabled=busy or selected_count == 0,
        )
    return open_clicked, clear_clicked


def render_bulk_select_form(busy: bool) -> Tuple[bool, str]:
    """Render the row-count input and return submit action with the raw value."""
    st.markdown(
        '<div class="bulk-field-label">Number of rows to select</div>',
        unsafe_allow_html=True,
    )
    raw_value = st.text_input(
        "Number of rows to select",
        key="bulk_select_rows",
        placeholder="Enter number of rows",
        label_visibility="collapsed",
        disabled=busy,
    )
    submit_clicked = st.button("Submit", type="primary", key="bulk_select_submit", disabled=busy)
    return submit_clicked, raw_value
