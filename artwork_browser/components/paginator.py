"""Pagination control emitting zero-based first-row offsets."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from artwork_browser.utils.pagination import clamp_page_number, first_row_offset

PAGE_INPUT_KEY = "page_input"


def render_paginator(
    first_index: int,
    total_records: int,
    total_pages: int,
    page_size: int,
    loading: bool = False,
) -> Optional[int]:
    """Render page controls and return the requested first-row offset, if any."""
    current_page = first_index // page_size + 1 if page_size > 0 else 1
    last_page = max(total_pages, 1)

    first_col, prev_col, page_col, next_col, last_col, info_col = st.columns([1, 1, 2, 1, 1, 4])
    requested_page: Optional[int] = None

    with first_col:
        if st.button("«", key="page_first", disabled=loading or current_page <= 1):
            requested_page = 1
    with prev_col:
        if st.button("‹", key="page_prev", disabled=loading or current_page <= 1):
            requested_page = current_page - 1
    with page_col:
        typed_page = st.number_input(
            "Page",
            min_value=1,
            max_value=last_page,
            value=clamp_page_number(current_page, last_page),
            step=1,
            key=PAGE_INPUT_KEY,
            disabled=loading,
            label_visibility="collapsed",
        )
        if int(typed_page) != current_page:
            requested_page = int(typed_page)
    with next_col:
        if st.button("›", key="page_next", disabled=loading or current_page >= last_page):
            requested_page = current_page + 1
    with last_col:
        if st.button("»", key="page_last", disabled=loading or current_page >= last_page):
            requested_page = last_page
    with info_col:
        st.caption(f"Page {current_page} of {last_page} · {total_records} records")

    if requested_page is None:
        return None
    return first_row_offset(clamp_page_number(requested_page, last_page), page_size)
