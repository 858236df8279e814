"""Artwork table component using Streamlit data_editor."""

from __future__ import annotations

from typing import Iterable, List, Set

import pandas as pd
import streamlit as st

from artwork_browser.config import COLUMN_LABELS, TABLE_COLUMNS
from artwork_browser.models import Page

TABLE_EDITOR_KEY = "artwork_table_editor"


def build_page_frame(page: Page, selected_ids: Set[int]) -> pd.DataFrame:
    """Build the display dataframe for one page with its checkbox column."""
    rows = [record.to_row() for record in page.records]
    dataframe = pd.DataFrame(rows, columns=["id", *TABLE_COLUMNS[1:]])
    dataframe["selected"] = dataframe["id"].isin(selected_ids)
    for column in ("date_start", "date_end"):
        dataframe[column] = dataframe[column].astype("Int64")
    return dataframe.set_index("id")


def diff_selection(page_ids: Iterable[int], rendered: Set[int], edited: Set[int]) -> List[int]:
    """Return the ids on this page whose checkbox changed, in page order."""
    return [record_id for record_id in page_ids if (record_id in rendered) != (record_id in edited)]


def render_table(page: Page, selected_ids: Set[int], loading: bool = False) -> List[int]:
    """Render the current page and return ids whose checkbox was toggled."""
    if not page.records:
        st.info("Loading artworks..." if loading else "No rows available.")
        return []

    rendered_selected = {record_id for record_id in page.ids if record_id in selected_ids}
    display_df = build_page_frame(page, rendered_selected)

    edited_df = st.data_editor(
        display_df,
        key=TABLE_EDITOR_KEY,
        hide_index=True,
        width="stretch",
        num_rows="fixed",
        column_order=TABLE_COLUMNS,
        disabled=True if loading else [column for column in TABLE_COLUMNS if column != "selected"],
        column_config={
            "selected": st.column_config.CheckboxColumn(label=COLUMN_LABELS["selected"], width="small"),
            "title": st.column_config.TextColumn(COLUMN_LABELS["title"], width="large"),
            "place_of_origin": st.column_config.TextColumn(COLUMN_LABELS["place_of_origin"]),
            "artist_display": st.column_config.TextColumn(COLUMN_LABELS["artist_display"]),
            "inscriptions": st.column_config.TextColumn(COLUMN_LABELS["inscriptions"]),
            "date_start": st.column_config.NumberColumn(COLUMN_LABELS["date_start"], format="%d"),
            "date_end": st.column_config.NumberColumn(COLUMN_LABELS["date_end"], format="%d"),
        },
    )

    if not isinstance(edited_df, pd.DataFrame):
        edited_df = pd.DataFrame(edited_df)
    if edited_df.empty:
        return []

    edited_selected = {int(record_id) for record_id in edited_df.index[edited_df["selected"].astype(bool)]}
    return diff_selection(page.ids, rendered_selected, edited_selected)
