"""Streamlit app entrypoint for the Artwork Browser."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, List, Tuple, TypeVar

import streamlit as st

from artwork_browser.components.bulk_select import render_bulk_select_form, render_header_actions
from artwork_browser.components.navbar import render_navbar
from artwork_browser.components.paginator import PAGE_INPUT_KEY, render_paginator
from artwork_browser.components.table import TABLE_EDITOR_KEY, render_table
from artwork_browser.config import ASSETS_DIR, PAGE_SIZE, ApiConfig
from artwork_browser.errors import FetchFailed
from artwork_browser.services import validation_service
from artwork_browser.services.bulk_select_service import BulkSelectOrchestrator
from artwork_browser.services.page_fetcher import ArtworkFetcher
from artwork_browser.services.pagination_service import PaginationController
from artwork_browser.services.selection_service import SelectionSet
from artwork_browser.utils.events import ChangeNotifier
from artwork_browser.utils.helpers import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

st.set_page_config(page_title="Artwork Browser", layout="wide")


def run_async(coroutine: Coroutine[Any, Any, T]) -> T:
    """Drive one async service call to completion from the script thread."""
    return asyncio.run(coroutine)


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def mark_state_changed(reason: str) -> None:
    """Flag that a service changed state so the page is rendered again."""
    logger.debug("State changed: %s", reason)
    st.session_state["state_changed"] = True


def init_session_state() -> None:
    """Initialize the services and UI flags kept across reruns."""
    if "pagination" not in st.session_state:
        notifier = ChangeNotifier()
        notifier.subscribe(mark_state_changed)
        if "fetcher" not in st.session_state:
            st.session_state["fetcher"] = ArtworkFetcher(ApiConfig.from_env())
        fetcher = st.session_state["fetcher"]
        selection = SelectionSet(notifier)
        st.session_state["selection"] = selection
        st.session_state["pagination"] = PaginationController(fetcher, PAGE_SIZE, notifier)
        st.session_state["bulk_select"] = BulkSelectOrchestrator(fetcher, selection, PAGE_SIZE, notifier)
    st.session_state.setdefault("initial_load_done", False)
    st.session_state.setdefault("state_changed", False)
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)

    st.session_state["notifications"] = []


def render_bulk_select_body() -> None:
    """Capture a row count and select that many rows from the start of the dataset.

    Invalid input and fetch failures are shown in place so the form stays open.
    """
    orchestrator: BulkSelectOrchestrator = st.session_state["bulk_select"]
    submitted, raw_value = render_bulk_select_form(orchestrator.busy)
    if not submitted:
        return

    valid, error_message, row_count = validation_service.validate_row_count(raw_value)
    if not valid:
        st.error(error_message)
        return

    try:
        with st.spinner("Fetching rows..."):
            selected_count = run_async(orchestrator.select_first(row_count))
    except FetchFailed as exc:
        logger.warning("Bulk select of %s rows failed: %s", row_count, exc)
        st.error(f"Could not fetch rows ({exc}). Please try again.")
        return

    if selected_count < row_count:
        queue_notification("info", f"Only {selected_count} rows are available; all of them were selected.")
    else:
        queue_notification("success", f"Selected the first {selected_count} rows.")
    st.session_state.pop(TABLE_EDITOR_KEY, None)
    st.rerun()


@st.dialog("Select rows")
def bulk_select_dialog() -> None:
    render_bulk_select_body()


def main() -> None:
    """Render and run the Artwork Browser."""
    load_css()
    init_session_state()

    controller: PaginationController = st.session_state["pagination"]
    selection: SelectionSet = st.session_state["selection"]
    orchestrator: BulkSelectOrchestrator = st.session_state["bulk_select"]

    if not st.session_state["initial_load_done"]:
        st.session_state["initial_load_done"] = True
        with st.spinner("Loading artworks..."):
            run_async(controller.refresh())

    render_navbar(len(selection))
    if controller.state.error:
        st.warning(f"Could not load the requested page: {controller.state.error}")

    open_dialog, clear_selection = render_header_actions(len(selection), orchestrator.busy)
    if clear_selection:
        selection.clear()
    if open_dialog:
        bulk_select_dialog()

    page = controller.page
    toggled_ids = render_table(page, selection.ids(), controller.state.loading)
    records_by_id = {record.id: record for record in page.records}
    for record_id in toggled_ids:
        selection.toggle(records_by_id[record_id])

    requested_offset = render_paginator(
        controller.state.first_index,
        controller.state.total_records,
        controller.state.total_pages,
        controller.state.page_size,
        controller.state.loading,
    )
    if requested_offset is not None:
        with st.spinner("Loading artworks..."):
            run_async(controller.on_navigation_event(requested_offset))
        # The typed page must not be replayed on the next run, even if it failed to load.
        st.session_state.pop(PAGE_INPUT_KEY, None)

    if st.session_state["state_changed"]:
        st.session_state["state_changed"] = False
        # Reset editor widget state to avoid replaying stale checkbox edits after rerun.
        st.session_state.pop(TABLE_EDITOR_KEY, None)
        st.rerun()

    show_notifications()


if __name__ == "__main__":
    main()
