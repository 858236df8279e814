"""Current-page tracking and navigation-driven fetching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from artwork_browser.config import PAGE_SIZE
from artwork_browser.errors import FetchFailed
from artwork_browser.models import Page
from artwork_browser.services.page_fetcher import PageFetcher
from artwork_browser.utils.events import ChangeNotifier
from artwork_browser.utils.helpers import get_logger
from artwork_browser.utils.pagination import first_row_offset, page_from_offset

logger = get_logger(__name__)


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = PAGE_SIZE
    total_pages: int = 0
    total_records: int = 0
    loading: bool = False
    error: Optional[str] = None

    @property
    def first_index(self) -> int:
        return first_row_offset(self.page, self.page_size)


class PaginationController:
    """Drives the fetcher on navigation and owns the displayed page.

    Each navigation takes a generation ticket. Only the result of the most
    recent request is applied; results of superseded requests are dropped,
    whichever order they complete in.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        page_size: int = PAGE_SIZE,
        notifier: Optional[ChangeNotifier] = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page size must be > 0, got {page_size}")
        self.fetcher = fetcher
        self.state = PaginationState(page_size=page_size)
        self.page = Page.empty(page_size)
        self.notifier = notifier or ChangeNotifier()
        self._generation = 0

    async def go_to_page(self, index: int) -> bool:
        """Fetch and display page ``index``; return True if this result was applied."""
        index = max(index, 1)
        self._generation += 1
        ticket = self._generation
        self.state.loading = True
        self.notifier.notify("loading")

        try:
            page = await self.fetcher.fetch_page(index, self.state.page_size)
        except FetchFailed as exc:
            if ticket != self._generation:
                logger.info("Discarding failure of superseded request for page %s", index)
                return False
            logger.warning("Could not load page %s, keeping page %s: %s", index, self.state.page, exc)
            self.state.error = str(exc)
            self.state.loading = False
            self.notifier.notify("error")
            return False

        if ticket != self._generation:
            logger.info("Discarding superseded result for page %s", index)
            return False

        self.page = page
        self.state.page = index
        self.state.total_pages = page.total_pages
        self.state.total_records = page.total_records
        self.state.error = None
        self.state.loading = False
        self.notifier.notify("page")
        return True

    async def on_navigation_event(self, first_row_offset: int) -> bool:
        """Translate a paginator's zero-based first-row offset into a page fetch."""
        return await self.go_to_page(page_from_offset(first_row_offset, self.state.page_size))

    async def refresh(self) -> bool:
        return await self.go_to_page(self.state.page)
