"""Bulk selection of the first K records across remote pages."""

from __future__ import annotations

from typing import List, Optional, Tuple

from artwork_browser.config import PAGE_SIZE
from artwork_browser.errors import FetchFailed, InvalidInput
from artwork_browser.models import Record
from artwork_browser.services.page_fetcher import PageFetcher
from artwork_browser.services.selection_service import SelectionSet
from artwork_browser.utils.events import ChangeNotifier
from artwork_browser.utils.helpers import get_logger
from artwork_browser.utils.pagination import pages_needed

logger = get_logger(__name__)


class BulkSelectOrchestrator:
    """Replace the selection with the first ``target_count`` records of the dataset.

    Pages are fetched one at a time from page 1 with the display page size,
    in increasing index order, stopping as soon as enough records are held
    or the dataset runs out. A fetch failure leaves the selection untouched.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        selection: SelectionSet,
        page_size: int = PAGE_SIZE,
        notifier: Optional[ChangeNotifier] = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page size must be > 0, got {page_size}")
        self.fetcher = fetcher
        self.selection = selection
        self.page_size = page_size
        self.notifier = notifier or ChangeNotifier()
        self.busy = False
        self._generation = 0

    async def select_first(self, target_count: int) -> int:
        """Select the first ``target_count`` records and return how many were selected."""
        if isinstance(target_count, bool) or not isinstance(target_count, int):
            raise InvalidInput("Row count must be a whole number.", target_count)
        if target_count < 0:
            raise InvalidInput("Row count cannot be negative.", target_count)

        self._generation += 1
        ticket = self._generation
        self._set_busy(True)
        try:
            records, pages_fetched = await self._collect(target_count)
        except FetchFailed as exc:
            if ticket != self._generation:
                logger.info("Discarding failure of superseded bulk selection of %s rows: %s", target_count, exc)
                return 0
            self._set_busy(False)
            raise

        if ticket != self._generation:
            logger.info("Discarding superseded bulk selection of %s rows", target_count)
            return 0

        chosen = records[:target_count]
        self.selection.replace_all(chosen)
        if len(chosen) < target_count:
            logger.info("Requested %s rows, dataset only had %s", target_count, len(chosen))
        logger.info("Bulk-selected %s rows from %s page(s)", len(chosen), pages_fetched)
        self._set_busy(False)
        return len(chosen)

    async def _collect(self, target_count: int) -> Tuple[List[Record], int]:
        accumulated: List[Record] = []
        pages_fetched = 0
        for index in range(1, pages_needed(target_count, self.page_size) + 1):
            page = await self.fetcher.fetch_page(index, self.page_size)
            pages_fetched += 1
            accumulated.extend(page.records)
            if len(accumulated) >= target_count:
                break
            if len(page.records) < self.page_size or (page.total_pages and index >= page.total_pages):
                break
        return accumulated, pages_fetched

    def _set_busy(self, busy: bool) -> None:
        self.busy = busy
        self.notifier.notify("busy")
