from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Set

import pytest

from artwork_browser.errors import FetchFailed
from artwork_browser.models import Page, Record
from artwork_browser.utils.pagination import compute_total_pages


def make_records(count: int, start_id: int = 1) -> List[Record]:
    return [
        Record(id=record_id, title=f"Artwork {record_id}", artist_display=f"Artist {record_id}")
        for record_id in range(start_id, start_id + count)
    ]


class FakeFetcher:
    """In-memory dataset served page by page, with optional failing pages."""

    def __init__(self, records: List[Record], fail_on: Optional[Set[int]] = None) -> None:
        self.records = records
        self.fail_on = set(fail_on or ())
        self.calls: List[tuple] = []

    async def fetch_page(self, index: int, page_size: int) -> Page:
        self.calls.append((index, page_size))
        if index in self.fail_on:
            raise FetchFailed("service unavailable", page=index, status_code=503)
        start = (index - 1) * page_size
        return Page(
            index=index,
            page_size=page_size,
            records=tuple(self.records[start : start + page_size]),
            total_pages=compute_total_pages(len(self.records), page_size),
            total_records=len(self.records),
        )

    @property
    def pages_requested(self) -> List[int]:
        return [index for index, _ in self.calls]


class GatedFetcher(FakeFetcher):
    """Fetcher whose responses are held until the test releases each page."""

    def __init__(self, records: List[Record], fail_on: Optional[Set[int]] = None) -> None:
        super().__init__(records, fail_on)
        self.gates: Dict[int, asyncio.Event] = {}

    def gate(self, index: int) -> asyncio.Event:
        return self.gates.setdefault(index, asyncio.Event())

    async def fetch_page(self, index: int, page_size: int) -> Page:
        await self.gate(index).wait()
        return await super().fetch_page(index, page_size)


@pytest.fixture
def dataset() -> List[Record]:
    return make_records(100)


@pytest.fixture
def fetcher(dataset: List[Record]) -> FakeFetcher:
    return FakeFetcher(dataset)
