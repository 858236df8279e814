"""Remote page retrieval from the artworks API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

import httpx

from artwork_browser.config import RECORD_FIELDS, ApiConfig
from artwork_browser.errors import FetchFailed
from artwork_browser.models import Page, Record
from artwork_browser.utils.helpers import get_logger
from artwork_browser.utils.pagination import compute_total_pages

logger = get_logger(__name__)

ARTWORKS_PATH = "artworks"


class PageFetcher(Protocol):
    async def fetch_page(self, index: int, page_size: int) -> Page: ...


class ArtworkFetcher:
    """Fetch one page of artworks per call. Stateless apart from its client."""

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        request_fields: bool = True,
    ) -> None:
        self.config = config or ApiConfig.from_env()
        self._client = client
        self._request_fields = request_fields

    async def fetch_page(self, index: int, page_size: int) -> Page:
        if index < 1:
            raise ValueError(f"page index must be >= 1, got {index}")
        if page_size <= 0:
            raise ValueError(f"page size must be > 0, got {page_size}")

        params: Dict[str, Any] = {"page": index, "limit": page_size}
        if self._request_fields:
            params["fields"] = ",".join(RECORD_FIELDS)

        logger.info("Fetching artworks page %s (limit=%s)", index, page_size)
        try:
            if self._client is not None:
                response = await self._client.get(ARTWORKS_PATH, params=params)
            else:
                async with httpx.AsyncClient(
                    base_url=self.config.base_url,
                    timeout=self.config.timeout_seconds,
                    verify=self.config.verify_ssl,
                ) as client:
                    response = await client.get(ARTWORKS_PATH, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Network error fetching page %s: %s", index, exc)
            raise FetchFailed(f"network error: {exc}", page=index) from exc

        if response.status_code >= 400:
            logger.warning("Remote returned HTTP %s for page %s", response.status_code, index)
            raise FetchFailed(
                f"remote returned HTTP {response.status_code}",
                page=index,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchFailed("response body is not valid JSON", page=index) from exc

        return parse_page(payload, index, page_size)


def parse_page(payload: Any, index: int, page_size: int) -> Page:
    """Build a Page from an artworks listing payload."""
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise FetchFailed("response is missing the data list", page=index)

    try:
        records: List[Record] = [Record.from_payload(item) for item in payload["data"]]
    except ValueError as exc:
        raise FetchFailed(f"malformed record: {exc}", page=index) from exc

    pagination = payload.get("pagination") or {}
    if not isinstance(pagination, dict):
        pagination = {}

    total_records = _as_int(pagination.get("total"))
    total_pages = _as_int(pagination.get("total_pages"))
    if total_records is None:
        # Without an exact count, every page is assumed full.
        total_records = (total_pages or 0) * page_size
    if total_pages is None:
        total_pages = compute_total_pages(total_records, page_size) if total_records else 0

    return Page(
        index=index,
        page_size=page_size,
        records=tuple(records),
        total_pages=total_pages,
        total_records=total_records,
    )


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return None
