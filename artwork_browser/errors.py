"""Error types raised by the browser services."""

from __future__ import annotations

from typing import Optional


class ArtworkBrowserError(Exception):
    """Base class for recoverable browser errors."""


class FetchFailed(ArtworkBrowserError):
    """A page could not be retrieved from the remote data source."""

    def __init__(self, message: str, page: Optional[int] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.page = page
        self.status_code = status_code

    def __str__(self) -> str:
        if self.page is None:
            return self.message
        return f"page {self.page}: {self.message}"


class InvalidInput(ArtworkBrowserError):
    """User-supplied input was rejected at the UI boundary."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
