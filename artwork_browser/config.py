"""Application configuration constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"

DEFAULT_BASE_URL = "https://api.artic.edu/api/v1/"
DEFAULT_TIMEOUT_SECONDS = 15.0

PAGE_SIZE = 12
MAX_BULK_SELECT = 10_000

RECORD_FIELDS = [
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]

TABLE_COLUMNS = [
    "selected",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]

COLUMN_LABELS = {
    "selected": "",
    "title": "Title",
    "place_of_origin": "Place of Origin",
    "artist_display": "Artist",
    "inscriptions": "Inscriptions",
    "date_start": "Start Date",
    "date_end": "End Date",
}


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout_seconds: float
    verify_ssl: bool

    @classmethod
    def from_env(cls) -> "ApiConfig":
        base_url = _normalize_base_url(os.getenv("ARTWORK_API_BASE_URL", DEFAULT_BASE_URL))
        timeout_seconds = float(os.getenv("ARTWORK_API_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
        verify_ssl = parse_bool(os.getenv("ARTWORK_API_VERIFY_SSL", "true"), default=True)
        return cls(base_url=base_url, timeout_seconds=timeout_seconds, verify_ssl=verify_ssl)


def _normalize_base_url(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        return DEFAULT_BASE_URL
    return normalized if normalized.endswith("/") else f"{normalized}/"


def parse_bool(value: str | bool | None, default: bool = True) -> bool:
    """Interpret common truthy/falsy strings from the environment."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default

    normalized = str(value).strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default
