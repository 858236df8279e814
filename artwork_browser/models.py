"""Record and page types returned by the remote data source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from artwork_browser.utils.helpers import normalize_text, normalize_year
from artwork_browser.utils.pagination import first_row_offset


@dataclass(frozen=True)
class Record:
    """One artwork row. Identity is defined by ``id`` alone."""

    id: int
    title: str = ""
    place_of_origin: str = ""
    artist_display: str = ""
    inscriptions: str = ""
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Record":
        """Build a record from one remote JSON object."""
        if not isinstance(payload, dict):
            raise ValueError(f"record payload must be an object, got {type(payload).__name__}")
        raw_id = payload.get("id")
        if raw_id is None or isinstance(raw_id, bool):
            raise ValueError("record payload is missing an id")
        try:
            record_id = int(raw_id)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"record id is not an integer: {raw_id!r}") from exc

        return cls(
            id=record_id,
            title=normalize_text(payload.get("title")),
            place_of_origin=normalize_text(payload.get("place_of_origin")),
            artist_display=normalize_text(payload.get("artist_display")),
            inscriptions=normalize_text(payload.get("inscriptions")),
            date_start=normalize_year(payload.get("date_start")),
            date_end=normalize_year(payload.get("date_end")),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "place_of_origin": self.place_of_origin,
            "artist_display": self.artist_display,
            "inscriptions": self.inscriptions,
            "date_start": self.date_start,
            "date_end": self.date_end,
        }


@dataclass(frozen=True)
class Page:
    """An ordered slice of records tagged with the index that produced it."""

    index: int
    page_size: int
    records: Tuple[Record, ...] = field(default_factory=tuple)
    total_pages: int = 0
    total_records: int = 0

    @classmethod
    def empty(cls, page_size: int, index: int = 1) -> "Page":
        return cls(index=index, page_size=page_size)

    @property
    def first_index(self) -> int:
        return first_row_offset(self.index, self.page_size)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(record.id for record in self.records)

    def __len__(self) -> int:
        return len(self.records)
