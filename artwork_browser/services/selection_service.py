"""Cross-page row selection keyed by record id."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from artwork_browser.models import Page, Record
from artwork_browser.utils.events import ChangeNotifier


class SelectionSet:
    """Selected records, independent of whichever page is displayed.

    Membership is only changed by ``toggle``, ``replace_all`` and ``clear``;
    navigating between pages never prunes it.
    """

    def __init__(self, notifier: Optional[ChangeNotifier] = None) -> None:
        self._members: Dict[int, Record] = {}
        self.notifier = notifier or ChangeNotifier()

    def toggle(self, record: Record) -> bool:
        """Flip membership of ``record`` and return whether it is now selected."""
        if record.id in self._members:
            del self._members[record.id]
            selected = False
        else:
            self._members[record.id] = record
            selected = True
        self.notifier.notify("selection")
        return selected

    def replace_all(self, records: Iterable[Record]) -> None:
        """Discard current membership and install ``records`` (last duplicate wins)."""
        members: Dict[int, Record] = {}
        for record in records:
            members[record.id] = record
        self._members = members
        self.notifier.notify("selection")

    def clear(self) -> None:
        self.replace_all(())

    def is_selected(self, record_id: int) -> bool:
        return record_id in self._members

    def snapshot(self) -> List[Record]:
        return list(self._members.values())

    def ids(self) -> Set[int]:
        return set(self._members)

    def selected_on(self, page: Page) -> Set[int]:
        """Return the ids of ``page`` rows that are currently selected."""
        return {record.id for record in page.records if record.id in self._members}

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._members

    def __len__(self) -> int:
        return len(self._members)
