"""Explicit state-change notification used to trigger re-renders."""

from __future__ import annotations

from typing import Callable, List

Listener = Callable[[str], None]


class ChangeNotifier:
    """Keeps a list of listeners and calls each one with a change reason."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, reason: str) -> None:
        for listener in list(self._listeners):
            listener(reason)
