"""Notification channel between a document and whoever renders it."""

from __future__ import annotations

from typing import Callable, Dict, List

Listener = Callable[[object], None]


class DocumentBus:
    """Minimal publish/subscribe hub keyed by event name."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Listener]] = {}

    def subscribe(self, event: str, callback: Listener) -> Callable[[], None]:
        """Register ``callback``; the returned function unsubscribes it."""

        listeners = self._subscribers.setdefault(event, [])
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, ())):
            callback(payload)
