"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

from bounce_signal.token import CancelToken

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[tuple[_Handler, CancelToken]]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> CancelToken:
        """Register a handler; cancel the returned token to unsubscribe it."""
        entry: tuple[_Handler, CancelToken]
        token = CancelToken(lambda: self._drop(signal_name, entry))
        entry = (handler, token)
        self._subscribers.setdefault(signal_name, []).append(entry)
        return token

    def _drop(self, signal_name: str, entry: tuple[_Handler, CancelToken]) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(entry)
        except ValueError:
            pass

    def subscriber_count(self, signal_name: str) -> int:
        return len(self._subscribers.get(signal_name, []))

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler, token in list(self._subscribers.get(signal_name, [])):
                # A handler earlier in this flush may have cancelled this one.
                if token.cancelled:
                    continue
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
