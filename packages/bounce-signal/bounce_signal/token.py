"""Cancellation tokens shared by subscriptions, timers, and frame requests."""
from __future__ import annotations

from typing import Callable


class CancelToken:
    """Owned handle for a registration. Cancelling is idempotent.

    ``on_cancel`` runs once, on the first ``cancel()`` call, and is how the
    registry that issued the token drops its entry.
    """

    __slots__ = ("_cancelled", "_on_cancel")

    def __init__(self, on_cancel: Callable[[], None] | None = None) -> None:
        self._cancelled = False
        self._on_cancel = on_cancel

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        on_cancel = self._on_cancel
        self._on_cancel = None
        if on_cancel is not None:
            on_cancel()

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "live"
        return f"<CancelToken {state}>"
