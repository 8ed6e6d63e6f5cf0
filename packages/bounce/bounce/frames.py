"""Frame loop - the host's per-refresh callback registry."""
from __future__ import annotations

from typing import Callable

from bounce_signal import CancelToken

FrameCallback = Callable[[], None]


class FrameLoop:
    """Queue of callbacks for the next frame.

    ``pump()`` runs one frame: every callback requested before the pump whose
    token is still live. Callbacks requested during a pump wait for the next.
    """

    def __init__(self) -> None:
        self._queue: list[tuple[FrameCallback, CancelToken]] = []
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def pending(self) -> int:
        return sum(1 for _, token in self._queue if not token.cancelled)

    def request(self, callback: FrameCallback) -> CancelToken:
        token = CancelToken()
        self._queue.append((callback, token))
        return token

    def pump(self) -> int:
        """Run one frame. Returns the number of callbacks invoked."""
        snapshot = self._queue
        self._queue = []
        self._frame += 1
        ran = 0
        for callback, token in snapshot:
            if token.cancelled:
                continue
            callback()
            ran += 1
        return ran

    def clear(self) -> None:
        for _, token in self._queue:
            token.cancel()
        self._queue.clear()
