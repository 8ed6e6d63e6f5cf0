"""TimerQueue - owns pending one-shot timers counted in ticks."""
from __future__ import annotations

from typing import Callable

from bounce_signal import CancelToken

from bounce_schedule.components import Timer


class TimerQueue:
    """Pending timers in insertion order. Fired and cancelled timers are dropped."""

    def __init__(self) -> None:
        self._timers: list[Timer] = []

    def after(self, ticks: int, name: str, callback: Callable[[], None]) -> CancelToken:
        """Fire ``callback`` on the ``ticks``-th tick from now."""
        if ticks < 1:
            raise ValueError("ticks must be at least 1")
        timer: Timer
        token = CancelToken(lambda: self._drop(timer))
        timer = Timer(name=name, remaining=ticks, callback=callback, token=token)
        self._timers.append(timer)
        return token

    def _drop(self, timer: Timer) -> None:
        try:
            self._timers.remove(timer)
        except ValueError:
            pass

    def pending(self) -> list[str]:
        return [t.name for t in self._timers]

    def __len__(self) -> int:
        return len(self._timers)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            timer.token.cancel()
        self._timers.clear()

    def advance(self) -> list[str]:
        """Decrement every timer and fire the ones that reach zero.

        Returns the names of the timers that fired this call.
        """
        fired: list[str] = []
        for timer in list(self._timers):
            if timer.token.cancelled:
                continue
            timer.remaining -= 1
            if timer.remaining <= 0:
                self._drop(timer)
                fired.append(timer.name)
                timer.callback()
        return fired
