"""System factory for timer processing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from bounce_schedule.queue import TimerQueue

if TYPE_CHECKING:
    from bounce import BadgeState, TickContext


def make_timer_system(
    queue: TimerQueue,
) -> Callable[[BadgeState, TickContext], None]:
    """Return a system that advances the queue once per tick."""

    def timer_system(state: BadgeState, ctx: TickContext) -> None:
        queue.advance()

    return timer_system
