"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from bounce_signal.bus import SignalBus

if TYPE_CHECKING:
    from bounce import BadgeState, TickContext


def make_signal_system(bus: SignalBus) -> Callable[[BadgeState, TickContext], None]:
    def signal_system(state: BadgeState, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
