"""Bounce transition and the system that applies it each tick."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from bounce.dimensions import DimensionTracker
from bounce.palette import ColorSelector
from bounce.types import BadgeState, Direction, TickContext, Vec

if TYPE_CHECKING:
    from bounce_signal import SignalBus

    from bounce.placement import PlacementInitializer

BOUNCED = "bounced"


@dataclass(frozen=True, slots=True)
class Step:
    """Result of one transition."""

    position: Vec
    direction: Direction
    contact_x: bool = False
    contact_y: bool = False

    @property
    def contact(self) -> bool:
        return self.contact_x or self.contact_y

    @property
    def corner(self) -> bool:
        return self.contact_x and self.contact_y


def _axis(value: float, d: int, upper: float) -> tuple[float, int, bool]:
    if value <= 0.0:
        return 0.0, 1, True
    if value >= upper:
        return upper, -1, True
    return value, d, False


def advance(position: Vec, direction: Direction, speed: float, bounds: Vec) -> Step:
    """Move one tick and reflect off the edges.

    ``bounds`` is the largest valid (x, y); a badge larger than the arena
    has a bound of 0 and stays pinned there, touching every tick.
    """
    x, y = position
    dx, dy = direction
    hx, hy = max(0.0, bounds[0]), max(0.0, bounds[1])
    new_x, dx, hit_x = _axis(x + speed * dx, dx, hx)
    new_y, dy, hit_y = _axis(y + speed * dy, dy, hy)
    return Step((new_x, new_y), (dx, dy), hit_x, hit_y)


def make_bounce_system(
    tracker: DimensionTracker,
    selector: ColorSelector,
    speed: float,
    placement: PlacementInitializer | None = None,
    bus: SignalBus | None = None,
    on_step: Callable[[Step], None] | None = None,
) -> Callable[[BadgeState, TickContext], None]:
    """Advance the badge one tick, recoloring at most once per tick.

    With ``placement`` given, the badge holds still until placement has
    happened. ``bus`` receives a ``bounced`` signal per contact tick.
    """

    def bounce_system(state: BadgeState, ctx: TickContext) -> None:
        if placement is not None and not placement.initialized:
            return
        dims = tracker.measure()
        step = advance(state.position, state.direction, speed, dims.bounds)
        state.position = step.position
        state.direction = step.direction
        if step.contact:
            state.color = selector.next(state.color)
            if bus is not None:
                axes = ("x",) * step.contact_x + ("y",) * step.contact_y
                bus.publish(
                    BOUNCED,
                    tick=ctx.tick_number,
                    axes=axes,
                    color=state.color,
                    corner=step.corner,
                )
        if on_step is not None:
            on_step(step)

    return bounce_system
