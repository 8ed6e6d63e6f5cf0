"""Shared types, state struct, and errors for the bounce engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable

Vec = tuple[float, float]
Direction = tuple[int, int]
Color = str


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Snapshot of badge and arena sizes, in surface pixels."""

    badge_width: float = 0.0
    badge_height: float = 0.0
    arena_width: float = 0.0
    arena_height: float = 0.0

    @property
    def bounds(self) -> Vec:
        """Largest valid (x, y). Collapses to 0 when the badge does not fit."""
        return (
            max(0.0, self.arena_width - self.badge_width),
            max(0.0, self.arena_height - self.badge_height),
        )

    @property
    def badge_known(self) -> bool:
        return self.badge_width > 0 and self.badge_height > 0

    @property
    def arena_known(self) -> bool:
        return self.arena_width > 0 and self.arena_height > 0


@dataclass(slots=True)
class BadgeState:
    """Mutable animation state owned by the render scheduler."""

    position: Vec
    direction: Direction
    color: Color


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class PaletteError(ValueError):
    """Raised when a palette cannot guarantee a visible color change."""


System = Callable[[BadgeState, TickContext], None]
