"""Dimension tracker - cached measurements of badge and arena."""
from __future__ import annotations

from bounce.surface import Surface
from bounce.types import Dimensions


class DimensionTracker:
    """Reads sizes from the surface, keeping the last known value per element.

    An element that is not laid out yet keeps its cached size (zero until a
    first real measurement). Zero sizes reported by the surface are stored
    as-is.
    """

    def __init__(self, surface: Surface) -> None:
        self._surface = surface
        self._latest = Dimensions()

    @property
    def latest(self) -> Dimensions:
        return self._latest

    def measure(self) -> Dimensions:
        prev = self._latest
        badge = self._surface.badge_size()
        arena = self._surface.arena_size()
        bw, bh = badge if badge is not None else (prev.badge_width, prev.badge_height)
        aw, ah = arena if arena is not None else (prev.arena_width, prev.arena_height)
        self._latest = Dimensions(
            badge_width=float(bw),
            badge_height=float(bh),
            arena_width=float(aw),
            arena_height=float(ah),
        )
        return self._latest
