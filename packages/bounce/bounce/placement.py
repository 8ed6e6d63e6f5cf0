"""Placement initializer - one random starting position per animation."""
from __future__ import annotations

import enum
import logging
import random

from bounce.types import Dimensions, Vec

logger = logging.getLogger(__name__)


class PlacementPhase(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class PlacementInitializer:
    """Two-state machine. Once INITIALIZED it never moves the badge again."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._phase = PlacementPhase.UNINITIALIZED

    @property
    def phase(self) -> PlacementPhase:
        return self._phase

    @property
    def initialized(self) -> bool:
        return self._phase is PlacementPhase.INITIALIZED

    def initialize(self, dims: Dimensions) -> Vec | None:
        """Return a random fitting position, or None when nothing was placed.

        Nothing is placed once initialized, or while the badge or the arena
        has no measured geometry yet.
        """
        if self.initialized:
            return None
        if not (dims.badge_known and dims.arena_known):
            return None
        hx, hy = dims.bounds
        position = (self._rng.uniform(0.0, hx), self._rng.uniform(0.0, hy))
        self._phase = PlacementPhase.INITIALIZED
        logger.debug(f"Badge placed at ({position[0]:.1f}, {position[1]:.1f})")
        return position

    def lock(self) -> None:
        self._phase = PlacementPhase.INITIALIZED
