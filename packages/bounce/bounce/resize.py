"""Resize reconciler - keeps the badge inside a resized arena."""
from __future__ import annotations

import logging
from typing import Any, Callable

from bounce.dimensions import DimensionTracker
from bounce.types import BadgeState, Dimensions, Vec

logger = logging.getLogger(__name__)


def reconcile(position: Vec, dims: Dimensions) -> Vec:
    """Clamp ``position`` to the bounds of ``dims``. Never bounces."""
    hx, hy = dims.bounds
    x, y = position
    return (max(0.0, min(x, hx)), max(0.0, min(y, hy)))


def make_resize_handler(
    state: BadgeState,
    tracker: DimensionTracker,
    on_reconciled: Callable[[Vec], None] | None = None,
) -> Callable[[str, dict[str, Any]], None]:
    """Bus handler that re-measures and clamps ``state.position`` in place."""

    def on_resize(signal_name: str, data: dict[str, Any]) -> None:
        dims = tracker.measure()
        before = state.position
        state.position = reconcile(before, dims)
        if state.position != before:
            logger.debug(
                f"Arena resized to {dims.arena_width:g}x{dims.arena_height:g}, "
                f"badge clamped to ({state.position[0]:.1f}, {state.position[1]:.1f})"
            )
        if on_reconciled is not None:
            on_reconciled(state.position)

    return on_resize
