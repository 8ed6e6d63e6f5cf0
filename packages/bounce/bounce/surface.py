"""Render surface contract and an in-memory implementation."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from bounce_signal import CancelToken, SignalBus

from bounce.types import Color, Vec

ResizeHandler = Callable[[str, dict[str, Any]], None]

RESIZED = "resized"


class Surface(Protocol):
    """What the engine needs from its host.

    ``arena_size`` and ``badge_size`` return ``None`` while the element has
    not been laid out yet.
    """

    @property
    def attached(self) -> bool: ...

    def arena_size(self) -> tuple[float, float] | None: ...

    def badge_size(self) -> tuple[float, float] | None: ...

    def place_badge(self, position: Vec, color: Color) -> None: ...

    def subscribe_resize(self, handler: ResizeHandler) -> CancelToken: ...


class MemorySurface:
    """Headless surface. Resize notifications are delivered synchronously."""

    def __init__(
        self,
        arena: tuple[float, float] | None = None,
        badge: tuple[float, float] | None = None,
        attached: bool = True,
    ) -> None:
        self._arena = arena
        self._badge = badge
        self._attached = attached
        self._bus = SignalBus()
        self.position: Vec | None = None
        self.color: Color | None = None
        self.placements = 0

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        self._attached = True

    def detach(self) -> None:
        self._attached = False

    def arena_size(self) -> tuple[float, float] | None:
        return self._arena

    def badge_size(self) -> tuple[float, float] | None:
        return self._badge

    def lay_out(self, width: float, height: float) -> None:
        self._badge = (width, height)

    def unlay(self) -> None:
        """Make both elements report no geometry, as before first layout."""
        self._badge = None
        self._arena = None

    def resize(self, width: float, height: float) -> None:
        self._arena = (width, height)
        self._bus.publish(RESIZED, width=width, height=height)
        self._bus.flush()

    def place_badge(self, position: Vec, color: Color) -> None:
        self.position = position
        self.color = color
        self.placements += 1

    def subscribe_resize(self, handler: ResizeHandler) -> CancelToken:
        return self._bus.subscribe(RESIZED, handler)

    @property
    def resize_listeners(self) -> int:
        return self._bus.subscriber_count(RESIZED)
