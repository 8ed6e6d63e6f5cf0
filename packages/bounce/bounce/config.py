"""Animation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from bounce.types import Color, Direction, PaletteError, Vec

DEFAULT_PALETTE: tuple[Color, ...] = (
    "#0000ee",
    "#ee0000",
    "#00ee00",
    "#ee00ee",
    "#eeee00",
    "#00eeee",
    "#ff7700",
    "#7700ff",
)


def validate_palette(palette: tuple[Color, ...]) -> None:
    if len(set(palette)) < 2:
        raise PaletteError(
            f"palette needs at least 2 distinct colors, got {list(palette)!r}"
        )


@dataclass(frozen=True)
class BounceConfig:
    """Immutable configuration for one animation.

    Attributes:
        speed: Pixels travelled per tick on each axis.
        fps: Frames (and ticks) per second the host refreshes at.
        palette: Colors eligible for selection on contact.
        initial_color: Color shown before the first contact.
        start_position: Position used until placement succeeds.
        start_direction: Initial (dx, dy), each -1 or +1.
        placement_delay: Seconds before each placement attempt.
        placement_attempts: Placement tries before giving up.
        remeasure_delay: Seconds before the deferred re-measurement.
    """

    speed: float = 0.5
    fps: int = 60
    palette: tuple[Color, ...] = DEFAULT_PALETTE
    initial_color: Color = "#0000ee"
    start_position: Vec = (50.0, 50.0)
    start_direction: Direction = (1, 1)
    placement_delay: float = 0.1
    placement_attempts: int = 2
    remeasure_delay: float = 0.2

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError("speed must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        validate_palette(self.palette)
        if any(d not in (-1, 1) for d in self.start_direction):
            raise ValueError(
                f"start_direction entries must be -1 or +1, got {self.start_direction!r}"
            )
        if self.placement_delay < 0 or self.remeasure_delay < 0:
            raise ValueError("delays must be non-negative")
        if self.placement_attempts < 1:
            raise ValueError("placement_attempts must be at least 1")
