"""bounce - Bounce-and-recolor animation engine for a single badge."""

from bounce_signal import CancelToken

from bounce.clock import Clock
from bounce.config import DEFAULT_PALETTE, BounceConfig
from bounce.dimensions import DimensionTracker
from bounce.frames import FrameLoop
from bounce.motion import Step, advance, make_bounce_system
from bounce.palette import ColorSelector
from bounce.placement import PlacementInitializer, PlacementPhase
from bounce.resize import make_resize_handler, reconcile
from bounce.scheduler import RenderScheduler
from bounce.surface import MemorySurface, Surface
from bounce.types import BadgeState, Dimensions, PaletteError, TickContext

__all__ = [
    "RenderScheduler",
    "BounceConfig",
    "DEFAULT_PALETTE",
    "BadgeState",
    "Dimensions",
    "TickContext",
    "Clock",
    "FrameLoop",
    "CancelToken",
    "Surface",
    "MemorySurface",
    "DimensionTracker",
    "PlacementInitializer",
    "PlacementPhase",
    "ColorSelector",
    "Step",
    "advance",
    "make_bounce_system",
    "reconcile",
    "make_resize_handler",
    "PaletteError",
]
