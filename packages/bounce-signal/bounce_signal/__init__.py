"""bounce-signal - In-process event bus for the bounce engine."""
from __future__ import annotations

from bounce_signal.bus import SignalBus
from bounce_signal.systems import make_signal_system
from bounce_signal.token import CancelToken

__all__ = ["CancelToken", "SignalBus", "make_signal_system"]
