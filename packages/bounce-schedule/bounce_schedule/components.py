"""Timer records."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from bounce_signal import CancelToken


@dataclass(eq=False)
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    name: str
    remaining: int
    callback: Callable[[], None]
    token: CancelToken = field(default_factory=CancelToken)
