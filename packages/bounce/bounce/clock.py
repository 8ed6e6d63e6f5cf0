"""Clock and TickContext for the frame-paced loop."""

import math
import random
from typing import Callable

from bounce.types import TickContext


class Clock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._tick_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def ticks_for(self, seconds: float) -> int:
        """Whole ticks covering ``seconds``, never less than one."""
        return max(1, math.ceil(round(seconds * self._fps, 6)))

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
            random=rng,
        )
