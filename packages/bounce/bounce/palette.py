"""Color selector - random palette color that always differs from the current one."""
from __future__ import annotations

import random

from bounce.config import validate_palette
from bounce.types import Color


class ColorSelector:
    def __init__(
        self,
        palette: tuple[Color, ...],
        rng: random.Random,
        current: Color | None = None,
    ) -> None:
        validate_palette(palette)
        # Duplicates would skew the uniform draw.
        self._palette = tuple(dict.fromkeys(palette))
        self._rng = rng
        self._current = current if current is not None else self._palette[0]

    @property
    def palette(self) -> tuple[Color, ...]:
        return self._palette

    @property
    def current(self) -> Color:
        return self._current

    def next(self, current: Color | None = None) -> Color:
        """Pick uniformly from the palette minus ``current`` and commit it."""
        if current is None:
            current = self._current
        candidates = [c for c in self._palette if c != current]
        color = self._rng.choice(candidates)
        self._current = color
        return color
