"""PygameSurface - render surface contract over a resizable pygame window."""
from __future__ import annotations

import pygame

from bounce.surface import RESIZED, ResizeHandler
from bounce.types import Color, Vec
from bounce_signal import CancelToken, SignalBus

from ui.constants import (
    BADGE_BORDER,
    BADGE_LINES,
    BADGE_PAD_X,
    BADGE_PAD_Y,
    BG_COLOR,
    BODY_SIZE,
    LINE_GAP,
    TITLE_SIZE,
)


class PygameSurface:
    """The window is the arena; the badge is a bordered block of text.

    The badge has no size until its text has been rendered once, so the
    engine sees an unlaid badge on the first frames.
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self._screen = screen
        self._bus = SignalBus()
        self._title_font = pygame.font.SysFont("monospace", TITLE_SIZE, bold=True)
        self._body_font = pygame.font.SysFont("monospace", BODY_SIZE)
        self._badge_size: tuple[float, float] | None = None
        self._position: Vec = (0.0, 0.0)
        self._color: Color = "#0000ee"
        self._attached = True

    @property
    def attached(self) -> bool:
        return self._attached

    def close(self) -> None:
        self._attached = False

    def arena_size(self) -> tuple[float, float] | None:
        w, h = self._screen.get_size()
        return float(w), float(h)

    def badge_size(self) -> tuple[float, float] | None:
        return self._badge_size

    def place_badge(self, position: Vec, color: Color) -> None:
        self._position = position
        self._color = color

    def subscribe_resize(self, handler: ResizeHandler) -> CancelToken:
        return self._bus.subscribe(RESIZED, handler)

    def handle_resize(self, width: int, height: int) -> None:
        self._bus.publish(RESIZED, width=width, height=height)
        self._bus.flush()

    def badge_rect(self) -> pygame.Rect | None:
        if self._badge_size is None:
            return None
        x, y = self._position
        w, h = self._badge_size
        return pygame.Rect(int(x), int(y), int(w), int(h))

    def draw(self) -> None:
        self._screen.fill(BG_COLOR)
        color = pygame.Color(self._color)
        lines = [self._title_font.render(BADGE_LINES[0], True, color)]
        lines += [self._body_font.render(text, True, color) for text in BADGE_LINES[1:]]

        inner_w = max(line.get_width() for line in lines)
        inner_h = sum(line.get_height() for line in lines) + LINE_GAP * (len(lines) - 1)
        self._badge_size = (
            float(inner_w + 2 * BADGE_PAD_X),
            float(inner_h + 2 * BADGE_PAD_Y),
        )

        rect = self.badge_rect()
        pygame.draw.rect(self._screen, color, rect, BADGE_BORDER)
        y = rect.y + BADGE_PAD_Y
        for line in lines:
            x = rect.x + (rect.width - line.get_width()) // 2
            self._screen.blit(line, (x, y))
            y += line.get_height() + LINE_GAP
