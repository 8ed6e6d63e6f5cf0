"""DVD Screensaver: maintenance page badge bouncing around a window.

Exercises bounce, bounce-signal, and bounce-schedule.

Controls:
  Click   Open the badge link in a browser tab
  Space   Pause / Resume
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import webbrowser

import pygame

from bounce import BounceConfig, FrameLoop, RenderScheduler
from ui.constants import FPS, HUD_COLOR, LINK_URL, SCREEN_H, SCREEN_W, TITLE
from ui.surface import PygameSurface


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="DVD Screensaver: bounce visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--speed", type=float, default=0.5, help="Pixels per frame (default: 0.5)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--url", type=str, default=LINK_URL, help="Link opened on badge click")
    p.add_argument("--debug", action="store_true", help="Log engine lifecycle")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    hud_font = pygame.font.SysFont("monospace", 12)

    surface = PygameSurface(screen)
    frames = FrameLoop()
    scheduler = RenderScheduler(
        surface,
        config=BounceConfig(speed=args.speed, fps=args.fps),
        frames=frames,
        seed=args.seed,
    )
    scheduler.start()

    paused = False
    running = True

    while running:
        pg_clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                surface.handle_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                rect = surface.badge_rect()
                if rect is not None and rect.collidepoint(event.pos):
                    webbrowser.open_new_tab(args.url)

        # --- Update ---
        if not paused:
            frames.pump()

        # --- Draw ---
        surface.draw()
        pause_str = "  [PAUSED]" if paused else ""
        hud = (
            f"Bounces: {scheduler.bounces}   Corners: {scheduler.corners}   "
            f"FPS: {pg_clock.get_fps():.0f}{pause_str}"
        )
        screen.blit(hud_font.render(hud, True, HUD_COLOR), (8, screen.get_height() - 18))
        pygame.display.flip()

    scheduler.teardown()
    surface.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
