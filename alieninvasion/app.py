"""The windowed game: opens a window and feeds key presses and time to the game."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

import pygame

from .game import BACKSPACE, ENTER, ESCAPE, SPACE, Game
from .render import draw

WIDTH = 720
HEIGHT = 720
TITLE = "Alien Invasion"
FRAMES_PER_SECOND = 60

_SPECIAL_KEYS = {
    pygame.K_RETURN: ENTER,
    pygame.K_KP_ENTER: ENTER,
    pygame.K_ESCAPE: ESCAPE,
    pygame.K_SPACE: SPACE,
    pygame.K_BACKSPACE: BACKSPACE,
}


def translate_key(key: int, unicode: str) -> str | None:
    """The game's character for a pygame key press, or None if it has no meaning."""
    special = _SPECIAL_KEYS.get(key)
    if special is not None:
        return special
    if unicode and len(unicode) == 1:
        return unicode
    return None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="alieninvasion",
        description="Shoot down the invading formation before it reaches you.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window is closed or the player quits."""
    _parse_args(argv)
    os.environ.setdefault("SDL_VIDEO_WINDOW_POS", f"{WIDTH},0")
    pygame.init()
    try:
        surface = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game()
        running = True
        while running:
            now = pygame.time.get_ticks() / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN:
                    key = translate_key(event.key, getattr(event, "unicode", ""))
                    if key is not None:
                        game.press(key, now)
                        if game.quit_requested:
                            running = False
                            break
            if not running:
                break
            game.update(now)
            draw(surface, game, now)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.display.quit()
    return 0