"""What each screen shows, and drawing it onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame

from .game import Game, State
from .shapes import Color, player_shapes, enemy_shapes, projectile_shapes
from .world import World

GREEN: Color = (0.0, 1.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
BLACK: Color = (0.0, 0.0, 0.0)

LARGE = 18
SMALL = 12


@dataclass(frozen=True)
class TextLine:
    """A line of text whose baseline starts at ``(x, y)`` in world coordinates."""

    text: str
    color: Color
    x: float
    y: float
    size: int = SMALL


def _menu(world: World, title: tuple[str, Color, float], lines) -> list[TextLine]:
    """A centred menu: title two units above the middle line, others at given offsets."""
    centre = world.xmin + world.width / 2.0
    middle = world.ymax / 2.0
    text, color, dx = title
    result = [TextLine(text, color, centre + dx, middle + 2.0, LARGE)]
    result.extend(
        TextLine(text, color, centre + dx, middle + dy, SMALL)
        for text, color, dx, dy in lines
    )
    return result


def _playing_text(game: Game, now: float) -> list[TextLine]:
    w = game.world
    centre = w.xmin + w.width / 2.0
    lines = [
        TextLine(f"Lifes: {game.lives}", RED, w.xmin + 1.0, w.ymax - 1.0),
        TextLine(f"Time: {int(game.game_time)}s", WHITE, centre - 2.0, w.ymax - 1.0),
        TextLine(f"Enemies: {game.kills}", GREEN, w.xmax - 5.0, w.ymax - 1.0),
    ]
    if game.behind_lines:
        lines.append(
            TextLine("BEHIND ENEMY LINES!", RED, w.xmax - 9.0, w.ymin + 1.0)
        )
    if game.can_fire(now):
        lines.append(TextLine("FIRE!", GREEN, w.xmin + 1.0, w.ymin + 1.0))
    else:
        lines.append(TextLine("LOADING...", RED, w.xmin + 1.0, w.ymin + 1.0))
    return lines


def screen_text(game: Game, now: float) -> list[TextLine]:
    """The text shown for the game's current state at time ``now``."""
    w = game.world
    state = game.state
    if state is State.INITIAL:
        return _menu(w, ("ALIEN INVASION", GREEN, -3.0), (
            ("Press ENTER to play", GREEN, -2.0, 0.0),
            ("Press H for help", WHITE, -2.0, -1.0),
            ("Press ESC to exit", RED, -2.0, -2.0),
        ))
    if state is State.DIFFICULTY_SELECT:
        return _menu(w, ("SELECT DIFFICULTY", GREEN, -3.0), (
            ("1 - Deux Ex Machina", WHITE, -2.0, 0.0),
            ("2 - Medium", WHITE, -2.0, -1.0),
            ("3 - Hard", WHITE, -2.0, -2.0),
            ("Press ESC to go back", GREEN, -3.0, -4.0),
        ))
    if state in (State.HELP_INITIAL, State.HELP_PAUSED):
        return _menu(w, ("GAME HELP", GREEN, -2.0), (
            ("W, S, A, D - Move the ship in cardinal directions", WHITE, -5.0, 0.0),
            ("Q, E - Rotate the ship in 90 degree angles", WHITE, -5.0, -1.0),
            ("Space - Shoot", WHITE, -5.0, -2.0),
            ("Press ENTER to go back", GREEN, -3.0, -4.0),
        ))
    if state is State.PAUSED:
        return _menu(w, ("GAME PAUSED", GREEN, -2.0), (
            ("Press ENTER to continue", GREEN, -3.0, 0.0),
            ("Press M to return to menu", WHITE, -3.0, -1.0),
            ("Press H for help", WHITE, -3.0, -2.0),
        ))
    stats = (
        (f"Game Time: {int(game.game_time)} seconds", WHITE, -3.0, 0.0),
        (f"Enemies eliminated: {game.kills}", WHITE, -3.0, -1.0),
        ("Press ENTER to play again", GREEN, -3.0, -3.0),
    )
    if state is State.LOST:
        return _menu(w, ("GAME OVER", RED, -2.0), stats)
    if state is State.WON:
        score = (f"Score: {game.final_score()}", WHITE, -3.0, 1.0)
        return _menu(w, ("VICTORY!", GREEN, -2.0), (score, *stats))
    return _playing_text(game, now)


def world_to_screen(
    world: World, x: float, y: float, width: int, height: int
) -> tuple[float, float]:
    """Map a world point to pixel coordinates, with y growing downwards on screen."""
    sx = (x - world.xmin) / world.width * width
    sy = (world.ymax - y) / world.height * height
    return (sx, sy)


def _rgb(color: Color) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    # The default font renders smaller than its nominal size; scale it up to match.
    return pygame.font.Font(None, round(size * 4 / 3))


def draw(surface: pygame.Surface, game: Game, now: float) -> None:
    """Paint the whole current screen of ``game`` onto ``surface``."""
    if not pygame.font.get_init():
        pygame.font.init()
    width, height = surface.get_size()
    world = game.world
    surface.fill(_rgb(BLACK))

    if game.state is State.PLAYING:
        shapes = []
        if game.player is not None:
            shapes.extend(player_shapes(game.player, world))
        for enemy in game.enemies:
            shapes.extend(enemy_shapes(enemy, world))
        for shot in (*game.player_shots, *game.enemy_shots):
            shapes.extend(projectile_shapes(shot, world))
        for shape in shapes:
            points = [
                world_to_screen(world, px, py, width, height) for px, py in shape.points
            ]
            pygame.draw.polygon(surface, _rgb(shape.color), points)

    for line in screen_text(game, now):
        font = _font(line.size)
        image = font.render(line.text, False, _rgb(line.color))
        sx, sy = world_to_screen(world, line.x, line.y, width, height)
        surface.blit(image, (round(sx), round(sy) - font.get_ascent()))