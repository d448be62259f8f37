"""Outlines of the ships and projectiles, placed in world coordinates.

Each object is described by coloured polygons in its own frame. The polygons
are rotated about the object's origin, then scaled by the world's scale, then
moved to the object's position. The result is ready to be drawn by any
renderer.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .enemy import EnemyShip
from .player import PlayerShip
from .projectile import Projectile
from .world import World

Color = tuple[float, float, float]
Point = tuple[float, float]

GREEN: Color = (0.0, 1.0, 0.0)
CABIN_BLUE: Color = (0.2, 0.5, 1.0)
ORANGE: Color = (1.0, 0.5, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)

# Exact cosine and sine for quarter turns, so right angles leave no rounding noise.
_QUARTER_TURNS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))

ENEMY_ROTATION = 180.0


@dataclass(frozen=True)
class Shape:
    """A filled polygon with an RGB colour whose channels run from 0 to 1."""

    color: Color
    points: tuple[Point, ...]


def _cos_sin(angle: float) -> tuple[float, float]:
    quarters = angle / 90.0
    if quarters.is_integer():
        return _QUARTER_TURNS[int(quarters) % 4]
    radians = math.radians(angle)
    return math.cos(radians), math.sin(radians)


def _place(
    local: Iterable[tuple[Color, Iterable[Point]]],
    x: float,
    y: float,
    scale: float,
    angle: float,
) -> list[Shape]:
    cos, sin = _cos_sin(angle)

    def transform(point: Point) -> Point:
        px, py = point
        rx = px * cos - py * sin
        ry = px * sin + py * cos
        return (x + rx * scale, y + ry * scale)

    return [
        Shape(color, tuple(transform(point) for point in points))
        for color, points in local
    ]


def player_shapes(player: PlayerShip, world: World) -> list[Shape]:
    """The player's ship: cannon, hull, two rockets and cockpit, in drawing order."""
    w, h = world.player_size
    cannon = ((-w / 2, -h / 2), (w / 2, -h / 2), (0.0, (h / 2) * 1.5))
    hull = (
        (-w / 2, -h / 2),
        (w / 2, -h / 2),
        (w / 2, 0.0),
        (w / 4, h / 4),
        (-w / 4, h / 4),
        (-w / 2, 0.0),
    )
    left_rocket = ((-w / 3, -h / 2), (-w / 6, -h / 2), (-w / 4, -h))
    right_rocket = ((w / 6, -h / 2), (w / 3, -h / 2), (w / 4, -h))
    cockpit = ((-w / 4, h / 4), (w / 4, h / 4), (0.0, -h / 2))
    local = (
        (GREEN, cannon),
        (GREEN, hull),
        (ORANGE, left_rocket),
        (ORANGE, right_rocket),
        (CABIN_BLUE, cockpit),
    )
    return _place(local, player.x, player.y, world.scale, player.angle)


def enemy_shapes(enemy: EnemyShip, world: World) -> list[Shape]:
    """An enemy ship, pointing down: hull then its two cannons."""
    w, h = world.enemy_size
    hull = ((-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2))
    left_cannon = ((-w / 2, -h / 2), (0.0, -h / 2), (-w / 4, h * 0.8))
    right_cannon = ((0.0, -h / 2), (w / 2, -h / 2), (w / 4, h * 0.8))
    local = ((WHITE, hull), (RED, left_cannon), (RED, right_cannon))
    return _place(local, enemy.x, enemy.y, world.scale, ENEMY_ROTATION)


def projectile_shapes(projectile: Projectile, world: World) -> list[Shape]:
    """A projectile's square body: blue for the player's shots, red for the enemies'."""
    s = world.projectile_size
    body = ((-s, -s), (s, -s), (s, s), (-s, s))
    color = BLUE if projectile.from_player else RED
    return _place(
        ((color, body),),
        projectile.x,
        projectile.y,
        world.scale,
        projectile.direction * 90.0,
    )