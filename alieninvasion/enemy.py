"""An enemy ship of the invading formation."""

from __future__ import annotations

from enum import IntEnum

from .world import World


class EnemyMove(IntEnum):
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


class EnemyShip:
    """An enemy ship, placed by default just below the top of the field."""

    def __init__(self, speed: float, world: World) -> None:
        self.speed = speed
        self.world = world
        self.x = 0.0
        self.y = world.ymax - 2.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move(self, direction: EnemyMove | int) -> None:
        """Move one step; enemies are not held to the field's limits."""
        direction = EnemyMove(direction)
        if direction is EnemyMove.RIGHT:
            self.x += self.speed
        elif direction is EnemyMove.DOWN:
            self.y -= self.speed
        elif direction is EnemyMove.LEFT:
            self.x -= self.speed
        else:
            self.y += self.speed