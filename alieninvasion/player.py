"""The player's ship: movement inside the field and quarter-turn rotation."""

from __future__ import annotations

from enum import IntEnum

from .world import World


class Move(IntEnum):
    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


class Rotation(IntEnum):
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1


class PlayerShip:
    """The player's ship, starting just above the bottom of the field and pointing up."""

    def __init__(self, speed: float, world: World) -> None:
        self.speed = speed
        self.world = world
        self.x = 0.0
        self.y = world.ymin + 2.0
        # Rotation relative to the drawn shape, which already points north.
        self.angle = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _limits(self) -> tuple[float, float, float, float]:
        w = self.world
        dx = w.player_size[0] * w.scale
        dy = w.player_size[1] * w.scale
        return (w.xmin + dx, w.xmax - dx, w.ymin + dy, w.ymax - dy)

    def move(self, direction: Move | int) -> bool:
        """Move one step if the ship is still inside its limits; return whether it moved."""
        direction = Move(direction)
        left, right, bottom, top = self._limits()
        if direction is Move.RIGHT and self.x < right:
            self.x += self.speed
        elif direction is Move.LEFT and self.x > left:
            self.x -= self.speed
        elif direction is Move.UP and self.y < top:
            self.y += self.speed
        elif direction is Move.DOWN and self.y > bottom:
            self.y -= self.speed
        else:
            return False
        return True

    def rotate(self, rotation: Rotation | int) -> bool:
        """Turn the ship a quarter turn, wrapping around a full circle."""
        rotation = Rotation(rotation)
        if rotation is Rotation.COUNTERCLOCKWISE:
            self.angle = 0.0 if self.angle >= 270.0 else self.angle + 90.0
        else:
            self.angle = 270.0 if self.angle <= 0.0 else self.angle - 90.0
        return True

    def heading(self) -> float:
        """Compass heading in degrees: east 0, north 90, west 180, south 270."""
        value = self.angle + 90.0
        return 0.0 if value == 360.0 else value