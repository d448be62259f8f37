"""Shots fired by the player and by enemies."""

from __future__ import annotations

from collections.abc import Sequence

from .world import World

# Direction index to unit step: right, up, left, down.
_STEPS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


class Projectile:
    """A projectile travelling in one of four directions at unit speed."""

    speed = 1.0

    def __init__(
        self, x: float, y: float, direction: int, from_player: bool, world: World
    ) -> None:
        if direction not in range(len(_STEPS)):
            raise ValueError(f"invalid projectile direction: {direction!r}")
        self.x = x
        self.y = y
        self.direction = direction
        self.from_player = bool(from_player)
        self.world = world

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def step(self) -> bool:
        """Advance one step; return True if the projectile has left the field."""
        dx, dy = _STEPS[self.direction]
        self.x += dx * self.speed
        self.y += dy * self.speed
        return not self.world.contains(self.x, self.y)

    def on_screen(self) -> bool:
        """Whether the projectile is not above the top of the field."""
        return self.y <= self.world.ymax

    def hits(self, position: Sequence[float] | None, half_size: float | None) -> bool:
        """Whether the projectile lies in the square of ``half_size`` around ``position``."""
        if position is None or half_size is None:
            return False
        px, py = position[0], position[1]
        return (
            px - half_size <= self.x <= px + half_size
            and py - half_size <= self.y <= py + half_size
        )