"""Geometry of the playing field and the sizes of the objects in it."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class World:
    """A square field centred on the origin, reaching ``size`` in every direction."""

    size: float = 20.0
    player_size: tuple[float, float] = (6.0, 5.0)
    enemy_size: tuple[float, float] = (3.0, 2.0)
    scale: float = 0.25

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("world size must be positive")
        if self.scale <= 0:
            raise ValueError("scale must be positive")

    @property
    def xmin(self) -> float:
        return -self.size

    @property
    def xmax(self) -> float:
        return self.size

    @property
    def ymin(self) -> float:
        return -self.size

    @property
    def ymax(self) -> float:
        return self.size

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """The field as ``(xmin, xmax, ymin, ymax)``."""
        return (self.xmin, self.xmax, self.ymin, self.ymax)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def projectile_size(self) -> float:
        """Half the side of a projectile's square body."""
        return self.player_size[0] * self.scale / 2

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the field, edges included."""
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax