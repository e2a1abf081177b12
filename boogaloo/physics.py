"""Box-shaped bodies that fall and collide with tile walls, and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from boogaloo.tile_grid import TileGrid, WorldRegion
from boogaloo.vecmath import AABB, V2

_MOVE_FACTORS = (V2(1.0, 1.0), V2(0.0, 1.0), V2(1.0, 0.0))
_MAX_ATTEMPTS = 8


class Direction(Enum):
    RIGHT = 0
    LEFT = 1


def direction_to_v2(direction: Direction) -> V2:
    """Unit vector for a direction; anything else gives the zero vector."""
    if direction is Direction.RIGHT:
        return V2(1.0, 0.0)
    if direction is Direction.LEFT:
        return V2(-1.0, 0.0)
    return V2(0.0, 0.0)


@dataclass
class AABBBody:
    """A box with a velocity."""

    hitbox: AABB
    vel: V2 = field(default_factory=lambda: V2(0.0, 0.0))

    def center(self) -> V2:
        return self.hitbox.pos + self.hitbox.size * 0.5

    def update(self, tile_grid: TileGrid, dt: float, gravity: float) -> None:
        """Apply gravity and move, sliding along or stopping at walls.

        Tries the full velocity, then only its vertical part, then only its
        horizontal part; if all collide, the velocity is halved and retried.
        """
        self.vel = V2(self.vel.x, self.vel.y - gravity * dt)
        for _ in range(_MAX_ATTEMPTS):
            for factor in _MOVE_FACTORS:
                new_vel = self.vel * factor
                new_hitbox = AABB(self.hitbox.pos + new_vel * dt, self.hitbox.size)
                if not tile_grid.are_there_any_walls_in_region(WorldRegion(new_hitbox)):
                    self.hitbox = new_hitbox
                    self.vel = new_vel
                    return
            self.vel = self.vel * 0.5

    def move(self, direction: Direction, speed: float) -> None:
        if direction is Direction.LEFT:
            self.vel = V2(-speed, self.vel.y)
        elif direction is Direction.RIGHT:
            self.vel = V2(speed, self.vel.y)
        else:
            raise ValueError(f"unknown direction {direction!r}")

    def stop(self) -> None:
        self.vel = V2(0.0, self.vel.y)

    @classmethod
    def from_hitbox(cls, hitbox: AABB) -> AABBBody:
        return cls(hitbox, V2(0.0, 0.0))


@dataclass
class Camera:
    """Position, velocity and zoom of the view."""

    DISTANCE: ClassVar[float] = 100.0

    pos: V2 = field(default_factory=lambda: V2(0.0, 0.0))
    vel: V2 = field(default_factory=lambda: V2(0.0, 0.0))
    zoom: float = 1.0

    def update(self, dt: float) -> None:
        self.pos = self.pos + self.vel * dt