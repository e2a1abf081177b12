"""A fixed grid of wall tiles and the coordinate systems that address it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from boogaloo.vecmath import AABB, V2


@dataclass
class Tile:
    """One cell of the grid."""

    SIZE: ClassVar[float] = 128.0

    wall: bool = False


_QUAD_ROWS = 100
_QUAD_COLS = 100


@dataclass(frozen=True)
class MemCoord:
    """Row/column position in the grid's storage, (0, 0) at a corner."""

    value: V2

    def to_tile(self) -> TileCoord:
        return TileCoord(self.value.to_int() - V2(_QUAD_COLS, _QUAD_ROWS))


@dataclass(frozen=True)
class TileCoord:
    """Tile position with (0, 0) at the grid's centre."""

    value: V2

    def to_mem(self) -> MemCoord:
        return MemCoord(self.value + V2(_QUAD_ROWS, _QUAD_COLS))

    def to_world(self) -> WorldCoord:
        return WorldCoord(self.value.to_float() * Tile.SIZE)


@dataclass(frozen=True)
class WorldCoord:
    """A point in world units."""

    value: V2

    def to_tile(self) -> TileCoord:
        return TileCoord((self.value / Tile.SIZE).map(math.floor))


@dataclass(frozen=True)
class TileRegion:
    """A box of tiles in tile coordinates."""

    aabb: AABB


@dataclass(frozen=True)
class WorldRegion:
    """A box in world units."""

    aabb: AABB

    def to_tile(self) -> TileRegion:
        """The tiles the box touches, both corners included."""
        a1 = WorldCoord(self.aabb.pos).to_tile()
        a2 = WorldCoord(self.aabb.pos + self.aabb.size).to_tile()
        return TileRegion(AABB(a1.value, a2.value - a1.value + V2(1, 1)))


Coord = Union[MemCoord, TileCoord, WorldCoord]


class TileGrid:
    """A square grid of tiles centred on tile (0, 0)."""

    QUAD_ROWS: ClassVar[int] = _QUAD_ROWS
    QUAD_COLS: ClassVar[int] = _QUAD_COLS
    ROWS: ClassVar[int] = _QUAD_ROWS * 2
    COLS: ClassVar[int] = _QUAD_COLS * 2

    def __init__(self) -> None:
        self.tiles = [[Tile() for _ in range(self.COLS)] for _ in range(self.ROWS)]

    def get_tile(self, coord: Coord) -> Optional[Tile]:
        """The tile at coord, or None outside the grid."""
        if isinstance(coord, WorldCoord):
            coord = coord.to_tile()
        if isinstance(coord, TileCoord):
            coord = coord.to_mem()
        if not isinstance(coord, MemCoord):
            raise TypeError(f"unsupported coordinate {coord!r}")
        x, y = coord.value.x, coord.value.y
        if 0 <= x < self.COLS and 0 <= y < self.ROWS:
            return self.tiles[int(y)][int(x)]
        return None

    def get_tile_hitbox(self, coord: Union[TileCoord, WorldCoord]) -> AABB:
        """The world-space box of the tile at coord."""
        if isinstance(coord, WorldCoord):
            coord = coord.to_tile()
        if not isinstance(coord, TileCoord):
            raise TypeError(f"unsupported coordinate {coord!r}")
        return AABB(coord.value.to_float() * Tile.SIZE, V2(Tile.SIZE, Tile.SIZE))

    def are_there_any_walls_in_region(self, region: Union[TileRegion, WorldRegion]) -> bool:
        if isinstance(region, WorldRegion):
            region = region.to_tile()
        if not isinstance(region, TileRegion):
            raise TypeError(f"unsupported region {region!r}")
        a1 = region.aabb.pos
        a2 = a1 + region.aabb.size
        for y in range(a1.y, a2.y):
            for x in range(a1.x, a2.x):
                tile = self.get_tile(TileCoord(V2(x, y)))
                if tile is not None and tile.wall:
                    return True
        return False