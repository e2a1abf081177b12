import pytest

from boogaloo.tile_grid import (
    MemCoord,
    Tile,
    TileCoord,
    TileGrid,
    TileRegion,
    WorldCoord,
    WorldRegion,
)
from boogaloo.vecmath import AABB, V2


def test_tile_origin_is_grid_centre():
    assert TileCoord(V2(0, 0)).to_mem() == MemCoord(V2(TileGrid.QUAD_COLS, TileGrid.QUAD_ROWS))


@pytest.mark.parametrize("x, y", [(0, 0), (-5, 7), (99, -100)])
def test_tile_mem_round_trip(x, y):
    coord = TileCoord(V2(x, y))
    assert coord.to_mem().to_tile() == coord


def test_world_to_tile_floors():
    assert WorldCoord(V2(-0.5, 130.0)).to_tile() == TileCoord(V2(-1, 1))


def test_tile_to_world_round_trip():
    coord = TileCoord(V2(2, -3))
    world = coord.to_world()
    assert world == WorldCoord(V2(2 * Tile.SIZE, -3 * Tile.SIZE))
    assert world.to_tile() == coord


def test_get_tile_same_cell_through_every_coordinate():
    grid = TileGrid()
    tile_coord = TileCoord(V2(3, 4))
    tile = grid.get_tile(tile_coord)
    assert tile is grid.get_tile(tile_coord.to_mem())
    assert tile is grid.get_tile(tile_coord.to_world())


def test_get_tile_outside_grid():
    grid = TileGrid()
    assert grid.get_tile(MemCoord(V2(-1, 0))) is None
    assert grid.get_tile(MemCoord(V2(0, TileGrid.ROWS))) is None
    assert grid.get_tile(TileCoord(V2(TileGrid.QUAD_COLS, 0))) is None


def test_get_tile_rejects_other_types():
    with pytest.raises(TypeError):
        TileGrid().get_tile(V2(0, 0))


def test_hitbox_contains_world_point():
    grid = TileGrid()
    point = V2(300.0, -50.0)
    hitbox = grid.get_tile_hitbox(WorldCoord(point))
    assert hitbox.contains(point)
    assert hitbox.size == V2(Tile.SIZE, Tile.SIZE)


def test_walls_in_tile_region():
    grid = TileGrid()
    grid.get_tile(TileCoord(V2(5, 5))).wall = True
    assert grid.are_there_any_walls_in_region(TileRegion(AABB(V2(4, 4), V2(2, 2))))
    assert not grid.are_there_any_walls_in_region(TileRegion(AABB(V2(0, 0), V2(5, 5))))


def test_walls_in_world_region():
    grid = TileGrid()
    grid.get_tile(TileCoord(V2(1, 0))).wall = True
    touching = WorldRegion(AABB(V2(10.0, 10.0), V2(Tile.SIZE, 20.0)))
    apart = WorldRegion(AABB(V2(10.0, 10.0), V2(50.0, 20.0)))
    assert grid.are_there_any_walls_in_region(touching)
    assert not grid.are_there_any_walls_in_region(apart)


def test_world_region_to_tile_covers_corners():
    region = WorldRegion(AABB(V2(10.0, 10.0), V2(Tile.SIZE, Tile.SIZE)))
    tiles = region.to_tile().aabb
    assert tiles.pos == WorldCoord(region.aabb.pos).to_tile().value
    far = WorldCoord(region.aabb.pos + region.aabb.size).to_tile().value
    assert tiles.pos + tiles.size - V2(1, 1) == far