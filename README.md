# boogaloo

Game-side logic for a small 2D side-scrolling shooter, in plain Python with
no third-party dependencies. The package is a library; it has no command-line
program.

## Modules

- `boogaloo.vecmath`: `V2`, `Triangle` and `AABB`, with `lerp`,
  `inv_lerp`, `rotate_v2`, `polar_v2`, `angle_v2`, `length`,
  `split_triangle_at`, `split_triangle_by`, `rotate_triangle`,
  `equilateral_triangle`, `aabb_stretch` and `fmodulof`.
- `boogaloo.anim`: `Segment` and `AnimPlayer`, which plays segments one
  after another with an optional easing function.
- `boogaloo.console`: `Row`, a line of bounded width, and `RowRing`, a
  bounded log in which index 0 is the newest line.
- `boogaloo.tile_grid`: `TileGrid` with the coordinate types `MemCoord`,
  `TileCoord`, `WorldCoord`, `TileRegion` and `WorldRegion`.
- `boogaloo.texture`: `Texture`, an RGBA32 pixel image with the blits used
  to pack an atlas, including `fill_texture_with_margin`, which extends a
  texture's edge pixels into a margin.
- `boogaloo.physics`: `AABBBody`, a box that falls under gravity and slides
  along tile walls, `Direction`, `direction_to_v2` and `Camera`.
- `boogaloo.viewport`: `compute_gl_viewport`, `window_to_viewport`,
  `viewport_to_world` and `FontGrid`, the cell layout of a bitmap font.
- `boogaloo.textutil`: `from_hex`, `as_integer`, `as_float`,
  `chop_by_delim` and `chop_word`. The parsers raise `ValueError` on bad
  input.
- `boogaloo.unicode_util`: `code_to_utf8`, `utf8_get_code`, `djb2_hash`
  and `escape`.

## Install

```
pip install .
```

## Examples

```python
from boogaloo.vecmath import V2, AABB
from boogaloo.tile_grid import TileGrid, TileCoord, WorldRegion
from boogaloo.physics import AABBBody

grid = TileGrid()
grid.get_tile(TileCoord(V2(0, -2))).wall = True

body = AABBBody.from_hitbox(AABB(V2(0.0, 0.0), V2(50.0, 50.0)))
body.update(grid, 1 / 60, gravity=2000.0)
print(body.hitbox, body.vel)

grid.are_there_any_walls_in_region(WorldRegion(AABB(V2(0.0, -300.0), V2(10.0, 10.0))))
```

```python
from boogaloo.anim import Segment, AnimPlayer

player = AnimPlayer([Segment(1.0, 0.8, 0.05), Segment(0.8, 1.2, 0.1)])
player.update(0.025)   # halfway through the first segment
player.is_finished()
```

```python
from boogaloo.textutil import from_hex, as_integer, chop_by_delim
from boogaloo.unicode_util import code_to_utf8, utf8_get_code

from_hex("181818FF")            # 0x181818FF
as_integer("-3")                # -3
chop_by_delim("name:rest", ":") # ("name", "rest")
code_to_utf8(0x20AC)            # b"\xe2\x82\xac"
utf8_get_code(b"\xe2\x82\xac")  # (0x20AC, 3)
```

```python
from boogaloo.viewport import compute_gl_viewport, FontGrid

compute_gl_viewport(1920, 1200)  # a centred 16:9 box inside the window
font = FontGrid(width=128, height=64)
font.glyph_quads("hi", position=font.char_size_pix.to_float(), scale=2.0)
```

## What the package does not do

It opens no window and draws nothing: there is no renderer, shader or GPU
texture upload, and `Texture` has no image-file loading or saving. It has no
colour types, no parser for typed configuration files and no effects such as
debris, particles or projectiles. It holds the state and arithmetic a game
loop would use; the loop itself, input handling and drawing are left to the
caller.

## Tests

```
pip install .[test]
pytest
```