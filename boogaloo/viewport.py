"""Mapping between window, screen and world space, and bitmap font layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from boogaloo.physics import Camera
from boogaloo.vecmath import AABB, V2, inv_lerp, lerp

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
SCREEN_FPS = 60

_INVALID_CHAR = "?"


def compute_gl_viewport(w: int, h: int) -> AABB:
    """The largest centred box with the screen's aspect ratio inside a w x h window."""
    w_width = float(w)
    w_height = float(h)
    s_width = float(SCREEN_WIDTH)
    s_height = float(SCREEN_HEIGHT)

    n_width = w_width
    n_height = w_width * (s_height / s_width)
    if n_height > w_height:
        n_height = w_height
        n_width = w_height * (s_width / s_height)

    return AABB(
        V2(w_width * 0.5 - n_width * 0.5, w_height * 0.5 - n_height * 0.5),
        V2(n_width, n_height),
    )


def window_to_viewport(window_size, p: V2) -> V2:
    """Map a window pixel (y down) to screen coordinates (y up) inside the viewport."""
    w, h = window_size
    viewport = compute_gl_viewport(w, h)
    py = h - p.y
    x = lerp(
        0.0,
        float(SCREEN_WIDTH),
        inv_lerp(viewport.pos.x, viewport.pos.x + viewport.size.x, float(p.x)),
    )
    y = lerp(
        0.0,
        float(SCREEN_HEIGHT),
        inv_lerp(viewport.pos.y, viewport.pos.y + viewport.size.y, float(py)),
    )
    return V2(x, y)


def viewport_to_world(camera: Camera, p: V2) -> V2:
    """Map a screen point to world space through the camera."""
    half_screen = V2(float(SCREEN_WIDTH), float(SCREEN_HEIGHT)) * 0.5
    return (p - half_screen) * camera.zoom + camera.pos


@dataclass
class FontGrid:
    """Layout of a bitmap font: printable ASCII in a grid of COLS x ROWS cells."""

    ROWS: ClassVar[int] = 7
    COLS: ClassVar[int] = 18

    width: int
    height: int
    tex_size_pix: V2 = field(init=False)
    char_size_pix: V2 = field(init=False)
    char_size_uv: V2 = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid font texture size {self.width}x{self.height}")
        self.tex_size_pix = V2(self.width, self.height)
        self.char_size_pix = self.tex_size_pix // V2(self.COLS, self.ROWS)
        self.char_size_uv = self.char_size_pix.to_float() / self.tex_size_pix.to_float()

    def char_uv(self, c: str) -> AABB:
        """Texture box of a character, flipped vertically; unprintables map to '?'."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if not 32 <= code <= 126:
            return self.char_uv(_INVALID_CHAR)
        index = code - 32
        cell = V2(index % self.COLS, index // self.COLS)
        pix = cell * self.char_size_pix
        uv = pix.to_float() / self.tex_size_pix.to_float()
        return AABB(uv, self.char_size_uv).flip_vertically()

    def text_size(self, length: int, scale: float) -> V2:
        """Size of a single line of length characters drawn at scale."""
        return self.char_size_pix.to_float() * scale * V2(float(length), 1.0)

    def glyph_quads(self, text: str, position: V2, scale: float) -> list[tuple[AABB, AABB]]:
        """(screen box, texture box) for each character of a line of text."""
        glyph_size = self.char_size_pix.to_float() * scale
        return [
            (
                AABB(position + (self.char_size_pix * V2(i, 0)).to_float() * scale, glyph_size),
                self.char_uv(c),
            )
            for i, c in enumerate(text)
        ]