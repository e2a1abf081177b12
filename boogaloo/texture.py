"""In-memory RGBA32 pixel images and the blits used to build texture atlases."""

from __future__ import annotations

from dataclasses import dataclass, field

from boogaloo.vecmath import AABB, V2


@dataclass
class Texture:
    """A width x height image stored row-major as 32-bit pixel values."""

    width: int
    height: int
    pixels: list[int] = field(repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative texture size {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def from_solid_color(cls, width: int, height: int, color: int) -> Texture:
        """A texture with every pixel set to color."""
        return cls(width, height, [color] * (width * height))

    def get(self, x: int, y: int) -> int:
        """The pixel at (x, y); IndexError outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def _check_region(self, x1: int, y1: int, x2: int, y2: int) -> None:
        inside = (
            0 <= x1 < self.width
            and 0 <= y1 < self.height
            and 0 <= x2 < self.width
            and 0 <= y2 < self.height
        )
        if not inside:
            raise ValueError(
                f"region ({x1}, {y1})-({x2}, {y2}) does not fit into "
                f"{self.width}x{self.height}"
            )

    def _region(self, aabb: AABB) -> tuple[int, int, int, int] | None:
        if aabb.size.x <= 0 or aabb.size.y <= 0:
            return None
        x1, y1 = aabb.pos.x, aabb.pos.y
        x2 = aabb.pos.x + aabb.size.x - 1
        y2 = aabb.pos.y + aabb.size.y - 1
        self._check_region(x1, y1, x2, y2)
        return x1, y1, x2, y2

    def fill_cols(self, src: Texture, x0: int, aabb: AABB) -> None:
        """Fill the box by repeating column x0 of src horizontally."""
        region = self._region(aabb)
        if region is None:
            return
        x1, y1, x2, y2 = region
        for y in range(y1, y2 + 1):
            color = src.get(x0, y - aabb.pos.y)
            for x in range(x1, x2 + 1):
                self.pixels[y * self.width + x] = color

    def fill_rows(self, src: Texture, y0: int, aabb: AABB) -> None:
        """Fill the box by repeating row y0 of src vertically."""
        region = self._region(aabb)
        if region is None:
            return
        x1, y1, x2, y2 = region
        for x in range(x1, x2 + 1):
            color = src.get(x - aabb.pos.x, y0)
            for y in range(y1, y2 + 1):
                self.pixels[y * self.width + x] = color

    def fill_aabb(self, aabb: AABB, color: int) -> None:
        """Set every pixel of the box to color; empty boxes are ignored."""
        region = self._region(aabb)
        if region is None:
            return
        x1, y1, x2, y2 = region
        for y in range(y1, y2 + 1):
            start = y * self.width
            self.pixels[start + x1 : start + x2 + 1] = [color] * (x2 - x1 + 1)

    def fill_texture(self, src: Texture, pos: V2) -> None:
        """Copy src with its top-left corner at pos."""
        x1, y1 = pos.x, pos.y
        x2 = pos.x + src.width - 1
        y2 = pos.y + src.height - 1
        self._check_region(x1, y1, x2, y2)
        for sy in range(src.height):
            row = src.pixels[sy * src.width : (sy + 1) * src.width]
            start = (y1 + sy) * self.width + x1
            self.pixels[start : start + src.width] = row

    def fill_texture_with_margin(self, src: Texture, margin: int, pos: V2) -> None:
        """Copy src inset by margin and extend its edge pixels into the margin."""
        self._check_region(
            pos.x,
            pos.y,
            pos.x + src.width + margin * 2 - 1,
            pos.y + src.height + margin * 2 - 1,
        )

        self.fill_texture(src, pos + V2(margin, margin))

        sxs = (0, src.width - 1)
        sys_ = (0, src.height - 1)
        bxs = (pos.x, pos.x + src.width + margin)
        bys = (pos.y, pos.y + src.height + margin)
        for corner in range(4):
            ix = corner & 1
            iy = (corner >> 1) & 1
            self.fill_aabb(
                AABB(V2(bxs[ix], bys[iy]), V2(margin, margin)),
                src.get(sxs[ix], sys_[iy]),
            )

        self.fill_rows(src, 0, AABB(pos + V2(margin, 0), V2(src.width, margin)))
        self.fill_rows(
            src,
            src.height - 1,
            AABB(pos + V2(margin, margin + src.height), V2(src.width, margin)),
        )
        self.fill_cols(src, 0, AABB(pos + V2(0, margin), V2(margin, src.height)))
        self.fill_cols(
            src,
            src.width - 1,
            AABB(pos + V2(margin + src.width, margin), V2(margin, src.height)),
        )