"""2D vectors, triangles and axis-aligned boxes with the helpers built on them."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Union

Number = Union[int, float]

TRIANGLE_VERT_COUNT = 3
V2_COMPONENTS = 2


def _components(other: Any) -> tuple[Number, Number] | None:
    if isinstance(other, V2):
        return other.x, other.y
    if isinstance(other, (int, float)):
        return other, other
    return None


@dataclass(frozen=True)
class V2:
    """A 2D vector; arithmetic is component-wise and scalars broadcast."""

    x: Number
    y: Number

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(self.x + pair[0], self.y + pair[1])

    __radd__ = __add__

    def __sub__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(self.x - pair[0], self.y - pair[1])

    def __rsub__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(pair[0] - self.x, pair[1] - self.y)

    def __mul__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(self.x * pair[0], self.y * pair[1])

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(self.x / pair[0], self.y / pair[1])

    def __rtruediv__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(pair[0] / self.x, pair[1] / self.y)

    def __floordiv__(self, other: Any) -> V2:
        pair = _components(other)
        if pair is None:
            return NotImplemented
        return V2(self.x // pair[0], self.y // pair[1])

    def __neg__(self) -> V2:
        return V2(-self.x, -self.y)

    def map(self, f: Callable[[Number], Number]) -> V2:
        """Apply f to both components."""
        return V2(f(self.x), f(self.y))

    def to_int(self) -> V2:
        """Convert to integers, truncating toward zero."""
        return V2(int(self.x), int(self.y))

    def to_float(self) -> V2:
        return V2(float(self.x), float(self.y))

    def __str__(self) -> str:
        return f"V2({self.x}, {self.y})"


@dataclass(frozen=True)
class Triangle:
    """Three vertices."""

    a: V2
    b: V2
    c: V2

    @property
    def vs(self) -> tuple[V2, V2, V2]:
        return (self.a, self.b, self.c)

    def __iter__(self) -> Iterator[V2]:
        return iter(self.vs)

    def __add__(self, pos: V2) -> Triangle:
        if not isinstance(pos, V2):
            return NotImplemented
        return Triangle(self.a + pos, self.b + pos, self.c + pos)

    def __sub__(self, pos: V2) -> Triangle:
        if not isinstance(pos, V2):
            return NotImplemented
        return Triangle(self.a - pos, self.b - pos, self.c - pos)

    def longest_side(self) -> int:
        """Index i of the longest side, the one from vertex i to vertex i+1."""
        vs = self.vs
        res = 0
        for i in range(1, TRIANGLE_VERT_COUNT):
            current = length(vs[(res + 1) % TRIANGLE_VERT_COUNT] - vs[res])
            candidate = length(vs[(i + 1) % TRIANGLE_VERT_COUNT] - vs[i])
            if candidate > current:
                res = i
        return res

    def __str__(self) -> str:
        return f"Triangle({self.a}, {self.b}, {self.c})"


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its corner and size."""

    pos: V2
    size: V2

    def map(self, f: Callable[[Number], Number]) -> AABB:
        return AABB(self.pos.map(f), self.size.map(f))

    def split_into_triangles(self) -> tuple[Triangle, Triangle]:
        """The (lower, upper) triangles that cover the box."""
        top_left = self.pos + self.size * V2(0, 1)
        bottom_right = self.pos + self.size * V2(1, 0)
        lower = Triangle(self.pos, top_left, bottom_right)
        upper = Triangle(top_left, bottom_right, self.pos + self.size)
        return lower, upper

    def flip_vertically(self) -> AABB:
        return AABB(V2(self.pos.x, self.pos.y + self.size.y), V2(self.size.x, -self.size.y))

    def flip_horizontally(self) -> AABB:
        return AABB(V2(self.pos.x + self.size.x, self.pos.y), V2(-self.size.x, self.size.y))

    def overlaps_with(self, other: AABB) -> bool:
        a1, a2 = self.pos, self.pos + self.size
        b1, b2 = other.pos, other.pos + other.size
        return a2.x >= b1.x and b2.x >= a1.x and a2.y >= b1.y and b2.y >= a1.y

    def contains(self, point: V2) -> bool:
        """Whether the point lies inside, edges included."""
        return (
            self.pos.x <= point.x <= self.pos.x + self.size.x
            and self.pos.y <= point.y <= self.pos.y + self.size.y
        )

    def __str__(self) -> str:
        return f"AABB({self.pos},{self.size})"


def lerp(a: Any, b: Any, f: Any) -> Any:
    return a + (b - a) * f


def inv_lerp(a: Any, b: Any, c: Any) -> Any:
    return (c - a) / (b - a)


def squaref(x: float) -> float:
    return x * x


def rotate_v2(v: V2, angle: float) -> V2:
    cos, sin = math.cos(angle), math.sin(angle)
    return V2(cos * v.x - sin * v.y, sin * v.x + cos * v.y)


def length(v: V2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def polar_v2(angle: float, mag: float) -> V2:
    return V2(math.cos(angle) * mag, math.sin(angle) * mag)


def angle_v2(v: V2) -> float:
    return math.atan2(v.y, v.x)


def split_triangle_at(tri: Triangle, side: int, f: float) -> tuple[Triangle, Triangle]:
    """Cut a triangle in two through the point at fraction f along a side."""
    if not 0 <= side < TRIANGLE_VERT_COUNT:
        raise ValueError(f"side must be in 0..{TRIANGLE_VERT_COUNT - 1}, got {side}")
    if not 0.0 <= f <= 1.0:
        raise ValueError(f"fraction must be in 0..1, got {f}")
    vs = tri.vs
    a = vs[side]
    b = vs[(side + 1) % TRIANGLE_VERT_COUNT]
    c = vs[(side + 2) % TRIANGLE_VERT_COUNT]
    q = lerp(a, b, f)
    return Triangle(c, q, a), Triangle(c, q, b)


def split_triangle_by(tri: Triangle, fs: tuple[float, float, float]) -> tuple[Triangle, ...]:
    """Cut a triangle into four using one fraction per side."""
    if len(fs) != TRIANGLE_VERT_COUNT:
        raise ValueError(f"expected {TRIANGLE_VERT_COUNT} fractions, got {len(fs)}")
    vs = tri.vs
    ps = [lerp(vs[i], vs[(i + 1) % TRIANGLE_VERT_COUNT], f) for i, f in enumerate(fs)]
    corners = tuple(
        Triangle(v, ps[i], ps[(i + 2) % TRIANGLE_VERT_COUNT]) for i, v in enumerate(vs)
    )
    return corners + (Triangle(ps[0], ps[1], ps[2]),)


def rotate_triangle(tri: Triangle, angle: float, pivot: V2) -> Triangle:
    moved = tri - pivot
    return Triangle(*(rotate_v2(v, angle) for v in moved)) + pivot


def equilateral_triangle(center: V2, radius: float, angle: float) -> Triangle:
    sector = 2.0 * math.pi / TRIANGLE_VERT_COUNT
    return Triangle(
        *(center + polar_v2(i * sector + angle, radius) for i in range(TRIANGLE_VERT_COUNT))
    )


def aabb_stretch(aabb: AABB, t: float) -> AABB:
    """Squash or stretch a box around its bottom centre; t == 1 leaves it unchanged."""
    bottom = aabb.pos + aabb.size * V2(0.5, 0.0)
    new_size = aabb.size * V2(2.0 - t, t)
    return AABB(bottom - new_size * V2(0.5, 0.0), new_size)


def fmodulof(a: float, b: float) -> float:
    """Floating modulo whose result takes the sign of b."""
    return math.fmod(math.fmod(a, b) + b, b)