"""Game logic for a 2D side-scroller: vector math, tile grids, animation,
textures, physics bodies, viewport transforms and text helpers."""

__version__ = "0.1.0"