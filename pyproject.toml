[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "boogaloo"
version = "0.1.0"
description = "Game logic for a 2D side-scroller: vector math, tile grids, animation, textures, physics, viewports and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "platformer", "vector-math", "tile-grid", "animation", "texture-atlas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["boogaloo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
