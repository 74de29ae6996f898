"""
wangtiler - seamless Wang tilings of the plane from a fixed set of 8 tiles.

Main entry points:
- create_grid / WangTileGrid: allocate and generate a tiling
- match_tile: the tile-matching function behind generation
- wangtiler.render: tile sets and PNG output
- wangtiler.observe.tui: terminal viewer

Example usage:
    from wangtiler import create_grid

    grid = create_grid(16, 16, seed=42)
    grid.generate()
    index = grid.at(0, 0)
"""

__version__ = "0.1.0"

from .core import (
    WangTileGrid,
    TilingSnapshot,
    create_grid,
    match_tile,
    WangTilerError,
    InvalidDimensionError,
    OutOfMemoryError,
    IndexOutOfRangeError,
)

__all__ = [
    "__version__",
    "WangTileGrid",
    "TilingSnapshot",
    "create_grid",
    "match_tile",
    "WangTilerError",
    "InvalidDimensionError",
    "OutOfMemoryError",
    "IndexOutOfRangeError",
]
