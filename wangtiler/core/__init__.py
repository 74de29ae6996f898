"""Core Wang tiling for wangtiler.

Pure computation with no I/O and no logging: the 8-tile edge algebra, the
grid that generates a seamless tiling, and the random sources it draws from.

Usage:
    from wangtiler.core import create_grid, match_tile
"""

from .errors import (
    WangTilerError,
    InvalidDimensionError,
    OutOfMemoryError,
    IndexOutOfRangeError,
    RandomSourceExhaustedError,
)
from .tiles import (
    TILE_COUNT,
    MAX_TILE_INDEX,
    Edge,
    match_tile,
    top_edge,
    left_edge,
    bottom_edge,
    right_edge,
    edge_pattern,
    tile_edges,
    tiles_matching,
    is_tile_index,
)
from .random_source import RandomSource, ScriptedRandom, make_rng
from .snapshot import Mismatch, TilingSnapshot, find_mismatches
from .grid import WangTileGrid, create_grid

__all__ = [
    # Errors
    "WangTilerError",
    "InvalidDimensionError",
    "OutOfMemoryError",
    "IndexOutOfRangeError",
    "RandomSourceExhaustedError",
    # Tiles
    "TILE_COUNT",
    "MAX_TILE_INDEX",
    "Edge",
    "match_tile",
    "top_edge",
    "left_edge",
    "bottom_edge",
    "right_edge",
    "edge_pattern",
    "tile_edges",
    "tiles_matching",
    "is_tile_index",
    # Randomness
    "RandomSource",
    "ScriptedRandom",
    "make_rng",
    # Grid
    "Mismatch",
    "TilingSnapshot",
    "find_mismatches",
    "WangTileGrid",
    "create_grid",
]
