"""
Tile index algebra for the fixed set of 8 Wang tiles.

A tile index is a 3-bit value b2 b1 b0:

    b2  pattern on the top edge (must equal the bottom of the tile above)
    b1  pattern on the left edge (must equal the right of the tile to the left)
    b0  free bit, chosen at random

The bottom and right patterns are derived: bottom = b2 ^ b0, right = b1 ^ b0.
Given a left and a top neighbour there are exactly two tiles that fit, and
they differ only in b0.

The 8 tile images are authored against this exact bit layout, so match_tile
must stay bit-for-bit identical.
"""

from __future__ import annotations

from enum import Enum

TILE_COUNT = 8
MAX_TILE_INDEX = TILE_COUNT - 1


class Edge(Enum):
    """The four edges of a square tile."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"

    @property
    def opposite(self) -> Edge:
        """The edge this one abuts on the neighbouring tile."""
        return _EDGE_OPPOSITES[self]


_EDGE_OPPOSITES: dict[Edge, Edge] = {
    Edge.TOP: Edge.BOTTOM,
    Edge.BOTTOM: Edge.TOP,
    Edge.LEFT: Edge.RIGHT,
    Edge.RIGHT: Edge.LEFT,
}


def match_tile(left_neighbor: int, top_neighbor: int, random_bit: int) -> int:
    """Pick a tile that fits below `top_neighbor` and right of `left_neighbor`.

    Args:
        left_neighbor: Index of the tile to the left (real or randomly drawn)
        top_neighbor: Index of the tile above (real or randomly drawn)
        random_bit: 0 or 1, selects between the two tiles that fit

    Returns:
        Tile index in [0, 7] whose low bit is `random_bit`
    """
    return (
        ((top_neighbor & 4) ^ ((top_neighbor & 1) << 2))
        | ((left_neighbor & 2) ^ ((left_neighbor & 1) << 1))
        | random_bit
    )


def top_edge(tile: int) -> int:
    """Pattern bit on the top edge."""
    return (tile >> 2) & 1


def left_edge(tile: int) -> int:
    """Pattern bit on the left edge."""
    return (tile >> 1) & 1


def bottom_edge(tile: int) -> int:
    """Pattern bit on the bottom edge."""
    return ((tile >> 2) ^ tile) & 1


def right_edge(tile: int) -> int:
    """Pattern bit on the right edge."""
    return ((tile >> 1) ^ tile) & 1


_EDGE_GETTERS = {
    Edge.TOP: top_edge,
    Edge.LEFT: left_edge,
    Edge.BOTTOM: bottom_edge,
    Edge.RIGHT: right_edge,
}


def edge_pattern(tile: int, edge: Edge) -> int:
    """Pattern bit of `tile` on the given edge."""
    return _EDGE_GETTERS[edge](tile)


def tile_edges(tile: int) -> dict[Edge, int]:
    """All four edge patterns of a tile, keyed by edge."""
    return {edge: getter(tile) for edge, getter in _EDGE_GETTERS.items()}


def tiles_matching(left_neighbor: int, top_neighbor: int) -> tuple[int, int]:
    """The two tile indices that fit the given neighbours, low bit 0 first."""
    return (
        match_tile(left_neighbor, top_neighbor, 0),
        match_tile(left_neighbor, top_neighbor, 1),
    )


def is_tile_index(value: object) -> bool:
    """True when `value` is an int in [0, 7] (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_TILE_INDEX
