"""Immutable tiling snapshots and adjacency checking.

A WangTileGrid is overwritten in place by every generate() call. Anything that
needs to hold on to a tiling (a renderer running while the grid regenerates,
a test comparing two generations) takes a TilingSnapshot instead.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import IndexOutOfRangeError
from .tiles import Edge, bottom_edge, is_tile_index, left_edge, right_edge, top_edge


class Tiling(Protocol):
    """Anything that exposes a grid of tile indices."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def at(self, row: int, col: int) -> int: ...


class Mismatch(NamedTuple):
    """An edge where two abutting tiles disagree.

    `edge` is the edge of the tile at (row, col) that fails to match its
    neighbour (TOP against the tile above, LEFT against the tile to the left).
    """

    row: int
    col: int
    edge: Edge


class TilingSnapshot(BaseModel):
    """A frozen copy of one generated tiling."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    tiles: tuple[int, ...]
    generation: int = 0
    seed: int | None = None

    @model_validator(mode="after")
    def check_tiles(self) -> TilingSnapshot:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Snapshot dimensions must be positive, got {self.width}x{self.height}")
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Snapshot holds {len(self.tiles)} tiles, expected {self.width * self.height}"
            )
        for tile in self.tiles:
            if not is_tile_index(tile):
                raise ValueError(f"Invalid tile index in snapshot: {tile!r}")
        return self

    def at(self, row: int, col: int) -> int:
        """Tile index at (row, col); raises IndexOutOfRangeError outside the grid."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexOutOfRangeError(
                f"Cell ({row}, {col}) is outside a {self.width}x{self.height} tiling",
                row=row,
                col=col,
            )
        return self.tiles[row * self.width + col]

    def rows(self) -> list[list[int]]:
        """The tiling as a list of rows."""
        return [
            list(self.tiles[row * self.width:(row + 1) * self.width])
            for row in range(self.height)
        ]


def find_mismatches(tiling: Tiling) -> list[Mismatch]:
    """List every abutting edge pair that does not match.

    Checks each cell's top edge against the bottom edge of the cell above and
    its left edge against the right edge of the cell to the left. An empty
    list means the tiling is seamless.
    """
    mismatches: list[Mismatch] = []
    for row in range(tiling.height):
        for col in range(tiling.width):
            tile = tiling.at(row, col)
            if row > 0 and top_edge(tile) != bottom_edge(tiling.at(row - 1, col)):
                mismatches.append(Mismatch(row, col, Edge.TOP))
            if col > 0 and left_edge(tile) != right_edge(tiling.at(row, col - 1)):
                mismatches.append(Mismatch(row, col, Edge.LEFT))
    return mismatches
