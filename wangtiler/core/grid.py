"""
The Wang tile grid.

A WangTileGrid owns a width x height array of tile indices and its own random
generator. generate() fills the array in row-major order, each cell chosen
from the two tiles that fit the already-placed tiles to its left and above:

    (0, 0)          any of the 8 tiles
    row 0           real left neighbour, randomly drawn "virtual" top
    column 0        real top neighbour, randomly drawn "virtual" left
    everything else real left and top neighbours

There is no backtracking: every choice is valid by construction, so once the
grid is allocated generation cannot fail.
"""

from __future__ import annotations

import random
from typing import Iterator

from .errors import IndexOutOfRangeError, InvalidDimensionError, OutOfMemoryError
from .random_source import RandomSource, make_rng
from .snapshot import Mismatch, TilingSnapshot, find_mismatches
from .tiles import MAX_TILE_INDEX, match_tile


def _check_dimensions(width: object, height: object) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionError(
                f"Grid {name} must be an integer, got {value!r}", width=width, height=height
            )
        if value <= 0:
            raise InvalidDimensionError(
                f"Grid {name} must be positive, got {value}", width=width, height=height
            )


class WangTileGrid:
    """
    A W x H Wang tiling stored as one flat row-major buffer.

    Usage:
        grid = WangTileGrid(16, 16, seed=42)
        grid.generate()
        index = grid.at(row, col)

    Not safe for concurrent use: generate() rewrites every cell in place.
    Take a snapshot() to keep a tiling around across regenerations.
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ):
        """
        Allocate a grid with every cell set to tile 0.

        Args:
            width: Number of columns (positive)
            height: Number of rows (positive)
            seed: Seed for the grid's own generator. When None, a seed is
                  drawn from OS entropy and kept so the tiling can be replayed.
            rng: Explicit random source (e.g. ScriptedRandom). Takes precedence
                 over `seed`.

        Raises:
            InvalidDimensionError: width or height is not a positive integer
            OutOfMemoryError: the tile buffer could not be allocated
        """
        _check_dimensions(width, height)
        self._width = width
        self._height = height

        try:
            self._tiles = [0] * (width * height)
        except (MemoryError, OverflowError) as e:
            raise OutOfMemoryError(
                f"Cannot allocate a {width}x{height} tile grid",
                width=width,
                height=height,
            ) from e

        self._generation = 0
        self._seed: int | None = None
        if rng is not None:
            self._rng = rng
        else:
            self.reseed(seed)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        """Width in tiles."""
        return self._width

    @property
    def height(self) -> int:
        """Height in tiles."""
        return self._height

    @property
    def seed(self) -> int | None:
        """Seed of the owned generator, or None when an explicit rng was given."""
        return self._seed

    @property
    def generation(self) -> int:
        """Number of completed generate() calls."""
        return self._generation

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def reseed(self, seed: int | None = None) -> None:
        """Replace the grid's generator with a freshly seeded one."""
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._seed = seed
        self._rng = make_rng(seed)

    def generate(self) -> None:
        """Overwrite every cell with a fresh pseudo-random Wang tiling."""
        rng = self._rng
        tiles = self._tiles
        width = self._width

        tiles[0] = rng.randint(0, MAX_TILE_INDEX)

        # Row 0: the tile above is imaginary, so draw one at random.
        for col in range(1, width):
            virtual_top = rng.randint(0, MAX_TILE_INDEX)
            tiles[col] = match_tile(tiles[col - 1], virtual_top, rng.randint(0, 1))

        for row in range(1, self._height):
            base = row * width
            virtual_left = rng.randint(0, MAX_TILE_INDEX)
            tiles[base] = match_tile(virtual_left, tiles[base - width], rng.randint(0, 1))

            for col in range(1, width):
                i = base + col
                tiles[i] = match_tile(tiles[i - 1], tiles[i - width], rng.randint(0, 1))

        self._generation += 1

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def at(self, row: int, col: int) -> int:
        """
        Tile index at (row, col).

        Raises:
            IndexOutOfRangeError: row or col is negative or past the edge
        """
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexOutOfRangeError(
                f"Cell ({row}, {col}) is outside a {self._width}x{self._height} grid",
                row=row,
                col=col,
            )
        return self._tiles[row * self._width + col]

    def rows(self) -> list[list[int]]:
        """Copy of the grid as a list of rows."""
        w = self._width
        return [self._tiles[r * w:(r + 1) * w] for r in range(self._height)]

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.rows())

    def snapshot(self) -> TilingSnapshot:
        """Immutable copy of the current tiling."""
        return TilingSnapshot(
            width=self._width,
            height=self._height,
            tiles=tuple(self._tiles),
            generation=self._generation,
            seed=self._seed,
        )

    def find_mismatches(self) -> list[Mismatch]:
        """Every abutting edge pair that fails to match (empty when seamless)."""
        return find_mismatches(self)

    def is_valid(self) -> bool:
        """True when every abutting edge pair matches."""
        return not self.find_mismatches()

    def __repr__(self) -> str:
        return (
            f"WangTileGrid(width={self._width}, height={self._height}, "
            f"seed={self._seed}, generation={self._generation})"
        )


def create_grid(
    width: int,
    height: int,
    seed: int | None = None,
    rng: RandomSource | None = None,
) -> WangTileGrid:
    """Allocate a WangTileGrid; see WangTileGrid.__init__ for arguments and errors."""
    return WangTileGrid(width, height, seed=seed, rng=rng)
