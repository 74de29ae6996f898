"""Tests for TilingSnapshot and adjacency checking."""

import pytest
from pydantic import ValidationError

from wangtiler.core import (
    Edge,
    IndexOutOfRangeError,
    Mismatch,
    TilingSnapshot,
    find_mismatches,
)


class TestTilingSnapshot:
    """Tests for the snapshot model."""

    def test_rows(self):
        snapshot = TilingSnapshot(width=3, height=2, tiles=(5, 7, 0, 1, 2, 3))
        assert snapshot.rows() == [[5, 7, 0], [1, 2, 3]]
        assert snapshot.at(1, 2) == 3

    def test_is_frozen(self):
        snapshot = TilingSnapshot(width=1, height=1, tiles=(4,))
        with pytest.raises(ValidationError):
            snapshot.width = 2

    def test_wrong_tile_count(self):
        with pytest.raises(ValidationError):
            TilingSnapshot(width=2, height=2, tiles=(0, 1, 2))

    def test_tile_out_of_range(self):
        with pytest.raises(ValidationError):
            TilingSnapshot(width=2, height=1, tiles=(0, 8))

    def test_non_positive_dimensions(self):
        with pytest.raises(ValidationError):
            TilingSnapshot(width=0, height=1, tiles=())

    def test_at_out_of_range(self):
        snapshot = TilingSnapshot(width=2, height=2, tiles=(5, 7, 1, 2))
        with pytest.raises(IndexOutOfRangeError):
            snapshot.at(2, 0)
        with pytest.raises(IndexOutOfRangeError):
            snapshot.at(0, -1)

    def test_json_round_trip(self):
        snapshot = TilingSnapshot(width=2, height=2, tiles=(5, 7, 1, 2), generation=3, seed=9)
        assert TilingSnapshot.model_validate_json(snapshot.model_dump_json()) == snapshot


class TestFindMismatches:
    """Tests for find_mismatches."""

    def test_seamless_tiling(self):
        snapshot = TilingSnapshot(width=2, height=2, tiles=(5, 7, 1, 2))
        assert find_mismatches(snapshot) == []

    def test_horizontal_mismatch(self):
        """Tile 0 has right pattern 0; tile 2 has left pattern 1."""
        snapshot = TilingSnapshot(width=2, height=1, tiles=(0, 2))
        assert find_mismatches(snapshot) == [Mismatch(0, 1, Edge.LEFT)]

    def test_vertical_mismatch(self):
        """Tile 0 has bottom pattern 0; tile 4 has top pattern 1."""
        snapshot = TilingSnapshot(width=1, height=2, tiles=(0, 4))
        assert find_mismatches(snapshot) == [Mismatch(1, 0, Edge.TOP)]

    def test_reports_every_edge(self):
        snapshot = TilingSnapshot(width=2, height=2, tiles=(0, 2, 4, 4))
        assert set(find_mismatches(snapshot)) == {
            Mismatch(0, 1, Edge.LEFT),
            Mismatch(1, 0, Edge.TOP),
            Mismatch(1, 1, Edge.TOP),
        }
