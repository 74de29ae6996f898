"""Tests for the tile index algebra."""

import pytest

from wangtiler.core import (
    TILE_COUNT,
    Edge,
    bottom_edge,
    edge_pattern,
    is_tile_index,
    left_edge,
    match_tile,
    right_edge,
    tile_edges,
    tiles_matching,
    top_edge,
)

ALL_TILES = range(TILE_COUNT)


class TestMatchTile:
    """Tests for match_tile."""

    def test_result_in_range_with_low_bit_equal_to_random_bit(self):
        """Every input combination gives an index in [0, 7] whose low bit is the free bit."""
        for left in ALL_TILES:
            for top in ALL_TILES:
                for bit in (0, 1):
                    result = match_tile(left, top, bit)
                    assert 0 <= result <= 7
                    assert result & 1 == bit

    def test_matches_formula(self):
        """Spot-check the exact bit formula."""
        # top=3: (0 ^ 4) = 4; left=5: (0 ^ 2) = 2; bit 1
        assert match_tile(5, 3, 1) == 7
        # top=5: (4 ^ 4) = 0; left=0: 0; bit 1
        assert match_tile(0, 5, 1) == 1
        # top=7: (4 ^ 4) = 0; left=1: (0 ^ 2) = 2; bit 0
        assert match_tile(1, 7, 0) == 2
        # top=4: 4; left=2: 2; bit 0
        assert match_tile(2, 4, 0) == 6
        assert match_tile(0, 0, 0) == 0

    def test_result_fits_both_neighbours(self):
        """The chosen tile's top matches the tile above and its left matches the tile to the left."""
        for left in ALL_TILES:
            for top in ALL_TILES:
                for bit in (0, 1):
                    result = match_tile(left, top, bit)
                    assert top_edge(result) == bottom_edge(top)
                    assert left_edge(result) == right_edge(left)

    def test_argument_order_is_left_then_top(self):
        """Swapping the neighbours changes the result for asymmetric inputs."""
        assert match_tile(4, 0, 0) != match_tile(0, 4, 0)


class TestEdges:
    """Tests for edge pattern extraction."""

    @pytest.mark.parametrize(
        "tile,top,left,bottom,right",
        [
            (0, 0, 0, 0, 0),
            (1, 0, 0, 1, 1),
            (2, 0, 1, 0, 1),
            (3, 0, 1, 1, 0),
            (4, 1, 0, 1, 0),
            (5, 1, 0, 0, 1),
            (6, 1, 1, 1, 1),
            (7, 1, 1, 0, 0),
        ],
    )
    def test_edge_table(self, tile, top, left, bottom, right):
        """Edge patterns of each of the 8 tiles."""
        assert tile_edges(tile) == {
            Edge.TOP: top,
            Edge.LEFT: left,
            Edge.BOTTOM: bottom,
            Edge.RIGHT: right,
        }

    def test_all_tiles_are_distinct(self):
        """No two tiles share all four edges."""
        signatures = {tuple(tile_edges(t).values()) for t in ALL_TILES}
        assert len(signatures) == TILE_COUNT

    def test_edge_pattern_dispatch(self):
        """edge_pattern agrees with the individual getters."""
        for tile in ALL_TILES:
            assert edge_pattern(tile, Edge.TOP) == top_edge(tile)
            assert edge_pattern(tile, Edge.LEFT) == left_edge(tile)
            assert edge_pattern(tile, Edge.BOTTOM) == bottom_edge(tile)
            assert edge_pattern(tile, Edge.RIGHT) == right_edge(tile)

    def test_opposite_edges(self):
        """Opposite edges pair up."""
        assert Edge.TOP.opposite == Edge.BOTTOM
        assert Edge.LEFT.opposite == Edge.RIGHT
        for edge in Edge:
            assert edge.opposite.opposite == edge


class TestTilesMatching:
    """Tests for tiles_matching."""

    def test_exactly_two_choices_per_neighbour_pair(self):
        """Brute force: exactly two of the 8 tiles fit any pair of neighbours."""
        for left in ALL_TILES:
            for top in ALL_TILES:
                fitting = {
                    t for t in ALL_TILES
                    if top_edge(t) == bottom_edge(top) and left_edge(t) == right_edge(left)
                }
                assert set(tiles_matching(left, top)) == fitting
                assert len(fitting) == 2

    def test_choices_differ_only_in_low_bit(self):
        low, high = tiles_matching(3, 6)
        assert high == low | 1
        assert low & 1 == 0


class TestIsTileIndex:
    """Tests for is_tile_index."""

    def test_valid(self):
        assert all(is_tile_index(t) for t in ALL_TILES)

    @pytest.mark.parametrize("value", [-1, 8, 1.0, "3", None, True])
    def test_invalid(self, value):
        assert not is_tile_index(value)
