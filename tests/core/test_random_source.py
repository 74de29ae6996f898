"""Tests for random sources."""

import random

import pytest

from wangtiler.core import RandomSource, RandomSourceExhaustedError, ScriptedRandom, make_rng


class TestScriptedRandom:
    """Tests for ScriptedRandom."""

    def test_replays_in_order(self):
        source = ScriptedRandom([3, 0, 7])
        assert source.randint(0, 7) == 3
        assert source.randint(0, 1) == 0
        assert source.randint(0, 7) == 7
        assert source.consumed == 3
        assert source.remaining == 0

    def test_exhausted(self):
        source = ScriptedRandom([1])
        source.randint(0, 1)
        with pytest.raises(RandomSourceExhaustedError):
            source.randint(0, 1)

    def test_value_outside_requested_range(self):
        """A scripted 5 cannot stand in for a free bit."""
        source = ScriptedRandom([5])
        with pytest.raises(ValueError):
            source.randint(0, 1)
        assert source.consumed == 0

    def test_accepts_any_iterable(self):
        source = ScriptedRandom(iter([2, 4]))
        assert source.remaining == 2

    def test_satisfies_protocol(self):
        assert isinstance(ScriptedRandom([]), RandomSource)


class TestMakeRng:
    """Tests for make_rng."""

    def test_seeded_generators_agree(self):
        a = make_rng(17)
        b = make_rng(17)
        assert [a.randint(0, 7) for _ in range(50)] == [b.randint(0, 7) for _ in range(50)]

    def test_is_independent_instance(self):
        assert make_rng(1) is not make_rng(1)
        assert isinstance(make_rng(None), random.Random)

    def test_random_satisfies_protocol(self):
        assert isinstance(random.Random(0), RandomSource)
