"""Random sources for tiling generation.

Generation only ever asks for inclusive integer ranges, so anything with a
`randint(a, b)` method works: a `random.Random` instance in production, or a
ScriptedRandom replaying fixed values in tests.
"""

from __future__ import annotations

import random
from typing import Iterable, Protocol, runtime_checkable

from .errors import RandomSourceExhaustedError


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniformly distributed integers."""

    def randint(self, a: int, b: int) -> int:
        """Return an integer N with a <= N <= b."""
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """Create a generator owned by one grid.

    Args:
        seed: Explicit seed for reproducible tilings (None = OS entropy)
    """
    return random.Random(seed)


class ScriptedRandom:
    """Replays a fixed sequence of integers, one per randint() call.

    Used for golden-output tests: the values are handed back in order and
    each one must fall inside the range requested by the caller.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        """How many scripted values are left."""
        return len(self._values) - self._position

    @property
    def consumed(self) -> int:
        """How many values have been handed out so far."""
        return self._position

    def randint(self, a: int, b: int) -> int:
        if self._position >= len(self._values):
            raise RandomSourceExhaustedError(
                f"Scripted random source exhausted after {self._position} values"
            )
        value = self._values[self._position]
        if not a <= value <= b:
            raise ValueError(
                f"Scripted value {value} at position {self._position} is outside [{a}, {b}]"
            )
        self._position += 1
        return value
