"""Exceptions raised by the wangtiler core.

Every error the core can raise derives from WangTilerError. The concrete
classes also derive from the matching builtin (ValueError, MemoryError,
IndexError) so callers that only know the builtins still catch them.
"""

from __future__ import annotations


class WangTilerError(Exception):
    """Base exception for all wangtiler errors."""

    pass


class InvalidDimensionError(WangTilerError, ValueError):
    """Grid width or height is not a positive integer."""

    def __init__(self, message: str, width: object = None, height: object = None):
        super().__init__(message)
        self.width = width
        self.height = height


class OutOfMemoryError(WangTilerError, MemoryError):
    """The tile buffer for a grid could not be allocated."""

    def __init__(self, message: str, width: int | None = None, height: int | None = None):
        super().__init__(message)
        self.width = width
        self.height = height


class IndexOutOfRangeError(WangTilerError, IndexError):
    """A cell was read outside the grid bounds."""

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        super().__init__(message)
        self.row = row
        self.col = col


class RandomSourceExhaustedError(WangTilerError):
    """A scripted random source ran out of values."""

    pass
