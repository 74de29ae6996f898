"""TUI widgets for the wangtiler viewer."""

from .tiling_view import TilingView
from .header import TilingHeader

__all__ = ["TilingView", "TilingHeader"]
