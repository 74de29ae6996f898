"""Terminal viewer for wangtiler."""

from .app import WangTilerTUI, run_tui

__all__ = ["WangTilerTUI", "run_tui"]
