"""Tiling view widget for the wangtiler TUI.

Draws a tiling snapshot as a grid of coloured tile indices, two characters
per tile.
"""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from wangtiler.core.snapshot import TilingSnapshot
from wangtiler.core.tiles import left_edge, top_edge


# Tiles with the same top and left pattern share a hue
TILE_COLORS: dict[int, str] = {
    0: "yellow",
    1: "bright_yellow",
    2: "green",
    3: "bright_green",
    4: "blue",
    5: "bright_blue",
    6: "magenta",
    7: "bright_magenta",
}

EDGE_BACKGROUNDS: tuple[str, str] = ("grey15", "grey35")


def get_tile_render(tile: int) -> tuple[str, str]:
    """Get (symbol, style) for a tile index."""
    color = TILE_COLORS.get(tile, "white")
    background = EDGE_BACKGROUNDS[top_edge(tile) ^ left_edge(tile)]
    return (str(tile), f"bold {color} on {background}")


class TilingView(Widget):
    """Widget that renders the current tiling.

    Shows as much of the tiling as fits, anchored at the top-left corner.
    """

    snapshot: reactive[TilingSnapshot | None] = reactive(None)

    def show(self, snapshot: TilingSnapshot) -> None:
        """Display a new tiling."""
        self.snapshot = snapshot
        self.refresh()

    def render(self) -> Text:
        """Render the tiling view."""
        snapshot = self.snapshot
        if snapshot is None:
            return Text("No tiling generated", style="bright_black")

        # Each tile takes 2 characters (symbol + space)
        visible_cols = snapshot.width
        visible_rows = snapshot.height
        if self.content_region.width > 0:
            visible_cols = min(visible_cols, max(1, self.content_region.width // 2))
        if self.content_region.height > 0:
            visible_rows = min(visible_rows, self.content_region.height)

        result = Text()
        for row in range(visible_rows):
            for col in range(visible_cols):
                symbol, style = get_tile_render(snapshot.at(row, col))
                result.append(symbol, style=style)
                result.append(" ", style=style)
            if row < visible_rows - 1:
                result.append("\n")

        return result
