"""Header widget for the wangtiler TUI.

Shows grid dimensions, seed, generation count, tile set and status.
"""

from __future__ import annotations

from textual.widgets import Static
from textual.reactive import reactive


class TilingHeader(Static):
    """Header widget showing tiling state."""

    dimensions: reactive[str] = reactive("16x16")
    seed: reactive[str] = reactive("-")
    generation: reactive[int] = reactive(0)
    tileset: reactive[str] = reactive("default")
    status: reactive[str] = reactive("IDLE")

    def render(self) -> str:
        """Render the header."""
        parts = [
            "wangtiler",
            f"Grid: {self.dimensions}",
            f"Seed: {self.seed}",
            f"Generation: {self.generation}",
            f"Tileset: {self.tileset}",
            f"[{self.status}]",
        ]
        return " | ".join(parts)

    def update_state(
        self,
        dimensions: tuple[int, int] | None = None,
        seed: int | None = None,
        generation: int | None = None,
        tileset: str | None = None,
        status: str | None = None,
    ) -> None:
        """Update header state.

        Args:
            dimensions: (width, height) tuple
            seed: Seed of the grid's generator
            generation: Number of completed generations
            tileset: Active tile set name
            status: Status string
        """
        if dimensions is not None:
            self.dimensions = f"{dimensions[0]}x{dimensions[1]}"
        if seed is not None:
            self.seed = str(seed)
        if generation is not None:
            self.generation = generation
        if tileset is not None:
            self.tileset = tileset
        if status is not None:
            self.status = status
