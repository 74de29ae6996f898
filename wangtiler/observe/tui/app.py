"""Main TUI application for the wangtiler viewer.

Shows the current tiling and lets the user regenerate it, save it as a PNG
and switch between tile sets.
"""

from __future__ import annotations

import time
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from wangtiler.config import TILESET_NAMES, TilerConfig
from wangtiler.core import WangTileGrid, create_grid
from wangtiler.logging_config import get_logger, log_generation, log_viewer_cmd
from wangtiler.render import (
    TileSet,
    TileSetError,
    next_image_path,
    render_tiling,
    resolve_tileset,
    save_tiling,
)
from .widgets import TilingHeader, TilingView

logger = get_logger(__name__)


class WangTilerTUI(App):
    """Terminal viewer for Wang tilings.

    Owns one grid and one tile set. The grid is only ever touched from the
    event loop, so generation never races with rendering.
    """

    CSS = """
    TilingHeader {
        height: 1;
        background: $boost;
    }
    TilingView {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("g", "generate", "Generate"),
        Binding("s", "save", "Save PNG"),
        Binding("t", "cycle_tileset", "Tileset"),
    ]

    def __init__(
        self,
        config: TilerConfig,
        grid: WangTileGrid | None = None,
        tileset: TileSet | None = None,
    ):
        """Initialize WangTilerTUI.

        Args:
            config: Resolved settings (dimensions, seed, tile set, folders)
            grid: Grid to show (default: a new grid from `config`)
            tileset: Tile set used when saving (default: resolved from `config`)
        """
        super().__init__()
        self._config = config
        if grid is None:
            grid = create_grid(config.width, config.height, seed=config.seed)
        if tileset is None:
            tileset = resolve_tileset(config.tileset, config.tiles_dir, config.tile_size)
        self._grid = grid
        self._tileset = tileset
        self._last_saved: Path | None = None

    @property
    def grid(self) -> WangTileGrid:
        return self._grid

    @property
    def last_saved(self) -> Path | None:
        """Path of the most recent successful save."""
        return self._last_saved

    @property
    def tileset(self) -> TileSet:
        return self._tileset

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield TilingHeader(id="header")
        yield TilingView(id="tiling")
        yield Footer()

    async def on_mount(self) -> None:
        """Generate the first tiling."""
        self._generate()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _generate(self) -> None:
        start = time.perf_counter()
        self._grid.generate()
        duration_ms = int((time.perf_counter() - start) * 1000)
        log_generation(
            logger,
            self._grid.width,
            self._grid.height,
            self._grid.generation,
            seed=self._grid.seed,
            duration_ms=duration_ms,
        )
        self.query_one("#tiling", TilingView).show(self._grid.snapshot())
        self._update_header()

    def _update_header(self, status: str = "IDLE") -> None:
        header = self.query_one("#header", TilingHeader)
        header.update_state(
            dimensions=(self._grid.width, self._grid.height),
            seed=self._grid.seed,
            generation=self._grid.generation,
            tileset=self._tileset.name,
            status=status,
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def action_generate(self) -> None:
        """Replace the tiling with a new one."""
        log_viewer_cmd(logger, "generate")
        self._generate()

    async def action_save(self) -> None:
        """Render the current tiling and save it as the next ImageN.png."""
        path = next_image_path(self._config.output_dir)
        log_viewer_cmd(logger, "save", str(path))
        try:
            image = render_tiling(self._grid.snapshot(), self._tileset)
            save_tiling(image, path)
        except OSError as e:
            logger.error(f"Failed to save {path}: {e}")
            self.notify(f"Error saving {path}: {e}", severity="error")
            return
        self._last_saved = path
        self.notify(f"Saved {path}")

    async def action_cycle_tileset(self) -> None:
        """Switch to the next named tile set, keeping the current one on failure."""
        names = list(TILESET_NAMES)
        current = self._tileset.name
        next_name = names[(names.index(current) + 1) % len(names)] if current in names else names[0]
        log_viewer_cmd(logger, "tileset", next_name)

        try:
            self._tileset = resolve_tileset(
                next_name, self._config.tiles_dir, self._config.tile_size
            )
        except TileSetError as e:
            self.notify(str(e), title="Error loading tile set", severity="error")
            return

        self._update_header()


async def run_tui(config: TilerConfig) -> None:
    """Run the TUI application.

    Args:
        config: Resolved settings
    """
    app = WangTilerTUI(config)
    await app.run_async()
