"""Rendering for wangtiler: tile sets and composited tiling images."""

from .tileset import (
    TILESET_PALETTES,
    TileSet,
    TileSetError,
    TileSetNotFoundError,
    TileImageError,
    TileSizeMismatchError,
    tile_path,
    load_tileset,
    draw_wang_tile,
    synthesize_tileset,
    resolve_tileset,
    export_tileset,
)
from .image import render_tiling, save_tiling, next_image_path

__all__ = [
    "TILESET_PALETTES",
    "TileSet",
    "TileSetError",
    "TileSetNotFoundError",
    "TileImageError",
    "TileSizeMismatchError",
    "tile_path",
    "load_tileset",
    "draw_wang_tile",
    "synthesize_tileset",
    "resolve_tileset",
    "export_tileset",
    "render_tiling",
    "save_tiling",
    "next_image_path",
]
