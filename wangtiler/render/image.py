"""Compositing a tiling into a single image and saving it."""

from __future__ import annotations

import time
from pathlib import Path

from PIL import Image

from ..core.snapshot import Tiling
from ..logging_config import get_logger, log_render
from .tileset import TileSet

logger = get_logger(__name__)


def render_tiling(tiling: Tiling, tileset: TileSet) -> Image.Image:
    """
    Paste tile image `tileset[tiling.at(row, col)]` at (col * tw, row * th).

    Args:
        tiling: A WangTileGrid or TilingSnapshot
        tileset: The 8 images to draw with

    Returns:
        RGBA image of size (width * tw, height * th)
    """
    start = time.perf_counter()
    tw, th = tileset.tile_size
    image = Image.new("RGBA", (tiling.width * tw, tiling.height * th))

    for row in range(tiling.height):
        for col in range(tiling.width):
            image.paste(tileset[tiling.at(row, col)], (col * tw, row * th))

    duration_ms = int((time.perf_counter() - start) * 1000)
    log_render(
        logger,
        "render",
        details=f"{tiling.width}x{tiling.height} tiles | {image.width}x{image.height}px | {duration_ms}ms",
    )
    return image


def save_tiling(image: Image.Image, path: Path | str) -> Path:
    """
    Save a rendered tiling as PNG, creating parent folders.

    Raises:
        ValueError: If `path` does not end in .png
    """
    path = Path(path)
    if path.suffix.lower() != ".png":
        raise ValueError(f"Only .png output is supported, got '{path.name}'")

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        image.save(path, format="PNG")
    except OSError as e:
        log_render(logger, "save", path, success=False, details=str(e))
        raise
    log_render(logger, "save", path)
    return path


def next_image_path(directory: Path | str, stem: str = "Image") -> Path:
    """First unused `<stem>N.png` in `directory`, counting N from 0."""
    directory = Path(directory)
    n = 0
    while (directory / f"{stem}{n}.png").exists():
        n += 1
    return directory / f"{stem}{n}.png"
