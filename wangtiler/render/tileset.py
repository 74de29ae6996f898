"""
Tile sets: the 8 images a tiling is drawn with.

Tile image i must be authored so that its edges follow the bit layout of tile
index i (see wangtiler.core.tiles). On disk a tile set is a folder of
numbered PNGs:

    tiles/
        default/0.png ... 7.png
        flowers/0.png ... 7.png

When a named set has no folder, an edge-coloured set is synthesized instead:
each tile is split into four triangles, one per edge, coloured by that edge's
pattern bit. Abutting edges then share a colour, which makes the tiling
visibly seamless without any assets.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw

from ..core.errors import WangTilerError
from ..core.tiles import TILE_COUNT, Edge, tile_edges
from ..logging_config import get_logger, log_tileset

logger = get_logger(__name__)

RGB = tuple[int, int, int]

# Pattern 0 colour, pattern 1 colour
TILESET_PALETTES: dict[str, tuple[RGB, RGB]] = {
    "default": ((230, 200, 120), (70, 130, 180)),
    "flowers": ((120, 180, 80), (220, 120, 170)),
    "mud": ((140, 105, 70), (85, 62, 40)),
    "grass": ((110, 175, 75), (55, 115, 45)),
}


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class TileSetError(WangTilerError):
    """Base exception for tile set problems."""

    pass


class TileSetNotFoundError(TileSetError):
    """No folder and no built-in palette for the requested tile set."""

    pass


class TileImageError(TileSetError):
    """A tile image is missing or cannot be decoded."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class TileSizeMismatchError(TileSetError):
    """The images of a tile set are not all the same size."""

    pass


# -----------------------------------------------------------------------------
# TileSet
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class TileSet:
    """Exactly 8 equally sized RGBA images, indexed by tile index."""

    name: str
    images: tuple[Image.Image, ...]

    def __post_init__(self):
        if len(self.images) != TILE_COUNT:
            raise TileSetError(
                f"Tile set '{self.name}' has {len(self.images)} images, expected {TILE_COUNT}"
            )
        sizes = {image.size for image in self.images}
        if len(sizes) != 1:
            raise TileSizeMismatchError(
                f"Tile set '{self.name}' mixes image sizes: {sorted(sizes)}"
            )

    @property
    def tile_size(self) -> tuple[int, int]:
        """(width, height) of each tile in pixels."""
        return self.images[0].size

    @property
    def tile_width(self) -> int:
        return self.images[0].width

    @property
    def tile_height(self) -> int:
        return self.images[0].height

    def __getitem__(self, index: int) -> Image.Image:
        return self.images[index]

    def __len__(self) -> int:
        return len(self.images)


# -----------------------------------------------------------------------------
# Loading and synthesis
# -----------------------------------------------------------------------------


def tile_path(tiles_dir: Path | str, name: str, index: int) -> Path:
    """Location of image `index` of tile set `name`."""
    return Path(tiles_dir) / name / f"{index}.png"


def load_tileset(tiles_dir: Path | str, name: str) -> TileSet:
    """
    Load `<tiles_dir>/<name>/0.png .. 7.png`.

    All 8 images are decoded before anything is returned, so a failure never
    yields a partial tile set.

    Raises:
        TileSetNotFoundError: The tile set folder does not exist
        TileImageError: An image is missing or unreadable
        TileSizeMismatchError: The images differ in size
    """
    folder = Path(tiles_dir) / name
    if not folder.is_dir():
        raise TileSetNotFoundError(f"Tile set folder not found: {folder}")

    images: list[Image.Image] = []
    for index in range(TILE_COUNT):
        path = tile_path(tiles_dir, name, index)
        try:
            with Image.open(path) as image:
                image.load()
                images.append(image.convert("RGBA"))
        except OSError as e:
            raise TileImageError(f"Error loading tile image {path}: {e}", path=path) from e

    return TileSet(name=name, images=tuple(images))


def draw_wang_tile(tile: int, size: int, palette: tuple[RGB, RGB]) -> Image.Image:
    """Draw one tile as four edge triangles coloured by pattern bit."""
    image = Image.new("RGBA", (size, size))
    draw = ImageDraw.Draw(image)
    last = size - 1
    centre = (last / 2, last / 2)

    corners = {
        Edge.TOP: [(0, 0), (last, 0), centre],
        Edge.RIGHT: [(last, 0), (last, last), centre],
        Edge.BOTTOM: [(last, last), (0, last), centre],
        Edge.LEFT: [(0, last), (0, 0), centre],
    }
    for edge, pattern in tile_edges(tile).items():
        draw.polygon(corners[edge], fill=palette[pattern] + (255,))

    return image


def synthesize_tileset(
    name: str,
    tile_size: int = 64,
    palette: tuple[RGB, RGB] | None = None,
) -> TileSet:
    """
    Build an edge-coloured tile set without any image files.

    Args:
        name: Tile set name; picks a built-in palette when `palette` is None
        tile_size: Edge length of each tile in pixels
        palette: (pattern 0 colour, pattern 1 colour)

    Raises:
        TileSetNotFoundError: No palette given and `name` has no built-in one
    """
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    if palette is None:
        if name not in TILESET_PALETTES:
            raise TileSetNotFoundError(f"No built-in palette for tile set '{name}'")
        palette = TILESET_PALETTES[name]

    images = tuple(draw_wang_tile(tile, tile_size, palette) for tile in range(TILE_COUNT))
    return TileSet(name=name, images=images)


def resolve_tileset(name: str, tiles_dir: Path | str, tile_size: int = 64) -> TileSet:
    """
    Load a tile set from disk, falling back to a synthesized one.

    A folder under `tiles_dir` always wins. Without one, built-in names are
    synthesized at `tile_size`; anything else is an error.
    """
    folder = Path(tiles_dir) / name
    if folder.is_dir():
        try:
            tileset = load_tileset(tiles_dir, name)
        except TileSetError as e:
            log_tileset(logger, name, str(folder), success=False, details=str(e))
            raise
        log_tileset(logger, name, str(folder), details=f"{tileset.tile_width}x{tileset.tile_height}px")
        return tileset

    tileset = synthesize_tileset(name, tile_size)
    log_tileset(logger, name, "synthesized", details=f"{tile_size}px")
    return tileset


def export_tileset(tileset: TileSet, directory: Path | str) -> list[Path]:
    """Write the tile set as `0.png .. 7.png` into `directory`."""
    out = Path(directory)
    out.mkdir(parents=True, exist_ok=True)
    paths = []
    for index, image in enumerate(tileset.images):
        path = out / f"{index}.png"
        image.save(path, format="PNG")
        paths.append(path)
    logger.info(f"Exported tile set '{tileset.name}' to {out}")
    return paths
