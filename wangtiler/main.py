"""wangtiler - seamless Wang tilings from a set of 8 tiles."""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from wangtiler.logging_config import get_logger, log_generation, setup_logging
from wangtiler.config import TILESET_NAMES, TilerConfig, load_config
from wangtiler.core import WangTileGrid, WangTilerError, create_grid

logger = get_logger(__name__)


def format_tiling(grid: WangTileGrid) -> str:
    """Tile indices as text, one row per line."""
    return "\n".join(" ".join(str(tile) for tile in row) for row in grid.rows())


def generate_once(grid: WangTileGrid) -> None:
    """Generate a tiling and log how long it took."""
    start = time.perf_counter()
    grid.generate()
    duration_ms = int((time.perf_counter() - start) * 1000)
    log_generation(
        logger, grid.width, grid.height, grid.generation, seed=grid.seed, duration_ms=duration_ms
    )


def run_generate(
    config: TilerConfig,
    output: Path | None = None,
    count: int = 1,
    print_grid: bool = False,
) -> int:
    """Generate `count` tilings, optionally printing and saving each.

    Args:
        config: Resolved settings
        output: PNG path for a single tiling. With count > 1, or when omitted,
                images go to config.output_dir as Image0.png, Image1.png, ...
        count: Number of tilings to generate
        print_grid: Print the tile indices to stdout

    Returns:
        Exit code
    """
    from wangtiler.render import next_image_path, render_tiling, resolve_tileset, save_tiling

    grid = create_grid(config.width, config.height, seed=config.seed)
    tileset = resolve_tileset(config.tileset, config.tiles_dir, config.tile_size)

    print(f"Generating {count} {config.width}x{config.height} tiling(s) (seed={grid.seed}, tileset={tileset.name})")

    if count == 1:
        generate_once(grid)
        if print_grid:
            print(format_tiling(grid))
        path = output or next_image_path(config.output_dir)
        save_tiling(render_tiling(grid, tileset), path)
        print(f"  Saved {path}")
        return 0

    from tqdm import tqdm

    for _ in tqdm(range(count), desc="  Rendering tilings", unit="image"):
        generate_once(grid)
        if print_grid:
            tqdm.write(format_tiling(grid) + "\n")
        save_tiling(render_tiling(grid, tileset), next_image_path(config.output_dir))

    print(f"  Saved {count} images to {config.output_dir}")
    return 0


def run_print(config: TilerConfig) -> int:
    """Generate one tiling and print its tile indices without rendering.

    Returns:
        Exit code
    """
    grid = create_grid(config.width, config.height, seed=config.seed)
    generate_once(grid)
    print(format_tiling(grid))
    return 0


def run_export_tileset(config: TilerConfig, directory: Path) -> int:
    """Write the configured tile set's 8 images to a folder.

    Returns:
        Exit code
    """
    from wangtiler.render import export_tileset, resolve_tileset

    tileset = resolve_tileset(config.tileset, config.tiles_dir, config.tile_size)
    paths = export_tileset(tileset, directory)
    print(f"Exported {len(paths)} tiles of '{tileset.name}' to {directory}")
    return 0


async def run_tui_mode(config: TilerConfig) -> int:
    """Run the TUI viewer.

    Returns:
        Exit code
    """
    from wangtiler.observe.tui import run_tui

    await run_tui(config)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wangtiler",
        description="wangtiler - seamless Wang tilings from a set of 8 tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Tile sets: {", ".join(TILESET_NAMES)} (or any folder of 0.png..7.png under --tiles-dir)

Examples:
  wangtiler                          # Render a 16x16 tiling to output/ImageN.png
  wangtiler --seed 7 -o wang.png     # Reproducible tiling to a given file
  wangtiler --print --no-render      # Print tile indices only
  wangtiler --count 20 --tileset mud # Render 20 tilings
  wangtiler --tui                    # Interactive viewer
        """,
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("--width", type=int, help="Grid width in tiles (default: 16)")
    parser.add_argument("--height", type=int, help="Grid height in tiles (default: 16)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible tiling")
    parser.add_argument("--tileset", help="Tile set name (default: default)")
    parser.add_argument("--tiles-dir", type=Path, help="Folder holding tile set folders (default: tiles/)")
    parser.add_argument("--tile-size", type=int, help="Pixel size of synthesized tiles (default: 64)")
    parser.add_argument("--output-dir", type=Path, help="Folder for rendered images (default: output/)")
    parser.add_argument("--data", type=Path, help="Data directory for the log file (default: data/)")
    parser.add_argument("-o", "--output", type=Path, help="PNG file for a single tiling")
    parser.add_argument("--count", type=int, default=1, metavar="N", help="Generate N tilings")
    parser.add_argument("--print", dest="print_grid", action="store_true", help="Print tile indices")
    parser.add_argument("--no-render", action="store_true", help="Skip rendering (use with --print)")
    parser.add_argument("--export-tileset", type=Path, metavar="DIR", help="Write the tile set images to DIR and exit")
    parser.add_argument("--tui", action="store_true", help="Run the interactive viewer")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging to console")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for wangtiler."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.output is not None and args.count > 1:
        parser.error("--output only applies to a single tiling; use --output-dir with --count")
    if args.no_render and not args.print_grid:
        parser.error("--no-render needs --print")

    try:
        config = load_config(
            args.config,
            width=args.width,
            height=args.height,
            seed=args.seed,
            tileset=args.tileset,
            tiles_dir=args.tiles_dir,
            tile_size=args.tile_size,
            output_dir=args.output_dir,
            data_dir=args.data,
        )
    except WangTilerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    console_level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(config.data_dir, console_level=console_level)
    logger.debug(f"Resolved config: {config.model_dump()}")

    try:
        if args.export_tileset is not None:
            return run_export_tileset(config, args.export_tileset)
        if args.tui:
            return asyncio.run(run_tui_mode(config))
        if args.no_render:
            return run_print(config)
        return run_generate(config, output=args.output, count=args.count, print_grid=args.print_grid)
    except (WangTilerError, ValueError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
