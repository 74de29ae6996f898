"""Shared test fixtures for wangtiler."""

import logging
import tempfile
from pathlib import Path

import pytest

from wangtiler.config import TilerConfig
from wangtiler.core import ScriptedRandom, WangTileGrid, create_grid
from wangtiler.render import TileSet, synthesize_tileset


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped by default, run with --run-slow)")


def pytest_addoption(parser):
    """Add --run-slow option to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests (skipped by default)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="Slow test (use --run-slow to run)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


# =============================================================================
# Filesystem
# =============================================================================


@pytest.fixture
def temp_data_dir() -> Path:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory(prefix="wangtiler_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_wangtiler_logger():
    """Close and drop handlers installed by setup_logging between tests."""
    yield
    root = logging.getLogger("wangtiler")
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()


# =============================================================================
# Grids
# =============================================================================


@pytest.fixture
def seeded_grid() -> WangTileGrid:
    """A generated 12x9 grid with a fixed seed."""
    grid = create_grid(12, 9, seed=1234)
    grid.generate()
    return grid


@pytest.fixture
def golden_source() -> ScriptedRandom:
    """Scripted draws for a 2x2 grid.

    Order: corner, row-0 virtual top, row-0 bit, column-0 virtual left,
    column-0 bit, interior bit.
    """
    return ScriptedRandom([5, 3, 1, 0, 1, 0])


# =============================================================================
# Rendering
# =============================================================================


@pytest.fixture
def small_tileset() -> TileSet:
    """The default tile set synthesized at 8px."""
    return synthesize_tileset("default", tile_size=8)


@pytest.fixture
def tiler_config(temp_data_dir: Path) -> TilerConfig:
    """Settings pointing every folder into the temp directory."""
    return TilerConfig(
        width=6,
        height=4,
        seed=99,
        tile_size=8,
        tiles_dir=temp_data_dir / "tiles",
        output_dir=temp_data_dir / "output",
        data_dir=temp_data_dir / "data",
    )
