"""
Centralized logging configuration for wangtiler.

Writes a debug log to file for the CLI, renderer and viewer.
Log file: data/wangtiler.log (with rotation)

Usage:
    from wangtiler.logging_config import setup_logging
    setup_logging(data_root)  # Call once at startup

All wangtiler.* loggers write DEBUG to file, WARNING+ to console.
The core package never logs; its callers do.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime


LOG_FILE_NAME = "wangtiler.log"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "wangtiler"

_logging_initialized = False


def setup_logging(
    data_root: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Configure the logging system for wangtiler.

    Args:
        data_root: Path to data directory (log file goes here)
        log_level: Level for file logging (default: DEBUG)
        console_level: Level for console output (default: WARNING)

    Returns:
        Path to the log file
    """
    global _logging_initialized

    data_path = Path(data_root)
    data_path.mkdir(parents=True, exist_ok=True)
    log_path = data_path / LOG_FILE_NAME

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Re-initialization replaces handlers instead of stacking them
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    file_formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-30s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    console_formatter = logging.Formatter(
        fmt="%(levelname)-8s | %(name)-25s | %(message)s"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if not _logging_initialized:
        root_logger.info("=" * 80)
        root_logger.info(f"wangtiler logging initialized at {datetime.now().isoformat()}")
        root_logger.info(f"Log file: {log_path.absolute()}")
        root_logger.info("=" * 80)
        _logging_initialized = True

    return log_path


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger configured as child of the wangtiler logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured Logging Helpers
# =============================================================================


def log_generation(
    logger: logging.Logger,
    width: int,
    height: int,
    generation: int,
    seed: int | None = None,
    duration_ms: int | None = None,
) -> None:
    """Log a completed tiling generation."""
    seed_str = f" | seed={seed}" if seed is not None else ""
    duration_str = f" | {duration_ms}ms" if duration_ms is not None else ""
    logger.debug(f"GENERATE | {width}x{height} | gen={generation}{seed_str}{duration_str}")


def log_tileset(
    logger: logging.Logger,
    name: str,
    source: str,
    success: bool = True,
    details: str | None = None,
) -> None:
    """Log a tile set being loaded or synthesized."""
    status = "OK" if success else "FAILED"
    details_str = f" | {details}" if details else ""
    level = logging.INFO if success else logging.WARNING
    logger.log(level, f"TILESET | {name} | {source} | {status}{details_str}")


def log_render(
    logger: logging.Logger,
    operation: str,
    path: Path | str | None = None,
    success: bool = True,
    details: str | None = None,
) -> None:
    """Log image rendering and saving."""
    status = "OK" if success else "FAILED"
    path_str = f" | {path}" if path else ""
    details_str = f" | {details}" if details else ""
    logger.debug(f"RENDER | {operation}{path_str} | {status}{details_str}")


def log_viewer_cmd(
    logger: logging.Logger,
    command: str,
    details: str | None = None,
) -> None:
    """Log a command issued from the terminal viewer."""
    details_str = f" | {details}" if details else ""
    logger.info(f"VIEWER_CMD | {command}{details_str}")
