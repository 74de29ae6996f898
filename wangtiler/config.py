"""Settings for wangtiler.

Settings are resolved in order, later sources winning:

1. Defaults on TilerConfig (a 16x16 grid of 64px tiles, "default" tile set)
2. An optional YAML file
3. WANGTILER_* environment variables (e.g. WANGTILER_WIDTH=32)
4. Explicit overrides, usually from the command line
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import WangTilerError

ENV_PREFIX = "WANGTILER_"

TILESET_NAMES: tuple[str, ...] = ("default", "flowers", "mud", "grass")


class ConfigError(WangTilerError):
    """Settings could not be read or failed validation."""

    pass


class TilerConfig(BaseModel):
    """Resolved settings for one run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=16, description="Grid width in tiles")
    height: int = Field(default=16, description="Grid height in tiles")
    seed: int | None = Field(default=None, description="Generator seed (None = random)")
    tileset: str = Field(default="default", description="Tile set name")
    tiles_dir: Path = Field(default=Path("tiles"), description="Directory of tile set folders")
    tile_size: int = Field(default=64, description="Edge length of synthesized tiles in pixels")
    output_dir: Path = Field(default=Path("output"), description="Where rendered PNGs go")
    data_dir: Path = Field(default=Path("data"), description="Where the log file goes")

    @field_validator("width", "height", "tile_size")
    @classmethod
    def check_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @field_validator("tileset")
    @classmethod
    def check_tileset(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    """Load the settings mapping from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _read_env(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect WANGTILER_* variables that name a TilerConfig field."""
    values: dict[str, str] = {}
    for field_name in TilerConfig.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is not None and raw != "":
            values[field_name] = raw
    return values


def load_config(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> TilerConfig:
    """
    Resolve settings from defaults, YAML, environment and overrides.

    Args:
        path: Optional YAML file
        environ: Environment mapping (default: os.environ)
        **overrides: Explicit values; None values are ignored

    Returns:
        Validated TilerConfig

    Raises:
        ConfigError: If the file cannot be read or a value is invalid
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(_read_yaml(Path(path)))
    values.update(_read_env(os.environ if environ is None else environ))
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return TilerConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
