from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import MAX_LEVEL, MIN_LEVEL, TILE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_QUADKEY_CONFIG_NAME: Final[str] = "quadkey.yaml"
DEFAULT_QUADKEY_CONFIG_ENV: Final[str] = "QUADKEY_TILES_CONFIG"


class QuadKeyConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_level: int = Field(default=12, ge=MIN_LEVEL, le=MAX_LEVEL)
    screen_dpi: int = Field(default=96, gt=0)
    tile_size: int = TILE_SIZE

    @field_validator("tile_size")
    @classmethod
    def _validate_tile_size(cls, value: int) -> int:
        if value != TILE_SIZE:
            raise ValueError(f"tile_size must be {TILE_SIZE}, got {value}")
        return value


class QuadKeyConfigFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quadkey: QuadKeyConfig = Field(default_factory=QuadKeyConfig)


def _resolve_config_path(path: Optional[Union[str, Path]]) -> tuple[Path, bool]:
    """Return the config path and whether it was named explicitly."""

    if path is not None:
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate, True

    explicit = os.environ.get(DEFAULT_QUADKEY_CONFIG_ENV)
    if explicit:
        candidate = Path(explicit).expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate, True

    return Path.cwd() / "config" / DEFAULT_QUADKEY_CONFIG_NAME, False


def _parse_yaml(text: str, *, source: Path) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to load quadkey YAML: {source}") from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"quadkey config must be a mapping: {source}")
    return data


def load_quadkey_config(path: Optional[Union[str, Path]] = None) -> QuadKeyConfig:
    config_path, explicit = _resolve_config_path(path)
    if not config_path.is_file():
        if explicit:
            raise FileNotFoundError(f"quadkey config file not found: {config_path}")
        logger.debug(
            "quadkey_config_defaults", extra={"config_path": str(config_path)}
        )
        return QuadKeyConfig()

    raw = config_path.read_text(encoding="utf-8")
    data = dict(_parse_yaml(raw, source=config_path))

    try:
        parsed = QuadKeyConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid quadkey config ({config_path}): {exc}") from exc

    logger.info(
        "quadkey_config_loaded",
        extra={
            "config_path": str(config_path),
            "default_level": parsed.quadkey.default_level,
            "screen_dpi": parsed.quadkey.screen_dpi,
        },
    )
    return parsed.quadkey


@lru_cache(maxsize=8)
def _get_quadkey_config_cached(
    config_path: str, mtime_ns: int, size: int
) -> QuadKeyConfig:
    _ = (mtime_ns, size)
    return load_quadkey_config(config_path)


def get_quadkey_config(path: Optional[Union[str, Path]] = None) -> QuadKeyConfig:
    resolved, explicit = _resolve_config_path(path)
    try:
        stat = resolved.stat()
    except FileNotFoundError as exc:
        if explicit:
            raise FileNotFoundError(
                f"quadkey config file not found: {resolved}"
            ) from exc
        return QuadKeyConfig()

    return _get_quadkey_config_cached(str(resolved), stat.st_mtime_ns, stat.st_size)


get_quadkey_config.cache_clear = _get_quadkey_config_cached.cache_clear  # type: ignore[attr-defined]
