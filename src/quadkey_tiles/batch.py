from __future__ import annotations

import math
from typing import Any

import numpy as np

from .constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    TILE_SIZE,
)
from .web_mercator import map_size, validate_level


def _as_float_array(values: Any, *, label: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    if np.isnan(arr).any():
        raise ValueError(f"{label} contains NaN values")
    return arr


def lat_long_array_to_pixel_xy(
    latitudes: Any, longitudes: Any, level: int
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`~quadkey_tiles.web_mercator.lat_long_to_pixel_xy`.

    Returns ``(pixel_x, pixel_y)`` as int64 arrays of the same length as the
    (flattened) inputs.
    """

    lat = _as_float_array(latitudes, label="latitudes")
    lon = _as_float_array(longitudes, label="longitudes")
    if lat.shape != lon.shape:
        raise ValueError(
            f"latitudes and longitudes must have the same length, got {lat.size} and {lon.size}"
        )

    lat = np.clip(lat, MIN_LATITUDE, MAX_LATITUDE)
    lon = np.clip(lon, MIN_LONGITUDE, MAX_LONGITUDE)

    x = (lon + 180.0) / 360.0
    sin_lat = np.sin(lat * math.pi / 180.0)
    y = 0.5 - np.log((1.0 + sin_lat) / (1.0 - sin_lat)) / (4.0 * math.pi)

    size = map_size(level)
    pixel_x = np.clip(np.floor(x * size + 0.5), 0, size - 1).astype(np.int64)
    pixel_y = np.clip(np.floor(y * size + 0.5), 0, size - 1).astype(np.int64)
    return pixel_x, pixel_y


def pixel_xy_array_to_tile_xy(
    pixel_x: Any, pixel_y: Any
) -> tuple[np.ndarray, np.ndarray]:
    px = np.asarray(pixel_x, dtype=np.int64)
    py = np.asarray(pixel_y, dtype=np.int64)
    return px // TILE_SIZE, py // TILE_SIZE


def tile_xy_array_to_quad_keys(
    tile_x: Any, tile_y: Any, level: int
) -> list[str]:
    level = validate_level(level)
    tx = np.asarray(tile_x, dtype=np.int64).reshape(-1)
    ty = np.asarray(tile_y, dtype=np.int64).reshape(-1)
    if tx.shape != ty.shape:
        raise ValueError(
            f"tile_x and tile_y must have the same length, got {tx.size} and {ty.size}"
        )
    if level == 0:
        return ["" for _ in range(tx.size)]

    shifts = np.arange(level - 1, -1, -1, dtype=np.int64)
    digits = ((tx[:, None] >> shifts) & 1) + 2 * ((ty[:, None] >> shifts) & 1)
    codes = (digits + ord("0")).astype(np.uint8)
    return [row.tobytes().decode("ascii") for row in codes]


def lat_long_array_to_quad_keys(
    latitudes: Any, longitudes: Any, level: int
) -> list[str]:
    """Encode many points at once; matches the scalar chain point for point."""

    pixel_x, pixel_y = lat_long_array_to_pixel_xy(latitudes, longitudes, level)
    tile_x, tile_y = pixel_xy_array_to_tile_xy(pixel_x, pixel_y)
    return tile_xy_array_to_quad_keys(tile_x, tile_y, level)
