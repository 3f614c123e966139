"""Spherical Web Mercator projection between WGS-84 degrees and map pixels.

The map at a given level of detail is a square of ``map_size(level)`` pixels
whose origin is the top-left (north-west) corner. Geographic inputs are
clamped to the latitude range where the projection stays finite, so every
conversion here is total over its numeric domain.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Iterator

from .constants import (
    EARTH_RADIUS,
    MAX_LATITUDE,
    MAX_LEVEL,
    MAX_LONGITUDE,
    METERS_PER_INCH,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    TILE_SIZE,
)
from .errors import LevelOfDetailError


@dataclass(frozen=True)
class PixelXY:
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))


@dataclass(frozen=True)
class LatLong:
    latitude: float
    longitude: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.latitude, self.longitude))


def clip(n: float, min_value: float, max_value: float) -> float:
    """Clamp ``n`` into ``[min_value, max_value]``."""

    return min(max(n, min_value), max_value)


def validate_level(level: int, *, min_level: int = 0, max_level: int = MAX_LEVEL) -> int:
    try:
        value = operator.index(level)
    except TypeError as exc:
        raise TypeError(f"level must be an integer, got {level!r}") from exc
    if isinstance(level, bool) or not (min_level <= value <= max_level):
        raise LevelOfDetailError(level, min_level=min_level, max_level=max_level)
    return value


def map_size(level: int) -> int:
    """Return the map width and height in pixels at ``level`` (0..23)."""

    return TILE_SIZE << validate_level(level)


def ground_resolution(latitude: float, level: int) -> float:
    """Return the ground resolution in meters per pixel."""

    latitude = clip(latitude, MIN_LATITUDE, MAX_LATITUDE)
    return (
        math.cos(latitude * math.pi / 180.0)
        * 2.0
        * math.pi
        * EARTH_RADIUS
        / map_size(level)
    )


def map_scale(latitude: float, level: int, screen_dpi: float) -> float:
    """Return the denominator N of the 1:N map scale for a screen resolution."""

    if screen_dpi <= 0:
        raise ValueError(f"screen_dpi must be > 0, got {screen_dpi!r}")
    return ground_resolution(latitude, level) * screen_dpi / METERS_PER_INCH


def lat_long_to_pixel_xy(latitude: float, longitude: float, level: int) -> PixelXY:
    latitude = clip(latitude, MIN_LATITUDE, MAX_LATITUDE)
    longitude = clip(longitude, MIN_LONGITUDE, MAX_LONGITUDE)

    x = (longitude + 180.0) / 360.0
    sin_latitude = math.sin(latitude * math.pi / 180.0)
    y = 0.5 - math.log((1.0 + sin_latitude) / (1.0 - sin_latitude)) / (4.0 * math.pi)

    size = map_size(level)
    # Round to nearest first, then clamp into the map.
    pixel_x = int(clip(math.floor(x * size + 0.5), 0, size - 1))
    pixel_y = int(clip(math.floor(y * size + 0.5), 0, size - 1))
    return PixelXY(x=pixel_x, y=pixel_y)


def pixel_xy_to_lat_long(pixel_x: int, pixel_y: int, level: int) -> LatLong:
    size = map_size(level)
    x = clip(pixel_x, 0, size - 1) / size - 0.5
    y = 0.5 - clip(pixel_y, 0, size - 1) / size

    latitude = 90.0 - 360.0 * math.atan(math.exp(-y * 2.0 * math.pi)) / math.pi
    longitude = 360.0 * x
    return LatLong(latitude=latitude, longitude=longitude)
