from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .constants import TILE_SIZE
from .web_mercator import PixelXY, validate_level


@dataclass(frozen=True)
class TileXY:
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))


@dataclass(frozen=True)
class TileBounds:
    """Geographic extent of a tile in degrees."""

    west: float
    south: float
    east: float
    north: float


def pixel_xy_to_tile_xy(pixel_x: int, pixel_y: int) -> TileXY:
    """Return the tile containing the given pixel."""

    return TileXY(x=int(pixel_x) // TILE_SIZE, y=int(pixel_y) // TILE_SIZE)


def tile_xy_to_pixel_xy(tile_x: int, tile_y: int) -> PixelXY:
    """Return the upper-left pixel of a tile."""

    return PixelXY(x=int(tile_x) * TILE_SIZE, y=int(tile_y) * TILE_SIZE)


def num_tiles(level: int) -> int:
    """Number of tiles along each axis at ``level``."""

    return 1 << validate_level(level)


def tile_x_to_lon(x: float, level: int) -> float:
    n = num_tiles(level)
    return x / n * 360.0 - 180.0


def tile_y_to_lat(y: float, level: int) -> float:
    n = num_tiles(level)
    lat_rad = math.atan(math.sinh(math.pi * (1.0 - 2.0 * y / n)))
    return math.degrees(lat_rad)


def tile_bounds(tile_x: int, tile_y: int, level: int) -> TileBounds:
    n = num_tiles(level)
    if not (0 <= tile_x < n):
        raise ValueError(f"tile_x out of range at level={level}: {tile_x}")
    if not (0 <= tile_y < n):
        raise ValueError(f"tile_y out of range at level={level}: {tile_y}")

    west = tile_x_to_lon(tile_x, level)
    east = tile_x_to_lon(tile_x + 1, level)
    north = tile_y_to_lat(tile_y, level)
    south = tile_y_to_lat(tile_y + 1, level)
    return TileBounds(west=west, south=south, east=east, north=north)
