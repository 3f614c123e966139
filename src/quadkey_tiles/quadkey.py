"""Quadkey encoding of tile coordinates.

A quadkey has one base-4 digit per level of detail, coarsest level first.
For the bit that corresponds to a level, tile X contributes 1 and tile Y
contributes 2 to that level's digit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterator, Optional

from .constants import MAX_LEVEL
from .errors import InvalidQuadKeyError, LevelOfDetailError, QuadKeyTilesError
from .tiles import TileBounds, pixel_xy_to_tile_xy, tile_bounds
from .web_mercator import lat_long_to_pixel_xy, validate_level

logger = logging.getLogger(__name__)

QUAD_KEY_DIGITS: Final[str] = "0123"


@dataclass(frozen=True)
class QuadKeyTile:
    tile_x: int
    tile_y: int
    level: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.tile_x, self.tile_y, self.level))


@dataclass(frozen=True)
class QuadKeyDecodeResult:
    """Outcome of :func:`decode_quad_key`: exactly one of tile/error is set."""

    quad_key: str
    tile: Optional[QuadKeyTile] = None
    error: Optional[QuadKeyTilesError] = None

    def __post_init__(self) -> None:
        if (self.tile is None) == (self.error is None):
            raise ValueError("QuadKeyDecodeResult requires exactly one of tile/error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> QuadKeyTile:
        if self.error is not None:
            raise self.error
        assert self.tile is not None
        return self.tile


def tile_xy_to_quad_key(tile_x: int, tile_y: int, level: int) -> str:
    """Encode tile coordinates as a quadkey of ``level`` digits.

    Only the low ``level`` bits of each coordinate take part in the key.
    """

    level = validate_level(level)
    digits: list[str] = []
    for i in range(level, 0, -1):
        digit = 0
        mask = 1 << (i - 1)
        if (tile_x & mask) != 0:
            digit += 1
        if (tile_y & mask) != 0:
            digit += 2
        digits.append(QUAD_KEY_DIGITS[digit])
    return "".join(digits)


def quad_key_to_tile_xy(quad_key: str) -> QuadKeyTile:
    """Decode a quadkey into tile coordinates and level of detail.

    Raises:
        InvalidQuadKeyError: a character is not one of ``0123``.
        LevelOfDetailError: the key is longer than ``MAX_LEVEL`` digits.
    """

    level = len(quad_key)
    if level > MAX_LEVEL:
        raise LevelOfDetailError(level, min_level=0, max_level=MAX_LEVEL)

    tile_x = 0
    tile_y = 0
    for position, character in enumerate(quad_key):
        mask = 1 << (level - position - 1)
        if character == "0":
            continue
        if character == "1":
            tile_x |= mask
        elif character == "2":
            tile_y |= mask
        elif character == "3":
            tile_x |= mask
            tile_y |= mask
        else:
            raise InvalidQuadKeyError(quad_key, character=character, position=position)
    return QuadKeyTile(tile_x=tile_x, tile_y=tile_y, level=level)


def decode_quad_key(quad_key: str) -> QuadKeyDecodeResult:
    """Non-raising variant of :func:`quad_key_to_tile_xy`."""

    try:
        tile = quad_key_to_tile_xy(quad_key)
    except QuadKeyTilesError as exc:
        logger.debug(
            "quadkey_decode_failed",
            extra={"quad_key": quad_key, "error": str(exc)},
        )
        return QuadKeyDecodeResult(quad_key=quad_key, error=exc)
    return QuadKeyDecodeResult(quad_key=quad_key, tile=tile)


def lat_long_to_quad_key(latitude: float, longitude: float, level: int) -> str:
    pixel = lat_long_to_pixel_xy(latitude, longitude, level)
    tile = pixel_xy_to_tile_xy(pixel.x, pixel.y)
    return tile_xy_to_quad_key(tile.x, tile.y, level)


def quad_key_bounds(quad_key: str) -> TileBounds:
    tile = quad_key_to_tile_xy(quad_key)
    return tile_bounds(tile.tile_x, tile.tile_y, tile.level)
