from .constants import (
    EARTH_RADIUS,
    MAX_LATITUDE,
    MAX_LEVEL,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LEVEL,
    MIN_LONGITUDE,
    TILE_SIZE,
)
from .errors import InvalidQuadKeyError, LevelOfDetailError, QuadKeyTilesError
from .quadkey import (
    QuadKeyDecodeResult,
    QuadKeyTile,
    decode_quad_key,
    lat_long_to_quad_key,
    quad_key_bounds,
    quad_key_to_tile_xy,
    tile_xy_to_quad_key,
)
from .tiles import (
    TileBounds,
    TileXY,
    pixel_xy_to_tile_xy,
    tile_bounds,
    tile_xy_to_pixel_xy,
)
from .web_mercator import (
    LatLong,
    PixelXY,
    clip,
    ground_resolution,
    lat_long_to_pixel_xy,
    map_scale,
    map_size,
    pixel_xy_to_lat_long,
)

__all__ = [
    "EARTH_RADIUS",
    "InvalidQuadKeyError",
    "LatLong",
    "LevelOfDetailError",
    "MAX_LATITUDE",
    "MAX_LEVEL",
    "MAX_LONGITUDE",
    "MIN_LATITUDE",
    "MIN_LEVEL",
    "MIN_LONGITUDE",
    "PixelXY",
    "QuadKeyDecodeResult",
    "QuadKeyTile",
    "QuadKeyTilesError",
    "TILE_SIZE",
    "TileBounds",
    "TileXY",
    "clip",
    "decode_quad_key",
    "ground_resolution",
    "lat_long_to_pixel_xy",
    "lat_long_to_quad_key",
    "map_scale",
    "map_size",
    "pixel_xy_to_lat_long",
    "pixel_xy_to_tile_xy",
    "quad_key_bounds",
    "quad_key_to_tile_xy",
    "tile_bounds",
    "tile_xy_to_pixel_xy",
    "tile_xy_to_quad_key",
]
