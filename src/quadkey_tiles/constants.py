from __future__ import annotations

from typing import Final

EARTH_RADIUS: Final[int] = 6378137

MIN_LATITUDE: Final[float] = -85.05112878
MAX_LATITUDE: Final[float] = 85.05112878
MIN_LONGITUDE: Final[float] = -180.0
MAX_LONGITUDE: Final[float] = 180.0

MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 23

TILE_SIZE: Final[int] = 256

METERS_PER_INCH: Final[float] = 0.0254
