from __future__ import annotations

import math

import pytest


def test_clip_clamps_and_is_idempotent() -> None:
    from quadkey_tiles.web_mercator import clip

    assert clip(5.0, 0.0, 10.0) == 5.0
    assert clip(-3.0, 0.0, 10.0) == 0.0
    assert clip(42.0, 0.0, 10.0) == 10.0
    for n in (-1e9, -0.5, 0.0, 3.25, 10.0, 1e9):
        once = clip(n, -1.0, 7.5)
        assert clip(once, -1.0, 7.5) == once


def test_map_size_doubles_per_level() -> None:
    from quadkey_tiles.web_mercator import map_size

    assert map_size(0) == 256
    assert map_size(1) == 512
    assert map_size(3) == 2048
    assert map_size(23) == 2**31


@pytest.mark.parametrize("level", [-1, 24, 64])
def test_map_size_rejects_out_of_range_levels(level: int) -> None:
    from quadkey_tiles.errors import LevelOfDetailError
    from quadkey_tiles.web_mercator import map_size

    with pytest.raises(LevelOfDetailError, match="Invalid level of detail") as excinfo:
        map_size(level)
    assert excinfo.value.level == level
    assert excinfo.value.max_level == 23


def test_map_size_rejects_non_integer_levels() -> None:
    from quadkey_tiles.errors import LevelOfDetailError
    from quadkey_tiles.web_mercator import map_size

    with pytest.raises(TypeError, match="level must be an integer"):
        map_size(2.5)  # type: ignore[arg-type]
    with pytest.raises(LevelOfDetailError):
        map_size(True)  # type: ignore[arg-type]


def test_ground_resolution_at_equator_matches_reference_table() -> None:
    from quadkey_tiles.web_mercator import ground_resolution

    assert ground_resolution(0.0, 1) == pytest.approx(78271.5170, abs=1e-4)
    assert ground_resolution(0.0, 23) == pytest.approx(0.0187, abs=1e-4)


def test_ground_resolution_clamps_latitude() -> None:
    from quadkey_tiles.constants import MAX_LATITUDE
    from quadkey_tiles.web_mercator import ground_resolution

    assert ground_resolution(90.0, 5) == pytest.approx(ground_resolution(MAX_LATITUDE, 5))
    assert ground_resolution(-90.0, 5) == pytest.approx(ground_resolution(MAX_LATITUDE, 5))
    assert ground_resolution(90.0, 5) > 0.0


@pytest.mark.parametrize("latitude", [-80.0, -45.0, 0.0, 12.5, 60.0, 85.0])
def test_ground_resolution_strictly_decreases_with_level(latitude: float) -> None:
    from quadkey_tiles.web_mercator import ground_resolution

    values = [ground_resolution(latitude, level) for level in range(1, 24)]
    assert all(finer < coarser for coarser, finer in zip(values, values[1:]))


def test_map_scale_converts_meters_per_pixel_to_scale_denominator() -> None:
    from quadkey_tiles.web_mercator import ground_resolution, map_scale

    assert map_scale(0.0, 1, 96) == pytest.approx(295829355.45, rel=1e-6)
    assert map_scale(40.0, 10, 72) == pytest.approx(
        ground_resolution(40.0, 10) * 72 / 0.0254
    )


def test_map_scale_rejects_non_positive_dpi() -> None:
    from quadkey_tiles.web_mercator import map_scale

    with pytest.raises(ValueError, match="screen_dpi must be > 0"):
        map_scale(0.0, 1, 0)


def test_lat_long_to_pixel_xy_origin_maps_to_center() -> None:
    from quadkey_tiles.web_mercator import PixelXY, lat_long_to_pixel_xy

    assert lat_long_to_pixel_xy(0.0, 0.0, 1) == PixelXY(x=256, y=256)
    x, y = lat_long_to_pixel_xy(0.0, 0.0, 3)
    assert (x, y) == (1024, 1024)


def test_lat_long_to_pixel_xy_clamps_out_of_range_inputs() -> None:
    from quadkey_tiles.constants import MAX_LATITUDE, MAX_LONGITUDE
    from quadkey_tiles.web_mercator import lat_long_to_pixel_xy

    clamped = lat_long_to_pixel_xy(90.0, 200.0, 1)
    assert tuple(clamped) == (511, 0)
    assert clamped == lat_long_to_pixel_xy(MAX_LATITUDE, MAX_LONGITUDE, 1)

    assert tuple(lat_long_to_pixel_xy(-90.0, -200.0, 1)) == (0, 511)


def test_lat_long_to_pixel_xy_rounds_to_nearest_pixel() -> None:
    from quadkey_tiles.web_mercator import lat_long_to_pixel_xy, map_size

    size = map_size(2)
    # Just over half a pixel east of the antimeridian rounds up to pixel 1.
    lon = -180.0 + 0.6 * 360.0 / size
    assert lat_long_to_pixel_xy(0.0, lon, 2).x == 1
    lon = -180.0 + 0.4 * 360.0 / size
    assert lat_long_to_pixel_xy(0.0, lon, 2).x == 0


def test_pixel_xy_to_lat_long_known_points() -> None:
    from quadkey_tiles.constants import MAX_LATITUDE
    from quadkey_tiles.web_mercator import pixel_xy_to_lat_long

    center = pixel_xy_to_lat_long(256, 256, 1)
    assert center.latitude == pytest.approx(0.0, abs=1e-12)
    assert center.longitude == pytest.approx(0.0, abs=1e-12)

    lat, lon = pixel_xy_to_lat_long(0, 0, 1)
    assert lat == pytest.approx(MAX_LATITUDE, abs=1e-6)
    assert lon == pytest.approx(-180.0)


def test_pixel_xy_to_lat_long_clamps_pixels() -> None:
    from quadkey_tiles.web_mercator import pixel_xy_to_lat_long

    assert pixel_xy_to_lat_long(-10, 10_000, 1) == pixel_xy_to_lat_long(0, 511, 1)
    lat, lon = pixel_xy_to_lat_long(10_000, -5, 1)
    assert lon == pytest.approx(360.0 * (511 / 512 - 0.5))
    assert math.isfinite(lat)


def test_projection_round_trip_within_one_pixel() -> None:
    from quadkey_tiles.web_mercator import (
        lat_long_to_pixel_xy,
        map_size,
        pixel_xy_to_lat_long,
    )

    level = 20
    tolerance = 360.0 / map_size(level)
    for lat in (-84.9, -60.123, -33.8688, 0.0, 1.5, 47.6097, 84.9):
        for lon in (-179.9, -122.3331, -0.001, 0.0, 2.3522, 151.2093, 179.9):
            pixel = lat_long_to_pixel_xy(lat, lon, level)
            back = pixel_xy_to_lat_long(pixel.x, pixel.y, level)
            assert back.latitude == pytest.approx(lat, abs=tolerance)
            assert back.longitude == pytest.approx(lon, abs=tolerance)
