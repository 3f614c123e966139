from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional, Sequence

from .config import get_quadkey_config
from .errors import QuadKeyTilesError
from .observability import configure_logging
from .quadkey import lat_long_to_quad_key, quad_key_bounds, quad_key_to_tile_xy
from .tiles import pixel_xy_to_tile_xy, tile_xy_to_pixel_xy
from .web_mercator import (
    ground_resolution,
    lat_long_to_pixel_xy,
    map_scale,
    map_size,
    pixel_xy_to_lat_long,
    validate_level,
)

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadkey-tiles",
        description="Convert between WGS-84 coordinates, map pixels, tiles and quadkeys.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to quadkey.yaml (defaults to QUADKEY_TILES_CONFIG / config/quadkey.yaml).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="Encode a latitude/longitude as a quadkey.")
    encode.add_argument("latitude", type=float)
    encode.add_argument("longitude", type=float)
    encode.add_argument("--level", type=int, default=None)

    decode = sub.add_parser("decode", help="Decode a quadkey into tile coordinates.")
    decode.add_argument("quad_key")

    resolution = sub.add_parser(
        "resolution", help="Ground resolution and map scale at a latitude."
    )
    resolution.add_argument("latitude", type=float)
    resolution.add_argument("--level", type=int, default=None)
    resolution.add_argument("--dpi", type=_positive_int, default=None)

    pixel = sub.add_parser("pixel", help="Convert pixel XY to latitude/longitude.")
    pixel.add_argument("pixel_x", type=int)
    pixel.add_argument("pixel_y", type=int)
    pixel.add_argument("--level", type=int, default=None)

    return parser


def _level(args: argparse.Namespace, default: int) -> int:
    level = default if args.level is None else args.level
    return validate_level(level, min_level=1)


def _run(args: argparse.Namespace) -> dict[str, Any]:
    cfg = get_quadkey_config(args.config_path)

    if args.command == "encode":
        level = _level(args, cfg.default_level)
        pixel = lat_long_to_pixel_xy(args.latitude, args.longitude, level)
        tile = pixel_xy_to_tile_xy(pixel.x, pixel.y)
        return {
            "level": level,
            "pixel": asdict(pixel),
            "tile": asdict(tile),
            "quad_key": lat_long_to_quad_key(args.latitude, args.longitude, level),
        }

    if args.command == "decode":
        tile = quad_key_to_tile_xy(args.quad_key)
        origin = tile_xy_to_pixel_xy(tile.tile_x, tile.tile_y)
        return {
            "quad_key": args.quad_key,
            "level": tile.level,
            "tile": {"x": tile.tile_x, "y": tile.tile_y},
            "pixel": asdict(origin),
            "bounds": asdict(quad_key_bounds(args.quad_key)),
        }

    if args.command == "resolution":
        level = _level(args, cfg.default_level)
        dpi = cfg.screen_dpi if args.dpi is None else args.dpi
        return {
            "latitude": args.latitude,
            "level": level,
            "map_size": map_size(level),
            "ground_resolution": ground_resolution(args.latitude, level),
            "screen_dpi": dpi,
            "map_scale": map_scale(args.latitude, level, dpi),
        }

    if args.command == "pixel":
        level = _level(args, cfg.default_level)
        point = pixel_xy_to_lat_long(args.pixel_x, args.pixel_y, level)
        return {
            "level": level,
            "pixel": {"x": args.pixel_x, "y": args.pixel_y},
            "latitude": point.latitude,
            "longitude": point.longitude,
        }

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        payload = _run(args)
    except QuadKeyTilesError as exc:
        logger.info(
            "quadkey_cli_rejected", extra={"command": args.command, "error": str(exc)}
        )
        print(f"quadkey-tiles: error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(payload, ensure_ascii=True, separators=(",", ":"), sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
