"""Generate a dungeon map, print it, and export it as TMX."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tilesmith import config
from tilesmith.environment.generators import RoomsAndCorridorsGenerator
from tilesmith.export import TEMPLATES, ExportError, write_tmx
from tilesmith.util import rng

logger = logging.getLogger("tilesmith")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilesmith", description="Generate a tile map and export it as TMX"
    )
    parser.add_argument("--width", type=int, default=config.MAP_WIDTH)
    parser.add_argument("--height", type=int, default=config.MAP_HEIGHT)
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        help="Master random seed (default: %(default)s)",
    )
    parser.add_argument("--max-rooms", type=int, default=config.MAX_ROOMS)
    parser.add_argument("--min-room-size", type=int, default=config.MIN_ROOM_SIZE)
    parser.add_argument("--max-room-size", type=int, default=config.MAX_ROOM_SIZE)
    parser.add_argument(
        "--tileset",
        choices=sorted(TEMPLATES),
        default=config.DEFAULT_TILESET,
        help="Tile set to export with (default: %(default)s)",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=config.DEFAULT_EXPORT_DIR,
        help="Directory to write map.tmx and tile-set files to",
    )
    parser.add_argument(
        "--no-export", action="store_true", help="Skip writing the TMX export"
    )
    parser.add_argument(
        "--print", action="store_true", help="Print the map as ASCII to stdout"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    rng.init(args.seed)
    try:
        generator = RoomsAndCorridorsGenerator(
            args.width,
            args.height,
            max_rooms=args.max_rooms,
            min_room_size=args.min_room_size,
            max_room_size=args.max_room_size,
        )
        tile_map = generator.generate()
    except ValueError as e:
        logger.error("Map generation failed: %s", e)
        return 2

    if args.print:
        print(tile_map.to_ascii())

    if not args.no_export:
        try:
            write_tmx(tile_map, TEMPLATES[args.tileset], args.export_dir)
        except (ExportError, OSError) as e:
            logger.error("Export failed: %s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
