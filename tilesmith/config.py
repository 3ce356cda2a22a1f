"""
Configuration constants.

Centralizes the magic numbers and configuration values used throughout the
codebase, organized by functional area.
"""

import logging
from pathlib import Path

from tilesmith.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

PROJECT_ROOT_PATH = Path(__file__).resolve().parent

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "burrito1"

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO

# =============================================================================
# MAP
# =============================================================================

# Layers every new TileMap starts with, bottom to top.
DEFAULT_LAYER_NAMES: tuple[str, ...] = ("Ground", "Structures")
GROUND_LAYER = "Ground"
STRUCTURES_LAYER = "Structures"

MAP_WIDTH = 60
MAP_HEIGHT = 40

# Rooms-and-corridors generation
MAX_ROOMS = 12
MIN_ROOM_SIZE = 5
MAX_ROOM_SIZE = 11

# =============================================================================
# EXPORT
# =============================================================================

# Tile set directories (art + template.tmx) live under here.
ASSETS_PATH = PROJECT_ROOT_PATH / "export" / "assets"

DEFAULT_TILESET = "dawnlike"
DEFAULT_EXPORT_DIR = Path("tmx_export")
TEMPLATE_DOCUMENT_NAME = "template.tmx"
EXPORT_DOCUMENT_NAME = "map.tmx"

# Joins tile indices in the exported layer data.
CSV_SEPARATOR = ","
