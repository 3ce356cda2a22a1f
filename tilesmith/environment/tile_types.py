"""
Tile symbols for the layered tile map.

This module defines:
- `TileSymbol`: the closed vocabulary of single-character tile codes. Layers
  store these characters directly in NumPy ``"U1"`` arrays, so a symbol's value
  is also what appears in the console rendition of the map.
- A small registration table giving each symbol a human-readable name and a
  category (terrain or decoration). Symbols carry no other state.
- Classification helpers (`is_wall`, `get_wall_map`) that are pure functions
  of the symbol, plus vectorized versions that work on whole tile arrays.
"""

from dataclasses import dataclass
from enum import StrEnum

import numpy as np


class TileSymbol(StrEnum):
    """Single-character tile codes."""

    # Terrain
    NOTHING = " "
    FLOOR = "f"
    FLOOR2 = "F"
    ROAD = "r"
    WALL = "w"
    WALL2 = "W"
    ROOM = "."
    ROOM2 = "#"
    DOOR = "+"
    STAIRS_UP = "<"
    STAIRS_DOWN = ">"
    TREE = "T"
    GRASS = "g"

    # Decoration
    SIGN = "s"
    HANGING = "h"  # Stuff that goes on indoor walls
    WINDOW = "o"
    COUNTER = "_"
    SHOPKEEPER = "A"
    SHELF = "S"
    STOCK = ")"
    TABLE = "t"
    CHAIR = "c"
    RUG = "~"
    POT = "("
    ASSISTANT = "a"
    PLAYER = "@"


TERRAIN = "terrain"
DECORATION = "decoration"


@dataclass(frozen=True)
class TileSymbolInfo:
    """Intrinsic, read-only properties of a tile symbol."""

    symbol: TileSymbol
    display_name: str
    category: str


# --- Registration ---

_tile_symbol_info: dict[TileSymbol, TileSymbolInfo] = {}


def register_tile_symbol(symbol: TileSymbol, display_name: str, category: str) -> None:
    """
    Registers the properties of a tile symbol.

    Raises:
        ValueError: If the symbol is already registered or the category unknown.
    """
    if symbol in _tile_symbol_info:
        raise ValueError(f"Tile symbol {symbol.name} is already registered.")
    if category not in (TERRAIN, DECORATION):
        raise ValueError(f"Unknown tile category '{category}' for {symbol.name}.")
    _tile_symbol_info[symbol] = TileSymbolInfo(symbol, display_name, category)


register_tile_symbol(TileSymbol.NOTHING, "Nothing", TERRAIN)
register_tile_symbol(TileSymbol.FLOOR, "Floor", TERRAIN)
register_tile_symbol(TileSymbol.FLOOR2, "Alternate Floor", TERRAIN)
register_tile_symbol(TileSymbol.ROAD, "Road", TERRAIN)
register_tile_symbol(TileSymbol.WALL, "Wall", TERRAIN)
register_tile_symbol(TileSymbol.WALL2, "Alternate Wall", TERRAIN)
register_tile_symbol(TileSymbol.ROOM, "Room", TERRAIN)
register_tile_symbol(TileSymbol.ROOM2, "Alternate Room", TERRAIN)
register_tile_symbol(TileSymbol.DOOR, "Door", TERRAIN)
register_tile_symbol(TileSymbol.STAIRS_UP, "Stairs Up", TERRAIN)
register_tile_symbol(TileSymbol.STAIRS_DOWN, "Stairs Down", TERRAIN)
register_tile_symbol(TileSymbol.TREE, "Tree", TERRAIN)
register_tile_symbol(TileSymbol.GRASS, "Grass", TERRAIN)

register_tile_symbol(TileSymbol.SIGN, "Sign", DECORATION)
register_tile_symbol(TileSymbol.HANGING, "Wall Hanging", DECORATION)
register_tile_symbol(TileSymbol.WINDOW, "Window", DECORATION)
register_tile_symbol(TileSymbol.COUNTER, "Counter", DECORATION)
register_tile_symbol(TileSymbol.SHOPKEEPER, "Shopkeeper", DECORATION)
register_tile_symbol(TileSymbol.SHELF, "Shelf", DECORATION)
register_tile_symbol(TileSymbol.STOCK, "Stock", DECORATION)
register_tile_symbol(TileSymbol.TABLE, "Table", DECORATION)
register_tile_symbol(TileSymbol.CHAIR, "Chair", DECORATION)
register_tile_symbol(TileSymbol.RUG, "Rug", DECORATION)
register_tile_symbol(TileSymbol.POT, "Pot", DECORATION)
register_tile_symbol(TileSymbol.ASSISTANT, "Assistant", DECORATION)
register_tile_symbol(TileSymbol.PLAYER, "Player", DECORATION)

# The two wall variants. Doors are oriented against these.
WALL_SYMBOLS: frozenset[TileSymbol] = frozenset({TileSymbol.WALL, TileSymbol.WALL2})

# Characters of the wall symbols, for np.isin against raw tile arrays.
_wall_chars = np.array(sorted(s.value for s in WALL_SYMBOLS), dtype="U1")


# --- Public Helper Functions ---


def is_wall(symbol: TileSymbol | str) -> bool:
    """Whether a tile is a wall type."""
    return symbol in WALL_SYMBOLS


def get_wall_map(tiles: np.ndarray) -> np.ndarray:
    """
    Converts an array of tile characters into a boolean map of wall-ness.
    True means the tile at that position is one of the wall variants.
    """
    return np.isin(tiles, _wall_chars)


def get_tile_symbol_info(symbol: TileSymbol | str) -> TileSymbolInfo:
    """
    Retrieves the registered properties of a symbol.

    Raises:
        ValueError: If ``symbol`` is not a character of the vocabulary.
    """
    return _tile_symbol_info[TileSymbol(symbol)]


def get_display_name(symbol: TileSymbol | str) -> str:
    """Human-readable name of a symbol, e.g. "Wall" or "Stairs Up"."""
    return get_tile_symbol_info(symbol).display_name


def is_terrain(symbol: TileSymbol | str) -> bool:
    return get_tile_symbol_info(symbol).category == TERRAIN


def is_decoration(symbol: TileSymbol | str) -> bool:
    return get_tile_symbol_info(symbol).category == DECORATION
