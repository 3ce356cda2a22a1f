"""Drawing and query primitives over a single layer.

These are plain functions so generators can use them on any layer of a map.
Areas are `Rect`s; drawing into or querying an area that sticks out of the
layer raises `OutOfBounds` instead of silently clipping.
"""

from __future__ import annotations

import numpy as np

from tilesmith.environment.map import Layer, OutOfBounds
from tilesmith.environment.tile_types import TileSymbol, is_wall
from tilesmith.types import TileCoord
from tilesmith.util.coordinates import Rect, is_rect_within

__all__ = ["count_matching", "is_clear", "is_wall", "rectangle"]


def _check_area(layer: Layer, area: Rect) -> None:
    if not is_rect_within(area, layer.width, layer.height):
        # Report the first corner that falls outside.
        x = area.x1 if not 0 <= area.x1 < layer.width else area.x2 - 1
        y = area.y1 if not 0 <= area.y1 < layer.height else area.y2 - 1
        raise OutOfBounds(x, y, layer.width, layer.height)


def rectangle(
    layer: Layer, area: Rect, symbol: TileSymbol | str, filled: bool
) -> None:
    """Draw a rectangle, optionally filled.

    An outline sets each border cell exactly once (corners included).
    """
    _check_area(layer, area)
    if area.is_empty():
        return
    value = TileSymbol(symbol).value
    tiles = layer.tiles
    if filled:
        tiles[area.x1 : area.x2, area.y1 : area.y2] = value
        return
    tiles[area.x1 : area.x2, area.y1] = value
    tiles[area.x1 : area.x2, area.y2 - 1] = value
    tiles[area.x1, area.y1 : area.y2] = value
    tiles[area.x2 - 1, area.y1 : area.y2] = value


def is_clear(layer: Layer, area: Rect) -> bool:
    """Check if a rectangular area is only composed of NOTHING tiles."""
    _check_area(layer, area)
    window = layer.tiles[area.x1 : area.x2, area.y1 : area.y2]
    return bool(np.all(window == TileSymbol.NOTHING.value))


def count_matching(
    layer: Layer,
    x: TileCoord,
    y: TileCoord,
    radius: int,
    symbol: TileSymbol | str,
) -> int:
    """Count the tiles in the square of ``radius`` around (x, y) that match.

    The square includes (x, y) itself. Positions outside the layer always
    count as matches, so the map edge behaves like a border of ``symbol``.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    side = 2 * radius + 1
    x1, y1 = x - radius, y - radius
    x2, y2 = x1 + side, y1 + side

    # Clip the square to the layer; everything clipped away counts.
    cx1, cy1 = max(x1, 0), max(y1, 0)
    cx2, cy2 = min(x2, layer.width), min(y2, layer.height)
    if cx1 >= cx2 or cy1 >= cy2:
        return side * side

    window = layer.tiles[cx1:cx2, cy1:cy2]
    outside = side * side - window.size
    inside = int(np.count_nonzero(window == TileSymbol(symbol).value))
    return outside + inside
