"""Rectangles and bounds checks in tile coordinates."""

from __future__ import annotations

from tilesmith.types import TileCoord, WorldTilePos


class Rect:
    """Rectangle/bounding box in tile coordinates.

    ``x2``/``y2`` are exclusive: a Rect(0, 0, 3, 2) covers x in 0..2, y in 0..1.
    """

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def center(self) -> tuple[int, int]:
        return (int((self.x1 + self.x2) / 2), int((self.y1 + self.y2) / 2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_world_tile_pos(
    pos: WorldTilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if world tile position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height


def is_rect_within(rect: Rect, map_width: TileCoord, map_height: TileCoord) -> bool:
    """Check if every tile of ``rect`` is within map bounds.

    Empty rects are always within bounds.
    """
    if rect.is_empty():
        return True
    return (
        0 <= rect.x1
        and 0 <= rect.y1
        and rect.x2 <= map_width
        and rect.y2 <= map_height
    )
