"""Dungeon-style map generation with rooms and corridors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tilesmith import config
from tilesmith.environment.geometry import is_clear, rectangle
from tilesmith.environment.map import Layer, TileMap
from tilesmith.environment.tile_types import TileSymbol, is_wall
from tilesmith.util import rng
from tilesmith.util.coordinates import Rect

from .base import BaseMapGenerator

if TYPE_CHECKING:
    from tilesmith.types import TileCoord, WorldTileCoord

logger = logging.getLogger(__name__)

_rng = rng.get("map.dungeon")

# Smallest room with walls around at least one interior tile.
MIN_ROOM_SIZE = 3


class RoomsAndCorridorsGenerator(BaseMapGenerator):
    """Generates a map with walled rooms and connecting corridors.

    Rooms (walls and floor) go on the structures layer and corridors on the
    ground layer below it. A corridor that crosses straight through a room
    wall cuts a door into it.
    """

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        max_rooms: int,
        min_room_size: int,
        max_room_size: int,
    ) -> None:
        super().__init__(map_width, map_height)
        if min_room_size < MIN_ROOM_SIZE:
            raise ValueError(
                f"min_room_size must be at least {MIN_ROOM_SIZE}, got {min_room_size}"
            )
        if max_room_size < min_room_size:
            raise ValueError("max_room_size must not be smaller than min_room_size")
        if max_room_size > min(map_width, map_height):
            raise ValueError(
                f"Rooms up to {max_room_size} tiles don't fit a "
                f"{map_width}x{map_height} map"
            )
        self.max_rooms = max_rooms
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size

    def _carve_room(self, structures: Layer, room: Rect) -> None:
        rectangle(structures, room, TileSymbol.WALL, filled=False)
        interior = Rect(room.x1 + 1, room.y1 + 1, room.width - 2, room.height - 2)
        rectangle(structures, interior, TileSymbol.ROOM, filled=True)

    def _crosses_wall(
        self,
        structures: Layer,
        x: WorldTileCoord,
        y: WorldTileCoord,
        horizontal: bool,
    ) -> bool:
        """Whether a corridor moving through (x, y) cuts straight across a wall."""
        if horizontal:
            sides = ((x, y - 1), (x, y + 1))
        else:
            sides = ((x - 1, y), (x + 1, y))
        return all(
            structures.in_bounds(sx, sy) and is_wall(structures.get(sx, sy))
            for sx, sy in sides
        )

    def _carve_corridor_tile(
        self,
        tile_map: TileMap,
        x: WorldTileCoord,
        y: WorldTileCoord,
        horizontal: bool,
    ) -> None:
        structures = tile_map.layer(config.STRUCTURES_LAYER)
        tile = structures.get(x, y)
        if tile is TileSymbol.NOTHING:
            tile_map.layer(config.GROUND_LAYER).set(x, y, TileSymbol.FLOOR)
        elif is_wall(tile) and self._crosses_wall(structures, x, y, horizontal):
            structures.set(x, y, TileSymbol.DOOR)

    def _carve_h_tunnel(self, tile_map: TileMap, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._carve_corridor_tile(tile_map, x, y, horizontal=True)

    def _carve_v_tunnel(self, tile_map: TileMap, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._carve_corridor_tile(tile_map, x, y, horizontal=False)

    def _is_free(self, tile_map: TileMap, room: Rect) -> bool:
        return all(is_clear(layer, room) for layer in tile_map.layers)

    def generate(self) -> TileMap:
        tile_map = TileMap(self.map_width, self.map_height)
        structures = tile_map.layer(config.STRUCTURES_LAYER)
        rooms: list[Rect] = []

        for _ in range(self.max_rooms):
            w = _rng.randint(self.min_room_size, self.max_room_size)
            h = _rng.randint(self.min_room_size, self.max_room_size)

            x = _rng.randint(0, self.map_width - w)
            y = _rng.randint(0, self.map_height - h)

            new_room = Rect(x, y, w, h)
            if not self._is_free(tile_map, new_room):
                continue

            self._carve_room(structures, new_room)

            if rooms:
                prev_x, prev_y = rooms[-1].center()
                new_x, new_y = new_room.center()
                if bool(_rng.getrandbits(1)):
                    self._carve_h_tunnel(tile_map, prev_x, new_x, prev_y)
                    self._carve_v_tunnel(tile_map, prev_y, new_y, new_x)
                else:
                    self._carve_v_tunnel(tile_map, prev_y, new_y, prev_x)
                    self._carve_h_tunnel(tile_map, prev_x, new_x, new_y)

            rooms.append(new_room)

        if not rooms:
            raise ValueError("Need to make at least one room.")

        logger.debug(
            "Placed %d of %d rooms on a %dx%d map",
            len(rooms),
            self.max_rooms,
            self.map_width,
            self.map_height,
        )
        return tile_map
