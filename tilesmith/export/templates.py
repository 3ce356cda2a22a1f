"""Tile-set conventions for TMX export.

A `TMXTemplate` says which tile-set index each tile symbol exports as. It is
an immutable value: different tile sets are different templates, passed to
the exporter explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from tilesmith import config
from tilesmith.environment.tile_types import TileSymbol
from tilesmith.export.autotile import SLOT_COUNT
from tilesmith.types import TileIndex


@dataclass(frozen=True)
class TerrainIDs:
    """The 16 tile-set indices of one terrain, in autotile slot order.

    Attributes:
        ids: Indices for slots 0-15 (see `tilesmith.export.autotile`).
        use_variants: Pick the slot from the tile's neighbors. When False the
            terrain always exports as its center index (slot 0).
    """

    ids: tuple[TileIndex, ...]
    use_variants: bool = True

    def __post_init__(self) -> None:
        if len(self.ids) != SLOT_COUNT:
            raise ValueError(
                f"A terrain needs exactly {SLOT_COUNT} tile ids, got {len(self.ids)}."
            )

    @classmethod
    def of(cls, ids: Sequence[TileIndex], use_variants: bool = True) -> TerrainIDs:
        return cls(tuple(ids), use_variants)

    @property
    def center(self) -> TileIndex:
        return self.ids[0]


@dataclass(frozen=True)
class TMXTemplate:
    """Configuration for TMX export with one tile set.

    Attributes:
        name: Tile-set name, as used on the command line.
        nothing_id: Index exported for empty (NOTHING) cells.
        terrains: Tile ids of every symbol the tile set can draw.
        door_h: Door set in a horizontal wall (wall or map edge to its left).
        door_v: Door set in a vertical wall.
        asset_dir: Directory holding ``template.tmx`` and the tile-set art.
    """

    name: str
    nothing_id: TileIndex
    terrains: Mapping[TileSymbol, TerrainIDs]
    door_h: TileIndex
    door_v: TileIndex
    asset_dir: Path = field(default=config.ASSETS_PATH)

    def __post_init__(self) -> None:
        # Freeze the mapping so a shared template can't be edited in place.
        object.__setattr__(
            self, "terrains", MappingProxyType(dict(self.terrains))
        )

    @property
    def template_path(self) -> Path:
        return self.asset_dir / config.TEMPLATE_DOCUMENT_NAME

    def terrain_for(self, symbol: TileSymbol | str) -> TerrainIDs | None:
        """Tile ids for ``symbol``, or None if this tile set has none."""
        return self.terrains.get(TileSymbol(symbol))


# --- DawnLike ---

DAWNLIKE_TEMPLATE = TMXTemplate(
    name="dawnlike",
    nothing_id="1031",
    terrains={
        TileSymbol.FLOOR: TerrainIDs.of(
            ["1421", "1400", "1401", "1422", "1443", "1442", "1441", "1420",
             "1399", "1425", "1423", "1402", "1426", "1444", "1424", "1404"],
            use_variants=False,
        ),
        TileSymbol.FLOOR2: TerrainIDs.of(
            ["1176", "1155", "1156", "1177", "1198", "1197", "1196", "1175",
             "1154", "1180", "1178", "1157", "1181", "1199", "1179", "1159"],
        ),
        TileSymbol.WALL: TerrainIDs.of(
            ["92", "72", "70", "93", "110", "112", "108", "91",
             "68", "69", "88", "88", "110", "89", "108", "71"],
        ),
        TileSymbol.WALL2: TerrainIDs.of(
            ["85", "65", "63", "86", "103", "105", "101", "84",
             "61", "62", "81", "81", "103", "82", "101", "64"],
        ),
        TileSymbol.ROOM: TerrainIDs.of(
            ["1428", "1407", "1408", "1429", "1450", "1449", "1448", "1427",
             "1406", "1432", "1430", "1409", "1433", "1451", "1431", "1411"],
        ),
        TileSymbol.ROOM2: TerrainIDs.of(
            ["1232", "1211", "1212", "1233", "1254", "1253", "1252", "1231",
             "1210", "1236", "1234", "1213", "1237", "1255", "1235", "1215"],
        ),
    },
    door_h="2096",
    door_v="2097",
    asset_dir=config.ASSETS_PATH / "dawnlike",
)  # fmt: skip

# Tile sets selectable by name.
TEMPLATES: dict[str, TMXTemplate] = {
    DAWNLIKE_TEMPLATE.name: DAWNLIKE_TEMPLATE,
}
