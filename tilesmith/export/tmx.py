"""Export a tile map as TMX (Tiled XML map).

`export_tiles` turns the visible tiles of a map into the comma-separated
tile-set indices of the TMX layer data. `write_tmx` does the whole export:
it copies the tile set's files into the export directory and fills the
tile set's ``template.tmx`` with the map's size and indices.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from string import Template

import numpy as np

from tilesmith import config
from tilesmith.environment.map import TileMap
from tilesmith.environment.tile_types import TileSymbol, get_wall_map
from tilesmith.export.autotile import ExportError, neighbor_slots
from tilesmith.export.templates import TMXTemplate
from tilesmith.types import TileCoord, TileIndex

logger = logging.getLogger(__name__)


class UnsupportedTile(ExportError):
    """Raised when the map shows a tile the tile set has no ids for."""

    def __init__(self, symbol: TileSymbol, x: TileCoord, y: TileCoord, tileset: str):
        super().__init__(
            f"Tile set '{tileset}' has no tile ids for {symbol.name} "
            f"(first seen at ({x}, {y}))."
        )
        self.symbol = symbol
        self.x = x
        self.y = y


@dataclass(frozen=True)
class TMXExport:
    """The values substituted into a TMX template."""

    width: TileCoord
    height: TileCoord
    csv: str

    @property
    def indices(self) -> list[TileIndex]:
        return self.csv.split(config.CSV_SEPARATOR) if self.csv else []


def _door_faces_horizontal(visible: np.ndarray) -> np.ndarray:
    """True where the cell to the left is a wall or past the map edge."""
    left_is_wall = np.ones(visible.shape, dtype=bool)
    left_is_wall[1:, :] = get_wall_map(visible[:-1, :])
    return left_is_wall


def export_tiles(tile_map: TileMap, template: TMXTemplate) -> TMXExport:
    """Convert the visible tiles of a map into tile-set indices.

    Raises:
        UnsupportedTile: The map shows a symbol the template has no ids for.
    """
    visible = tile_map.visible_tiles()
    slots = neighbor_slots(visible)
    exported = np.empty(visible.shape, dtype=object)

    for char in np.unique(visible):
        symbol = TileSymbol(char)
        mask = visible == char

        if symbol is TileSymbol.NOTHING:
            exported[mask] = template.nothing_id
            continue

        if symbol is TileSymbol.DOOR:
            horizontal = _door_faces_horizontal(visible)
            exported[mask & horizontal] = template.door_h
            exported[mask & ~horizontal] = template.door_v
            continue

        terrain = template.terrain_for(symbol)
        if terrain is None:
            xs, ys = np.nonzero(mask.T)[::-1]
            raise UnsupportedTile(symbol, int(xs[0]), int(ys[0]), template.name)

        if not terrain.use_variants:
            exported[mask] = terrain.center
            continue

        ids = np.array(terrain.ids, dtype=object)
        exported[mask] = ids[slots[mask]]

    # Row-major: x varies fastest, which is Fortran order for a (width, height)
    # array.
    csv = config.CSV_SEPARATOR.join(exported.ravel(order="F"))
    return TMXExport(width=tile_map.width, height=tile_map.height, csv=csv)


def render_document(template_text: str, export: TMXExport) -> str:
    """Substitute ``$width``, ``$height`` and ``$csv`` into a TMX template."""
    return Template(template_text).substitute(
        width=export.width, height=export.height, csv=export.csv
    )


def _ignore_tmx(_directory: str, names: list[str]) -> list[str]:
    # The TMX is generated, not copied.
    return [name for name in names if Path(name).suffix.lower() == ".tmx"]


def _logged_copy(src: str, dst: str) -> str:
    logger.info("Copying %s to %s", src, dst)
    return shutil.copy2(src, dst)


def copy_assets(asset_dir: Path, export_dir: Path) -> None:
    """Copy a tile set's files into the export directory, except TMX files.

    A tile set that ships nothing but its template is copied as-is, with a
    warning: the written map will point at tile-set files that aren't there.
    """
    if not any(
        path.is_file() and path.suffix.lower() != ".tmx"
        for path in asset_dir.rglob("*")
    ):
        logger.warning(
            "No tile-set files besides the template in %s; "
            "copy the tile set's .tsx and images there before opening the map",
            asset_dir,
        )
    shutil.copytree(
        asset_dir,
        export_dir,
        ignore=_ignore_tmx,
        copy_function=_logged_copy,
        dirs_exist_ok=True,
    )


def write_tmx(
    tile_map: TileMap,
    template: TMXTemplate,
    export_dir: Path | str = config.DEFAULT_EXPORT_DIR,
) -> Path:
    """Export a map as a TMX document plus tile-set files.

    Returns:
        The path of the written document.

    Raises:
        ExportError: The map can't be expressed with this tile set.
        OSError: Copying assets or writing the document failed.
    """
    export = export_tiles(tile_map, template)
    template_text = template.template_path.read_text(encoding="utf-8")

    export_dir = Path(export_dir)
    export_dir.mkdir(parents=True, exist_ok=True)
    copy_assets(template.asset_dir, export_dir)

    document_path = export_dir / config.EXPORT_DOCUMENT_NAME
    document_path.write_text(render_document(template_text, export), encoding="utf-8")
    logger.info(
        "Wrote %dx%d map to %s using tile set '%s'",
        export.width,
        export.height,
        document_path,
        template.name,
    )
    return document_path
