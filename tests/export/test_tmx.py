from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from tilesmith.environment.map import TileMap
from tilesmith.environment.tile_types import TileSymbol
from tilesmith.export.templates import DAWNLIKE_TEMPLATE, TerrainIDs, TMXTemplate
from tilesmith.export.tmx import (
    TMXExport,
    UnsupportedTile,
    copy_assets,
    export_tiles,
    render_document,
    write_tmx,
)

# Slot i of this terrain exports as "s<i>", so tests can read slots back.
SLOTTED = TerrainIDs.of([f"s{i}" for i in range(16)])


def _template(asset_dir: Path | None = None, **terrains: TerrainIDs) -> TMXTemplate:
    return TMXTemplate(
        name="test",
        nothing_id="N",
        terrains={TileSymbol[name.upper()]: ids for name, ids in terrains.items()},
        door_h="DH",
        door_v="DV",
        asset_dir=asset_dir or Path("unused"),
    )


def _map(*rows: str) -> TileMap:
    tile_map = TileMap(len(rows[0]), len(rows), layer_names=("Ground",))
    ground = tile_map.layer("Ground")
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            ground.set(x, y, char)
    return tile_map


def test_isolated_wall_in_empty_map() -> None:
    tile_map = TileMap(3, 3, layer_names=())
    tile_map.layer("Ground").set(1, 1, TileSymbol.WALL)
    export = export_tiles(tile_map, _template(wall=SLOTTED))
    assert (export.width, export.height) == (3, 3)
    assert export.indices == ["N", "N", "N", "N", "s15", "N", "N", "N", "N"]


def test_isolated_wall_with_dawnlike() -> None:
    tile_map = TileMap(3, 3, layer_names=())
    tile_map.layer("Ground").set(1, 1, TileSymbol.WALL)
    export = export_tiles(tile_map, DAWNLIKE_TEMPLATE)
    assert export.csv == "1031,1031,1031,1031,71,1031,1031,1031,1031"


def test_output_is_row_major() -> None:
    tile_map = _map("w ", "  ", "  ")
    export = export_tiles(tile_map, _template(wall=SLOTTED))
    assert export.indices == ["s15", "N", "N", "N", "N", "N"]
    assert (export.width, export.height) == (2, 3)


def test_block_of_terrain() -> None:
    export = export_tiles(_map("www", "www", "www"), _template(wall=SLOTTED))
    assert export.indices == [
        "s8", "s1", "s2",
        "s7", "s0", "s3",
        "s6", "s5", "s4",
    ]  # fmt: skip


def test_horizontal_run_middle_is_horizontal() -> None:
    export = export_tiles(_map("   ", "www", "   "), _template(wall=SLOTTED))
    assert export.indices[3:6] == ["s14", "s9", "s12"]


def test_terrain_without_variants_uses_center() -> None:
    flat = TerrainIDs.of([f"f{i}" for i in range(16)], use_variants=False)
    export = export_tiles(_map("ff", "f "), _template(floor=flat))
    assert export.indices == ["f0", "f0", "f0", "N"]


def test_neighbors_must_be_the_same_symbol() -> None:
    export = export_tiles(_map("wW"), _template(wall=SLOTTED, wall2=SLOTTED))
    assert export.indices == ["s15", "s15"]


@pytest.mark.parametrize(
    "row,expected",
    [
        ("w+", "DH"),  # wall to the left
        ("W+", "DH"),
        ("+ ", "DH"),  # map edge to the left
        (".+", "DV"),
        (" +", "DV"),
        ("++", "DV"),
    ],
)
def test_door_orientation(row: str, expected: str) -> None:
    template = _template(wall=SLOTTED, wall2=SLOTTED, room=SLOTTED)
    export = export_tiles(_map(row), template)
    door_index = row.rindex("+")
    assert export.indices[door_index] == expected


def test_door_looks_at_visible_tiles() -> None:
    tile_map = TileMap(2, 1)
    tile_map.layer("Structures").set(0, 0, TileSymbol.WALL)
    tile_map.layer("Structures").set(1, 0, TileSymbol.DOOR)
    assert export_tiles(tile_map, _template(wall=SLOTTED)).indices == ["s15", "DH"]
    # A floor on the ground layer hides the wall above it.
    tile_map.layer("Ground").set(0, 0, TileSymbol.FLOOR)
    flat = TerrainIDs.of(["F"] * 16, use_variants=False)
    assert export_tiles(tile_map, _template(floor=flat)).indices == ["F", "DV"]


def test_unsupported_tile() -> None:
    with pytest.raises(UnsupportedTile) as excinfo:
        export_tiles(_map("  ", " T"), _template(wall=SLOTTED))
    assert excinfo.value.symbol is TileSymbol.TREE
    assert (excinfo.value.x, excinfo.value.y) == (1, 1)


def test_export_does_not_modify_map() -> None:
    tile_map = _map("w+", ".w")
    before = tile_map.to_ascii()
    export_tiles(tile_map, DAWNLIKE_TEMPLATE)
    assert tile_map.to_ascii() == before


def test_render_document() -> None:
    export = TMXExport(width=2, height=1, csv="1,2")
    text = render_document('<map width="$width" height="$height">$csv</map>', export)
    assert text == '<map width="2" height="1">1,2</map>'


def test_render_document_unknown_placeholder() -> None:
    with pytest.raises(KeyError):
        render_document("$depth", TMXExport(width=1, height=1, csv="1"))


def _make_assets(root: Path) -> Path:
    assets = root / "assets"
    (assets / "Objects").mkdir(parents=True)
    (assets / "template.tmx").write_text(
        'w=$width h=$height\n$csv\n', encoding="utf-8"
    )
    (assets / "Objects" / "Wall.png").write_bytes(b"png")
    (assets / "Objects" / "old.TMX").write_text("stale", encoding="utf-8")
    (assets / "tiles.tsx").write_text("<tileset/>", encoding="utf-8")
    return assets


def test_copy_assets_skips_tmx(tmp_path: Path) -> None:
    assets = _make_assets(tmp_path)
    out = tmp_path / "out"
    out.mkdir()
    copy_assets(assets, out)
    assert (out / "Objects" / "Wall.png").read_bytes() == b"png"
    assert (out / "tiles.tsx").is_file()
    assert not (out / "template.tmx").exists()
    assert not (out / "Objects" / "old.TMX").exists()
    # Copying again over an existing export is fine.
    copy_assets(assets, out)


def test_copy_assets_warns_without_tile_set_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "template.tmx").write_text("$csv", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="tilesmith.export.tmx"):
        copy_assets(assets, tmp_path / "out")
    assert "No tile-set files" in caplog.text
    assert list((tmp_path / "out").iterdir()) == []


def test_copy_assets_quiet_with_tile_set_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    assets = _make_assets(tmp_path)
    with caplog.at_level(logging.WARNING, logger="tilesmith.export.tmx"):
        copy_assets(assets, tmp_path / "out")
    assert "No tile-set files" not in caplog.text


def test_write_tmx(tmp_path: Path) -> None:
    assets = _make_assets(tmp_path)
    tile_map = TileMap(3, 3, layer_names=())
    tile_map.layer("Ground").set(1, 1, TileSymbol.WALL)

    path = write_tmx(tile_map, _template(assets, wall=SLOTTED), tmp_path / "export")

    assert path == tmp_path / "export" / "map.tmx"
    assert path.read_text(encoding="utf-8") == "w=3 h=3\nN,N,N,N,s15,N,N,N,N\n"
    assert (tmp_path / "export" / "Objects" / "Wall.png").is_file()


def test_write_tmx_with_dawnlike(tmp_path: Path) -> None:
    tile_map = TileMap(2, 2)
    tile_map.layer("Structures").fill(TileSymbol.WALL)
    path = write_tmx(tile_map, DAWNLIKE_TEMPLATE, tmp_path)
    text = path.read_text(encoding="utf-8")
    assert 'width="2" height="2"' in text
    assert "68,70,108,110" in text


def test_write_tmx_failed_copy_leaves_map_alone(tmp_path: Path) -> None:
    assets = _make_assets(tmp_path)
    tile_map = _map("w")
    before = tile_map.to_ascii()
    with (
        patch("tilesmith.export.tmx.shutil.copytree", side_effect=OSError("disk")),
        pytest.raises(OSError),
    ):
        write_tmx(tile_map, _template(assets, wall=SLOTTED), tmp_path / "export")
    assert tile_map.to_ascii() == before
    assert not (tmp_path / "export" / "map.tmx").exists()


def test_write_tmx_missing_template(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write_tmx(_map("w"), _template(tmp_path / "nope", wall=SLOTTED), tmp_path)
