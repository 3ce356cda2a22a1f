from __future__ import annotations

from collections.abc import Iterator

import pytest

from tilesmith.environment.map import TileMap
from tilesmith.util import rng


@pytest.fixture(autouse=True)
def seeded_rng() -> Iterator[None]:
    """Give every test the same deterministic random streams."""
    rng.init("tests")
    yield
    rng.init("tests")


@pytest.fixture
def single_layer_map() -> TileMap:
    """A 3x3 map with one layer, every cell NOTHING."""
    tile_map = TileMap(3, 3, layer_names=())
    tile_map.layer("Ground")
    return tile_map
