from __future__ import annotations

import numpy as np

from tilesmith import config
from tilesmith.environment.tile_types import TileSymbol
from tilesmith.types import TileCoord
from tilesmith.util.coordinates import is_valid_world_tile_pos

# NumPy dtype of a layer's tile storage: one unicode character per cell.
TILE_DTYPE = "U1"

_NOTHING = TileSymbol.NOTHING.value


class OutOfBounds(IndexError):
    """Raised when a tile coordinate lies outside the grid."""

    def __init__(
        self, x: TileCoord, y: TileCoord, width: TileCoord, height: TileCoord
    ) -> None:
        super().__init__(
            f"Tile ({x}, {y}) is outside the {width}x{height} grid."
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Layer:
    """A named, rectangular buffer of tile symbols.

    Tiles are stored as a ``(width, height)`` array in Fortran order, so tile
    ``(x, y)`` lives at flat slot ``x + y * width``. A layer is never resized.
    """

    def __init__(self, name: str, width: TileCoord, height: TileCoord) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Layer size must be non-negative, got {width}x{height}.")
        self.name = name
        self.width: TileCoord = width
        self.height: TileCoord = height
        self.tiles = np.full((width, height), _NOTHING, dtype=TILE_DTYPE, order="F")

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return is_valid_world_tile_pos((x, y), self.width, self.height)

    def _check_bounds(self, x: TileCoord, y: TileCoord) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    def get(self, x: TileCoord, y: TileCoord) -> TileSymbol:
        self._check_bounds(x, y)
        return TileSymbol(self.tiles[x, y])

    def set(self, x: TileCoord, y: TileCoord, symbol: TileSymbol | str) -> None:
        self._check_bounds(x, y)
        self.tiles[x, y] = TileSymbol(symbol).value

    def fill(self, symbol: TileSymbol | str) -> None:
        """Fill the layer with a single tile type."""
        self.tiles[:, :] = TileSymbol(symbol).value

    def __repr__(self) -> str:
        return f"Layer(name={self.name!r}, width={self.width}, height={self.height})"


class TileMap:
    """A rectangular tile map made of layers stacked bottom to top.

    Every layer has the map's dimensions. Layers are looked up by name and
    created on first access, on top of the existing ones. Callers are
    expected to use consistent names for the same layer.
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        layer_names: tuple[str, ...] = config.DEFAULT_LAYER_NAMES,
    ) -> None:
        self.width: TileCoord = width
        self.height: TileCoord = height
        # Insertion order is the stacking order.
        self._layers: dict[str, Layer] = {}
        for name in layer_names:
            self.layer(name)

    @property
    def layers(self) -> list[Layer]:
        """Layers ordered bottom to top."""
        return list(self._layers.values())

    def layer(self, name: str) -> Layer:
        """Get a map layer by name, adding it on top if it doesn't exist."""
        layer = self._layers.get(name)
        if layer is None:
            layer = Layer(name, self.width, self.height)
            self._layers[name] = layer
        return layer

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return is_valid_world_tile_pos((x, y), self.width, self.height)

    def resolve_visible(self, x: TileCoord, y: TileCoord) -> TileSymbol:
        """The tile shown at (x, y).

        Layers are scanned bottom to top and the first tile that isn't
        NOTHING wins. The topmost layer is shown if every layer below it is
        NOTHING at this cell.
        """
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        layers = self.layers
        for index, layer in enumerate(layers):
            tile = layer.tiles[x, y]
            if index == len(layers) - 1 or tile != _NOTHING:
                return TileSymbol(tile)
        return TileSymbol.NOTHING

    def visible_tiles(self) -> np.ndarray:
        """Array of shape (width, height) of the tile shown at every cell.

        Same rule as `resolve_visible`, applied to the whole grid at once:
        starting from the topmost layer, each lower layer paints over the
        result wherever it isn't NOTHING.
        """
        layers = self.layers
        if not layers:
            return np.full(
                (self.width, self.height), _NOTHING, dtype=TILE_DTYPE, order="F"
            )
        visible = layers[-1].tiles.copy(order="F")
        for layer in reversed(layers[:-1]):
            opaque = layer.tiles != _NOTHING
            visible[opaque] = layer.tiles[opaque]
        return visible

    def to_ascii(self) -> str:
        """Render the visible map as text inside a +-| border.

        A map with no rows renders as nothing at all.
        """
        if self.height == 0:
            return ""
        visible = self.visible_tiles()
        frame = "+" + "-" * self.width + "+"
        rows = [frame]
        for y in range(self.height):
            rows.append("|" + "".join(visible[:, y]) + "|")
        rows.append(frame)
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.to_ascii()
