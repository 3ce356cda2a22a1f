"""TMX export of tile maps.

- `export_tiles`: visible tiles -> comma-separated tile-set indices
- `write_tmx`: full export of a document plus tile-set files
- `TMXTemplate` / `TerrainIDs`: tile-set conventions, e.g. `DAWNLIKE_TEMPLATE`
"""

from .autotile import ExportError, UnmappedClassification, classify
from .templates import DAWNLIKE_TEMPLATE, TEMPLATES, TerrainIDs, TMXTemplate
from .tmx import TMXExport, UnsupportedTile, export_tiles, write_tmx

__all__ = [
    "DAWNLIKE_TEMPLATE",
    "TEMPLATES",
    "ExportError",
    "TMXExport",
    "TMXTemplate",
    "TerrainIDs",
    "UnmappedClassification",
    "UnsupportedTile",
    "classify",
    "export_tiles",
    "write_tmx",
]
