"""Map generation algorithms.

Generators only build maps through the grid API (layers, `rectangle`,
`is_clear`, ...), so anything they produce can be printed and exported.

- RoomsAndCorridorsGenerator: Classic dungeon-style rooms and corridors
"""

from .base import BaseMapGenerator
from .dungeon import RoomsAndCorridorsGenerator

__all__ = [
    "BaseMapGenerator",
    "RoomsAndCorridorsGenerator",
]
