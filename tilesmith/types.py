from __future__ import annotations

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================

TileCoord = int  # Always integer tile position

# Map coordinates - absolute positions on the tile map
WorldTileCoord = TileCoord  # Example: x=5, y=3
WorldTilePos = tuple[WorldTileCoord, WorldTileCoord]  # Example: (5, 3)

# =============================================================================
# EXPORT TYPES
# =============================================================================

# A tile-set index as it appears in the exported document (e.g. "1421").
# Kept as a string since it is substituted verbatim into the TMX text.
TileIndex = str

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed = int | str | None
