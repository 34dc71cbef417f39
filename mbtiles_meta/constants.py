"""Shared constants for MBTiles metadata validation.

Field keys, enumerated values and coordinate limits used by the bounds
parser and both schema validators live here so the validators stay in sync.
"""

from __future__ import annotations

# Metadata table keys recognized by the schema validators
NAME_KEY: str = "name"
DESCRIPTION_KEY: str = "description"
TYPE_KEY: str = "type"
VERSION_KEY: str = "version"
FORMAT_KEY: str = "format"
BOUNDS_KEY: str = "bounds"

# Allowed values for enumerated fields
TILE_TYPES: tuple[str, ...] = ("overlay", "baselayer")
TILE_FORMATS: tuple[str, ...] = ("png", "jpg")

# Spec version tokens with a validator (oldest first)
SPEC_VERSION_1_0: str = "1.0"
SPEC_VERSION_1_1: str = "1.1"
SUPPORTED_SPEC_VERSIONS: tuple[str, ...] = (SPEC_VERSION_1_0, SPEC_VERSION_1_1)
LATEST_SPEC_VERSION: str = SPEC_VERSION_1_1

# Bounds limits in degrees. Left/bottom must be west/south of the prime
# meridian/equator, right/top east/north of it.
BOUNDS_LEFT_RANGE: tuple[float, float] = (-180.0, 0.0)
BOUNDS_BOTTOM_RANGE: tuple[float, float] = (-85.0, 0.0)
BOUNDS_RIGHT_RANGE: tuple[float, float] = (0.0, 180.0)
BOUNDS_TOP_RANGE: tuple[float, float] = (0.0, 85.0)

FULL_EARTH_BOUNDS: str = "-180.0,-85,180,85"

# Name of the key/value table inside an .mbtiles file
METADATA_TABLE: str = "metadata"
