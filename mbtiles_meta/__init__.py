"""mbtiles-meta - Versioned schema validation for MBTiles metadata tables."""

from mbtiles_meta.bounds import Bounds, parse_bounds
from mbtiles_meta.errors import (
    MbtilesMetaError,
    MetadataParseError,
    UnsupportedSpecVersionError,
)
from mbtiles_meta.models import MetadataRecord, TileFormat, TileType
from mbtiles_meta.reader import collect_pairs, create_from_rows, read_metadata_table
from mbtiles_meta.registry import get_validator, supported_versions, validate_metadata
from mbtiles_meta.validators import (
    MetadataValidatorV10,
    MetadataValidatorV11,
    SchemaValidator,
)

__all__ = [
    "Bounds",
    "MbtilesMetaError",
    "MetadataParseError",
    "MetadataRecord",
    "MetadataValidatorV10",
    "MetadataValidatorV11",
    "SchemaValidator",
    "TileFormat",
    "TileType",
    "UnsupportedSpecVersionError",
    "collect_pairs",
    "create_from_rows",
    "get_validator",
    "parse_bounds",
    "read_metadata_table",
    "supported_versions",
    "validate_metadata",
]
