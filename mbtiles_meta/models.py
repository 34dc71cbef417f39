"""Validated MBTiles metadata record.

This module provides:
- TileType: Enum for the ``type`` field (overlay, baselayer)
- TileFormat: Enum for the ``format`` field (png, jpg)
- MetadataRecord: Immutable result of a successful validation

Records are built once by a schema validator and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from mbtiles_meta.bounds import Bounds

_NONE = " - "
_SEPARATOR = " | "


class TileType(Enum):
    """How the tileset is meant to be layered on a map.

    Attributes:
        OVERLAY: Drawn on top of another layer.
        BASELAYER: Drawn as the bottom layer.
    """

    OVERLAY = "overlay"
    BASELAYER = "baselayer"


class TileFormat(Enum):
    """Image file format of the tile data."""

    PNG = "png"
    JPG = "jpg"


@dataclass(frozen=True)
class MetadataRecord:
    """Typed metadata for one tileset.

    Attributes:
        name: Plain-english name of the tileset.
        description: Description of the layer as plain text.
        type: Overlay or baselayer.
        version: Tileset version exactly as written (a plain number).
        format: Tile image format; always None under spec 1.0.
        bounds: (left, bottom, right, top) in degrees, or None.
        extra: Every metadata key not consumed by the schema, in input order.
            Read-only; excluded from the hash.
    """

    name: str
    description: str
    type: TileType
    version: str
    format: TileFormat | None = None
    bounds: Bounds | None = None
    extra: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only copy, detached from the caller's mapping
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Returns:
            Dictionary with all fields. Absent optional fields are None.
        """
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "version": self.version,
            "format": self.format.value if self.format is not None else None,
            "bounds": list(self.bounds) if self.bounds is not None else None,
            "extra": dict(self.extra),
        }

    def describe(self) -> str:
        """Render the record as a short human-readable summary."""
        bounds = ",".join(str(v) for v in self.bounds) if self.bounds is not None else _NONE
        fields = [
            f"Name: {self.name}",
            f"Type: {self.type.value}",
            f"Version: {self.version}",
            f"Description: {self.description}",
            f"Format: {self.format.value if self.format is not None else _NONE}",
            f"Bounds: {bounds}",
        ]
        return f"Metadata:\n{_SEPARATOR.join(fields)}\n\nExtra: {dict(self.extra)}"

    def __str__(self) -> str:
        return self.describe()
