"""Schema validators for the MBTiles metadata table.

Each validator implements one revision of the MBTiles spec:
- MetadataValidatorV10: https://github.com/mapbox/mbtiles-spec/blob/master/1.0/spec.md
- MetadataValidatorV11: https://github.com/mapbox/mbtiles-spec/blob/master/1.1/spec.md

Validators never mutate the mapping they are given. They work on a copy,
remove each key they recognize, and hand the remainder to the record as
``extra``. Checks run in a fixed order and stop at the first failure.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping

from mbtiles_meta.bounds import Bounds, parse_bounds
from mbtiles_meta.constants import (
    BOUNDS_KEY,
    DESCRIPTION_KEY,
    FORMAT_KEY,
    FULL_EARTH_BOUNDS,
    NAME_KEY,
    SPEC_VERSION_1_0,
    SPEC_VERSION_1_1,
    TILE_FORMATS,
    TILE_TYPES,
    TYPE_KEY,
    VERSION_KEY,
)
from mbtiles_meta.errors import MetadataParseError
from mbtiles_meta.models import MetadataRecord, TileFormat, TileType

logger = logging.getLogger(__name__)

# Plain decimal number: optional sign, digits with optional fraction.
# ASCII digits only; no exponent, whitespace, nan or inf.
PLAIN_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

BOUNDS_FORMAT_HINT = (
    "Should be longitude and latitude values in OpenLayers Bounds format: "
    f"left, bottom, right, top. Example of the full earth: {FULL_EARTH_BOUNDS}"
)


def is_plain_number(value: str) -> bool:
    """Check that a string is a plain decimal number such as ``1`` or ``2.3``."""
    return PLAIN_NUMBER_PATTERN.fullmatch(value) is not None


class SchemaValidator(ABC):
    """Base class for MBTiles metadata schema validators.

    Subclasses must define:
        spec_version: Spec version token handled by the validator
        description: Human-readable summary of the schema

    Subclasses must implement:
        validate(): Build a MetadataRecord or raise MetadataParseError
    """

    spec_version: str
    description: str

    @abstractmethod
    def validate(self, metadata: Mapping[str, str]) -> MetadataRecord:
        """Validate raw metadata key/value pairs.

        Args:
            metadata: Metadata table contents. Left unchanged.

        Returns:
            MetadataRecord whose ``extra`` holds every unrecognized key.

        Raises:
            MetadataParseError: If a mandatory field is missing or malformed.
        """
        ...

    def _fail(self, message: str, *, field: str) -> MetadataParseError:
        """Helper to create a parse failure for a field."""
        logger.debug("Spec %s validation failed on '%s': %s", self.spec_version, field, message)
        return MetadataParseError(message, field=field)

    def _take_core_fields(
        self, remaining: dict[str, str]
    ) -> tuple[str, str, TileType, str]:
        """Remove and validate name, description, type and version.

        Args:
            remaining: Working copy of the metadata; consumed keys are removed.

        Returns:
            Tuple of (name, description, type, version).
        """
        name = remaining.pop(NAME_KEY, None)
        if name is None:
            raise self._fail(f"Missing mandatory field '{NAME_KEY}'", field=NAME_KEY)

        description = remaining.pop(DESCRIPTION_KEY, None)
        if description is None:
            raise self._fail(f"Missing mandatory field '{DESCRIPTION_KEY}'", field=DESCRIPTION_KEY)

        tile_type = remaining.pop(TYPE_KEY, None)
        if tile_type is None or tile_type not in TILE_TYPES:
            raise self._fail(
                f"Missing mandatory field '{TYPE_KEY}' or not in [{', '.join(TILE_TYPES)}]",
                field=TYPE_KEY,
            )

        version = remaining.pop(VERSION_KEY, None)
        if version is None:
            raise self._fail(f"Missing mandatory field '{VERSION_KEY}'", field=VERSION_KEY)
        if not is_plain_number(version):
            raise self._fail(
                f"Invalid syntax for mandatory field '{VERSION_KEY}': must be a plain number",
                field=VERSION_KEY,
            )

        return name, description, TileType(tile_type), version


class MetadataValidatorV10(SchemaValidator):
    """Validator for MBTiles spec 1.0.

    Requires name, description, type and version. ``format`` and ``bounds``
    are not part of this revision and stay in ``extra`` when present.
    """

    spec_version = SPEC_VERSION_1_0
    description = "name, description, type, version"

    def validate(self, metadata: Mapping[str, str]) -> MetadataRecord:
        """Validate metadata against spec 1.0."""
        remaining = dict(metadata)
        name, description, tile_type, version = self._take_core_fields(remaining)

        logger.debug("Spec 1.0 metadata valid, %d extra keys", len(remaining))
        return MetadataRecord(
            name=name,
            description=description,
            type=tile_type,
            version=version,
            extra=remaining,
        )


class MetadataValidatorV11(SchemaValidator):
    """Validator for MBTiles spec 1.1.

    Adds a mandatory ``format`` (png or jpg) and an optional ``bounds``
    to the 1.0 fields. A bounds value that is present but malformed fails
    the whole validation.
    """

    spec_version = SPEC_VERSION_1_1
    description = "name, description, type, version, format, bounds (optional)"

    def validate(self, metadata: Mapping[str, str]) -> MetadataRecord:
        """Validate metadata against spec 1.1."""
        remaining = dict(metadata)
        name, description, tile_type, version = self._take_core_fields(remaining)

        tile_format = remaining.pop(FORMAT_KEY, None)
        if tile_format is None or tile_format not in TILE_FORMATS:
            raise self._fail(
                f"Missing mandatory field '{FORMAT_KEY}' or not in [{', '.join(TILE_FORMATS)}]",
                field=FORMAT_KEY,
            )

        bounds: Bounds | None = None
        raw_bounds = remaining.pop(BOUNDS_KEY, None)
        if raw_bounds is not None:
            bounds = parse_bounds(raw_bounds)
            if bounds is None:
                raise self._fail(
                    f"Invalid syntax for optional field '{BOUNDS_KEY}'. {BOUNDS_FORMAT_HINT}",
                    field=BOUNDS_KEY,
                )

        logger.debug("Spec 1.1 metadata valid, %d extra keys", len(remaining))
        return MetadataRecord(
            name=name,
            description=description,
            type=tile_type,
            version=version,
            format=TileFormat(tile_format),
            bounds=bounds,
            extra=remaining,
        )
