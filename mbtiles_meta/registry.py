"""Spec version lookup and the validation entry point."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from mbtiles_meta.config import get_setting
from mbtiles_meta.constants import LATEST_SPEC_VERSION, SUPPORTED_SPEC_VERSIONS, VERSION_KEY
from mbtiles_meta.errors import UnsupportedSpecVersionError
from mbtiles_meta.models import MetadataRecord
from mbtiles_meta.validators import (
    MetadataValidatorV10,
    MetadataValidatorV11,
    SchemaValidator,
)

logger = logging.getLogger(__name__)

# Immutable tuple; validators hold no state and are shared
VALIDATORS: tuple[SchemaValidator, ...] = (
    MetadataValidatorV10(),
    MetadataValidatorV11(),
)

_BY_VERSION: dict[str, SchemaValidator] = {v.spec_version: v for v in VALIDATORS}


def get_validator(spec_version: str) -> SchemaValidator | None:
    """Look up the validator for a spec version token.

    Args:
        spec_version: Token such as "1.0" or "1.1". Matched literally.

    Returns:
        The validator, or None if the version is not supported.
    """
    return _BY_VERSION.get(spec_version)


def supported_versions() -> tuple[str, ...]:
    """Return the spec version tokens that have a validator."""
    return SUPPORTED_SPEC_VERSIONS


def resolve_spec_version(
    metadata: Mapping[str, str],
    spec_version: str | None = None,
    project_path: Path | None = None,
) -> str:
    """Pick the spec version token that governs validation.

    Precedence: explicit token, configured ``spec_version`` (environment or
    project config), the metadata's own ``version`` value, then the newest
    supported version.

    Args:
        metadata: Raw metadata key/value pairs.
        spec_version: Explicit token from the caller.
        project_path: Project directory for config lookup.

    Returns:
        The version token. It is not checked against supported versions.
    """
    configured = get_setting("spec_version", cli_value=spec_version, project_path=project_path)
    if configured is not None:
        return str(configured)
    declared = metadata.get(VERSION_KEY)
    if declared is not None:
        return declared
    return LATEST_SPEC_VERSION


def validate_metadata(
    metadata: Mapping[str, str],
    spec_version: str | None = None,
    *,
    project_path: Path | None = None,
) -> MetadataRecord:
    """Validate metadata against the schema for its spec version.

    Args:
        metadata: Raw metadata key/value pairs. Left unchanged.
        spec_version: Explicit spec version token (see resolve_spec_version).
        project_path: Project directory for config lookup.

    Returns:
        Validated MetadataRecord.

    Raises:
        UnsupportedSpecVersionError: If no validator exists for the version.
        MetadataParseError: If the metadata violates the schema.
    """
    version = resolve_spec_version(metadata, spec_version, project_path)
    validator = get_validator(version)
    if validator is None:
        logger.debug("No validator for spec version %r", version)
        raise UnsupportedSpecVersionError(version, supported_versions())

    logger.debug("Validating %d metadata keys against spec %s", len(metadata), version)
    return validator.validate(metadata)
