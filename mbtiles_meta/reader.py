"""Reading metadata key/value rows into a mapping.

Validators work on a fully materialized mapping. This module turns rows
from any source into that mapping, and reads the ``metadata`` table of an
``.mbtiles`` SQLite file.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path

from mbtiles_meta.constants import METADATA_TABLE
from mbtiles_meta.errors import MetadataSourceError
from mbtiles_meta.models import MetadataRecord
from mbtiles_meta.validators import SchemaValidator

logger = logging.getLogger(__name__)


def collect_pairs(rows: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Materialize (key, value) rows into an insertion-ordered dict.

    A key seen more than once keeps its first position and its last value.

    Args:
        rows: Key/value pairs, e.g. rows of a metadata table.

    Returns:
        Dict of metadata in row order.
    """
    pairs: dict[str, str] = {}
    for key, value in rows:
        if key in pairs:
            logger.warning("Duplicate metadata key %r, keeping last value", key)
        pairs[key] = value
    logger.debug("Collected %d metadata keys", len(pairs))
    return pairs


def create_from_rows(
    rows: Iterable[tuple[str, str]], validator: SchemaValidator
) -> MetadataRecord:
    """Collect rows and validate them with the given validator.

    Args:
        rows: Key/value pairs.
        validator: Schema validator for the spec version in use.

    Returns:
        Validated MetadataRecord.

    Raises:
        MetadataParseError: If the metadata violates the schema.
    """
    return validator.validate(collect_pairs(rows))


def read_metadata_table(path: Path) -> dict[str, str]:
    """Read the metadata table of an .mbtiles file.

    The file is opened read-only. NULL names are skipped; NULL values are
    read as empty strings.

    Args:
        path: Path to the .mbtiles file.

    Returns:
        Dict of metadata in table order.

    Raises:
        MetadataSourceError: If the file is missing, is not SQLite, or has
            no metadata table.
    """
    if not path.is_file():
        raise MetadataSourceError(str(path), "file not found")

    uri = f"{path.resolve().as_uri()}?mode=ro"
    try:
        with closing(sqlite3.connect(uri, uri=True)) as conn:
            cursor = conn.execute(f"SELECT name, value FROM {METADATA_TABLE}")
            rows = [
                (str(name), "" if value is None else str(value))
                for name, value in cursor.fetchall()
                if name is not None
            ]
    except sqlite3.DatabaseError as e:
        raise MetadataSourceError(str(path), str(e)) from e

    logger.debug("Read %d metadata rows from %s", len(rows), path)
    return collect_pairs(rows)
