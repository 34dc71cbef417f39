"""Shared pytest fixtures for mbtiles-meta tests."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from contextlib import closing
from pathlib import Path

import pytest

# =============================================================================
# Metadata Fixtures
# =============================================================================


@pytest.fixture
def v10_metadata() -> dict[str, str]:
    """Minimal valid spec 1.0 metadata."""
    return {
        "name": "World",
        "description": "Country boundaries",
        "type": "baselayer",
        "version": "1.0",
    }


@pytest.fixture
def v11_metadata(v10_metadata: dict[str, str]) -> dict[str, str]:
    """Valid spec 1.1 metadata with format and bounds."""
    return {
        **v10_metadata,
        "version": "1.1",
        "format": "png",
        "bounds": "-180.0,-85,180,85",
    }


# =============================================================================
# MBTiles File Fixtures
# =============================================================================


def _write_mbtiles(path: Path, rows: list[tuple[str | None, str | None]]) -> Path:
    """Create an .mbtiles file with a metadata table holding the given rows."""
    with closing(sqlite3.connect(path)) as conn:
        conn.execute("CREATE TABLE metadata (name TEXT, value TEXT)")
        conn.executemany("INSERT INTO metadata (name, value) VALUES (?, ?)", rows)
        conn.commit()
    return path


@pytest.fixture
def make_mbtiles(tmp_path: Path) -> Callable[..., Path]:
    """Factory for .mbtiles files.

    Accepts a dict or a list of (name, value) rows and an optional filename.
    """

    def _make(
        metadata: dict[str, str] | list[tuple[str | None, str | None]],
        filename: str = "tiles.mbtiles",
    ) -> Path:
        rows = list(metadata.items()) if isinstance(metadata, dict) else metadata
        return _write_mbtiles(tmp_path / filename, rows)

    return _make


@pytest.fixture
def v11_mbtiles(make_mbtiles: Callable[..., Path], v11_metadata: dict[str, str]) -> Path:
    """An .mbtiles file with valid spec 1.1 metadata and one extra key."""
    return make_mbtiles({**v11_metadata, "attribution": "OpenStreetMap"})


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the developer's environment out of tests."""
    monkeypatch.delenv("MBTILES_META_SPEC_VERSION", raising=False)
