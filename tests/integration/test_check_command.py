"""Tests for 'mbtiles-meta check', 'bounds' and 'versions' commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from mbtiles_meta.cli import cli
from mbtiles_meta.config import set_setting


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


class TestCheckCommand:
    """Tests for 'mbtiles-meta check'."""

    @pytest.mark.integration
    def test_valid_file(self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path) -> None:
        """A valid file exits 0 and prints the fields."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["check", str(v11_mbtiles)])

        assert result.exit_code == 0, result.output
        assert "metadata valid (spec 1.1)" in result.output
        assert "Name: World" in result.output
        assert "Format: png" in result.output
        assert "1 extra key(s): attribution" in result.output

    @pytest.mark.integration
    def test_verbose_lists_extra_values(
        self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path
    ) -> None:
        """--verbose prints each extra key with its value."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["check", str(v11_mbtiles), "--verbose"])

        assert result.exit_code == 0, result.output
        assert "attribution: OpenStreetMap" in result.output

    @pytest.mark.integration
    def test_json_output(self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path) -> None:
        """--json prints a success envelope with the record."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["check", str(v11_mbtiles), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["data"]["spec_version"] == "1.1"
        assert data["data"]["metadata"]["bounds"] == [-180.0, -85.0, 180.0, 85.0]
        assert data["data"]["metadata"]["extra"] == {"attribution": "OpenStreetMap"}

    @pytest.mark.integration
    def test_global_format_json(self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path) -> None:
        """--format json works like --json."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["--format", "json", "check", str(v11_mbtiles)])

        assert json.loads(result.output)["command"] == "check"

    @pytest.mark.integration
    def test_spec_version_option(
        self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path
    ) -> None:
        """--spec-version 1.0 leaves format and bounds in extra."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(
                cli, ["check", str(v11_mbtiles), "--spec-version", "1.0", "--json"]
            )

        assert result.exit_code == 0, result.output
        metadata = json.loads(result.output)["data"]["metadata"]
        assert metadata["format"] is None
        assert set(metadata["extra"]) == {"format", "bounds", "attribution"}

    @pytest.mark.integration
    def test_configured_spec_version(
        self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path
    ) -> None:
        """The spec_version from the project config is used."""
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            set_setting(Path(cwd), "spec_version", "1.0")
            result = runner.invoke(cli, ["check", str(v11_mbtiles)])

        assert result.exit_code == 0, result.output
        assert "spec 1.0" in result.output

    @pytest.mark.integration
    def test_parse_failure(
        self,
        runner: CliRunner,
        make_mbtiles: Callable[..., Path],
        v11_metadata: dict[str, str],
        tmp_path: Path,
    ) -> None:
        """A missing mandatory field exits 1 with the message."""
        del v11_metadata["format"]
        path = make_mbtiles(v11_metadata)

        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["check", str(path), "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["success"] is False
        assert data["errors"][0]["type"] == "MetadataParseError"
        assert data["errors"][0]["code"] == "MBTM-VAL001"
        assert "'format'" in data["errors"][0]["message"]

    @pytest.mark.integration
    def test_unsupported_spec_version(
        self, runner: CliRunner, v11_mbtiles: Path, tmp_path: Path
    ) -> None:
        """An unknown spec version exits 1 with a version error."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(
                cli, ["check", str(v11_mbtiles), "--spec-version", "2.0", "--json"]
            )

        assert result.exit_code == 1
        assert json.loads(result.output)["errors"][0]["type"] == "UnsupportedSpecVersionError"

    @pytest.mark.integration
    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing file exits 1 with a source error."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["check", "nope.mbtiles"])

        assert result.exit_code == 1
        assert "file not found" in result.output


class TestBoundsCommand:
    """Tests for 'mbtiles-meta bounds'."""

    @pytest.mark.integration
    def test_valid(self, runner: CliRunner) -> None:
        """Valid bounds exit 0."""
        result = runner.invoke(cli, ["bounds", "--", "-180.0,-85,180,85"])

        assert result.exit_code == 0, result.output
        assert "Bounds valid" in result.output

    @pytest.mark.integration
    def test_invalid(self, runner: CliRunner) -> None:
        """Out-of-range bounds exit 1."""
        result = runner.invoke(cli, ["bounds", "10,-85,180,85"])

        assert result.exit_code == 1
        assert "Invalid bounds" in result.output

    @pytest.mark.integration
    def test_json(self, runner: CliRunner) -> None:
        """--json returns the parsed values."""
        result = runner.invoke(cli, ["bounds", "--json", "--", "-10,-85,180,85"])

        assert json.loads(result.output)["data"]["bounds"] == [-10.0, -85.0, 180.0, 85.0]


class TestVersionsCommand:
    """Tests for 'mbtiles-meta versions'."""

    @pytest.mark.integration
    def test_lists_versions(self, runner: CliRunner) -> None:
        """Both supported versions are printed."""
        result = runner.invoke(cli, ["versions"])

        assert result.exit_code == 0
        assert "1.0" in result.output
        assert "1.1" in result.output

    @pytest.mark.integration
    def test_json(self, runner: CliRunner) -> None:
        """--json lists the tokens."""
        result = runner.invoke(cli, ["versions", "--json"])

        assert json.loads(result.output)["data"]["versions"] == ["1.0", "1.1"]
