"""mbtiles-meta CLI - Command-line interface for validating MBTiles metadata.

The CLI is a thin wrapper around the Python API (see registry.py).
All business logic lives in the library; the CLI handles user interaction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NoReturn

import click

from mbtiles_meta.bounds import parse_bounds
from mbtiles_meta.config import (
    KNOWN_SETTINGS,
    get_setting,
    list_settings,
    set_setting,
    unset_setting,
)
from mbtiles_meta.errors import MbtilesMetaError
from mbtiles_meta.json_output import ErrorDetail, error_envelope, success_envelope
from mbtiles_meta.models import MetadataRecord
from mbtiles_meta.output import detail, error, info, success, warn
from mbtiles_meta.reader import read_metadata_table
from mbtiles_meta.registry import resolve_spec_version, supported_versions, validate_metadata


def should_output_json(ctx: click.Context, json_flag: bool = False) -> bool:
    """Determine if JSON output should be used.

    Global --format=json takes precedence, but per-command --json flags also work.

    Args:
        ctx: Click context containing the format preference.
        json_flag: Per-command --json flag value.

    Returns:
        True if JSON output should be used, False for text output.
    """
    obj = ctx.find_root().obj or {}
    global_format = obj.get("format", "text")
    return global_format == "json" or json_flag


def output_json_envelope(envelope: Any) -> None:
    """Output a JSON envelope to stdout."""
    click.echo(envelope.to_json())


def _report_error(command: str, err: MbtilesMetaError, use_json: bool) -> NoReturn:
    """Report a structured error and exit with status 1."""
    if use_json:
        output_json_envelope(error_envelope(command, [ErrorDetail.from_error(err)]))
    else:
        error(err.message)
    raise SystemExit(1) from err


@click.group()
@click.version_option(package_name="mbtiles-meta")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format (json for machine parsing, text for humans).",
)
@click.pass_context
def cli(ctx: click.Context, output_format: str) -> None:
    """mbtiles-meta - Validate the metadata table of MBTiles tilesets."""
    ctx.ensure_object(dict)
    ctx.obj["format"] = output_format


# ─────────────────────────────────────────────────────────────────────────────
# Check command
# ─────────────────────────────────────────────────────────────────────────────


def _print_record(record: MetadataRecord, *, verbose: bool) -> None:
    """Print a validated record field by field."""
    info(f"Name: {record.name}")
    info(f"Description: {record.description}")
    info(f"Type: {record.type.value}")
    info(f"Version: {record.version}")
    if record.format is not None:
        info(f"Format: {record.format.value}")
    if record.bounds is not None:
        info(f"Bounds: {', '.join(str(v) for v in record.bounds)}")

    if not record.extra:
        return
    if verbose:
        for key, value in record.extra.items():
            detail(f"  {key}: {value}")
    else:
        detail(f"  {len(record.extra)} extra key(s): {', '.join(record.extra)}")


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--spec-version",
    default=None,
    help="MBTiles spec version to validate against (default: config, then metadata 'version').",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Show extra metadata and debug logging.")
@click.pass_context
def check(
    ctx: click.Context,
    path: Path,
    spec_version: str | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """Validate the metadata table of an MBTiles file.

    PATH is the .mbtiles file to check.
    """
    use_json = should_output_json(ctx, json_output)
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        metadata = read_metadata_table(path)
        version = resolve_spec_version(metadata, spec_version, Path.cwd())
        record = validate_metadata(metadata, version)
    except MbtilesMetaError as err:
        _report_error("check", err, use_json)

    if use_json:
        output_json_envelope(
            success_envelope(
                "check",
                {"path": str(path), "spec_version": version, "metadata": record.to_dict()},
            )
        )
        return

    success(f"{path.name}: metadata valid (spec {version})")
    _print_record(record, verbose=verbose)


# ─────────────────────────────────────────────────────────────────────────────
# Bounds command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command()
@click.argument("value")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON.")
@click.pass_context
def bounds(ctx: click.Context, value: str, json_output: bool) -> None:
    """Check a bounds value (left,bottom,right,top).

    Use '--' before values that start with a minus sign:

        mbtiles-meta bounds -- -180.0,-85,180,85
    """
    use_json = should_output_json(ctx, json_output)
    parsed = parse_bounds(value)

    if parsed is None:
        message = f"Invalid bounds: {value}"
        if use_json:
            output_json_envelope(
                error_envelope("bounds", [ErrorDetail(type="InvalidBounds", message=message)])
            )
        else:
            error(message)
            detail("  Expected left,bottom,right,top within [-180,0],[-85,0],[0,180],[0,85]")
        raise SystemExit(1)

    if use_json:
        output_json_envelope(success_envelope("bounds", {"bounds": list(parsed)}))
    else:
        success(f"Bounds valid: {', '.join(str(v) for v in parsed)}")


# ─────────────────────────────────────────────────────────────────────────────
# Versions command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON.")
@click.pass_context
def versions(ctx: click.Context, json_output: bool) -> None:
    """List supported MBTiles spec versions."""
    tokens = supported_versions()
    if should_output_json(ctx, json_output):
        output_json_envelope(success_envelope("versions", {"versions": list(tokens)}))
        return
    for token in tokens:
        info(token)


# ─────────────────────────────────────────────────────────────────────────────
# Config commands
# ─────────────────────────────────────────────────────────────────────────────


@cli.group()
def config() -> None:
    """Manage mbtiles-meta settings for the current directory."""


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Show the resolved value of a setting."""
    try:
        value = get_setting(key, project_path=Path.cwd())
    except MbtilesMetaError as err:
        _report_error("config get", err, should_output_json(ctx))

    if should_output_json(ctx):
        output_json_envelope(success_envelope("config get", {"key": key, "value": value}))
    elif value is None:
        info(f"{key} is not set")
    else:
        click.echo(value)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a setting in .mbtiles-meta/config.yaml."""
    use_json = should_output_json(ctx)
    try:
        set_setting(Path.cwd(), key, value)
    except MbtilesMetaError as err:
        _report_error("config set", err, use_json)

    if use_json:
        output_json_envelope(success_envelope("config set", {"key": key, "value": value}))
        return
    success(f"Set {key} = {value}")
    if key not in KNOWN_SETTINGS:
        warn(f"'{key}' is not a known setting")
    elif key == "spec_version" and value not in supported_versions():
        warn(f"Spec version '{value}' is not supported ({', '.join(supported_versions())})")


@config.command("unset")
@click.argument("key")
@click.pass_context
def config_unset(ctx: click.Context, key: str) -> None:
    """Remove a setting from .mbtiles-meta/config.yaml."""
    use_json = should_output_json(ctx)
    try:
        removed = unset_setting(Path.cwd(), key)
    except MbtilesMetaError as err:
        _report_error("config unset", err, use_json)

    if use_json:
        output_json_envelope(success_envelope("config unset", {"key": key, "removed": removed}))
    elif removed:
        success(f"Removed {key}")
    else:
        info(f"{key} was not set")


@config.command("list")
@click.pass_context
def config_list(ctx: click.Context) -> None:
    """List settings with their sources."""
    use_json = should_output_json(ctx)
    try:
        settings = list_settings(Path.cwd())
    except MbtilesMetaError as err:
        _report_error("config list", err, use_json)

    if use_json:
        output_json_envelope(success_envelope("config list", {"settings": settings}))
        return
    if not settings:
        info("No settings configured")
        return
    for key, entry in settings.items():
        info(f"{key} = {entry['value']} ({entry['source']})")
