"""Standardized terminal output utilities.

All user-facing CLI messages should use these functions for consistent
formatting across the application.

Basic Usage:
    from mbtiles_meta.output import success, info, warn, error, detail

    success("world.mbtiles: metadata valid (spec 1.1)")
    info("Name: World")
    warn("Spec version taken from metadata 'version' value")
    error("Missing mandatory field 'format' or not in [png, jpg]")
    detail("Extra: attribution")
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

# ANSI color codes via click's style system
_STYLES = {
    "success": {"fg": "green"},
    "info": {"fg": "blue"},
    "warn": {"fg": "yellow"},
    "error": {"fg": "red"},
    "detail": {"fg": "bright_black"},  # Dimmed/gray
}

_PREFIXES = {
    "success": "\u2713",  # checkmark
    "info": "\u2192",  # arrow
    "warn": "\u26a0",  # warning
    "error": "\u2717",  # X
    "detail": " ",  # space (no prefix, just indent)
}


def _output(message: str, style: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Internal helper for styled output.

    Args:
        message: The message to display.
        style: The style name (success, error, info, warn, detail).
        file: File to write to.
        nl: Whether to print a newline after the message.
    """
    fg_color = _STYLES[style]["fg"]
    styled_prefix = click.style(_PREFIXES[style], fg=fg_color)
    styled_message = click.style(message, fg=fg_color)
    click.echo(f"{styled_prefix} {styled_message}", file=file, nl=nl)


def success(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("world.mbtiles: metadata valid (spec 1.1)")
        ✓ world.mbtiles: metadata valid (spec 1.1)
    """
    _output(message, "success", file=file, nl=nl)


def info(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an info message with blue arrow."""
    _output(message, "info", file=file, nl=nl)


def warn(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a warning message with yellow warning symbol (default: stderr)."""
    _output(message, "warn", file=file or sys.stderr, nl=nl)


def error(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an error message with red X (default: stderr).

    Example:
        >>> error("Missing mandatory field 'name'")
        ✗ Missing mandatory field 'name'
    """
    _output(message, "error", file=file or sys.stderr, nl=nl)


def detail(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a detail message in dimmed text."""
    _output(message, "detail", file=file, nl=nl)
