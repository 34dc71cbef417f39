"""Parsing of the MBTiles ``bounds`` metadata value.

Bounds are written in OpenLayers Bounds order as four comma-separated
numbers: ``left, bottom, right, top`` (longitude, latitude, longitude,
latitude), e.g. ``-180.0,-85,180,85`` for the whole Earth.
"""

from __future__ import annotations

import logging

from mbtiles_meta.constants import (
    BOUNDS_BOTTOM_RANGE,
    BOUNDS_LEFT_RANGE,
    BOUNDS_RIGHT_RANGE,
    BOUNDS_TOP_RANGE,
)

logger = logging.getLogger(__name__)

# left, bottom, right, top
Bounds = tuple[float, float, float, float]


def _in_range(value: float, limits: tuple[float, float]) -> bool:
    low, high = limits
    return low <= value <= high


def bounds_in_range(bounds: Bounds) -> bool:
    """Check bounds against the MBTiles coordinate limits.

    The limits split the globe at the prime meridian and the equator:
    left in [-180, 0], bottom in [-85, 0], right in [0, 180], top in [0, 85].
    A box lying entirely in one hemisphere is therefore rejected.

    Args:
        bounds: Parsed (left, bottom, right, top) values.

    Returns:
        True if all four coordinates are within their limits.
    """
    left, bottom, right, top = bounds
    return (
        _in_range(left, BOUNDS_LEFT_RANGE)
        and _in_range(bottom, BOUNDS_BOTTOM_RANGE)
        and _in_range(right, BOUNDS_RIGHT_RANGE)
        and _in_range(top, BOUNDS_TOP_RANGE)
    )


def parse_bounds(text: str | None) -> Bounds | None:
    """Parse a ``left,bottom,right,top`` string into a bounds tuple.

    Parsing is all-or-nothing: a wrong token count, any token that is not a
    number, or any coordinate outside its limits rejects the whole value.

    Args:
        text: Raw bounds value from the metadata table.

    Returns:
        Tuple of four floats, or None if the value is rejected.
    """
    if text is None:
        return None

    tokens = text.split(",")
    if len(tokens) != 4:
        logger.debug("Rejected bounds %r: expected 4 values, got %d", text, len(tokens))
        return None

    # float() also takes digit separators and non-ASCII digits
    if any("_" in token or not token.isascii() for token in tokens):
        logger.debug("Rejected bounds %r: non-numeric value", text)
        return None

    try:
        left, bottom, right, top = (float(token) for token in tokens)
    except ValueError:
        logger.debug("Rejected bounds %r: non-numeric value", text)
        return None

    bounds: Bounds = (left, bottom, right, top)
    if not bounds_in_range(bounds):
        logger.debug("Rejected bounds %r: coordinates out of range", text)
        return None

    return bounds
