"""Structured error codes for mbtiles-meta.

All errors follow the format MBTM-{category}{number}:
- MBTM-VAL*: Metadata validation errors
- MBTM-VER*: Spec version errors
- MBTM-SRC*: Metadata source errors
- MBTM-CFG*: Configuration errors
"""

from __future__ import annotations

from typing import Any


class MbtilesMetaError(Exception):
    """Base class for all mbtiles-meta errors.

    All errors have:
    - code: Structured error code (e.g., MBTM-VAL001)
    - message: Human-readable error message
    """

    code: str = "MBTM-000"

    # Reserved attribute names that cannot be overwritten by context
    _RESERVED_ATTRS = frozenset({"code", "message", "context", "args"})

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize an mbtiles-meta error.

        Args:
            message: Human-readable error message.
            **context: Additional context stored as error attributes.
                Reserved keys (code, message, context, args) are ignored.
        """
        self.message = message
        self.context = context
        for key, value in context.items():
            if key not in self._RESERVED_ATTRS:
                setattr(self, key, value)
        super().__init__(f"[{self.code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# Validation Errors (MBTM-VAL*)
class ValidationError(MbtilesMetaError):
    """Base class for metadata validation errors."""

    code = "MBTM-VAL000"


class MetadataParseError(ValidationError):
    """Raised when a mandatory field is missing or malformed.

    Also raised when an optional field (bounds) is present but malformed.

    Error code: MBTM-VAL001
    """

    code = "MBTM-VAL001"

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message, field=field)


# Spec Version Errors (MBTM-VER*)
class SpecVersionError(MbtilesMetaError):
    """Base class for spec version errors."""

    code = "MBTM-VER000"


class UnsupportedSpecVersionError(SpecVersionError):
    """Raised when no validator exists for a spec version token.

    Error code: MBTM-VER001
    """

    code = "MBTM-VER001"

    def __init__(self, version: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported MBTiles spec version '{version}' "
            f"(supported: {', '.join(supported)})",
            version=version,
            supported=list(supported),
        )


# Source Errors (MBTM-SRC*)
class SourceError(MbtilesMetaError):
    """Base class for errors reading metadata from storage."""

    code = "MBTM-SRC000"


class MetadataSourceError(SourceError):
    """Raised when the metadata table cannot be read from a file.

    Error code: MBTM-SRC001
    """

    code = "MBTM-SRC001"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read metadata from {path}: {reason}", path=path, reason=reason)


# Configuration Errors (MBTM-CFG*)
class ConfigError(MbtilesMetaError):
    """Base class for configuration-related errors."""

    code = "MBTM-CFG000"


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed.

    Error code: MBTM-CFG001
    """

    code = "MBTM-CFG001"

    def __init__(self, path: str, parse_error: str) -> None:
        super().__init__(
            f"Failed to parse config file {path}: {parse_error}",
            path=path,
            parse_error=parse_error,
        )
