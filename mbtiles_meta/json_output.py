"""JSON envelopes for machine-readable CLI output.

Every command run with --json (or --format json) prints one object:
``{"success": ..., "command": ..., "data": {...}}`` plus an ``errors``
list when it failed. For ``check`` the data holds the validated record;
errors carry the structured MBTM-* code when one exists.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from mbtiles_meta.errors import MbtilesMetaError


@dataclass
class ErrorDetail:
    """One entry of the errors list.

    Attributes:
        type: Error class name, e.g. "MetadataParseError".
        message: Message without the code prefix.
        code: MBTM-* code, or None for ad hoc failures such as rejected bounds.
    """

    type: str
    message: str
    code: str | None = None

    def to_dict(self) -> dict[str, str]:
        result = {"type": self.type, "message": self.message}
        if self.code is not None:
            result["code"] = self.code
        return result

    @classmethod
    def from_error(cls, err: MbtilesMetaError) -> ErrorDetail:
        """Describe a raised mbtiles-meta error."""
        return cls(type=type(err).__name__, message=err.message, code=err.code)


@dataclass
class OutputEnvelope:
    """Result of one command; ``errors`` stays None on success."""

    success: bool
    command: str
    data: dict[str, Any] | None
    errors: list[ErrorDetail] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "success": self.success,
            "command": self.command,
            "data": self.data,
        }
        if self.errors is not None:
            result["errors"] = [e.to_dict() for e in self.errors]
        return result

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize; pass indent=None for a single line."""
        return json.dumps(self.to_dict(), indent=indent)


def success_envelope(command: str, data: dict[str, Any]) -> OutputEnvelope:
    return OutputEnvelope(success=True, command=command, data=data)


def error_envelope(
    command: str,
    errors: list[ErrorDetail],
    *,
    data: dict[str, Any] | None = None,
) -> OutputEnvelope:
    """Build a failed envelope; data defaults to an empty dict."""
    return OutputEnvelope(
        success=False,
        command=command,
        data=data if data is not None else {},
        errors=errors,
    )
