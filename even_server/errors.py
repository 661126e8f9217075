"""Error types for the even server.

Only two failure classes are meaningful here: bad configuration at startup and
malformed record payloads when parsing. Anything else raised inside a handler
is unexpected and is converted to a stable JSON error shape by the server.
"""

from __future__ import annotations

from typing import Any


class EvenServerError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(EvenServerError):
    """Raised when environment configuration cannot be parsed."""


class RecordError(EvenServerError):
    """Raised when a payload does not match either /info record shape."""


def error_from_exception(exc: Exception) -> dict[str, Any]:
    """Best-effort conversion of unexpected exceptions into a stable error shape."""

    return {
        "error": {
            "code": "UNEXPECTED_ERROR",
            "message": "Unexpected error in even server.",
            "details": {"type": type(exc).__name__, "message": str(exc)},
        }
    }
