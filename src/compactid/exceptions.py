"""Error types raised by the identifier codec."""

from __future__ import annotations

from typing import Any


class CompactIdError(Exception):
    """Base error type."""


class InvalidIdentifier(CompactIdError, ValueError):
    """Raised when a string is not a canonical 26-character ULID."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"{value!r} is not a valid 26-character ULID")
        self.value = value


class MalformedCompactId(CompactIdError, ValueError):
    """Raised when a compact id does not decode to a ULID triple."""

    def __init__(self, value: Any, reason: str = "could not be decoded") -> None:
        super().__init__(f"Compact id {value!r} {reason}")
        self.value = value
        self.reason = reason


class ConfigurationError(CompactIdError, ValueError):
    """Raised when a :class:`~compactid.config.CodecConfig` cannot be used."""
