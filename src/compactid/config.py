"""Configuration for the compact encoder."""

from __future__ import annotations

import os
from typing import Mapping

import msgspec
from msgspec import Struct

from .exceptions import ConfigurationError

__all__ = ["DEFAULT_ALPHABET", "CodecConfig", "load_config"]

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class CodecConfig(Struct, frozen=True):
    """Typed configuration for an :class:`~compactid.codec.IdentifierCodec`.

    ``blocklist`` of ``None`` keeps the encoder's built-in list of words that
    must never appear in generated ids; an empty tuple disables it.
    """

    alphabet: str = DEFAULT_ALPHABET
    min_length: int = 0
    blocklist: tuple[str, ...] | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "COMPACTID_",
    ) -> CodecConfig:
        """Build a configuration from ``{prefix}ALPHABET`` style variables."""

        env = os.environ if environ is None else environ
        alphabet = env.get(f"{prefix}ALPHABET") or DEFAULT_ALPHABET
        raw_length = env.get(f"{prefix}MIN_LENGTH", "").strip()
        try:
            min_length = int(raw_length) if raw_length else 0
        except ValueError as exc:
            raise ConfigurationError(f"{prefix}MIN_LENGTH must be an integer, got {raw_length!r}") from exc
        raw_blocklist = env.get(f"{prefix}BLOCKLIST")
        blocklist: tuple[str, ...] | None = None
        if raw_blocklist is not None:
            blocklist = tuple(word.strip() for word in raw_blocklist.split(",") if word.strip())
        return cls(alphabet=alphabet, min_length=min_length, blocklist=blocklist)


def load_config(data: bytes | str) -> CodecConfig:
    """Decode a JSON document into a :class:`CodecConfig`."""

    try:
        return msgspec.json.decode(data, type=CodecConfig)
    except msgspec.ValidationError as exc:
        raise ConfigurationError(f"Invalid codec configuration: {exc}") from exc
    except msgspec.DecodeError as exc:
        raise ConfigurationError(f"Codec configuration is not valid JSON: {exc}") from exc
