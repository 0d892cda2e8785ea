"""Multi-integer encoders used to render compact ids."""

from __future__ import annotations

from typing import Protocol, Sequence

from sqids import Sqids

from .config import CodecConfig
from .exceptions import ConfigurationError

__all__ = ["IntegerListEncoder", "build_encoder"]


class IntegerListEncoder(Protocol):
    """Encode an ordered list of unsigned integers into one string and back.

    ``decode`` must return an empty list, rather than raise, when the input
    was not produced by ``encode``.
    """

    def encode(self, numbers: Sequence[int]) -> str: ...

    def decode(self, value: str) -> list[int]: ...


def build_encoder(config: CodecConfig) -> IntegerListEncoder:
    """Create a :class:`sqids.Sqids` encoder from ``config``."""

    try:
        if config.blocklist is None:
            return Sqids(alphabet=config.alphabet, min_length=config.min_length)
        return Sqids(
            alphabet=config.alphabet,
            min_length=config.min_length,
            blocklist=set(config.blocklist),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid compact encoder configuration: {exc}") from exc
