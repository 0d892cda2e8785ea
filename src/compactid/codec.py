"""Translate ULIDs to short compact ids and back."""

from __future__ import annotations

import datetime as dt
import logging
from functools import lru_cache

from .config import CodecConfig
from .encoders import IntegerListEncoder, build_encoder
from .exceptions import MalformedCompactId
from .identifier import TIMESTAMP_BITS, compose, decompose
from .width import HALF_BITS, join80, split80

__all__ = ["IdentifierCodec", "codec_for", "decode_identifier", "encode_identifier"]

logger = logging.getLogger(__name__)

_FIELD_BITS = (TIMESTAMP_BITS, HALF_BITS, HALF_BITS)
_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


class IdentifierCodec:
    """Convert ULIDs into compact ids made of ``[timestamp, high, low]``.

    The 80-bit randomness is split into two 40-bit halves because the compact
    encoder only accepts machine-sized integers.  Compact ids do not sort in
    timestamp order; use the ULID when ordering matters.
    """

    __slots__ = ("config", "_encoder")

    def __init__(
        self,
        config: CodecConfig | None = None,
        *,
        encoder: IntegerListEncoder | None = None,
    ) -> None:
        self.config = config or CodecConfig()
        self._encoder = encoder if encoder is not None else build_encoder(self.config)

    def encode(self, identifier: str) -> str:
        """Return the compact id for a canonical 26-character ULID."""

        timestamp, randomness = decompose(identifier)
        high, low = split80(randomness)
        return self._encoder.encode([timestamp, high, low])

    def decode(self, compact: str) -> str:
        """Return the ULID a compact id was built from."""

        timestamp, high, low = self._fields(compact)
        return compose(timestamp, join80(high, low))

    def timestamp_of(self, compact: str) -> dt.datetime:
        """Return the UTC creation time of the ULID behind ``compact``."""

        timestamp, _high, _low = self._fields(compact)
        try:
            return _EPOCH + dt.timedelta(milliseconds=timestamp)
        except OverflowError as exc:
            raise self._reject(compact, "has a timestamp outside the datetime range") from exc

    def _fields(self, compact: str) -> tuple[int, int, int]:
        numbers = list(self._encoder.decode(compact)) if isinstance(compact, str) else []
        if not numbers:
            raise self._reject(compact, "could not be decoded")
        if len(numbers) != len(_FIELD_BITS):
            raise self._reject(compact, f"holds {len(numbers)} integers, expected {len(_FIELD_BITS)}")
        for number, bits in zip(numbers, _FIELD_BITS):
            if number < 0 or number >> bits:
                raise self._reject(compact, "holds an integer outside the ULID field widths")
        # Several strings can decode to the same integers; only the canonical
        # rendering is accepted.
        if self._encoder.encode(numbers) != compact:
            raise self._reject(compact, "is not in canonical form")
        timestamp, high, low = numbers
        return timestamp, high, low

    @staticmethod
    def _reject(compact: object, reason: str) -> MalformedCompactId:
        logger.debug("Rejected compact id %r: %s", compact, reason)
        return MalformedCompactId(compact, reason)


@lru_cache(maxsize=32)
def codec_for(config: CodecConfig | None = None) -> IdentifierCodec:
    """Return the codec for ``config``, reused across calls with an equal config."""

    return IdentifierCodec(config)


def encode_identifier(identifier: str, config: CodecConfig | None = None) -> str:
    """Encode ``identifier`` with the codec for ``config``."""

    return codec_for(config).encode(identifier)


def decode_identifier(compact: str, config: CodecConfig | None = None) -> str:
    """Decode ``compact`` with the codec for ``config``."""

    return codec_for(config).decode(compact)
