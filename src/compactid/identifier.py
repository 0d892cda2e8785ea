"""Split canonical ULID strings into their timestamp and randomness fields.

A ULID is 26 Crockford base32 symbols: the first 10 carry a 48-bit millisecond
timestamp and the last 16 carry 80 bits of randomness.  Parsing and rendering
of the timestamp is delegated to :mod:`ulid` (``python-ulid``); the randomness
field goes through :mod:`compactid.radix` so that it is handled as one integer.
"""

from __future__ import annotations

import logging
from typing import Any

from ulid import ULID

from .exceptions import InvalidIdentifier
from .radix import ALPHABET, decode_chunk, encode_chunk

__all__ = [
    "IDENTIFIER_LENGTH",
    "RANDOMNESS_BITS",
    "RANDOMNESS_LENGTH",
    "TIMESTAMP_BITS",
    "TIMESTAMP_LENGTH",
    "compose",
    "decode_time",
    "decompose",
    "encode_time",
    "is_valid",
]

logger = logging.getLogger(__name__)

TIMESTAMP_BITS = 48
RANDOMNESS_BITS = 80
TIMESTAMP_LENGTH = 10
RANDOMNESS_LENGTH = 16
IDENTIFIER_LENGTH = TIMESTAMP_LENGTH + RANDOMNESS_LENGTH

_SYMBOLS = frozenset(ALPHABET)
# 26 symbols hold 130 bits; the leading symbol may only use the low three.
_MAX_LEADING = ALPHABET[7]
_ZERO_RANDOMNESS = ALPHABET[0] * RANDOMNESS_LENGTH


def is_valid(value: Any) -> bool:
    """Return ``True`` when ``value`` is a canonical upper-case ULID string."""

    if not isinstance(value, str) or len(value) != IDENTIFIER_LENGTH:
        return False
    if value[0] > _MAX_LEADING or not _SYMBOLS.issuperset(value):
        return False
    try:
        ULID.from_str(value)
    except ValueError:
        return False
    return True


def decode_time(chunk: str) -> int:
    """Return the millisecond timestamp encoded by a 10-symbol prefix."""

    return ULID.from_str(chunk + _ZERO_RANDOMNESS).milliseconds


def encode_time(milliseconds: int) -> str:
    """Render ``milliseconds`` as the 10-symbol ULID timestamp prefix."""

    if milliseconds < 0 or milliseconds >> TIMESTAMP_BITS:
        raise ValueError(f"{milliseconds} is not an unsigned 48-bit timestamp")
    raw = milliseconds.to_bytes(TIMESTAMP_BITS // 8, "big") + bytes(RANDOMNESS_BITS // 8)
    return str(ULID.from_bytes(raw))[:TIMESTAMP_LENGTH]


def decompose(identifier: str) -> tuple[int, int]:
    """Return the ``(timestamp, randomness)`` integers of ``identifier``."""

    if not is_valid(identifier):
        logger.debug("Rejected identifier %r", identifier)
        raise InvalidIdentifier(identifier)
    timestamp = decode_time(identifier[:TIMESTAMP_LENGTH])
    randomness = decode_chunk(identifier[TIMESTAMP_LENGTH:])
    return timestamp, randomness


def compose(timestamp: int, randomness: int) -> str:
    """Build the 26-symbol ULID string for ``timestamp`` and ``randomness``."""

    return encode_time(timestamp) + encode_chunk(randomness, RANDOMNESS_LENGTH)
