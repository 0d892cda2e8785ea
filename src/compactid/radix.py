"""Fixed-width conversion between Crockford base32 strings and integers."""

from __future__ import annotations

__all__ = [
    "ALPHABET",
    "BITS_PER_SYMBOL",
    "decode_chunk",
    "encode_chunk",
]


# Crockford's base32 drops ``I``, ``L``, ``O`` and ``U``.  The symbols are
# ordered by ASCII code point so that fixed-width strings sort the same way as
# the integers they encode.
ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
BITS_PER_SYMBOL = 5
_MASK = (1 << BITS_PER_SYMBOL) - 1
_INDEX = {char: index for index, char in enumerate(ALPHABET)}


def decode_chunk(chunk: str) -> int:
    """Decode ``chunk`` into an unsigned integer, five bits per symbol."""

    number = 0
    for char in chunk:
        try:
            digit = _INDEX[char]
        except KeyError as exc:
            raise ValueError(f"Character {char!r} is not valid base32") from exc
        number = (number << BITS_PER_SYMBOL) | digit
    return number


def encode_chunk(value: int, length: int) -> str:
    """Encode ``value`` as exactly ``length`` symbols, left padded with ``0``."""

    if value < 0:
        raise ValueError("base32 chunks only hold unsigned integers")
    if value >> (BITS_PER_SYMBOL * length):
        raise ValueError(f"{value} does not fit in {length} base32 symbols")
    symbols: list[str] = []
    number = value
    for _ in range(length):
        symbols.append(ALPHABET[number & _MASK])
        number >>= BITS_PER_SYMBOL
    return "".join(reversed(symbols))
