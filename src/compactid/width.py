"""Split the 80-bit randomness field into halves the compact encoder accepts."""

from __future__ import annotations

__all__ = ["HALF_BITS", "HALF_MASK", "join80", "split80"]

HALF_BITS = 40
HALF_MASK = (1 << HALF_BITS) - 1


def split80(value: int) -> tuple[int, int]:
    """Return the ``(high, low)`` 40-bit halves of an 80-bit integer."""

    if value < 0 or value >> (2 * HALF_BITS):
        raise ValueError(f"{value} is not an unsigned 80-bit integer")
    return value >> HALF_BITS, value & HALF_MASK


def join80(high: int, low: int) -> int:
    """Rejoin two 40-bit halves produced by :func:`split80`."""

    for half in (high, low):
        if half < 0 or half > HALF_MASK:
            raise ValueError(f"{half} is not an unsigned 40-bit integer")
    return (high << HALF_BITS) | low
