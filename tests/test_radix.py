import random

import pytest

from compactid.radix import ALPHABET, decode_chunk, encode_chunk


def test_alphabet_is_sorted_crockford_base32() -> None:
    assert len(ALPHABET) == 32
    assert list(ALPHABET) == sorted(ALPHABET)
    assert not set("ILOU") & set(ALPHABET)


def test_decode_chunk_accumulates_five_bits_per_symbol() -> None:
    assert decode_chunk("") == 0
    assert decode_chunk("0000") == 0
    assert decode_chunk("Z") == 31
    assert decode_chunk("10") == 32
    assert decode_chunk("Z" * 16) == 2**80 - 1


def test_encode_chunk_pads_to_requested_length() -> None:
    assert encode_chunk(0, 16) == "0" * 16
    assert encode_chunk(32, 4) == "0010"
    assert encode_chunk(2**80 - 1, 16) == "Z" * 16


def test_chunk_round_trip_for_random_strings() -> None:
    rng = random.Random(2024)
    for _ in range(200):
        chunk = "".join(rng.choice(ALPHABET) for _ in range(16))
        assert encode_chunk(decode_chunk(chunk), 16) == chunk


def test_decode_chunk_rejects_unknown_symbols() -> None:
    with pytest.raises(ValueError, match="'U'"):
        decode_chunk("00U0")


def test_encode_chunk_rejects_values_that_do_not_fit() -> None:
    with pytest.raises(ValueError):
        encode_chunk(2**80, 16)
    with pytest.raises(ValueError):
        encode_chunk(-1, 16)
