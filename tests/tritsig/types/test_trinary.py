"""Tests for the trit, tryte, integer and byte conversions."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tritsig.types.constants import BYTE_HASH_LENGTH, HASH_LENGTH, TRYTE_ALPHABET
from tritsig.types.exceptions import TrinaryEncodingError
from tritsig.types.trinary import (
    MAX_HASH_VALUE,
    bytes_to_int,
    bytes_to_trits,
    bytes_to_trytes,
    int_to_bytes,
    int_to_trits,
    int_to_trytes,
    reduce_to_hash_value,
    trits_to_bytes,
    trits_to_int,
    trits_to_trytes,
    tryte_from_value,
    tryte_value,
    trytes_to_bytes,
    trytes_to_int,
    trytes_to_trits,
)

tryte_strings = st.text(alphabet=TRYTE_ALPHABET)
hash_values = st.integers(min_value=-MAX_HASH_VALUE, max_value=MAX_HASH_VALUE)


@pytest.mark.parametrize(
    "symbol, value",
    [
        pytest.param("9", 0, id="nine_is_zero"),
        pytest.param("A", 1, id="A"),
        pytest.param("M", 13, id="M_is_max"),
        pytest.param("N", -13, id="N_is_min"),
        pytest.param("Z", -1, id="Z"),
    ],
)
def test_tryte_values(symbol: str, value: int) -> None:
    """Each alphabet symbol maps to its balanced value and back."""
    assert tryte_value(symbol) == value
    assert tryte_from_value(value) == symbol


@pytest.mark.parametrize(
    "symbol, trits",
    [
        pytest.param("9", [0, 0, 0], id="zero"),
        pytest.param("A", [1, 0, 0], id="one"),
        pytest.param("D", [1, 1, 0], id="four"),
        pytest.param("E", [-1, -1, 1], id="five"),
        pytest.param("M", [1, 1, 1], id="thirteen"),
        pytest.param("N", [-1, -1, -1], id="minus_thirteen"),
    ],
)
def test_tryte_trits_are_little_endian(symbol: str, trits: list[int]) -> None:
    """A tryte expands into 3 balanced trits, least significant first."""
    assert trytes_to_trits(symbol) == trits
    assert trits_to_trytes(trits) == symbol


def test_invalid_symbols_are_rejected() -> None:
    """Characters outside the alphabet never decode."""
    with pytest.raises(TrinaryEncodingError, match="position 2"):
        trytes_to_trits("AB!")
    with pytest.raises(TrinaryEncodingError):
        tryte_value("a")
    with pytest.raises(TrinaryEncodingError):
        tryte_from_value(14)


def test_trits_to_trytes_rejects_bad_input() -> None:
    """Trit sequences must be whole trytes of valid trits."""
    with pytest.raises(TrinaryEncodingError, match="multiple of 3"):
        trits_to_trytes([0, 1])
    with pytest.raises(TrinaryEncodingError, match="must be -1, 0 or 1"):
        trits_to_trytes([0, 2, 0])


@given(tryte_strings)
def test_trytes_trits_roundtrip(trytes: str) -> None:
    """Tryte strings survive a trip through trits."""
    assert trits_to_trytes(trytes_to_trits(trytes)) == trytes


@given(st.integers(min_value=-(3**27 - 1) // 2, max_value=(3**27 - 1) // 2))
def test_int_trits_roundtrip(value: int) -> None:
    """Every integer in the balanced range of 27 trits round-trips."""
    assert trits_to_int(int_to_trits(value, 27)) == value


def test_int_to_trits_rejects_overflow() -> None:
    """A value wider than the requested length is an error, not a truncation."""
    assert int_to_trits(13, 3) == [1, 1, 1]
    with pytest.raises(TrinaryEncodingError, match="does not fit"):
        int_to_trits(14, 3)
    with pytest.raises(TrinaryEncodingError, match="does not fit"):
        int_to_trits(-14, 3)


def test_int_trytes() -> None:
    """Integers pad to the requested number of trytes."""
    assert int_to_trytes(0, 9) == "9" * 9
    assert int_to_trytes(1, 3) == "A99"
    assert int_to_trytes(-1, 3) == "Z99"
    assert int_to_trytes(27, 2) == "9A"
    assert trytes_to_int("9A") == 27


def test_reduce_to_hash_value_wraps_balanced() -> None:
    """Reduction keeps values in the range and wraps the edges."""
    assert reduce_to_hash_value(MAX_HASH_VALUE) == MAX_HASH_VALUE
    assert reduce_to_hash_value(MAX_HASH_VALUE + 1) == -MAX_HASH_VALUE
    assert reduce_to_hash_value(-MAX_HASH_VALUE - 1) == MAX_HASH_VALUE
    assert reduce_to_hash_value(3**242) == 0


def test_int_bytes_is_twos_complement() -> None:
    """Hash-block integers are 48 big-endian two's complement bytes."""
    assert int_to_bytes(0) == bytes(BYTE_HASH_LENGTH)
    assert int_to_bytes(1) == bytes(BYTE_HASH_LENGTH - 1) + b"\x01"
    assert int_to_bytes(-1) == b"\xff" * BYTE_HASH_LENGTH
    with pytest.raises(TrinaryEncodingError, match="outside the range"):
        int_to_bytes(MAX_HASH_VALUE + 1)


def test_bytes_to_int_reduces_wide_values() -> None:
    """Any 384-bit pattern decodes into the 242-trit range."""
    widest = b"\x7f" + b"\xff" * (BYTE_HASH_LENGTH - 1)
    value = bytes_to_int(widest)
    assert -MAX_HASH_VALUE <= value <= MAX_HASH_VALUE
    assert (value - (2**383 - 1)) % 3**242 == 0

    with pytest.raises(TrinaryEncodingError, match="48 bytes"):
        bytes_to_int(b"\x00" * 47)


@given(hash_values)
def test_block_bytes_roundtrip(value: int) -> None:
    """A hash block survives bytes -> trits -> bytes, with its last trit zero."""
    data = int_to_bytes(value)
    trits = bytes_to_trits(data)
    assert len(trits) == HASH_LENGTH
    assert trits[-1] == 0
    assert trits_to_bytes(trits) == data


def test_last_trit_of_a_block_is_dropped() -> None:
    """The 243rd trit carries no information in the byte form."""
    trits = [1] * HASH_LENGTH
    truncated = trits[:-1] + [0]
    assert trits_to_bytes(trits) == trits_to_bytes(truncated)


def test_trytes_bytes_blocks() -> None:
    """Tryte strings convert block by block."""
    trytes = "A" + "9" * 80 + "Z" + "9" * 80
    data = trytes_to_bytes(trytes)
    assert len(data) == 2 * BYTE_HASH_LENGTH
    assert bytes_to_trytes(data) == trytes

    with pytest.raises(TrinaryEncodingError, match="multiple of 81"):
        trytes_to_bytes("A" * 80)
    with pytest.raises(TrinaryEncodingError, match="multiple of 81"):
        trytes_to_bytes("")
    with pytest.raises(TrinaryEncodingError, match="multiple of 48"):
        bytes_to_trytes(b"\x00" * 50)


def test_strict_encoding_rejects_non_zero_last_trit() -> None:
    """Strict encoding refuses blocks whose dropped trit carries a value."""
    trits = [0] * (HASH_LENGTH - 1) + [1]
    assert trits_to_bytes(trits) == bytes(BYTE_HASH_LENGTH)
    with pytest.raises(TrinaryEncodingError, match="last trit"):
        trits_to_bytes(trits, strict=True)

    # "J" is 10: trits (1, 0, 1), so its top trit is set.
    trytes = "9" * 80 + "J"
    assert trytes_to_bytes(trytes) == trytes_to_bytes("9" * 80 + "A")
    with pytest.raises(TrinaryEncodingError, match="last trit"):
        trytes_to_bytes(trytes, strict=True)
    assert trytes_to_bytes("9" * 80 + "A", strict=True) == trytes_to_bytes("9" * 80 + "A")
