"""Tests for the fixed-width ternary integer."""

import pytest

from tritsig.types.bigint import TernaryInt
from tritsig.types.trinary import MAX_HASH_VALUE, int_to_bytes


def test_add_u32_adds() -> None:
    """Small additions behave like plain integer addition."""
    assert TernaryInt(-5).add_u32(7) == TernaryInt(2)
    assert TernaryInt(0).add_u32(2**32 - 1).value == 2**32 - 1


def test_add_u32_wraps_at_block_width() -> None:
    """Crossing the largest value wraps to the most negative one."""
    assert TernaryInt(MAX_HASH_VALUE).add_u32(1).value == -MAX_HASH_VALUE
    assert TernaryInt(MAX_HASH_VALUE).add_u32(3).value == -MAX_HASH_VALUE + 2


@pytest.mark.parametrize(
    "addend",
    [
        pytest.param(-1, id="negative"),
        pytest.param(2**32, id="too_wide"),
    ],
)
def test_add_u32_rejects_non_uint32(addend: int) -> None:
    """Only unsigned 32-bit integers can be added."""
    with pytest.raises(OverflowError):
        TernaryInt(0).add_u32(addend)


def test_bytes_roundtrip() -> None:
    """Loading and storing a block preserves its value."""
    data = int_to_bytes(-123456789)
    number = TernaryInt.from_bytes(data)
    assert number.value == -123456789
    assert number.to_bytes() == data
    assert repr(number) == "TernaryInt(-123456789)"


def test_construction_reduces() -> None:
    """Out-of-range construction values are wrapped, not rejected."""
    assert TernaryInt(3**242 + 4) == TernaryInt(4)
    assert hash(TernaryInt(3**242 + 4)) == hash(TernaryInt(4))
