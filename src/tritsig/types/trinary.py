"""
Conversions between trits, trytes, integers and the byte form of hash blocks.

A trit is a balanced ternary digit in `{-1, 0, 1}`. Trit sequences are
little-endian: the trit at position `i` weighs `3**i`. A tryte packs three
trits and is written with one symbol of `TRYTE_ALPHABET`, where `9` is zero,
`A` to `M` are 1 to 13 and `N` to `Z` are -13 to -1.

The sponge works on bytes. One hash block of 243 trits maps to 48 bytes: the
integer value of its first 242 trits, encoded as big-endian two's complement.
"""

from __future__ import annotations

from typing import Sequence

from typing_extensions import Final

from .constants import (
    BYTE_HASH_LENGTH,
    HASH_LENGTH,
    HASH_VALUE_TRITS,
    TRITS_PER_TRYTE,
    TRYTE_ALPHABET,
    TRYTE_HASH_LENGTH,
)
from .exceptions import TrinaryEncodingError

TRYTE_VALUES: Final[dict[str, int]] = {
    symbol: (index if index <= 13 else index - 27) for index, symbol in enumerate(TRYTE_ALPHABET)
}
"""Maps each tryte symbol to its balanced value in `[-13, 13]`."""

_HASH_MODULUS: Final = 3**HASH_VALUE_TRITS

MAX_HASH_VALUE: Final = (_HASH_MODULUS - 1) // 2
"""The largest integer a hash block can hold; the smallest is its negation."""


def _balanced_digits(value: int, length: int) -> list[int]:
    """Split `value` into `length` balanced trits, returning them with the leftover."""
    trits: list[int] = []
    for _ in range(length):
        value, remainder = divmod(value, 3)
        if remainder == 2:
            # Borrow from the next position so this digit becomes -1.
            remainder = -1
            value += 1
        trits.append(remainder)
    return trits + [value]


_TRYTE_TRITS: Final[dict[str, tuple[int, ...]]] = {
    symbol: tuple(_balanced_digits(value, TRITS_PER_TRYTE)[:TRITS_PER_TRYTE])
    for symbol, value in TRYTE_VALUES.items()
}

_TRITS_TRYTE: Final[dict[tuple[int, ...], str]] = {
    trits: symbol for symbol, trits in _TRYTE_TRITS.items()
}


def validate_trytes(trytes: str) -> str:
    """
    Check that every character of `trytes` is a tryte symbol.

    Raises:
        TrinaryEncodingError: On the first character outside the alphabet.
    """
    for position, symbol in enumerate(trytes):
        if symbol not in TRYTE_VALUES:
            raise TrinaryEncodingError(trytes, f"invalid tryte {symbol!r} at position {position}")
    return trytes


def tryte_value(tryte: str) -> int:
    """Return the balanced value in `[-13, 13]` of a single tryte symbol."""
    try:
        return TRYTE_VALUES[tryte]
    except KeyError:
        raise TrinaryEncodingError(tryte, "not a tryte symbol") from None


def tryte_from_value(value: int) -> str:
    """Return the tryte symbol of a balanced value in `[-13, 13]`."""
    if not -13 <= value <= 13:
        raise TrinaryEncodingError(value, "tryte values lie in [-13, 13]")
    return TRYTE_ALPHABET[value % 27]


def trytes_to_trits(trytes: str) -> list[int]:
    """Expand a tryte string into its little-endian trits."""
    validate_trytes(trytes)
    return [trit for symbol in trytes for trit in _TRYTE_TRITS[symbol]]


def trits_to_trytes(trits: Sequence[int]) -> str:
    """
    Pack trits into a tryte string.

    Raises:
        TrinaryEncodingError: If the length is not a multiple of 3 or a value is
            not a trit.
    """
    if len(trits) % TRITS_PER_TRYTE:
        raise TrinaryEncodingError(trits, "trit count must be a multiple of 3")
    symbols: list[str] = []
    for offset in range(0, len(trits), TRITS_PER_TRYTE):
        chunk = tuple(trits[offset : offset + TRITS_PER_TRYTE])
        try:
            symbols.append(_TRITS_TRYTE[chunk])
        except KeyError:
            raise TrinaryEncodingError(chunk, "trits must be -1, 0 or 1") from None
    return "".join(symbols)


def trits_to_int(trits: Sequence[int]) -> int:
    """Return the integer value of little-endian balanced trits."""
    value = 0
    for trit in reversed(trits):
        value = value * 3 + trit
    return value


def int_to_trits(value: int, length: int) -> list[int]:
    """
    Encode `value` as exactly `length` little-endian balanced trits.

    Raises:
        TrinaryEncodingError: If `value` does not fit in `length` trits.
    """
    *trits, leftover = _balanced_digits(value, length)
    if leftover:
        raise TrinaryEncodingError(value, f"does not fit in {length} trits")
    return trits


def int_to_trytes(value: int, length: int) -> str:
    """Encode `value` as exactly `length` trytes."""
    return trits_to_trytes(int_to_trits(value, length * TRITS_PER_TRYTE))


def trytes_to_int(trytes: str) -> int:
    """Return the integer value of a tryte string."""
    return trits_to_int(trytes_to_trits(trytes))


def reduce_to_hash_value(value: int) -> int:
    """
    Wrap `value` into the range a hash block can hold.

    The result is the balanced residue of `value` modulo `3**242`, that is the
    value of the lowest 242 balanced trits of `value`.
    """
    residue = value % _HASH_MODULUS
    if residue > MAX_HASH_VALUE:
        residue -= _HASH_MODULUS
    return residue


def int_to_bytes(value: int) -> bytes:
    """
    Encode a hash-block integer as 48 big-endian two's complement bytes.

    Raises:
        TrinaryEncodingError: If `value` lies outside the 242-trit range.
    """
    if not -MAX_HASH_VALUE <= value <= MAX_HASH_VALUE:
        raise TrinaryEncodingError(value, "outside the range of a hash block")
    return value.to_bytes(BYTE_HASH_LENGTH, "big", signed=True)


def bytes_to_int(data: bytes) -> int:
    """
    Decode 48 bytes into a hash-block integer.

    Any 384-bit input is accepted and reduced into the 242-trit range.
    """
    if len(data) != BYTE_HASH_LENGTH:
        raise TrinaryEncodingError(
            data, f"a hash block is {BYTE_HASH_LENGTH} bytes, got {len(data)}"
        )
    return reduce_to_hash_value(int.from_bytes(data, "big", signed=True))


def trits_to_bytes(trits: Sequence[int], strict: bool = False) -> bytes:
    """
    Encode one 243-trit hash block as bytes, ignoring its last trit.

    With `strict`, a non-zero last trit raises instead of being dropped.
    """
    if len(trits) != HASH_LENGTH:
        raise TrinaryEncodingError(trits, f"a hash block is {HASH_LENGTH} trits, got {len(trits)}")
    if strict and trits[HASH_VALUE_TRITS]:
        raise TrinaryEncodingError(trits, "the last trit of a hash block must be zero")
    return int_to_bytes(trits_to_int(trits[:HASH_VALUE_TRITS]))


def bytes_to_trits(data: bytes) -> list[int]:
    """Decode one 48-byte hash block into 243 trits, the last one zero."""
    return int_to_trits(bytes_to_int(data), HASH_VALUE_TRITS) + [0]


def trytes_to_bytes(trytes: str, strict: bool = False) -> bytes:
    """
    Encode whole hash blocks of trytes into their byte form.

    Raises:
        TrinaryEncodingError: If the length is not a positive multiple of 81,
            or with `strict` if the last trit of a block is not zero.
    """
    if not trytes or len(trytes) % TRYTE_HASH_LENGTH:
        raise TrinaryEncodingError(
            trytes, f"length must be a positive multiple of {TRYTE_HASH_LENGTH} trytes"
        )
    trits = trytes_to_trits(trytes)
    return b"".join(
        trits_to_bytes(trits[offset : offset + HASH_LENGTH], strict)
        for offset in range(0, len(trits), HASH_LENGTH)
    )


def bytes_to_trytes(data: bytes) -> str:
    """
    Decode whole 48-byte hash blocks into trytes.

    Raises:
        TrinaryEncodingError: If the length is not a positive multiple of 48.
    """
    if not data or len(data) % BYTE_HASH_LENGTH:
        raise TrinaryEncodingError(
            data, f"length must be a positive multiple of {BYTE_HASH_LENGTH} bytes"
        )
    return "".join(
        trits_to_trytes(bytes_to_trits(data[offset : offset + BYTE_HASH_LENGTH]))
        for offset in range(0, len(data), BYTE_HASH_LENGTH)
    )
