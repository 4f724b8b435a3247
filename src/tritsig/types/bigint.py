"""Fixed-width ternary integer used to fold a key index into a seed."""

from __future__ import annotations

from typing_extensions import Self

from .trinary import bytes_to_int, int_to_bytes, reduce_to_hash_value
from .uint import Uint32


class TernaryInt:
    """
    A signed integer of exactly one hash block (242 balanced trits).

    Arithmetic wraps: results are reduced modulo `3**242` into the balanced
    range, so the value can always be written back to 48 bytes.
    """

    __slots__ = ("value",)

    def __init__(self, value: int = 0) -> None:
        self.value = reduce_to_hash_value(value)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Load the value of a 48-byte hash block."""
        return cls(bytes_to_int(data))

    def add_u32(self, addend: int) -> Self:
        """
        Add an unsigned 32-bit integer in place, wrapping on overflow.

        Raises:
            OverflowError: If `addend` does not fit in 32 bits.
        """
        self.value = reduce_to_hash_value(self.value + int(Uint32(addend)))
        return self

    def to_bytes(self) -> bytes:
        """Write the value as a 48-byte hash block."""
        return int_to_bytes(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TernaryInt):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((TernaryInt, self.value))

    def __repr__(self) -> str:
        return f"TernaryInt({self.value})"
