"""Sizes of the trinary hash block shared by every component."""

from typing_extensions import Final

TRYTE_ALPHABET: Final = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""The 27 tryte symbols, ordered by value starting at 0 (`9`)."""

TRITS_PER_TRYTE: Final = 3
"""Number of balanced trits packed in one tryte."""

HASH_LENGTH: Final = 243
"""Length of one hash block in trits."""

TRYTE_HASH_LENGTH: Final = HASH_LENGTH // TRITS_PER_TRYTE
"""Length of one hash block in trytes (81)."""

BYTE_HASH_LENGTH: Final = 48
"""Length of one hash block in bytes (384 bits, two's complement)."""

HASH_VALUE_TRITS: Final = HASH_LENGTH - 1
"""
Number of trits that carry the value of a hash block.

The last trit of a block is always zero in its byte form: a 384-bit signed
integer cannot hold every 243-trit value.
"""
