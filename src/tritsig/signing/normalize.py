"""
Normalizes a bundle hash into the message values that drive the hash chains.

Each of the 81 trytes of the hash becomes its value in `[-13, 13]`. The hash
is cut into 3 chunks of 27 values, and each chunk is shifted, one unit at a
time from its first position onwards, until its values sum to zero. A chunk
whose values sum to zero keeps the total number of chain steps revealed by a
signature constant.
"""

from __future__ import annotations

from ..types.constants import TRYTE_HASH_LENGTH
from ..types.exceptions import InvalidArgumentError
from ..types.trinary import tryte_value, validate_trytes
from .constants import FRAGMENT_LENGTH, NORMALIZED_TRYTE_UPPER_BOUND, NUMBER_OF_FRAGMENT_CHUNKS


def _normalize_chunk(values: list[int]) -> list[int]:
    """Shift a chunk in place until its values sum to zero."""
    bound = NORMALIZED_TRYTE_UPPER_BOUND
    total = sum(values)

    while total > 0:
        for j, value in enumerate(values):
            if value > -bound:
                values[j] -= 1
                total -= 1
                break

    while total < 0:
        for j, value in enumerate(values):
            if value < bound:
                values[j] += 1
                total += 1
                break

    return values


def normalized_bundle(bundle_hash: str) -> list[int]:
    """
    Normalizes an 81-tryte bundle hash.

    Returns:
        81 values in `[-13, 13]`, each consecutive group of 27 summing to zero.

    Raises:
        InvalidArgumentError: If `bundle_hash` is not 81 trytes.
    """
    if len(bundle_hash) != TRYTE_HASH_LENGTH:
        raise InvalidArgumentError(
            f"Bundle hash must be {TRYTE_HASH_LENGTH} trytes, got {len(bundle_hash)}"
        )
    validate_trytes(bundle_hash)

    normalized: list[int] = []
    for i in range(NUMBER_OF_FRAGMENT_CHUNKS):
        chunk = bundle_hash[i * FRAGMENT_LENGTH : (i + 1) * FRAGMENT_LENGTH]
        normalized.extend(_normalize_chunk([tryte_value(symbol) for symbol in chunk]))
    return normalized


def normalized_fragments(bundle_hash: str) -> list[list[int]]:
    """Normalizes a bundle hash and splits it into its 3 message chunks."""
    normalized = normalized_bundle(bundle_hash)
    return [
        normalized[i * FRAGMENT_LENGTH : (i + 1) * FRAGMENT_LENGTH]
        for i in range(NUMBER_OF_FRAGMENT_CHUNKS)
    ]


def is_insecure(bundle_hash: str) -> bool:
    """
    Whether a bundle hash normalizes to a value of 13 anywhere.

    A value of 13 makes the signer reveal the private block itself for that
    chain. Such hashes are rejected and the bundle is re-hashed with a new tag.
    """
    return NORMALIZED_TRYTE_UPPER_BOUND in normalized_bundle(bundle_hash)
