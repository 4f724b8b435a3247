"""Internal precondition checks for the signing primitives."""

from __future__ import annotations

from typing import Sequence

from ..types.constants import BYTE_HASH_LENGTH
from ..types.exceptions import InvalidArgumentError
from .constants import (
    FRAGMENT_LENGTH,
    KEY_FRAGMENT_BYTE_LENGTH,
    MAX_SECURITY_LEVEL,
    NORMALIZED_TRYTE_UPPER_BOUND,
)


def enforce_security_level(security: int) -> None:
    """
    Validate that `security` is a supported number of key fragments.

    Raises:
        InvalidArgumentError: Outside `[1, MAX_SECURITY_LEVEL]`.
    """
    if isinstance(security, bool) or not 1 <= security <= MAX_SECURITY_LEVEL:
        raise InvalidArgumentError(
            f"Security level must be between 1 and {MAX_SECURITY_LEVEL}, got {security}"
        )


def enforce_fragment_alignment(name: str, data: bytes) -> int:
    """
    Validate that `data` is a non-empty sequence of whole fragments.

    Returns:
        The number of fragments in `data`.

    Raises:
        InvalidArgumentError: If the length is not a positive multiple of one fragment.
    """
    if not data or len(data) % KEY_FRAGMENT_BYTE_LENGTH:
        raise InvalidArgumentError(
            f"{name} must be a positive multiple of {KEY_FRAGMENT_BYTE_LENGTH} bytes, "
            f"got {len(data)}"
        )
    return len(data) // KEY_FRAGMENT_BYTE_LENGTH


def enforce_block_alignment(name: str, data: bytes) -> int:
    """
    Validate that `data` is a non-empty sequence of whole hash blocks.

    Returns:
        The number of blocks in `data`.
    """
    if not data or len(data) % BYTE_HASH_LENGTH:
        raise InvalidArgumentError(
            f"{name} must be a positive multiple of {BYTE_HASH_LENGTH} bytes, got {len(data)}"
        )
    return len(data) // BYTE_HASH_LENGTH


def enforce_normalized_fragment(normalized_fragment: Sequence[int]) -> None:
    """
    Validate one normalized message chunk.

    Raises:
        InvalidArgumentError: If it does not hold `FRAGMENT_LENGTH` values in
            `[-13, 13]`.
    """
    if len(normalized_fragment) != FRAGMENT_LENGTH:
        raise InvalidArgumentError(
            f"A normalized fragment holds {FRAGMENT_LENGTH} values, "
            f"got {len(normalized_fragment)}"
        )
    bound = NORMALIZED_TRYTE_UPPER_BOUND
    for value in normalized_fragment:
        if not -bound <= value <= bound:
            raise InvalidArgumentError(f"Normalized value {value} is outside [-{bound}, {bound}]")


def enforce_fragment_length(name: str, data: bytes) -> None:
    """
    Validate that `data` is exactly one fragment of 27 hash blocks.

    Raises:
        InvalidArgumentError: On any other length.
    """
    if len(data) != KEY_FRAGMENT_BYTE_LENGTH:
        raise InvalidArgumentError(
            f"{name} must be {KEY_FRAGMENT_BYTE_LENGTH} bytes, got {len(data)}"
        )
