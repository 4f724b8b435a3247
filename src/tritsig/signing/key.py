"""
Derives private key material from a seed and a key index.

The derivation is deterministic: the same seed, index and security level
always give the same key, which lets an address be regenerated on demand
instead of storing its key.
"""

from __future__ import annotations

from ..kerl import Kerl
from ..types.bigint import TernaryInt
from ..types.constants import BYTE_HASH_LENGTH
from ..types.exceptions import InvalidArgumentError
from ..types.uint import Uint32
from ._validation import enforce_security_level
from .constants import FRAGMENT_LENGTH


def key(seed_bytes: bytes, index: int, security: int) -> bytes:
    """
    Derives the private key of one address.

    ### Derivation

    1.  **Index folding**: the seed is read as a 242-trit integer and the index
        is added to it, wrapping at the width of a hash block.

    2.  **Subseed**: the sum is hashed once (absorb, then final squeeze) to give
        the subseed of this index.

    3.  **Expansion**: the subseed is absorbed again and `security * 27` blocks
        are squeezed one after the other from the same state.

    Args:
        seed_bytes: The seed as one 48-byte hash block.
        index: The key index, an unsigned 32-bit integer.
        security: The number of key fragments, from 1 to 3.

    Returns:
        The key: `security` fragments of 27 consecutive 48-byte blocks.

    Raises:
        InvalidArgumentError: If `seed_bytes` is not one hash block, the index
            is not a uint32 or the security level is unsupported.
    """
    if len(seed_bytes) != BYTE_HASH_LENGTH:
        raise InvalidArgumentError(
            f"Seed must be {BYTE_HASH_LENGTH} bytes, got {len(seed_bytes)}"
        )
    try:
        index = Uint32(index)
    except (OverflowError, TypeError) as e:
        raise InvalidArgumentError(f"Invalid key index: {e}") from e
    enforce_security_level(security)

    seed_index = TernaryInt.from_bytes(seed_bytes).add_u32(index).to_bytes()

    sponge = Kerl()
    sponge.absorb(seed_index)
    subseed = sponge.final_squeeze()
    sponge.absorb(subseed)

    key_bytes = bytearray(security * FRAGMENT_LENGTH * BYTE_HASH_LENGTH)
    for offset in range(0, len(key_bytes), BYTE_HASH_LENGTH):
        sponge.squeeze(key_bytes, offset)
    return bytes(key_bytes)
