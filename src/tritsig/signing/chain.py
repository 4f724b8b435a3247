"""
Implements the Winternitz hash chains of the one-time signature scheme.

### Chains

Every block of a private key heads a chain: one step hashes the block into a
new one (reset, absorb, final squeeze). After `CHAIN_LENGTH` (26) steps the
chain reaches its public end.

- A **digest** hashes together the public ends of the 27 chains of one key
  fragment. An **address** hashes together the digests of all fragments.
- A **signature fragment** reveals, for each chain, the block reached after
  `13 - v` steps, where `v` is the normalized message value of that chain.
- A verifier walks the remaining `v + 13` steps of each chain and recomputes
  the digest. Since `(13 - v) + (v + 13) = 26`, the result matches the
  signer's digest exactly when the signature was made over this message.

Each function below owns the sponges it uses for the duration of the call.
"""

from __future__ import annotations

from typing import Sequence

from ..kerl import Kerl
from ..types.constants import BYTE_HASH_LENGTH
from ._validation import (
    enforce_block_alignment,
    enforce_fragment_alignment,
    enforce_fragment_length,
    enforce_normalized_fragment,
)
from .constants import (
    CHAIN_LENGTH,
    FRAGMENT_LENGTH,
    KEY_FRAGMENT_BYTE_LENGTH,
    NORMALIZED_TRYTE_UPPER_BOUND,
)


def hash_chain(block: bytes, num_steps: int, sponge: Kerl | None = None) -> bytes:
    """
    Walks `num_steps` steps down the chain starting at `block`.

    Args:
        block: The 48-byte starting block.
        num_steps: How many times to hash the block.
        sponge: A sponge owned by the caller to reuse, otherwise a fresh one.

    Returns:
        The block reached after `num_steps` steps.
    """
    sponge = sponge if sponge is not None else Kerl()
    current = block
    for _ in range(num_steps):
        sponge.reset()
        sponge.absorb(current)
        current = sponge.final_squeeze()
    return current


def split_key(key: bytes) -> list[bytes]:
    """Split a private key into its per-security-level fragments."""
    num_fragments = enforce_fragment_alignment("Key", key)
    return [
        key[i * KEY_FRAGMENT_BYTE_LENGTH : (i + 1) * KEY_FRAGMENT_BYTE_LENGTH]
        for i in range(num_fragments)
    ]


def digests(key: bytes) -> bytes:
    """
    Computes the digest of every fragment of a private key.

    The security level is inferred from the length of `key`.

    Args:
        key: The private key, a positive multiple of 27 blocks.

    Returns:
        One 48-byte digest per fragment, concatenated.

    Raises:
        InvalidArgumentError: If `key` is not made of whole fragments.
    """
    chain_sponge = Kerl()
    digest_sponge = Kerl()

    result = bytearray()
    for fragment in split_key(key):
        for offset in range(0, KEY_FRAGMENT_BYTE_LENGTH, BYTE_HASH_LENGTH):
            # Drive the chain to its public end.
            public_end = hash_chain(
                fragment[offset : offset + BYTE_HASH_LENGTH], CHAIN_LENGTH, chain_sponge
            )
            digest_sponge.absorb(public_end)
        result += digest_sponge.final_squeeze()
    return bytes(result)


def address(digests: bytes) -> bytes:
    """
    Hashes concatenated digests into an address.

    Raises:
        InvalidArgumentError: If `digests` is not made of whole blocks.
    """
    enforce_block_alignment("Digests", digests)
    sponge = Kerl()
    sponge.absorb(digests)
    return sponge.final_squeeze()


def signature_fragment(normalized_fragment: Sequence[int], key_fragment: bytes) -> bytes:
    """
    Signs one normalized message chunk with one key fragment.

    **One-time use**: a key fragment must never sign two different chunks.
    Each signature reveals chain positions that let anyone sign any chunk
    whose values are all lower or equal.

    Args:
        normalized_fragment: 27 values in `[-13, 13]`.
        key_fragment: The 27 private blocks of one fragment.

    Returns:
        The signature fragment: for each chain, the block after `13 - v` steps.

    Raises:
        InvalidArgumentError: On a malformed chunk or fragment.
    """
    enforce_normalized_fragment(normalized_fragment)
    enforce_fragment_length("Key fragment", key_fragment)

    sponge = Kerl()
    result = bytearray()
    for i in range(FRAGMENT_LENGTH):
        block = key_fragment[i * BYTE_HASH_LENGTH : (i + 1) * BYTE_HASH_LENGTH]
        num_steps = NORMALIZED_TRYTE_UPPER_BOUND - normalized_fragment[i]
        result += hash_chain(block, num_steps, sponge)
    return bytes(result)


def digest(normalized_fragment: Sequence[int], signature_fragment: bytes) -> bytes:
    """
    Completes the chains of a signature fragment and hashes their public ends.

    This mirrors `digests` for a single fragment: the result equals the digest
    of the signing key fragment if and only if the signature was produced by
    that fragment over this exact chunk.

    Args:
        normalized_fragment: 27 values in `[-13, 13]`.
        signature_fragment: The 27 revealed blocks.

    Returns:
        A 48-byte digest.
    """
    enforce_normalized_fragment(normalized_fragment)
    enforce_fragment_length("Signature fragment", signature_fragment)

    chain_sponge = Kerl()
    digest_sponge = Kerl()
    for i in range(FRAGMENT_LENGTH):
        block = signature_fragment[i * BYTE_HASH_LENGTH : (i + 1) * BYTE_HASH_LENGTH]
        num_steps = normalized_fragment[i] + NORMALIZED_TRYTE_UPPER_BOUND
        digest_sponge.absorb(hash_chain(block, num_steps, chain_sponge))
    return digest_sponge.final_squeeze()

