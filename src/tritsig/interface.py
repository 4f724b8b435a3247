"""
Defines the public interface of the signing library.

High-level operations on seeds, addresses and bundles (`generate_address`,
`sign_inputs`, `validate_signatures`) built on the primitives of
`tritsig.signing`.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import Address, Bundle, Seed, Transaction
from .signing._validation import enforce_security_level
from .signing.chain import address, digest, digests, signature_fragment, split_key
from .signing.constants import MAX_SECURITY_LEVEL, NUMBER_OF_FRAGMENT_CHUNKS
from .signing.key import key
from .signing.normalize import normalized_fragments
from .types.exceptions import (
    InvalidArgumentError,
    MissingSignatureSlotError,
    TritsigError,
    UnknownInputAddressError,
)
from .types.tryte_string import Hash, SignatureMessageFragment
from .types.uint import Uint32

logger = logging.getLogger(__name__)


def generate_address(seed: Seed, index: int, security: int | None = None) -> Address:
    """
    Derives the address of one key index.

    ### Derivation

    `seed + index` is expanded into a private key (`tritsig.signing.key`), each
    key fragment is hashed down its chains into a digest, and the digests are
    hashed into the address.

    Args:
        seed: The wallet seed.
        index: The key index.
        security: Number of key fragments; defaults to the seed's security level.

    Returns:
        The address, tagged with its key index and security level.
    """
    security = seed.security if security is None else security
    key_bytes = key(seed.to_bytes(), index, security)
    return Address(
        trytes=Hash.from_bytes(address(digests(key_bytes))),
        key_index=Uint32(index),
        security=security,
    )


def generate_addresses(
    seed: Seed, start: int = 0, count: int = 1, security: int | None = None
) -> list[Address]:
    """Derives the addresses of `count` consecutive key indexes from `start`."""
    if count < 0:
        raise InvalidArgumentError(f"Address count must not be negative, got {count}")
    return [generate_address(seed, index, security) for index in range(start, start + count)]


def _find_input(inputs: Sequence[Address], address_trytes: str) -> Address:
    """Return the input descriptor of an address, scanning in order."""
    for candidate in inputs:
        if candidate.trytes == address_trytes:
            return candidate
    raise UnknownInputAddressError(address_trytes)


def _find_continuation_slot(bundle: Bundle, address_trytes: str, level: int) -> Transaction:
    """Return the first blank zero-value transaction at an address."""
    for transaction in bundle.transactions:
        if (
            transaction.address == address_trytes
            and transaction.value == 0
            and not transaction.is_signed
        ):
            return transaction
    raise MissingSignatureSlotError(address_trytes, level)


def _sign(normalized_fragment: list[int], key_fragment: bytes) -> SignatureMessageFragment:
    return SignatureMessageFragment.from_bytes(signature_fragment(normalized_fragment, key_fragment))


def sign_inputs(
    seed: Seed,
    inputs: Sequence[Address],
    bundle: Bundle,
    signature_fragments: Sequence[str],
) -> list[str]:
    """
    Finalizes a bundle and signs all of its inputs.

    **CRITICAL SECURITY WARNING**: the key of an input address must sign only
    one bundle. A second signature with the same key reveals enough chain
    positions to forge signatures for other bundles.

    ### Signing Algorithm

    1.  **Finalize**: compute the bundle hash and write the message fragments
        of the outputs (`signature_fragments`) into their transactions.

    2.  **Locate inputs**: every transaction with a negative value is an input.
        Its key index and security level come from the descriptor in `inputs`
        with the same address.

    3.  **Sign**: derive the key of that index with the seed's security level.
        Fragment 0 of the key signs message chunk 0 into the input transaction
        itself. Each further level `j` signs chunk `j mod 3` into the next blank
        zero-value transaction at the same address.

    4.  **Serialize**: order the transactions by sequence index and serialize
        each one.

    The bundle is mutated in place.

    Args:
        seed: The wallet seed owning every input.
        inputs: One descriptor per input address, with key index and security level.
        bundle: The bundle to finalize and sign; input signature fields must be blank.
        signature_fragments: Message trytes for the leading transactions.

    Returns:
        The 2673-tryte wire form of every transaction, in sequence order.

    Raises:
        UnknownInputAddressError: If an input transaction matches no descriptor.
        InvalidArgumentError: If a descriptor lacks its key index or has a
            security level the seed cannot provide.
        MissingSignatureSlotError: If an input lacks a continuation transaction.
    """
    bundle.finalize()
    bundle.add_trytes(signature_fragments)

    for transaction in bundle.transactions:
        if not transaction.is_input:
            continue

        descriptor = _find_input(inputs, transaction.address)
        if descriptor.key_index is None or descriptor.security is None:
            raise InvalidArgumentError(
                f"Input {transaction.address[:16]}... needs a key index and a security level"
            )
        enforce_security_level(descriptor.security)
        if descriptor.security > seed.security:
            raise InvalidArgumentError(
                f"Input {transaction.address[:16]}... has security level {descriptor.security}, "
                f"the seed only derives {seed.security} key fragment(s)"
            )

        logger.debug(
            "Signing input %d at %s... with security level %d",
            transaction.current_index,
            transaction.address[:16],
            descriptor.security,
        )

        key_fragments = split_key(key(seed.to_bytes(), descriptor.key_index, seed.security))
        message_chunks = normalized_fragments(transaction.bundle_hash)

        transaction.signature_message_fragment = _sign(message_chunks[0], key_fragments[0])

        for level in range(1, descriptor.security):
            slot = _find_continuation_slot(bundle, transaction.address, level)
            slot.signature_message_fragment = _sign(
                message_chunks[level % NUMBER_OF_FRAGMENT_CHUNKS], key_fragments[level]
            )

    bundle.transactions.sort(key=lambda transaction: transaction.current_index)
    return [transaction.to_trytes() for transaction in bundle.transactions]


def validate_signatures(
    expected_address: Address | str,
    signature_fragments: Sequence[str],
    bundle_hash: str,
) -> bool:
    """
    Checks that signature fragments were made by the key of an address.

    This is a **pure predicate**: it never raises, and any malformed input
    yields `False`.

    ### Verification Algorithm

    1.  Normalize the bundle hash into its 3 message chunks.
    2.  Complete the chains of fragment `i` against chunk `i mod 3` and hash
        their public ends into a digest.
    3.  Hash the digests, in the given order, into an address and compare it
        with `expected_address`.

    Args:
        expected_address: The address the signature must belong to.
        signature_fragments: One 2187-tryte fragment per security level, in
            sequence order.
        bundle_hash: The 81-tryte bundle hash that was signed.

    Returns:
        `True` if and only if the recomputed address equals `expected_address`.
    """
    try:
        if not 1 <= len(signature_fragments) <= MAX_SECURITY_LEVEL:
            logger.debug("Rejecting signature made of %d fragments", len(signature_fragments))
            return False

        message_chunks = normalized_fragments(bundle_hash)
        fragment_digests = bytearray()
        for i, fragment in enumerate(signature_fragments):
            if len(fragment) != SignatureMessageFragment.LENGTH:
                logger.debug("Rejecting signature fragment %d of %d trytes", i, len(fragment))
                return False
            fragment_digests += digest(
                message_chunks[i % NUMBER_OF_FRAGMENT_CHUNKS],
                SignatureMessageFragment(fragment).to_bytes(),
            )
        computed_address = Hash.from_bytes(address(bytes(fragment_digests)))
    except (TritsigError, TypeError) as e:
        logger.debug("Rejecting malformed signature: %s", e)
        return False

    if isinstance(expected_address, Address):
        return expected_address.trytes == computed_address
    return computed_address == expected_address
