"""
A bundle: the ordered transactions that move funds together under one hash.

The bundle hash is the Kerl hash of the essence of every transaction, in
order. Signatures sign the normalized bundle hash, so every field of the
essence is covered by every signature in the bundle.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from ..kerl import Kerl
from ..signing.normalize import is_insecure
from ..types.constants import TRITS_PER_TRYTE
from ..types.exceptions import InvalidArgumentError
from ..types.trinary import int_to_trytes, trytes_to_bytes, trytes_to_int
from ..types.tryte_string import Hash, Nonce, SignatureMessageFragment, Tag
from .transaction import Transaction

logger = logging.getLogger(__name__)

_TAG_MODULUS = 3 ** (Tag.LENGTH * TRITS_PER_TRYTE)


def _increment_tag(tag: Tag) -> Tag:
    """Add one to a tag read as a balanced integer, wrapping at its width."""
    half = _TAG_MODULUS // 2
    value = (trytes_to_int(tag) + 1 + half) % _TAG_MODULUS - half
    return Tag(int_to_trytes(value, Tag.LENGTH))


class Bundle:
    """An ordered, mutable collection of transactions sharing one hash."""

    def __init__(self, transactions: Sequence[Transaction] | None = None) -> None:
        """Initializes the bundle, optionally with existing transactions."""
        self.transactions: list[Transaction] = list(transactions or [])

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __getitem__(self, index: int) -> Transaction:
        return self.transactions[index]

    @property
    def hash(self) -> Hash | None:
        """The bundle hash, or `None` for an empty bundle."""
        return self.transactions[0].bundle_hash if self.transactions else None

    def add_transaction(
        self,
        address: str,
        value: int,
        tag: str = "",
        timestamp: int = 0,
        signature_message_length: int = 1,
    ) -> None:
        """
        Appends an entry spanning `signature_message_length` transactions.

        The first transaction carries `value`. The others carry a value of zero
        and reserve room for a longer message or, for an input, for the
        signature fragments of security levels above 1.
        """
        if signature_message_length < 1:
            raise InvalidArgumentError(
                f"An entry spans at least one transaction, got {signature_message_length}"
            )
        for i in range(signature_message_length):
            self.transactions.append(
                Transaction(
                    address=str(address),
                    value=value if i == 0 else 0,
                    obsolete_tag=tag,
                    tag=tag,
                    timestamp=timestamp,
                )
            )

    def finalize(self) -> None:
        """
        Assigns sequence indexes and computes the bundle hash.

        ### Algorithm

        1.  Number the transactions: `current_index` is the position and
            `last_index` the position of the last transaction.
        2.  Absorb the essence of every transaction into a Kerl sponge and
            squeeze the bundle hash.
        3.  If the normalized hash contains 13, the hash would reveal a private
            block: increment the obsolete tag of the first transaction and
            hash again.
        4.  Store the hash on every transaction.

        Raises:
            InvalidArgumentError: If the bundle is empty.
        """
        if not self.transactions:
            raise InvalidArgumentError("Cannot finalize an empty bundle")

        last_index = len(self.transactions) - 1
        for i, transaction in enumerate(self.transactions):
            transaction.current_index = i
            transaction.last_index = last_index

        while True:
            sponge = Kerl()
            for transaction in self.transactions:
                sponge.absorb(trytes_to_bytes(transaction.essence()))
            bundle_hash = Hash.from_bytes(sponge.final_squeeze())

            if not is_insecure(bundle_hash):
                break

            logger.debug("Insecure bundle hash %s..., incrementing obsolete tag", bundle_hash[:16])
            first = self.transactions[0]
            first.obsolete_tag = _increment_tag(first.obsolete_tag)

        for transaction in self.transactions:
            transaction.bundle_hash = bundle_hash

    def add_trytes(self, signature_fragments: Sequence[str]) -> None:
        """
        Fills the signature / message fields and clears the attachment fields.

        Transaction `i` receives `signature_fragments[i]`, padded to 2187
        trytes; transactions beyond the list, or given an empty string, are
        left blank for a later signature.
        """
        for i, transaction in enumerate(self.transactions):
            fragment = signature_fragments[i] if i < len(signature_fragments) else ""
            transaction.signature_message_fragment = SignatureMessageFragment(fragment)
            transaction.trunk_transaction_hash = Hash.null()
            transaction.branch_transaction_hash = Hash.null()
            transaction.attachment_timestamp = 0
            transaction.attachment_timestamp_lower_bound = 0
            transaction.attachment_timestamp_upper_bound = 0
            transaction.nonce = Nonce.null()
