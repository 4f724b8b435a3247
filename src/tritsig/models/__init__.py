"""Ledger data containers: seeds, addresses, transactions and bundles."""

from .address import CHECKSUM_LENGTH, Address, address_checksum
from .bundle import Bundle
from .seed import Seed, SeedTrytes
from .transaction import TRANSACTION_TRYTE_LENGTH, Transaction

__all__ = [
    "Address",
    "Bundle",
    "Seed",
    "SeedTrytes",
    "Transaction",
    "TRANSACTION_TRYTE_LENGTH",
    "CHECKSUM_LENGTH",
    "address_checksum",
]
