"""
A Winternitz one-time signature library over balanced-ternary data.

Keys, digests, addresses and signatures are all built from the Kerl sponge.
"""

from .interface import generate_address, generate_addresses, sign_inputs, validate_signatures
from .kerl import Kerl
from .models import Address, Bundle, Seed, Transaction

__all__ = [
    "generate_address",
    "generate_addresses",
    "sign_inputs",
    "validate_signatures",
    "Kerl",
    "Address",
    "Bundle",
    "Seed",
    "Transaction",
]
