"""
The Winternitz-style one-time signature primitives.

It exposes key derivation, digest and address computation, signature
fragment generation and its verification-side counterpart.
"""

from .chain import address, digest, digests, hash_chain, signature_fragment, split_key
from .constants import PROD_CONFIG, TARGET_CONFIG, TEST_CONFIG, SigningConfig
from .key import key
from .normalize import is_insecure, normalized_bundle, normalized_fragments

__all__ = [
    "key",
    "digests",
    "address",
    "digest",
    "signature_fragment",
    "hash_chain",
    "split_key",
    "normalized_bundle",
    "normalized_fragments",
    "is_insecure",
    "SigningConfig",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "TARGET_CONFIG",
]
