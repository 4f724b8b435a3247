"""Reusable type definitions for trinary data."""

from .base import CamelModel, StrictBaseModel
from .bigint import TernaryInt
from .constants import (
    BYTE_HASH_LENGTH,
    HASH_LENGTH,
    TRITS_PER_TRYTE,
    TRYTE_ALPHABET,
    TRYTE_HASH_LENGTH,
)
from .exceptions import (
    InvalidArgumentError,
    MissingSignatureSlotError,
    SigningError,
    TrinaryEncodingError,
    TritsigError,
    UnknownInputAddressError,
)
from .tryte_string import BaseTrytes, Hash, Nonce, SignatureMessageFragment, Tag
from .uint import Uint32

__all__ = [
    # Core types
    "Uint32",
    "TernaryInt",
    "BaseTrytes",
    "Hash",
    "Tag",
    "Nonce",
    "SignatureMessageFragment",
    "CamelModel",
    "StrictBaseModel",
    # Sizes
    "TRYTE_ALPHABET",
    "TRITS_PER_TRYTE",
    "HASH_LENGTH",
    "TRYTE_HASH_LENGTH",
    "BYTE_HASH_LENGTH",
    # Exceptions
    "TritsigError",
    "InvalidArgumentError",
    "TrinaryEncodingError",
    "SigningError",
    "UnknownInputAddressError",
    "MissingSignatureSlotError",
]
