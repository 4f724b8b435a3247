"""The Kerl sponge hash over trinary hash blocks."""

from ..types.constants import BYTE_HASH_LENGTH, HASH_LENGTH, TRYTE_HASH_LENGTH
from .sponge import Kerl

__all__ = [
    "Kerl",
    "HASH_LENGTH",
    "BYTE_HASH_LENGTH",
    "TRYTE_HASH_LENGTH",
]
