"""The secret seed from which every private key of a wallet derives."""

from __future__ import annotations

import secrets

from pydantic import Field
from typing_extensions import Self

from ..signing.constants import MAX_SECURITY_LEVEL, TARGET_CONFIG
from ..types import StrictBaseModel
from ..types.constants import TRYTE_ALPHABET, TRYTE_HASH_LENGTH
from ..types.trinary import trytes_to_bytes
from ..types.tryte_string import BaseTrytes


class SeedTrytes(BaseTrytes):
    """The 81 trytes of a seed; shorter input is padded with `9`."""

    LENGTH = TRYTE_HASH_LENGTH
    PADDED = True


class Seed(StrictBaseModel):
    """
    A secret seed and the security level it derives keys with.

    The seed is the only secret of a wallet: every private key is recomputed
    from it and a key index. It is never included in `repr` output.
    """

    trytes: SeedTrytes = Field(repr=False)
    """The 81 secret trytes."""

    security: int = Field(default=TARGET_CONFIG.DEFAULT_SECURITY_LEVEL, ge=1, le=MAX_SECURITY_LEVEL)
    """Number of key fragments per derived key."""

    @classmethod
    def random(cls, security: int | None = None) -> Self:
        """
        Generates a new seed from the operating system's entropy pool.

        Each tryte is drawn uniformly with `secrets.choice`.
        """
        trytes = SeedTrytes(
            "".join(secrets.choice(TRYTE_ALPHABET) for _ in range(TRYTE_HASH_LENGTH))
        )
        if security is None:
            return cls(trytes=trytes)
        return cls(trytes=trytes, security=security)

    def to_bytes(self) -> bytes:
        """The seed as one 48-byte hash block."""
        return trytes_to_bytes(self.trytes)
