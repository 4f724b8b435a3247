"""
A public address, optionally tagged with the key that controls it.

Only the 81 address trytes identify an address. The key index and security
level are bookkeeping for the owner, and the balance is whatever the ledger
reported; none of them take part in comparisons.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from ..kerl import Kerl
from ..signing.constants import MAX_SECURITY_LEVEL
from ..types import StrictBaseModel
from ..types.constants import TRYTE_HASH_LENGTH
from ..types.exceptions import InvalidArgumentError
from ..types.trinary import bytes_to_trytes
from ..types.tryte_string import Hash
from ..types.uint import Uint32

CHECKSUM_LENGTH = 9
"""Number of checksum trytes appended to an address for display."""


def address_checksum(trytes: str) -> str:
    """Return the 9-tryte checksum of an 81-tryte address."""
    sponge = Kerl()
    sponge.absorb(Hash(trytes).to_bytes())
    return bytes_to_trytes(sponge.final_squeeze())[-CHECKSUM_LENGTH:]


class Address(StrictBaseModel):
    """An 81-tryte address and, for the owner, the key that controls it."""

    trytes: Hash
    """The address hash."""

    key_index: Uint32 | None = None
    """Index of the key this address was derived from."""

    security: int | None = Field(default=None, ge=1, le=MAX_SECURITY_LEVEL)
    """Security level of the key this address was derived from."""

    balance: int | None = None
    """Balance last reported by the ledger."""

    @model_validator(mode="before")
    @classmethod
    def strip_checksum(cls, data: Any) -> Any:
        """Accept the 90-tryte form when its trailing checksum is valid."""
        if not isinstance(data, dict):
            return data
        trytes = data.get("trytes")
        if isinstance(trytes, str) and len(trytes) == TRYTE_HASH_LENGTH + CHECKSUM_LENGTH:
            body, checksum = trytes[:TRYTE_HASH_LENGTH], trytes[TRYTE_HASH_LENGTH:]
            if address_checksum(body) != checksum:
                raise InvalidArgumentError(f"Invalid checksum for address {body[:16]}...")
            data = {**data, "trytes": Hash(body)}
        return data

    def checksum(self) -> str:
        """The 9-tryte checksum of this address."""
        return address_checksum(self.trytes)

    def with_checksum(self) -> str:
        """The 90-tryte display form: the address followed by its checksum."""
        return self.trytes + self.checksum()

    def __eq__(self, other: object) -> bool:
        """Compare the address trytes with another address or a tryte string."""
        if isinstance(other, Address):
            return self.trytes == other.trytes
        if isinstance(other, str):
            return self.trytes == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self.trytes))

    def __str__(self) -> str:
        return str(self.trytes)
