"""
A single ledger transaction and its 2673-tryte wire form.

### Wire layout

| Field                          | Trytes |
|--------------------------------|--------|
| signature / message fragment   | 2187   |
| address                        | 81     |
| value                          | 27     |
| obsolete tag                   | 27     |
| timestamp                      | 9      |
| current index                  | 9      |
| last index                     | 9      |
| bundle hash                    | 81     |
| trunk transaction              | 81     |
| branch transaction             | 81     |
| tag                            | 27     |
| attachment timestamp           | 9      |
| attachment timestamp lower     | 9      |
| attachment timestamp upper     | 9      |
| nonce                          | 27     |

The **essence** (address, value, obsolete tag, timestamp and indexes) is what
the bundle hash commits to.
"""

from __future__ import annotations

from pydantic import Field
from typing_extensions import Final, Self

from ..types import CamelModel
from ..types.exceptions import InvalidArgumentError
from ..types.trinary import int_to_trytes, trytes_to_int, validate_trytes
from ..types.tryte_string import Hash, Nonce, SignatureMessageFragment, Tag

VALUE_TRYTE_LENGTH: Final = 27
"""Width of the value field."""

INT_FIELD_TRYTE_LENGTH: Final = 9
"""Width of the timestamp, index and attachment fields."""

_LAYOUT: Final[tuple[tuple[str, int], ...]] = (
    ("signature_message_fragment", SignatureMessageFragment.LENGTH),
    ("address", Hash.LENGTH),
    ("value", VALUE_TRYTE_LENGTH),
    ("obsolete_tag", Tag.LENGTH),
    ("timestamp", INT_FIELD_TRYTE_LENGTH),
    ("current_index", INT_FIELD_TRYTE_LENGTH),
    ("last_index", INT_FIELD_TRYTE_LENGTH),
    ("bundle_hash", Hash.LENGTH),
    ("trunk_transaction_hash", Hash.LENGTH),
    ("branch_transaction_hash", Hash.LENGTH),
    ("tag", Tag.LENGTH),
    ("attachment_timestamp", INT_FIELD_TRYTE_LENGTH),
    ("attachment_timestamp_lower_bound", INT_FIELD_TRYTE_LENGTH),
    ("attachment_timestamp_upper_bound", INT_FIELD_TRYTE_LENGTH),
    ("nonce", Nonce.LENGTH),
)

_INT_FIELDS: Final = frozenset(
    {
        "value",
        "timestamp",
        "current_index",
        "last_index",
        "attachment_timestamp",
        "attachment_timestamp_lower_bound",
        "attachment_timestamp_upper_bound",
    }
)

TRANSACTION_TRYTE_LENGTH: Final = sum(width for _, width in _LAYOUT)
"""Length of a serialized transaction (2673 trytes)."""


class Transaction(CamelModel):
    """
    One entry of a bundle.

    The sign of `value` gives the role of the transaction: negative for an
    input that must be signed, zero for a message or a signature continuation
    slot, positive for an output.
    """

    address: Hash
    value: int = 0
    obsolete_tag: Tag = Field(default_factory=Tag.null)
    timestamp: int = Field(default=0, ge=0)
    current_index: int = Field(default=0, ge=0)
    last_index: int = Field(default=0, ge=0)
    bundle_hash: Hash = Field(default_factory=Hash.null)
    signature_message_fragment: SignatureMessageFragment = Field(
        default_factory=SignatureMessageFragment.null
    )
    trunk_transaction_hash: Hash = Field(default_factory=Hash.null)
    branch_transaction_hash: Hash = Field(default_factory=Hash.null)
    tag: Tag = Field(default_factory=Tag.null)
    attachment_timestamp: int = 0
    attachment_timestamp_lower_bound: int = 0
    attachment_timestamp_upper_bound: int = 0
    nonce: Nonce = Field(default_factory=Nonce.null)

    @property
    def is_input(self) -> bool:
        """Whether this transaction spends funds and needs a signature."""
        return self.value < 0

    @property
    def is_signed(self) -> bool:
        """Whether the signature / message field holds anything."""
        return not self.signature_message_fragment.is_null

    def essence(self) -> str:
        """The 162 trytes the bundle hash commits to."""
        return (
            self.address
            + int_to_trytes(self.value, VALUE_TRYTE_LENGTH)
            + self.obsolete_tag
            + int_to_trytes(self.timestamp, INT_FIELD_TRYTE_LENGTH)
            + int_to_trytes(self.current_index, INT_FIELD_TRYTE_LENGTH)
            + int_to_trytes(self.last_index, INT_FIELD_TRYTE_LENGTH)
        )

    def to_trytes(self) -> str:
        """Serialize to the 2673-tryte wire form."""
        parts: list[str] = []
        for name, width in _LAYOUT:
            field_value = getattr(self, name)
            if name in _INT_FIELDS:
                parts.append(int_to_trytes(field_value, width))
            else:
                parts.append(str(field_value))
        return "".join(parts)

    @classmethod
    def from_trytes(cls, trytes: str) -> Self:
        """
        Parse the 2673-tryte wire form.

        Raises:
            InvalidArgumentError: If the length is wrong or a character is not a tryte.
        """
        if len(trytes) != TRANSACTION_TRYTE_LENGTH:
            raise InvalidArgumentError(
                f"A transaction is {TRANSACTION_TRYTE_LENGTH} trytes, got {len(trytes)}"
            )
        validate_trytes(trytes)

        fields: dict[str, object] = {}
        offset = 0
        for name, width in _LAYOUT:
            chunk = trytes[offset : offset + width]
            fields[name] = trytes_to_int(chunk) if name in _INT_FIELDS else chunk
            offset += width
        return cls(**fields)
