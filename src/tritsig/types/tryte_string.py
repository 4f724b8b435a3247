"""
Fixed-length tryte string types.

Each type inherits from `str`, validates its alphabet and length at
construction and can be used directly as a pydantic field:

- Hash:                      81 trytes, exactly one hash block.
- Tag:                       27 trytes, right-padded with `9`.
- Nonce:                     27 trytes.
- SignatureMessageFragment:  2187 trytes (27 hash blocks), right-padded with `9`.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .constants import TRYTE_HASH_LENGTH
from .exceptions import TrinaryEncodingError
from .trinary import bytes_to_trytes, trytes_to_bytes, trytes_to_trits, validate_trytes


def _coerce_to_str(value: Any) -> str:
    """
    Coerce tryte input to `str`.

    Accepts `str` and ASCII `bytes` / `bytearray`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("ascii")
        except UnicodeDecodeError:
            raise TrinaryEncodingError(value, "trytes must be ASCII") from None
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")


class BaseTrytes(str):
    """
    A base class for fixed-length tryte strings that inherits from `str`.

    Subclasses set:
      - `LENGTH`: exact number of trytes the instance must contain.
      - `PADDED`: whether shorter input is right-padded with `9`.
    """

    LENGTH: ClassVar[int]
    """The exact number of trytes (overridden by subclasses)."""

    PADDED: ClassVar[bool] = False
    """Whether shorter input is accepted and padded with `9`."""

    def __new__(cls, value: Any = "") -> Self:
        """
        Create and validate a new tryte string.

        Raises:
            TrinaryEncodingError: If a character is not a tryte or the length is wrong.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        trytes = validate_trytes(_coerce_to_str(value))
        if cls.PADDED and len(trytes) < cls.LENGTH:
            trytes = trytes.ljust(cls.LENGTH, "9")
        if len(trytes) != cls.LENGTH:
            raise TrinaryEncodingError(
                trytes, f"{cls.__name__} expects exactly {cls.LENGTH} trytes, got {len(trytes)}"
            )
        return super().__new__(cls, trytes)

    @classmethod
    def null(cls) -> Self:
        """Create a new instance made only of `9` (zero) trytes."""
        return cls("9" * cls.LENGTH)

    @property
    def is_null(self) -> bool:
        """Whether every tryte is zero."""
        return not self.strip("9")

    def to_trits(self) -> list[int]:
        """Expand into little-endian trits."""
        return trytes_to_trits(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, validate the string and instantiate the class.
        3. For serialization (e.g., to JSON), emit the plain string.
        """
        python_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: str(x)),
        )

    def __repr__(self) -> str:
        """Return a string representation of the trytes."""
        return f"{type(self).__name__}({str(self)!r})"


class Hash(BaseTrytes):
    """A single hash block: an address, a bundle hash or a transaction hash."""

    LENGTH = TRYTE_HASH_LENGTH

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Decode a 48-byte hash block."""
        return cls(bytes_to_trytes(data))

    def to_bytes(self) -> bytes:
        """Encode as a 48-byte hash block."""
        return trytes_to_bytes(self)


class Tag(BaseTrytes):
    """A 27-tryte tag, padded with `9` on the right."""

    LENGTH = 27
    PADDED = True


class Nonce(BaseTrytes):
    """The 27-tryte proof-of-work nonce of a transaction."""

    LENGTH = 27


class SignatureMessageFragment(BaseTrytes):
    """
    The 2187-tryte payload of a transaction.

    Holds either a message or one signature fragment, which is 27 hash blocks.
    """

    LENGTH = 27 * TRYTE_HASH_LENGTH
    PADDED = True

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Decode the byte form of a signature fragment."""
        return cls(bytes_to_trytes(data))

    def to_bytes(self) -> bytes:
        """
        Encode as 27 consecutive 48-byte hash blocks.

        Raises:
            TrinaryEncodingError: If a block has a non-zero last trit, which no
                signature can contain.
        """
        return trytes_to_bytes(self, strict=True)
