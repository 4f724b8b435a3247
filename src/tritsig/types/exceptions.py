"""Exception hierarchy for trinary encoding and signing."""

from __future__ import annotations


class TritsigError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidArgumentError(TritsigError, ValueError):
    """
    Raised when a caller violates a precondition.

    Misaligned buffers, out-of-range security levels and malformed trytes are
    programmer errors and are never processed further.
    """


class TrinaryEncodingError(InvalidArgumentError):
    """
    Raised when a value cannot be represented in the requested trinary form.

    Attributes:
        value: The offending value (truncated for display).
        detail: What went wrong.
    """

    def __init__(self, value: object, detail: str) -> None:
        self.value = value
        self.detail = detail

        value_repr = repr(value)
        if len(value_repr) > 50:
            value_repr = value_repr[:47] + "..."

        super().__init__(f"Cannot encode {value_repr}: {detail}")


class SigningError(TritsigError):
    """Base class for errors raised while signing the inputs of a bundle."""


class UnknownInputAddressError(SigningError, LookupError):
    """
    Raised when an input transaction has no matching input descriptor.

    Signing such a transaction would need a key index and security level
    that the caller never supplied.

    Attributes:
        address: The address of the unmatched input transaction.
    """

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"No input descriptor matches input address {address[:16]}...")


class MissingSignatureSlotError(SigningError):
    """
    Raised when an input lacks the zero-value transactions its signature needs.

    An input of security level `L` needs `L - 1` continuation transactions at
    the same address with a value of exactly zero.

    Attributes:
        address: The input address.
        level: The 0-based security level whose fragment had no slot.
    """

    def __init__(self, address: str, level: int) -> None:
        self.address = address
        self.level = level
        super().__init__(
            f"No zero-value transaction left for signature fragment {level} "
            f"of input address {address[:16]}..."
        )
