"""
Defines the constants and configuration presets of the one-time signature scheme.

A private key is `security` fragments of `FRAGMENT_LENGTH` hash blocks. Each
block heads a Winternitz chain of `CHAIN_LENGTH` hashing steps: a signature
reveals the block reached after `13 - v` steps, where `v` is the normalized
message value for that block, and the verifier walks the remaining `v + 13`
steps to the public end of the chain.

Every value here is fixed by the wire format of the ledger; only the default
security level differs between presets.
"""

from pydantic import BaseModel, ConfigDict
from typing_extensions import Final

from ..config import TRITSIG_ENV
from ..types.constants import BYTE_HASH_LENGTH, TRYTE_HASH_LENGTH


class SigningConfig(BaseModel):
    """A model holding the configuration constants for a signing preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    FRAGMENT_LENGTH: int
    """Number of hash blocks in one key fragment, and of symbols in one message chunk."""

    NORMALIZED_TRYTE_UPPER_BOUND: int
    """Bound of the normalized message values, which lie in `[-bound, bound]`."""

    NUMBER_OF_FRAGMENT_CHUNKS: int
    """Number of message chunks a normalized bundle hash splits into."""

    MAX_SECURITY_LEVEL: int
    """The highest supported number of key fragments per address."""

    DEFAULT_SECURITY_LEVEL: int
    """Security level used when the caller does not choose one."""

    @property
    def CHAIN_LENGTH(self) -> int:  # noqa: N802
        """Total number of hashing steps from a private block to its public end."""
        return 2 * self.NORMALIZED_TRYTE_UPPER_BOUND

    @property
    def KEY_FRAGMENT_BYTE_LENGTH(self) -> int:  # noqa: N802
        """Size in bytes of one key fragment, and of one signature fragment."""
        return self.FRAGMENT_LENGTH * BYTE_HASH_LENGTH

    @property
    def SIGNATURE_FRAGMENT_TRYTE_LENGTH(self) -> int:  # noqa: N802
        """Size in trytes of one signature fragment (2187)."""
        return self.FRAGMENT_LENGTH * TRYTE_HASH_LENGTH


PROD_CONFIG: Final = SigningConfig(
    FRAGMENT_LENGTH=27,
    NORMALIZED_TRYTE_UPPER_BOUND=13,
    NUMBER_OF_FRAGMENT_CHUNKS=3,
    MAX_SECURITY_LEVEL=3,
    DEFAULT_SECURITY_LEVEL=2,
)


TEST_CONFIG: Final = SigningConfig(
    FRAGMENT_LENGTH=27,
    NORMALIZED_TRYTE_UPPER_BOUND=13,
    NUMBER_OF_FRAGMENT_CHUNKS=3,
    MAX_SECURITY_LEVEL=3,
    DEFAULT_SECURITY_LEVEL=1,
)


TARGET_CONFIG: Final = PROD_CONFIG if TRITSIG_ENV == "prod" else TEST_CONFIG
"""The preset selected by `TRITSIG_ENV`."""

FRAGMENT_LENGTH: Final = TARGET_CONFIG.FRAGMENT_LENGTH

NORMALIZED_TRYTE_UPPER_BOUND: Final = TARGET_CONFIG.NORMALIZED_TRYTE_UPPER_BOUND

NUMBER_OF_FRAGMENT_CHUNKS: Final = TARGET_CONFIG.NUMBER_OF_FRAGMENT_CHUNKS

MAX_SECURITY_LEVEL: Final = TARGET_CONFIG.MAX_SECURITY_LEVEL

CHAIN_LENGTH: Final = TARGET_CONFIG.CHAIN_LENGTH

KEY_FRAGMENT_BYTE_LENGTH: Final = TARGET_CONFIG.KEY_FRAGMENT_BYTE_LENGTH

SIGNATURE_FRAGMENT_TRYTE_LENGTH: Final = TARGET_CONFIG.SIGNATURE_FRAGMENT_TRYTE_LENGTH
