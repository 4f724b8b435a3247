"""
Defines the Kerl sponge, the hash engine of every signing operation.

### Construction

Kerl wraps Keccak-384 (original Keccak padding, not SHA-3) so that it hashes
243-trit blocks:

1.  **Absorbing**: blocks are fed to Keccak in their 48-byte form (see
    `tritsig.types.trinary`).

2.  **Squeezing**: Keccak is finalized and its 384-bit output, read as a signed
    integer, is reduced to the 242 trits a block can carry. The state is then
    reset and the bitwise complement of the raw output is absorbed, so the next
    squeeze yields a fresh block. Squeezing repeatedly after one absorb gives
    an extendable output.

Instances hold mutable state: a computation owns its instance and never shares
it with a concurrent one.
"""

from __future__ import annotations

from Crypto.Hash import keccak

from ..types.constants import BYTE_HASH_LENGTH
from ..types.exceptions import InvalidArgumentError
from ..types.trinary import bytes_to_int, int_to_bytes

_KECCAK_DIGEST_BITS = 384

_ALL_ONES = (1 << _KECCAK_DIGEST_BITS) - 1


class Kerl:
    """A Keccak-384 sponge over 48-byte hash blocks."""

    def __init__(self) -> None:
        """Start from the empty state."""
        self._keccak = keccak.new(digest_bits=_KECCAK_DIGEST_BITS)

    def reset(self) -> None:
        """Return to the empty state."""
        self._keccak = keccak.new(digest_bits=_KECCAK_DIGEST_BITS)

    def absorb(self, data: bytes | bytearray, offset: int = 0, length: int | None = None) -> None:
        """
        Feed whole hash blocks into the sponge.

        Args:
            data: Buffer holding the blocks.
            offset: Index of the first byte to absorb.
            length: Number of bytes to absorb, by default up to the end of `data`.

        Raises:
            InvalidArgumentError: If the window is empty, falls outside `data` or
                is not a multiple of the block size.
        """
        if length is None:
            length = len(data) - offset
        if offset < 0 or length <= 0 or offset + length > len(data):
            raise InvalidArgumentError(
                f"Absorb window [{offset}, {offset + length}) is invalid for {len(data)} bytes"
            )
        if length % BYTE_HASH_LENGTH:
            raise InvalidArgumentError(
                f"Absorb length must be a multiple of {BYTE_HASH_LENGTH} bytes, got {length}"
            )
        self._keccak.update(bytes(data[offset : offset + length]))

    def squeeze(self, out: bytearray | None = None, offset: int = 0) -> bytes:
        """
        Extract the next hash block and advance the state.

        Args:
            out: Optional buffer receiving the block at `offset`.
            offset: Where to write the block inside `out`.

        Returns:
            The 48-byte block.
        """
        if out is not None and (offset < 0 or offset + BYTE_HASH_LENGTH > len(out)):
            raise InvalidArgumentError(
                f"Squeeze needs {BYTE_HASH_LENGTH} bytes at offset {offset}, "
                f"buffer holds {len(out)}"
            )

        raw = self._keccak.digest()

        # Drop whatever does not fit in 242 balanced trits.
        block = int_to_bytes(bytes_to_int(raw))
        if out is not None:
            out[offset : offset + BYTE_HASH_LENGTH] = block

        # Re-seed the state with the complement of the raw output.
        flipped = int.from_bytes(raw, "big") ^ _ALL_ONES
        self.reset()
        self._keccak.update(flipped.to_bytes(BYTE_HASH_LENGTH, "big"))
        return block

    def final_squeeze(self, out: bytearray | None = None, offset: int = 0) -> bytes:
        """Squeeze one block, then reset the sponge."""
        block = self.squeeze(out, offset)
        self.reset()
        return block
