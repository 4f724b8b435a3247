"""Tests for the Winternitz hash chains, digests and signature fragments."""

import pytest

from tritsig.signing.chain import (
    address,
    digest,
    digests,
    hash_chain,
    signature_fragment,
    split_key,
)
from tritsig.signing.constants import (
    CHAIN_LENGTH,
    FRAGMENT_LENGTH,
    KEY_FRAGMENT_BYTE_LENGTH,
    NORMALIZED_TRYTE_UPPER_BOUND,
)
from tritsig.signing.key import key
from tritsig.types.constants import BYTE_HASH_LENGTH
from tritsig.types.exceptions import InvalidArgumentError
from tritsig.types.trinary import trytes_to_bytes

SEED = trytes_to_bytes("CHAIN" + "9" * 76)
BLOCK = trytes_to_bytes("BLOCK" + "9" * 76)


@pytest.fixture(scope="module")
def key_one() -> bytes:
    """A security-1 private key."""
    return key(SEED, 0, 1)


@pytest.mark.parametrize("value", range(-NORMALIZED_TRYTE_UPPER_BOUND, NORMALIZED_TRYTE_UPPER_BOUND + 1))
def test_chain_identity(value: int) -> None:
    """Walking `13 - v` then `v + 13` steps reaches the public end."""
    bound = NORMALIZED_TRYTE_UPPER_BOUND
    public_end = hash_chain(BLOCK, CHAIN_LENGTH)
    assert hash_chain(hash_chain(BLOCK, bound - value), value + bound) == public_end


def test_hash_chain_zero_steps() -> None:
    """A chain of no steps returns its starting block."""
    assert hash_chain(BLOCK, 0) == BLOCK
    assert hash_chain(BLOCK, 1) != BLOCK


def test_split_key() -> None:
    """A key splits into whole fragments."""
    fragments = split_key(key(SEED, 0, 3))
    assert len(fragments) == 3
    assert all(len(fragment) == KEY_FRAGMENT_BYTE_LENGTH for fragment in fragments)


class TestDigests:
    """Digests and addresses of whole keys."""

    def test_one_digest_per_fragment(self, key_one: bytes) -> None:
        """Each fragment hashes down to one block."""
        assert len(digests(key_one)) == BYTE_HASH_LENGTH
        assert len(digests(key(SEED, 0, 2))) == 2 * BYTE_HASH_LENGTH

    def test_digests_share_prefix(self, key_one: bytes) -> None:
        """The digest of a fragment does not depend on the other fragments."""
        assert digests(key(SEED, 0, 2))[:BYTE_HASH_LENGTH] == digests(key_one)

    @pytest.mark.parametrize(
        "length",
        [
            pytest.param(0, id="empty"),
            pytest.param(BYTE_HASH_LENGTH, id="one_block"),
            pytest.param(KEY_FRAGMENT_BYTE_LENGTH + BYTE_HASH_LENGTH, id="partial_fragment"),
        ],
    )
    def test_digests_rejects_partial_keys(self, length: int) -> None:
        """Keys must be made of whole fragments."""
        with pytest.raises(InvalidArgumentError):
            digests(bytes(length))

    def test_address(self, key_one: bytes) -> None:
        """An address is one block, deterministic and key-dependent."""
        value = address(digests(key_one))
        assert len(value) == BYTE_HASH_LENGTH
        assert address(digests(key_one)) == value
        assert address(digests(key(SEED, 1, 1))) != value

    def test_address_rejects_misaligned_digests(self) -> None:
        """Digests are whole blocks."""
        with pytest.raises(InvalidArgumentError):
            address(bytes(50))
        with pytest.raises(InvalidArgumentError):
            address(b"")


class TestSignatureFragment:
    """Signing one chunk and recomputing its digest."""

    def test_roundtrip(self, key_one: bytes) -> None:
        """The digest of a signature equals the digest of the signing fragment."""
        normalized = [((i * 7) % 27) - 13 for i in range(FRAGMENT_LENGTH)]
        fragment = signature_fragment(normalized, key_one)
        assert len(fragment) == KEY_FRAGMENT_BYTE_LENGTH
        assert digest(normalized, fragment) == digests(key_one)

    def test_wrong_chunk_gives_wrong_digest(self, key_one: bytes) -> None:
        """A signature does not verify against another chunk."""
        normalized = [0] * FRAGMENT_LENGTH
        other = [1, -1] + [0] * (FRAGMENT_LENGTH - 2)
        fragment = signature_fragment(normalized, key_one)
        assert digest(other, fragment) != digests(key_one)

    def test_upper_bound_reveals_private_blocks(self, key_one: bytes) -> None:
        """A value of 13 takes zero steps and exposes the private block."""
        normalized = [NORMALIZED_TRYTE_UPPER_BOUND] * FRAGMENT_LENGTH
        assert signature_fragment(normalized, key_one) == key_one

    def test_lower_bound_reveals_public_ends(self, key_one: bytes) -> None:
        """A value of -13 takes all the steps; the verifier takes none."""
        normalized = [-NORMALIZED_TRYTE_UPPER_BOUND] * FRAGMENT_LENGTH
        fragment = signature_fragment(normalized, key_one)
        first_block = key_one[:BYTE_HASH_LENGTH]
        assert fragment[:BYTE_HASH_LENGTH] == hash_chain(first_block, CHAIN_LENGTH)
        assert digest(normalized, fragment) == digests(key_one)

    @pytest.mark.parametrize(
        "normalized",
        [
            pytest.param([0] * (FRAGMENT_LENGTH - 1), id="short_chunk"),
            pytest.param([14] + [0] * (FRAGMENT_LENGTH - 1), id="above_bound"),
            pytest.param([-14] + [0] * (FRAGMENT_LENGTH - 1), id="below_bound"),
        ],
    )
    def test_rejects_malformed_chunks(self, key_one: bytes, normalized: list[int]) -> None:
        """Chunks are 27 values in `[-13, 13]`."""
        with pytest.raises(InvalidArgumentError):
            signature_fragment(normalized, key_one)
        with pytest.raises(InvalidArgumentError):
            digest(normalized, key_one)

    def test_rejects_wrong_fragment_length(self, key_one: bytes) -> None:
        """Only a single whole fragment can sign or be verified."""
        normalized = [0] * FRAGMENT_LENGTH
        with pytest.raises(InvalidArgumentError, match="Key fragment"):
            signature_fragment(normalized, key_one + key_one)
        with pytest.raises(InvalidArgumentError, match="Signature fragment"):
            digest(normalized, key_one[:-BYTE_HASH_LENGTH])
