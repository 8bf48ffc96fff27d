"""
End-to-end digest tests.

A single-block absorber from the test helpers pads the message into a fresh
state, then the core runs `permute` and `extract256`. Results are checked
against published digests and against two independent implementations:

- pycryptodome's Keccak-256 (original Keccak padding, domain byte 0x01).
- hashlib's SHA3-256 (FIPS 202 padding, domain byte 0x06).

Both share the same permutation, so agreement with either one pins it down.
"""

import hashlib

import pytest
from Crypto.Hash import keccak
from hypothesis import given, settings
from hypothesis import strategies as st

from keccak_spec.keccak import RATE_BYTES_256
from tests.keccak_spec.helpers import SHA3_DOMAIN, absorb_single_block, hash_single_block


def _pycryptodome_keccak256(message: bytes) -> bytes:
    k = keccak.new(digest_bits=256)
    k.update(message)
    return k.digest()


single_block_messages = st.binary(max_size=RATE_BYTES_256 - 1)


@pytest.mark.parametrize(
    "message, expected",
    [
        (b"", "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"),
        (b"abc", "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"),
    ],
    ids=["empty", "abc"],
)
def test_published_keccak256(message: bytes, expected: str) -> None:
    """Matches published Keccak-256 digests."""
    assert hash_single_block(message).hex() == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        (b"", "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"),
        (b"abc", "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"),
    ],
    ids=["empty", "abc"],
)
def test_published_sha3_256(message: bytes, expected: str) -> None:
    """Matches the FIPS 202 SHA3-256 example digests."""
    assert hash_single_block(message, domain=SHA3_DOMAIN).hex() == expected


def test_abc_state_layout() -> None:
    """The padded "abc" block sets the expected bytes of the first 17 lanes."""
    state = absorb_single_block(b"abc")
    assert state[0] == 0x01636261
    assert state[16] == 0x8000000000000000
    assert all(state[i] == 0 for i in range(1, 16))
    assert all(state[i] == 0 for i in range(17, 25))


@pytest.mark.parametrize("length", [0, 1, 55, 56, 134, 135])
def test_padding_boundaries(length: int) -> None:
    """Lengths at the padding edges, including a shared 0x81 pad byte."""
    message = bytes(range(length))
    assert hash_single_block(message) == _pycryptodome_keccak256(message)


@settings(max_examples=25)
@given(message=single_block_messages)
def test_matches_pycryptodome_keccak256(message: bytes) -> None:
    """Agrees with pycryptodome for every single-block message."""
    assert hash_single_block(message) == _pycryptodome_keccak256(message)


@settings(max_examples=25)
@given(message=single_block_messages)
def test_matches_hashlib_sha3_256(message: bytes) -> None:
    """Agrees with hashlib once the SHA3 domain byte is used."""
    assert hash_single_block(message, domain=SHA3_DOMAIN) == hashlib.sha3_256(message).digest()


def test_repeatable() -> None:
    """Hashing the same message twice yields the same digest."""
    assert hash_single_block(b"abc") == hash_single_block(b"abc")


def test_absorber_rejects_multi_block_messages() -> None:
    """The test absorber only handles one block."""
    with pytest.raises(ValueError, match="shorter than"):
        absorb_single_block(b"\x00" * RATE_BYTES_256)
