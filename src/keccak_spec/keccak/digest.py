"""
256-bit digest extraction.

Keccak lanes are little-endian: the first byte of a lane's serialization is
its least-significant byte. A digest, however, is read as one contiguous
big-endian byte string. Reading lanes 0..3 out as little-endian bytes and
concatenating them, lane 0 first, gives exactly that string:

    lane 0 = 0x0123456789ABCDEF  ->  EF CD AB 89 67 45 23 01  (digest bytes 0..7)
    lane 1                       ->  ...                      (digest bytes 8..15)
    ...

Equivalently: byte-reverse each lane, then treat lane 0 as the most
significant 64 bits of a 256-bit integer and lane 3 as the least.
"""

from __future__ import annotations

from ..types import Bytes32
from .constants import DIGEST_LANES
from .state import State


def extract256(state: State) -> Bytes32:
    """
    Read the 256-bit digest from a post-permutation state.

    The state is not modified.

    Raises:
        StateLengthError: If the state does not hold exactly 25 lanes.
    """
    state.check_shape()
    return Bytes32(b"".join(state.lanes[i].to_bytes() for i in range(DIGEST_LANES)))
