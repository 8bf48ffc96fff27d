"""64-bit circular rotation."""

from __future__ import annotations

from ..types import Uint64
from .constants import LANE_BITS, LANE_MASK


def rotate_left(value: int, n: int) -> Uint64:
    """
    Rotate a 64-bit lane left by `n` bits.

    Bits shifted out of the top re-enter at the bottom:

        rotate_left(0x8000000000000001, 1) == 0x0000000000000003

    Args:
        value: The lane, a `Uint64` or a plain int in [0, 2**64).
        n: Rotation amount. Zero is the identity; values of 64 or more
            are reduced modulo 64.

    Returns:
        The rotated lane.
    """
    lane = int(Uint64(value))
    n %= LANE_BITS
    if n == 0:
        return Uint64(lane)
    return Uint64(((lane << n) | (lane >> (LANE_BITS - n))) & LANE_MASK)
