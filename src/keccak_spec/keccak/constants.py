"""
Constants for the Keccak-f[1600] permutation.

Reference: https://keccak.team/keccak_specs_summary.html
"""

from __future__ import annotations

from typing import Final

# ===========================================================================
# State Geometry
# ===========================================================================
#
# The 1600-bit state is a 5x5 matrix of 64-bit lanes.
#
# Lanes are stored flat. Lane (x, y) lives at linear index x + 5y:
#
#        x=0  x=1  x=2  x=3  x=4
#   y=0    0    1    2    3    4
#   y=1    5    6    7    8    9
#   y=2   10   11   12   13   14
#   y=3   15   16   17   18   19
#   y=4   20   21   22   23   24

ROW_LENGTH: Final = 5
"""Number of lanes along each axis of the state matrix."""

NUM_LANES: Final = ROW_LENGTH * ROW_LENGTH
"""Number of lanes in the state (25)."""

LANE_BITS: Final = 64
"""Width of a lane in bits."""

LANE_BYTES: Final = LANE_BITS // 8
"""Width of a lane in bytes."""

STATE_BYTES: Final = NUM_LANES * LANE_BYTES
"""Size of the serialized state (200 bytes = 1600 bits)."""

LANE_MASK: Final = (1 << LANE_BITS) - 1
"""Mask selecting the low 64 bits of an integer."""

NUM_ROUNDS: Final = 24
"""
Number of rounds in Keccak-f[1600].

Equals 12 + 2l where the lane width is 2^l bits (l = 6).
"""

# ===========================================================================
# Digest Geometry
# ===========================================================================

DIGEST_BYTES: Final = 32
"""Size of the extracted digest (256 bits)."""

DIGEST_LANES: Final = DIGEST_BYTES // LANE_BYTES
"""Number of leading lanes read by the 256-bit extractor (lanes 0-3)."""

RATE_BYTES_256: Final = STATE_BYTES - 2 * DIGEST_BYTES
"""
Sponge rate for 256-bit output (136 bytes = 17 lanes).

The core never absorbs input itself. This is exported for absorbers that
drive it, which XOR their padded block into the first 17 lanes.
"""

# ===========================================================================
# Rho Offsets
# ===========================================================================
#
# Rho rotates every lane by a fixed amount. The offsets are the triangular
# numbers (t+1)(t+2)/2 mod 64 visited along the walk (x, y) -> (y, 2x + 3y),
# starting from (1, 0). Lane 0 is never rotated.

RHO_OFFSETS: Final[tuple[int, ...]] = (
    # x=0  x=1  x=2  x=3  x=4
    0, 1, 62, 28, 27,  # y=0
    36, 44, 6, 55, 20,  # y=1
    3, 10, 43, 25, 39,  # y=2
    41, 45, 15, 21, 8,  # y=3
    18, 2, 61, 56, 14,  # y=4
)  # fmt: skip
"""Left-rotation amount for each lane, indexed by x + 5y."""

# ===========================================================================
# Pi Cycle
# ===========================================================================
#
# Pi moves lane (x, y) to position (y, 2x + 3y mod 5).
#
# Lane 0 is a fixed point. The other 24 positions form a single cycle, so
# the whole relocation needs exactly one temporary.
#
# Walking the cycle backwards from lane 1: lane 1 receives the value of
# lane 6, lane 6 receives lane 9, and so on. The last slot (lane 10)
# receives the saved original value of lane 1.

PI_CYCLE: Final[tuple[int, ...]] = (
    1, 6, 9, 22, 14, 20, 2, 12, 13, 19, 23, 15,
    4, 24, 21, 8, 16, 5, 3, 18, 17, 11, 7, 10,
)  # fmt: skip
"""Destinations in overwrite order; each one is filled from the next entry."""

# ===========================================================================
# Round Constants
# ===========================================================================
#
# The 24 round constants come from a degree-8 LFSR over GF(2).
#
# Only bit positions 2^j - 1 for j in 0..6 (bits 0, 1, 3, 7, 15, 31, 63)
# can ever be set. Each constant therefore fits in one byte:
#
#   packed bit 6 -> lane bit 63
#   packed bit 5 -> lane bit 31
#   packed bit 4 -> lane bit 15
#   packed bit 3 -> lane bit 7
#   packed bit 2 -> lane bit 3
#   packed bit 1 -> lane bit 1
#   packed bit 0 -> lane bit 0

PACKED_CONSTANT_BITS: Final = 7
"""Number of meaningful bits in each packed round-constant byte."""

PACKED_ROUND_CONSTANTS: Final = bytes(
    [
        0x01, 0x1A, 0x5E, 0x70, 0x1F, 0x21, 0x79, 0x55,
        0x0E, 0x0C, 0x35, 0x26, 0x3F, 0x4F, 0x5D, 0x53,
        0x52, 0x48, 0x16, 0x66, 0x79, 0x58, 0x21, 0x74,
    ]
)  # fmt: skip
"""The 24 round constants in their one-byte packed encoding."""

ROUND_CONSTANTS: Final[tuple[int, ...]] = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)  # fmt: skip
"""The 24 round constants as expanded 64-bit values."""
