"""
Round constants for the Iota step.

Each of the 24 rounds XORs one constant into lane 0. The constants are the
output of a small LFSR, and every one of them is zero outside the seven bit
positions 0, 1, 3, 7, 15, 31 and 63. That structure lets each constant be
stored as a single byte and expanded on demand:

    packed byte  0b1011110  (0x5E)
                   |||||||
                   ||||||+-- bit 0  -> lane bit 0   (clear)
                   |||||+--- bit 1  -> lane bit 1   (set)
                   ||||+---- bit 2  -> lane bit 3   (set)
                   |||+----- bit 3  -> lane bit 7   (set)
                   ||+------ bit 4  -> lane bit 15  (set)
                   |+------- bit 5  -> lane bit 31  (clear)
                   +-------- bit 6  -> lane bit 63  (set)

    expanded     0x800000000000808A

The packed table and the literal expanded table are both available. The
`KECCAK_ROUND_CONSTANTS` setting picks which one `constant_for` serves.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator

from .. import config
from ..types import StrictBaseModel, Uint64
from .constants import NUM_ROUNDS, PACKED_CONSTANT_BITS, PACKED_ROUND_CONSTANTS, ROUND_CONSTANTS
from .exceptions import RoundIndexError

logger = logging.getLogger(__name__)


def decode_round_constant(packed: int) -> Uint64:
    """
    Expand one packed byte into its 64-bit round constant.

    Bit `j` of the byte (j in 0..6) becomes bit `2**j - 1` of the result.

    Raises:
        ValueError: If `packed` uses bits outside the low seven.
    """
    if not 0 <= packed < (1 << PACKED_CONSTANT_BITS):
        raise ValueError(f"Packed round constant must fit in 7 bits, got {packed:#x}")

    value = 0
    for j in range(PACKED_CONSTANT_BITS):
        if (packed >> j) & 1:
            value |= 1 << ((1 << j) - 1)
    return Uint64(value)


def _check_round_index(round_index: object) -> int:
    """Reject anything that is not an int in [0, NUM_ROUNDS)."""
    # Negative indices would otherwise wrap around the table.
    if (
        not isinstance(round_index, int)
        or isinstance(round_index, bool)
        or not 0 <= round_index < NUM_ROUNDS
    ):
        logger.debug("Rejected round index %r", round_index)
        raise RoundIndexError(round_index, NUM_ROUNDS)
    return round_index


class RoundConstantTable(StrictBaseModel):
    """The packed round-constant table, one byte per round."""

    packed: bytes = Field(
        min_length=NUM_ROUNDS,
        max_length=NUM_ROUNDS,
        description="One byte per round carrying the seven significant bits.",
    )

    @field_validator("packed")
    @classmethod
    def _check_packed_bits(cls, v: bytes) -> bytes:
        """Ensures no entry uses the unused top bit."""
        for round_index, b in enumerate(v):
            if b >> PACKED_CONSTANT_BITS:
                raise ValueError(f"Round {round_index}: packed byte {b:#04x} uses bit 7")
        return v

    def constant_for(self, round_index: int) -> Uint64:
        """
        Decode the constant for one round.

        Raises:
            RoundIndexError: If `round_index` is outside [0, 23].
        """
        return decode_round_constant(self.packed[_check_round_index(round_index)])

    def expanded(self) -> tuple[Uint64, ...]:
        """Decode every round constant, in round order."""
        return tuple(decode_round_constant(b) for b in self.packed)


ROUND_CONSTANT_TABLE = RoundConstantTable(packed=PACKED_ROUND_CONSTANTS)
"""The canonical packed table for Keccak-f[1600]."""

EXPANDED_ROUND_CONSTANTS: tuple[Uint64, ...] = tuple(Uint64(rc) for rc in ROUND_CONSTANTS)
"""The canonical literal table, as lanes."""

logger.debug(
    "Loaded %d round constants (serving from '%s' source)",
    NUM_ROUNDS,
    config.KECCAK_ROUND_CONSTANTS,
)


def constant_for(round_index: int) -> Uint64:
    """
    Return the Iota constant for a round.

    Args:
        round_index: Round number in [0, 23].

    Returns:
        The 64-bit round constant.

    Raises:
        RoundIndexError: If `round_index` is outside [0, 23] or not an int.
    """
    if config.KECCAK_ROUND_CONSTANTS == "table":
        return EXPANDED_ROUND_CONSTANTS[_check_round_index(round_index)]
    return ROUND_CONSTANT_TABLE.constant_for(round_index)
