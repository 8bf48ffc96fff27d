"""
The Keccak-f[1600] permutation.

Each of the 24 rounds applies five steps to the state, in order:

    Theta -> Rho -> Pi -> Chi -> Iota

- Theta mixes every column's parity into its two neighbouring columns.
- Rho rotates each lane by a fixed, lane-specific amount.
- Pi moves lanes to new positions within the 5x5 matrix.
- Chi is the only non-linear step: a 5-bit S-box applied across each row.
- Iota XORs a round constant into lane 0 to break symmetry between rounds.

Every step mutates the state in place.

Reference: FIPS 202, Section 3.2 (https://doi.org/10.6028/NIST.FIPS.202)
"""

from __future__ import annotations

from .constants import NUM_LANES, NUM_ROUNDS, PI_CYCLE, RHO_OFFSETS, ROW_LENGTH
from .rotation import rotate_left
from .round_constants import constant_for
from .state import State


def theta(state: State) -> None:
    """
    Applies the Theta step.

    For each column x, the parity C[x] is the XOR of its five lanes. Each lane
    is then XORed with

        D[x] = rotate_left(C[x + 1], 1) ^ C[x - 1]

    with column indices taken mod 5.
    """
    lanes = state.lanes

    # Column parities.
    parity = [
        lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
        for x in range(ROW_LENGTH)
    ]

    # Per-column mixing value.
    #
    # (x + 4) mod 5 is x - 1 without going negative.
    mix = [
        rotate_left(parity[(x + 1) % ROW_LENGTH], 1) ^ parity[(x + 4) % ROW_LENGTH]
        for x in range(ROW_LENGTH)
    ]

    for index in range(NUM_LANES):
        lanes[index] ^= mix[index % ROW_LENGTH]


def rho(state: State) -> None:
    """Applies the Rho step: rotates lanes 1..24 by their fixed offsets."""
    lanes = state.lanes
    # Lane 0 has offset zero.
    for index in range(1, NUM_LANES):
        lanes[index] = rotate_left(lanes[index], RHO_OFFSETS[index])


def pi(state: State) -> None:
    """
    Applies the Pi step: lane (x, y) moves to (y, 2x + 3y mod 5).

    The 24 moving lanes form one cycle. The value of the first destination
    is saved, each destination is then filled from its source in cycle order,
    and the saved value closes the cycle.
    """
    lanes = state.lanes
    saved = lanes[PI_CYCLE[0]]
    for destination, source in zip(PI_CYCLE, PI_CYCLE[1:]):
        lanes[destination] = lanes[source]
    lanes[PI_CYCLE[-1]] = saved


def chi(state: State) -> None:
    """
    Applies the Chi step to each row independently.

        lane[x] ^= ~lane[x + 1] & lane[x + 2]      (x mod 5 within the row)

    All five updates must read the row as it was before the step. Updating
    left to right, only the last two updates wrap around to lanes 0 and 1,
    which by then have been overwritten, so their original values are held
    aside.
    """
    lanes = state.lanes
    for row in range(0, NUM_LANES, ROW_LENGTH):
        a0 = lanes[row]
        a1 = lanes[row + 1]
        lanes[row] ^= ~a1 & lanes[row + 2]
        lanes[row + 1] ^= ~lanes[row + 2] & lanes[row + 3]
        lanes[row + 2] ^= ~lanes[row + 3] & lanes[row + 4]
        lanes[row + 3] ^= ~lanes[row + 4] & a0
        lanes[row + 4] ^= ~a0 & a1


def iota(state: State, round_index: int) -> None:
    """
    Applies the Iota step: XORs the round constant into lane 0.

    Raises:
        RoundIndexError: If `round_index` is outside [0, 23].
    """
    state.lanes[0] ^= constant_for(round_index)


def keccak_round(state: State, round_index: int) -> None:
    """
    Applies one full round to the state.

    Args:
        state: The 25-lane state, mutated in place.
        round_index: The round number in [0, 23], selecting the Iota constant.

    Raises:
        StateLengthError: If the state does not hold exactly 25 lanes.
        RoundIndexError: If `round_index` is outside [0, 23].
    """
    state.check_shape()
    # Resolve the constant first so a bad index leaves the state untouched.
    constant = constant_for(round_index)

    theta(state)
    rho(state)
    pi(state)
    chi(state)
    state.lanes[0] ^= constant


def permute(state: State) -> None:
    """
    Performs the full Keccak-f[1600] permutation on the given state.

    Args:
        state: The 25-lane state, mutated in place.

    Raises:
        StateLengthError: If the state does not hold exactly 25 lanes. The
            state is left unmodified.
    """
    state.check_shape()
    for round_index in range(NUM_ROUNDS):
        theta(state)
        rho(state)
        pi(state)
        chi(state)
        iota(state, round_index)
