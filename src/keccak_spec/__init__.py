"""Keccak-f[1600] permutation core with 256-bit digest extraction.

Usage::

    from keccak_spec import State, extract256, permute

    # An absorber XORs a padded block into the state ...
    state = State.zero()

    # ... then the core permutes it and reads the digest.
    permute(state)
    digest = extract256(state)
"""

from .keccak import (
    KeccakError,
    LaneIndexError,
    RoundIndexError,
    State,
    StateLengthError,
    constant_for,
    extract256,
    permute,
    rotate_left,
)

__all__ = [
    "State",
    "permute",
    "extract256",
    "rotate_left",
    "constant_for",
    "KeccakError",
    "RoundIndexError",
    "LaneIndexError",
    "StateLengthError",
]
