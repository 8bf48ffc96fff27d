"""The Keccak-f[1600] permutation and 256-bit digest extraction."""

from .constants import (
    NUM_LANES,
    NUM_ROUNDS,
    PACKED_ROUND_CONSTANTS,
    RATE_BYTES_256,
    ROUND_CONSTANTS,
    STATE_BYTES,
)
from .digest import extract256
from .exceptions import KeccakError, LaneIndexError, RoundIndexError, StateLengthError
from .permutation import chi, iota, keccak_round, permute, pi, rho, theta
from .rotation import rotate_left
from .round_constants import (
    ROUND_CONSTANT_TABLE,
    RoundConstantTable,
    constant_for,
    decode_round_constant,
)
from .state import State

__all__ = [
    # Core API
    "State",
    "permute",
    "extract256",
    # Round steps
    "keccak_round",
    "theta",
    "rho",
    "pi",
    "chi",
    "iota",
    # Primitives
    "rotate_left",
    "constant_for",
    "decode_round_constant",
    "RoundConstantTable",
    "ROUND_CONSTANT_TABLE",
    # Constants
    "NUM_LANES",
    "NUM_ROUNDS",
    "STATE_BYTES",
    "RATE_BYTES_256",
    "PACKED_ROUND_CONSTANTS",
    "ROUND_CONSTANTS",
    # Exceptions
    "KeccakError",
    "RoundIndexError",
    "LaneIndexError",
    "StateLengthError",
]
