"""Exception hierarchy for the Keccak permutation core."""

from __future__ import annotations


class KeccakError(Exception):
    """
    Base exception for all permutation-core errors.

    Every error here is a programmer error: the caller handed the core
    something outside its fixed-size contract.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class RoundIndexError(KeccakError, IndexError):
    """
    Raised when a round index falls outside [0, NUM_ROUNDS).

    Attributes:
        round_index: The rejected index (may not even be an int).
        num_rounds: The number of valid rounds.
    """

    def __init__(self, round_index: object, num_rounds: int) -> None:
        self.round_index = round_index
        self.num_rounds = num_rounds
        super().__init__(
            f"Round index {round_index!r} is out of range (valid range: [0, {num_rounds - 1}])"
        )


class LaneIndexError(KeccakError, IndexError):
    """
    Raised when a lane index or matrix coordinate is out of range.

    Negative indices are rejected rather than wrapped around.

    Attributes:
        index: The rejected index.
        limit: The exclusive upper bound of the valid range.
    """

    def __init__(self, index: object, limit: int, *, what: str = "Lane index") -> None:
        self.index = index
        self.limit = limit
        super().__init__(f"{what} {index!r} is out of range (valid range: [0, {limit - 1}])")


class StateLengthError(KeccakError, ValueError):
    """
    Raised when a state, or its serialized form, has the wrong size.

    Attributes:
        expected: The exact size required.
        actual: The size received.
        unit: What is being counted ('lanes' or 'bytes').
    """

    def __init__(self, *, expected: int, actual: int, unit: str = "lanes") -> None:
        self.expected = expected
        self.actual = actual
        self.unit = unit
        super().__init__(f"State requires exactly {expected} {unit}, got {actual}")
