"""
The Keccak-f[1600] state.

The state is 25 lanes of 64 bits, viewed as a 5x5 matrix. Lane (x, y) is
stored at linear index x + 5y.

A state is owned by its caller. The permutation mutates it in place and
never hands back a separate copy.
"""

from __future__ import annotations

import logging

from pydantic import Field
from typing_extensions import Self

from ..types import Bytes200, CamelModel, Uint64
from .constants import LANE_BYTES, NUM_LANES, ROW_LENGTH, STATE_BYTES
from .exceptions import LaneIndexError, StateLengthError

logger = logging.getLogger(__name__)


def _zero_lanes() -> list[Uint64]:
    return [Uint64(0)] * NUM_LANES


def _check_index(index: object, limit: int, what: str) -> int:
    # Negative indices are rejected rather than wrapped.
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < limit:
        logger.debug("Rejected %s %r (limit %d)", what.lower(), index, limit)
        raise LaneIndexError(index, limit, what=what)
    return index


class State(CamelModel):
    """A mutable 1600-bit permutation state of exactly 25 lanes."""

    lanes: list[Uint64] = Field(
        default_factory=_zero_lanes,
        min_length=NUM_LANES,
        max_length=NUM_LANES,
        description="The 25 lanes, lane (x, y) at index x + 5y.",
    )

    @classmethod
    def zero(cls) -> Self:
        """The all-zero state."""
        return cls()

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Build a state from its 200-byte serialization.

        Each lane is read as 8 little-endian bytes, lane 0 first.

        Raises:
            StateLengthError: If `data` is not exactly 200 bytes long.
        """
        if len(data) != STATE_BYTES:
            logger.debug("Rejected %d-byte serialized state", len(data))
            raise StateLengthError(expected=STATE_BYTES, actual=len(data), unit="bytes")
        return cls(
            lanes=[
                Uint64.decode_bytes(bytes(data[i : i + LANE_BYTES]))
                for i in range(0, STATE_BYTES, LANE_BYTES)
            ]
        )

    def to_bytes(self) -> Bytes200:
        """Serialize the state as 200 bytes, each lane little-endian, lane 0 first."""
        self.check_shape()
        return Bytes200(b"".join(lane.to_bytes() for lane in self.lanes))

    def check_shape(self) -> None:
        """
        Verify the state still holds exactly 25 lanes.

        Field validation covers construction and assignment, but the lane
        list itself can still be resized in place.

        Raises:
            StateLengthError: If the lane count is not 25.
        """
        if len(self.lanes) != NUM_LANES:
            logger.debug("Rejected state with %d lanes", len(self.lanes))
            raise StateLengthError(expected=NUM_LANES, actual=len(self.lanes))

    def clone(self) -> Self:
        """Return an independent copy of this state."""
        return type(self)(lanes=list(self.lanes))

    def lane(self, x: int, y: int) -> Uint64:
        """Read lane (x, y), with x and y in [0, 4]."""
        x = _check_index(x, ROW_LENGTH, "Coordinate x")
        y = _check_index(y, ROW_LENGTH, "Coordinate y")
        return self.lanes[x + ROW_LENGTH * y]

    def set_lane(self, x: int, y: int, value: int) -> None:
        """Overwrite lane (x, y), with x and y in [0, 4]."""
        x = _check_index(x, ROW_LENGTH, "Coordinate x")
        y = _check_index(y, ROW_LENGTH, "Coordinate y")
        self.lanes[x + ROW_LENGTH * y] = Uint64(value)

    def __len__(self) -> int:
        """Number of lanes (always 25 for a well-formed state)."""
        return len(self.lanes)

    def __getitem__(self, index: int) -> Uint64:
        """Read a lane by linear index in [0, 24]."""
        return self.lanes[_check_index(index, NUM_LANES, "Lane index")]

    def __setitem__(self, index: int, value: int) -> None:
        """Overwrite a lane by linear index in [0, 24]."""
        self.lanes[_check_index(index, NUM_LANES, "Lane index")] = Uint64(value)
