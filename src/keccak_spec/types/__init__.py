"""Reusable type definitions for the Keccak permutation core."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, Bytes200
from .uint import BaseUint, Uint64

__all__ = [
    # Core types
    "BaseUint",
    "Uint64",
    "BaseBytes",
    "Bytes32",
    "Bytes200",
    "CamelModel",
    "StrictBaseModel",
]
