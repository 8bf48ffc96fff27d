"""Test helpers for the Keccak permutation core."""

from .sponge import (
    KECCAK_DOMAIN,
    SHA3_DOMAIN,
    absorb_single_block,
    hash_single_block,
)

__all__ = [
    "KECCAK_DOMAIN",
    "SHA3_DOMAIN",
    "absorb_single_block",
    "hash_single_block",
]
