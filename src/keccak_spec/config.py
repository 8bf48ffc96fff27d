"""
Global configuration for the Keccak permutation core.

This module contains environment-specific settings that apply across the package.
"""

import os

_SUPPORTED_ROUND_CONSTANT_SOURCES: list[str] = ["packed", "table"]

KECCAK_ROUND_CONSTANTS = os.environ.get("KECCAK_ROUND_CONSTANTS", "packed").lower()
"""
Where round constants are read from ('packed' or 'table').

- 'packed' decodes each constant from its one-byte packed encoding on demand.
- 'table' serves the literal table of expanded 64-bit constants.

Defaults to 'packed'. Both sources yield identical values.
"""

if KECCAK_ROUND_CONSTANTS not in _SUPPORTED_ROUND_CONSTANT_SOURCES:
    raise ValueError(
        f"Invalid KECCAK_ROUND_CONSTANTS environment variable: '{KECCAK_ROUND_CONSTANTS}'. "
        f"Supported values: {_SUPPORTED_ROUND_CONSTANT_SOURCES}"
    )
