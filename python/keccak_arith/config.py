"""
config.py - Environment-driven settings.

Values are read on every call so a running process (or a test) can flip them
through the environment.

  KECCAK_ARITH_STRICT_RADIX    "1" raises RadixError on malformed recomposition
                               instead of falling back to zero (default "0")
  KECCAK_ARITH_INSPECT_CHUNKS  digits shown by lanes.inspect_lane (default 65)
"""

import os
from typing import Optional

from .constants import THETA_CHUNKS

STRICT_RADIX_ENV = "KECCAK_ARITH_STRICT_RADIX"
INSPECT_CHUNKS_ENV = "KECCAK_ARITH_INSPECT_CHUNKS"

_TRUE = {"1", "true", "yes", "on"}


def strict_radix(override: Optional[bool] = None) -> bool:
    """Explicit override wins, otherwise the environment decides."""
    if override is not None:
        return override
    return os.environ.get(STRICT_RADIX_ENV, "0").strip().lower() in _TRUE


def inspect_chunks() -> int:
    raw = os.environ.get(INSPECT_CHUNKS_ENV, str(THETA_CHUNKS))
    try:
        chunks = int(raw)
    except ValueError:
        raise ValueError(f"{INSPECT_CHUNKS_ENV} must be an integer, got {raw!r}")
    if chunks <= 0:
        raise ValueError(f"{INSPECT_CHUNKS_ENV} must be positive, got {chunks}")
    return chunks
