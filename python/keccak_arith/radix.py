"""
radix.py - Positional digit decomposition and recomposition

Decomposition never fails for a non-negative int. Recomposition follows the
reference pipeline: a digit that does not fit its base makes the whole
result 0. That fallback is logged; strict radix mode (see config.py) raises
RadixError instead.
"""

import logging
from typing import List, Optional, Sequence

from .config import strict_radix
from .types import ContractViolation, RadixError

logger = logging.getLogger(__name__)


def _check_base(base: int) -> None:
    if base < 2:
        raise ContractViolation(f"base must be >= 2, got {base}")


def to_radix_le(value: int, base: int, width: Optional[int] = None) -> List[int]:
    """
    Little-endian digits of `value` in `base`.

    Zero decomposes to [0]. With `width`, the digits are zero-padded on the
    high end to exactly `width`; a value that needs more digits than that
    is a ContractViolation.
    """
    _check_base(base)
    if value < 0:
        raise ContractViolation(f"lanes are unsigned, got {value}")

    digits = []
    while value:
        value, d = divmod(value, base)
        digits.append(d)
    if not digits:
        digits.append(0)

    if width is not None:
        if len(digits) > width:
            raise ContractViolation(
                f"value needs {len(digits)} base {base} digits, declared width is {width}"
            )
        digits.extend([0] * (width - len(digits)))
    return digits


def to_radix_be(value: int, base: int, width: Optional[int] = None) -> List[int]:
    """Big-endian digits of `value` in `base`."""
    return to_radix_le(value, base, width)[::-1]


def from_radix_le(digits: Sequence[int], base: int, strict: Optional[bool] = None) -> int:
    """Recompose little-endian digits. Malformed digits give 0 (or RadixError)."""
    return from_radix_be(list(reversed(digits)), base, strict)


def from_radix_be(digits: Sequence[int], base: int, strict: Optional[bool] = None) -> int:
    """Recompose big-endian digits. Malformed digits give 0 (or RadixError)."""
    _check_base(base)
    value = 0
    for d in digits:
        if not 0 <= d < base:
            if strict_radix(strict):
                raise RadixError(f"digit {d} is not valid in base {base}")
            logger.warning(f"Digit {d} not valid in base {base}; recomposition defaults to 0")
            return 0
        value = value * base + d
    return value
