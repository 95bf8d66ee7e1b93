"""
types.py - Errors and type aliases for keccak_arith
"""

from typing import Any, List, Optional, Protocol


# Every lane form is a plain (arbitrary precision) int.
Lane = int
Lane9 = int     # one bit per base 9 digit
Lane13 = int    # one bit per base 13 digit

# native[x][y] is the u64 lane at (x, y)
NativeState = List[List[int]]


class KeccakArithError(Exception):
    """Base class for every error raised by keccak_arith."""
    pass


class ContractViolation(KeccakArithError, AssertionError):
    """
    A caller broke a precondition: digit out of range, coordinate out of
    range, rotation out of range, wrong digit-sequence length, value outside
    the u64 window.

    These are programmer errors. They are raised unconditionally, `python -O`
    does not turn them off.
    """
    pass


class FieldOverflowError(KeccakArithError, ValueError):
    """A lane does not fit into a field element (too wide or >= modulus)."""
    pass


class RadixError(KeccakArithError, ValueError):
    """Digit recomposition failed (digit >= base). Strict radix mode only."""
    pass


class AssignedCell(Protocol):
    """A cell assigned by the proving layer; `value` is None until witnessed."""
    value: Optional[Any]
