"""
coef.py - Digit codecs

A digit of a base 13 or base 9 lane holds the arithmetic sum of a few bits.
The codecs here recover the boolean result from that sum.
"""

from .constants import A1, A2, A3, A4, B9, B13
from .types import ContractViolation

# f_arith -> f_logic, indexed by 2*a + b + 3*c + 2*d
B9_BIT_TABLE = (0, 0, 1, 1, 0, 0, 1, 1, 0)


def _check_digit(x: int, base: int) -> None:
    if not 0 <= x < base:
        raise ContractViolation(f"digit {x} out of range for base {base}")


def convert_b13_coef(x: int) -> int:
    """
    Maps a sum of up to 12 bits to the XOR of those bits.

    `x` is a chunk of a base 13 number holding the arithmetic sum of the
    bits. Their XOR is 1 exactly when `x` is odd: 5 bits set and 7 unset
    gives x = 5 and XOR = 1.
    """
    _check_digit(x, B13)
    return x & 1


def convert_b9_coef(x: int) -> int:
    """
    Maps `2*a + b + 3*c + 2*d` to `a ^ (~b & c) ^ d`.

    `x` is a chunk of a base 9 number; a, b, c, d are single bits.
    """
    _check_digit(x, B9)
    return B9_BIT_TABLE[x]


def identity_coef(x: int) -> int:
    """Pass-through, for pure re-basing."""
    return x


def chi_arith(a: int, b: int, c: int, d: int) -> int:
    """
    A1*a + A2*b + A3*c + A4*d.

    Works on single bits as well as on whole base 9 lanes (every digit
    0 or 1), because a base 9 lane sum never carries.
    """
    return A1 * a + A2 * b + A3 * c + A4 * d
