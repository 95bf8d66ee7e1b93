"""
lanes.py - Lane converters

A native u64 lane is spread out one bit per digit in base 13 (theta) or
base 9 (chi). Summing up to `base - 1` such lanes never carries between
digits, so each digit keeps the per-position bit sum. The converters below
move lanes between those encodings and back to native words, reinterpreting
each digit through a codec from coef.py.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .coef import convert_b9_coef, convert_b13_coef, identity_coef
from .config import inspect_chunks
from .constants import B2, B9, B13, LANE_BITS, LANE_MASK, MAX_ROTATION, THETA_CHUNKS
from .radix import from_radix_be, from_radix_le, to_radix_be, to_radix_le
from .types import ContractViolation, Lane9, Lane13

logger = logging.getLogger(__name__)

CoefTransform = Callable[[int], int]


def check_u64(word: int) -> None:
    if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= LANE_MASK:
        raise ContractViolation(f"{word} is not a u64 lane")


# =============================================================================
# NATIVE -> SPREAD
# =============================================================================

def convert_b2_to_base(word: int, base: int) -> int:
    """Bit i of `word` becomes the coefficient of base**i."""
    check_u64(word)
    lane = 0
    for i in range(LANE_BITS):
        bit = (word >> i) & 1
        lane += bit * base ** i
    return lane


def convert_b2_to_b13(word: int) -> Lane13:
    return convert_b2_to_base(word, B13)


def convert_b2_to_b9(word: int) -> Lane9:
    return convert_b2_to_base(word, B9)


# =============================================================================
# GENERIC DIGIT-WISE CONVERSION
# =============================================================================

def convert_lane(
    lane: int,
    from_base: int,
    to_base: int,
    coef_transform: CoefTransform,
    strict: Optional[bool] = None,
    width: Optional[int] = None,
) -> int:
    """
    Big-endian digits of `from_base`, each mapped by `coef_transform`, read
    back as big-endian digits of `to_base`.

    With `width`, a lane needing more than `width` digits of `from_base` is a
    ContractViolation.

    A mapped digit that is not valid in `to_base` makes the result 0, or
    raises RadixError in strict radix mode.
    """
    chunks = to_radix_be(lane, from_base, width)
    converted = [coef_transform(x) for x in chunks]
    return from_radix_be(converted, to_base, strict)


def convert_b9_lane_to_b13(x: Lane9) -> Lane13:
    return convert_lane(x, B9, B13, convert_b9_coef, width=LANE_BITS)


def _to_native(value: int) -> int:
    if value > LANE_MASK:
        raise ContractViolation(f"converted lane has {value.bit_length()} bits, expected at most {LANE_BITS}")
    return value


def convert_b9_lane_to_b2(x: Lane9) -> int:
    """Base 9 chi lane -> native word, applying the chi combinator per digit."""
    return _to_native(convert_lane(x, B9, B2, convert_b9_coef))


def convert_b9_lane_to_b2_normal(x: Lane9) -> int:
    """Base 9 lane whose digits are already bits -> native word."""
    return _to_native(convert_lane(x, B9, B2, identity_coef))


# =============================================================================
# THETA OUTPUT: ROTATE + FOLD
# =============================================================================

def convert_b13_lane_to_b9(x: Lane13, rot: int) -> Lane9:
    """
    Theta output lane (65 base 13 chunks) -> rotated base 9 lane.

    Chunks 0 and 64 were kept apart by theta and describe the same bit, so
    they are summed back into one. The remaining 63 middle chunks are split
    at 63 - rot: the tail wraps around to the low end, the folded chunk goes
    in between, and the head follows.
    """
    if isinstance(rot, bool) or not isinstance(rot, int) or not 0 <= rot <= MAX_ROTATION:
        raise ContractViolation(f"rotation must be in [0, {MAX_ROTATION}], got {rot!r}")

    chunks = to_radix_le(x, B13, THETA_CHUNKS)
    special = chunks[0] + chunks[64]
    middle = chunks[1:64]
    left, right = middle[:63 - rot], middle[63 - rot:]

    rotated = [convert_b13_coef(c) for c in right + [special] + left]
    return from_radix_le(rotated, B9)


# =============================================================================
# DEBUG
# =============================================================================

def inspect_lane(x: int, name: str, base: int) -> List[Tuple[int, int]]:
    """(index, digit) pairs of the little-endian digits of `x`, logged at debug."""
    chunks = to_radix_le(x, base)
    width = inspect_chunks()
    chunks = (chunks + [0] * width)[:width]
    info = list(enumerate(chunks))
    logger.debug(f"inspect {name} {x} info {info}")
    return info
