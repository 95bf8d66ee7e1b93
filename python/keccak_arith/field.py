"""
field.py - Bridge between lanes and the proving layer's field elements

Field elements are scalars of the BN254 scalar field with a 32 byte
little-endian canonical representation. A lane that does not fit is an
error: it is never truncated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .constants import FIELD_BYTES, FIELD_MODULUS, STATE_LANES, STATE_WIDTH
from .state import StateBigInt
from .types import AssignedCell, ContractViolation, FieldOverflowError, NativeState

_NATIVE_BYTES = 8


@dataclass(frozen=True)
class FieldElement:
    """Canonical field element, 0 <= value < FIELD_MODULUS."""
    value: int = 0

    def __post_init__(self):
        if not 0 <= self.value < FIELD_MODULUS:
            raise FieldOverflowError(f"{self.value} is not a canonical field element")

    @classmethod
    def zero(cls) -> "FieldElement":
        return cls(0)

    @classmethod
    def one(cls) -> "FieldElement":
        return cls(1)

    @classmethod
    def from_int(cls, n: int) -> "FieldElement":
        """Reduces modulo the field (use the constructor to reject instead)."""
        return cls(n % FIELD_MODULUS)

    @classmethod
    def from_repr(cls, repr_bytes: bytes) -> "FieldElement":
        """32 byte little-endian repr; non-canonical encodings are rejected."""
        if len(repr_bytes) != FIELD_BYTES:
            raise ContractViolation(f"field repr must be {FIELD_BYTES} bytes, got {len(repr_bytes)}")
        return cls(int.from_bytes(repr_bytes, "little"))

    def to_repr(self) -> bytes:
        return self.value.to_bytes(FIELD_BYTES, "little")

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement((self.value + other.value) % FIELD_MODULUS)

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement((self.value * other.value) % FIELD_MODULUS)

    def __int__(self) -> int:
        return self.value


# =============================================================================
# StateBigInt <-> field elements
# =============================================================================

def lane_to_field(lane: int) -> FieldElement:
    """Lane -> field element through its little-endian bytes."""
    if lane < 0:
        raise ContractViolation(f"lanes are unsigned, got {lane}")
    width = max(1, (lane.bit_length() + 7) // 8)
    if width > FIELD_BYTES:
        raise FieldOverflowError(f"lane needs {width} bytes, field elements hold {FIELD_BYTES}")
    array = lane.to_bytes(width, "little").ljust(FIELD_BYTES, b"\x00")
    return FieldElement.from_repr(array)


def state_bigint_to_field(state: StateBigInt, n: int = STATE_LANES) -> List[FieldElement]:
    """First `n` lanes of `state` (storage order) as field elements."""
    if not 0 < n <= STATE_LANES:
        raise ContractViolation(f"n must be in [1, {STATE_LANES}], got {n}")
    return [lane_to_field(lane) for lane in state.xy[:n]]


def state_to_biguint(state: Sequence[FieldElement]) -> StateBigInt:
    """Field elements -> StateBigInt; fewer than 25 are zero-padded."""
    if len(state) > STATE_LANES:
        raise ContractViolation(f"at most {STATE_LANES} field elements, got {len(state)}")
    xy = [int.from_bytes(elem.to_repr(), "little") for elem in state]
    xy.extend([0] * (STATE_LANES - len(xy)))
    return StateBigInt(xy)


def state_to_state_bigint(state: Sequence[FieldElement]) -> NativeState:
    """
    Field elements -> native 5x5 u64 matrix, zero-padded to 25 lanes.

    Every element must carry a u64: bytes 8..32 of its repr are zero.
    """
    if len(state) > STATE_LANES:
        raise ContractViolation(f"at most {STATE_LANES} field elements, got {len(state)}")
    elems = []
    for elem in state:
        raw = elem.to_repr()
        if any(raw[_NATIVE_BYTES:]):
            raise ContractViolation(f"field element {elem.value} does not hold a u64 lane")
        elems.append(int.from_bytes(raw[:_NATIVE_BYTES], "little"))
    elems.extend([0] * (STATE_LANES - len(elems)))
    return [elems[STATE_WIDTH * idx:STATE_WIDTH * (idx + 1)] for idx in range(STATE_WIDTH)]


# =============================================================================
# StateBigInt <-> native words
# =============================================================================

def native_to_state_bigint(state: NativeState) -> StateBigInt:
    return StateBigInt.from_state(state)


def state_bigint_to_native(state: StateBigInt) -> NativeState:
    return state.to_state()


# =============================================================================
# Helpers for the constraint layer
# =============================================================================

def split_state_cells(state: Sequence[AssignedCell]) -> List[FieldElement]:
    """Only the values of assigned state cells."""
    res = []
    for idx, cell in enumerate(state):
        if cell.value is None:
            raise ContractViolation(f"state cell {idx} has no assigned value")
        value = cell.value
        res.append(value if isinstance(value, FieldElement) else FieldElement(int(value)))
    return res


def f_from_radix_be(buf: Sequence[int], base: int) -> FieldElement:
    """Big-endian digits recomposed inside the field."""
    f_base = FieldElement.from_int(base)
    acc = FieldElement.zero()
    for x in buf:
        acc = acc * f_base + FieldElement.from_int(x)
    return acc
