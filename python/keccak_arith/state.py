"""
state.py - 5x5 Keccak state of arbitrary precision lanes

Lanes live in a flat list of 25 ints; (x, y) maps to offset x*5 + y.
"""

from __future__ import annotations

from itertools import product
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .constants import STATE_LANES, STATE_WIDTH
from .lanes import check_u64
from .types import ContractViolation, NativeState


def _check_lane(lane: int) -> None:
    if isinstance(lane, bool) or not isinstance(lane, int):
        raise ContractViolation(f"lanes are unsigned ints, got {lane!r}")
    if lane < 0:
        raise ContractViolation(f"lanes are unsigned, got {lane}")


def _offset(xy: Tuple[int, int]) -> int:
    try:
        x, y = xy
    except (TypeError, ValueError):
        raise ContractViolation(f"state index must be an (x, y) pair, got {xy!r}")
    if not (0 <= x < STATE_WIDTH and 0 <= y < STATE_WIDTH):
        raise ContractViolation(f"state coordinate {xy!r} out of range")
    return x * STATE_WIDTH + y


def coordinates() -> Iterator[Tuple[int, int]]:
    """All (x, y) pairs in storage order."""
    return product(range(STATE_WIDTH), range(STATE_WIDTH))


class StateBigInt:
    """25 lanes addressed by (x, y). Defaults to all zero."""

    __slots__ = ("xy",)

    def __init__(self, xy: Optional[Sequence[int]] = None):
        if xy is None:
            self.xy: List[int] = [0] * STATE_LANES
            return
        lanes = list(xy)
        if len(lanes) != STATE_LANES:
            raise ContractViolation(f"state needs {STATE_LANES} lanes, got {len(lanes)}")
        for lane in lanes:
            _check_lane(lane)
        self.xy = lanes

    @classmethod
    def zero(cls) -> "StateBigInt":
        return cls()

    @classmethod
    def from_state(cls, state: NativeState) -> "StateBigInt":
        """From a native 5x5 matrix of u64 words, native[x][y] -> (x, y)."""
        if len(state) != STATE_WIDTH or any(len(row) != STATE_WIDTH for row in state):
            raise ContractViolation("native state must be 5x5")
        lanes = []
        for row in state:
            for word in row:
                check_u64(word)
                lanes.append(word)
        return cls(lanes)

    @classmethod
    def from_state_big_int(cls, a: "StateBigInt", lane_transform: Callable[[int], int]) -> "StateBigInt":
        """New state with `lane_transform` applied to every lane of `a`."""
        out = cls()
        for xy in coordinates():
            out[xy] = lane_transform(a[xy])
        return out

    def to_state(self) -> NativeState:
        """Back to native u64 words. Every lane must fit in 64 bits."""
        for lane in self.xy:
            check_u64(lane)
        return [self.xy[x * STATE_WIDTH:(x + 1) * STATE_WIDTH] for x in range(STATE_WIDTH)]

    def copy(self) -> "StateBigInt":
        return StateBigInt(self.xy)

    def __getitem__(self, xy: Tuple[int, int]) -> int:
        return self.xy[_offset(xy)]

    def __setitem__(self, xy: Tuple[int, int], lane: int) -> None:
        _check_lane(lane)
        self.xy[_offset(xy)] = lane

    def __iter__(self) -> Iterator[int]:
        return iter(self.xy)

    def __len__(self) -> int:
        return STATE_LANES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateBigInt):
            return NotImplemented
        return self.xy == other.xy

    __hash__ = None

    def __repr__(self) -> str:
        return f"StateBigInt({self.xy!r})"
