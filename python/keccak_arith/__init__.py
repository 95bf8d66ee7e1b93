"""
keccak_arith
============

Base conversion arithmetic for Keccak lane witnesses:
  - digit codecs that recover XOR (base 13) and chi (base 9) from digit sums
  - lane converters between native u64 words, base 9 and base 13
  - StateBigInt, the 5x5 state of arbitrary precision lanes
  - the bridge to 32 byte field elements for the proving layer
"""

from .constants import A1, A2, A3, A4, B2, B9, B13, FIELD_MODULUS
from .types import (
    ContractViolation,
    FieldOverflowError,
    KeccakArithError,
    Lane9,
    Lane13,
    NativeState,
    RadixError,
)
from .coef import chi_arith, convert_b9_coef, convert_b13_coef, identity_coef
from .radix import from_radix_be, from_radix_le, to_radix_be, to_radix_le
from .lanes import (
    convert_b2_to_b9,
    convert_b2_to_b13,
    convert_b9_lane_to_b2,
    convert_b9_lane_to_b2_normal,
    convert_b9_lane_to_b13,
    convert_b13_lane_to_b9,
    convert_lane,
    inspect_lane,
)
from .state import StateBigInt
from .field import (
    FieldElement,
    f_from_radix_be,
    native_to_state_bigint,
    split_state_cells,
    state_bigint_to_field,
    state_bigint_to_native,
    state_to_biguint,
    state_to_state_bigint,
)

__version__ = "0.1.0"
__all__ = [
    # Constants
    "A1", "A2", "A3", "A4",
    "B2", "B9", "B13",
    "FIELD_MODULUS",
    # Errors and types
    "KeccakArithError",
    "ContractViolation",
    "FieldOverflowError",
    "RadixError",
    "Lane9",
    "Lane13",
    "NativeState",
    # Digit codecs
    "convert_b13_coef",
    "convert_b9_coef",
    "identity_coef",
    "chi_arith",
    # Radix
    "to_radix_le",
    "to_radix_be",
    "from_radix_le",
    "from_radix_be",
    # Lane converters
    "convert_b2_to_b13",
    "convert_b2_to_b9",
    "convert_lane",
    "convert_b9_lane_to_b13",
    "convert_b9_lane_to_b2",
    "convert_b9_lane_to_b2_normal",
    "convert_b13_lane_to_b9",
    "inspect_lane",
    # State
    "StateBigInt",
    # Field bridge
    "FieldElement",
    "state_bigint_to_field",
    "state_to_biguint",
    "state_to_state_bigint",
    "native_to_state_bigint",
    "state_bigint_to_native",
    "split_state_cells",
    "f_from_radix_be",
]
