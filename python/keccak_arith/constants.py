"""
constants.py - Numeric constants shared by the lane converters.

Bases:
  - B2  = binary (native words)
  - B9  = chi step encoding
  - B13 = theta step encoding

Chi arithmetic scalars:
    f_logic(a, b, c, d) = a ^ (~b & c) ^ d
    f_arith(a, b, c, d) = A1*a + A2*b + A3*c + A4*d
For bits a, b, c, d we have 0 <= f_arith < 9, and f_arith -> f_logic is a
function (see `coef.convert_b9_coef`).
"""

B2 = 2
B9 = 9
B13 = 13

A1 = 2
A2 = 1
A3 = 3
A4 = 2

# 5x5 Keccak-f[1600] state geometry
STATE_WIDTH = 5
STATE_LANES = STATE_WIDTH * STATE_WIDTH

LANE_BITS = 64
LANE_MASK = (1 << LANE_BITS) - 1

# Digits of a base 13 lane leaving theta: positions 0 and 64 alias the same bit.
THETA_CHUNKS = LANE_BITS + 1
MAX_ROTATION = LANE_BITS - 1

# BN254 scalar field (the proving layer's native field).
FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
FIELD_BYTES = 32
