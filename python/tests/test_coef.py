"""
test_coef.py - Digit codec tests

The codecs must recover XOR (base 13) and a ^ (~b & c) ^ d (base 9) from
arithmetic digit sums.
"""

from itertools import product

import pytest
from keccak_arith.coef import (
    B9_BIT_TABLE,
    chi_arith,
    convert_b9_coef,
    convert_b13_coef,
    identity_coef,
)
from keccak_arith.types import ContractViolation


class TestBase13Coef:
    """Parity of a bit sum is its XOR."""

    @pytest.mark.parametrize("x", range(13))
    def test_parity(self, x):
        """Base 13 codec is x mod 2 for every digit."""
        assert convert_b13_coef(x) == x % 2

    def test_five_of_twelve_bits(self):
        """5 bits set, 7 unset -> XOR is 1."""
        bits = [1] * 5 + [0] * 7
        assert convert_b13_coef(sum(bits)) == 1

    @pytest.mark.parametrize("x", [13, 14, -1])
    def test_out_of_range(self, x):
        """Digits outside [0, 13) are rejected."""
        with pytest.raises(ContractViolation):
            convert_b13_coef(x)


class TestBase9Coef:
    """f_arith -> f_logic lookup."""

    def test_table(self):
        """Lookup table for digits 0..8."""
        assert [convert_b9_coef(x) for x in range(9)] == [0, 0, 1, 1, 0, 0, 1, 1, 0]
        assert B9_BIT_TABLE == (0, 0, 1, 1, 0, 0, 1, 1, 0)

    def test_matches_logic_for_all_bit_patterns(self):
        """All 16 (a, b, c, d) agree with a ^ (~b & c) ^ d."""
        for a, b, c, d in product((0, 1), repeat=4):
            x = chi_arith(a, b, c, d)
            assert x == 2 * a + b + 3 * c + 2 * d
            assert convert_b9_coef(x) == a ^ ((1 - b) & c) ^ d, (a, b, c, d)

    @pytest.mark.parametrize("x", [9, 12, -1])
    def test_out_of_range(self, x):
        """Digits outside [0, 9) are rejected."""
        with pytest.raises(ContractViolation):
            convert_b9_coef(x)

    def test_contract_violation_is_assertion_error(self):
        """ContractViolation is still an AssertionError for callers that catch those."""
        with pytest.raises(AssertionError):
            convert_b9_coef(9)


class TestIdentityCoef:
    def test_pass_through(self):
        """Identity codec returns its digit."""
        assert [identity_coef(x) for x in range(13)] == list(range(13))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
