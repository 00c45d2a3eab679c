"""Tests for checked amount arithmetic."""

import pytest

from amm_pool.constants import UINT256_MAX
from amm_pool.safe_int import (
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint256Overflow,
    Underflow,
)


class TestWrapping:
    def test_int_and_nested(self):
        assert S(42).value == 42
        assert S(S(7)).value == 7
        assert SafeInt.zero().value == 0
        assert S is SafeInt

    @pytest.mark.parametrize("bad", ["1000", 2.5, True, None])
    def test_non_int_amounts_rejected(self, bad):
        with pytest.raises(TypeError, match="needs an int"):
            S(bad)


class TestOperandTypes:
    @pytest.mark.parametrize("operand", [0.5, "2", True, None])
    def test_non_int_operands_rejected(self, operand):
        for apply in (
            lambda: S(10) + operand,
            lambda: operand + S(10),
            lambda: S(10) - operand,
            lambda: S(10) * operand,
            lambda: operand * S(10),
            lambda: S(10) // operand,
        ):
            with pytest.raises(TypeError, match="needs an int"):
                apply()


class TestOperators:
    def test_reserve_update_arithmetic(self):
        """The operations a swap applies to its reserves."""
        native_reserve, token_reserve = S(1000), S(1000)
        assert (native_reserve + 100).value == 1100
        assert (100 + native_reserve).value == 1100
        assert (token_reserve - S(90)).value == 910
        assert (token_reserve - 1000).value == 0

    def test_reserve_cannot_go_negative(self):
        with pytest.raises(Underflow, match="910 - 911"):
            S(910) - 911

    def test_fee_adjusted_price(self):
        fee_adjusted = S(100) * 997
        assert (fee_adjusted * 1000 // (S(1000) * 1000 + fee_adjusted)).value == 90
        assert (2 * S(21)).value == 42

    def test_products_beyond_64_bits(self):
        reserve = 10**30
        assert (S(reserve) * S(reserve)).value == 10**60

    def test_ratio_against_empty_reserve(self):
        with pytest.raises(DivisionByZero, match="by zero"):
            S(500) // S.zero()

    def test_hierarchy(self):
        for error in (DivisionByZero, Underflow, Uint256Overflow):
            assert issubclass(error, SafeIntError)
        assert issubclass(SafeIntError, ArithmeticError)

    def test_ordering_and_truthiness(self):
        assert S(1) < 2 and S(2) <= S(2)
        assert S(3) > S(2) and S(3) >= 3
        assert S(4) == 4 and S(4) != S(5)
        assert not S.zero() and S(1)


class TestUint256Range:
    @pytest.mark.parametrize("amount", [0, 1, UINT256_MAX])
    def test_bounds_accepted(self, amount):
        assert S(amount).to_uint256() == amount

    @pytest.mark.parametrize("amount", [-1, UINT256_MAX + 1])
    def test_out_of_range_rejected(self, amount):
        with pytest.raises(Uint256Overflow):
            S(amount).to_uint256()

    def test_sum_past_max_rejected(self):
        with pytest.raises(Uint256Overflow):
            (S(UINT256_MAX) + S(1)).to_uint256()
