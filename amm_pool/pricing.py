"""Constant-product pricing.

The pool uses the constant product formula: x * y = k
with a 0.3% fee on input amounts. The fee stays in the pool, so k grows
with every swap.
"""

from __future__ import annotations

from typing import ClassVar

from amm_pool.constants import FEE_DENOMINATOR, FEE_NUMERATOR
from amm_pool.safe_int import S


class PricingEngine:
    """Constant-product pricing math.

    Formula: output = (input * 997 * reserve_out) / (reserve_in * 1000 + input * 997)

    All divisions floor, so the pool never pays out more than the exact
    formula yields.
    """

    FEE_NUMERATOR: ClassVar[int] = FEE_NUMERATOR
    FEE_DENOMINATOR: ClassVar[int] = FEE_DENOMINATOR

    def price(self, input_amount: int, input_reserve: int, output_reserve: int) -> int:
        """Calculate swap output for a given input.

        Args:
            input_amount: Amount of the asset being sold
            input_reserve: Pool reserve of the asset being sold
            output_reserve: Pool reserve of the asset being bought

        Returns:
            Amount of the bought asset paid to the caller

        Raises:
            ValueError: If any argument is negative
            DivisionByZero: If both input_reserve and input_amount are zero
        """
        _require_non_negative(
            input_amount=input_amount,
            input_reserve=input_reserve,
            output_reserve=output_reserve,
        )

        fee_adjusted_input = S(input_amount) * self.FEE_NUMERATOR
        numerator = fee_adjusted_input * S(output_reserve)
        denominator = S(input_reserve) * self.FEE_DENOMINATOR + fee_adjusted_input

        return (numerator // denominator).value

    def proportional(self, amount: int, reserve_from: int, reserve_to: int) -> int:
        """Scale amount by reserve_to / reserve_from, rounding down.

        Used to size deposits and withdrawals against the live reserve ratio.

        Raises:
            DivisionByZero: If reserve_from is zero
        """
        _require_non_negative(amount=amount, reserve_from=reserve_from, reserve_to=reserve_to)
        return (S(amount) * S(reserve_to) // S(reserve_from)).value


def _require_non_negative(**amounts: int) -> None:
    for name, value in amounts.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


# Singleton instance
pricing_engine = PricingEngine()


def price(input_amount: int, input_reserve: int, output_reserve: int) -> int:
    """Module-level shortcut for PricingEngine.price."""
    return pricing_engine.price(input_amount, input_reserve, output_reserve)
