"""Liquidity provision and removal.

Rounding is load-bearing for solvency:
- tokens collected on deposit round up (floor + 1)
- shares minted and assets paid on withdraw round down
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from amm_pool.errors import InsufficientShares, NotInitialized, ZeroInput
from amm_pool.pool.events import LiquidityProvided, LiquidityRemoved
from amm_pool.pool.state import checked_amount
from amm_pool.safe_int import S

if TYPE_CHECKING:
    from amm_pool.pool.state import PoolState
    from amm_pool.pool.transaction import TransactionBoundary
    from amm_pool.pricing import PricingEngine

logger = structlog.get_logger()


class LiquidityEngine:
    """Mints and burns liquidity shares against the live reserve ratio."""

    def __init__(
        self,
        state: PoolState,
        boundary: TransactionBoundary,
        pricing: PricingEngine,
    ) -> None:
        self._state = state
        self._boundary = boundary
        self._pricing = pricing

    def deposit(self, caller: str, value: int) -> int:
        """Add liquidity: value native plus the matching token amount.

        The token amount follows the current native/token ratio, which may
        have drifted from the initial ratio after swaps.

        Args:
            caller: Liquidity provider (must have approved the pool for tokens)
            value: Native payment sent with the call

        Returns:
            Tokens pulled from caller

        Raises:
            ZeroInput: If value is zero or too small to mint a share
            NotInitialized: If the pool holds no liquidity
            TransferFailed: If the native payment or the token pull fails
        """
        native_in = checked_amount("value", value)
        if native_in == 0:
            raise ZeroInput("deposit requires a non-zero native payment")

        with self._boundary.begin("deposit") as tx:
            if not self._state.initialized:
                raise NotInitialized("Pool has no liquidity; call init first")

            native_reserve = self._state.native_reserve
            token_reserve = self._state.token_reserve
            total_shares = self._state.total_liquidity_shares

            token_required = (
                S(self._pricing.proportional(native_in, native_reserve, token_reserve)) + 1
            ).value
            shares_minted = self._pricing.proportional(native_in, native_reserve, total_shares)
            if shares_minted == 0:
                raise ZeroInput(
                    f"deposit of {native_in} is too small to mint a share "
                    f"(native reserve {native_reserve}, total shares {total_shares})"
                )

            self._state.credit_shares(caller, shares_minted)
            self._state.set_reserves(
                (S(native_reserve) + native_in).value,
                (S(token_reserve) + token_required).value,
            )

            tx.collect_native(caller, native_in)
            tx.pull_tokens(caller, token_required)
            tx.emit(
                LiquidityProvided(
                    caller=caller,
                    shares_minted=shares_minted,
                    native_amount=native_in,
                    token_amount=token_required,
                )
            )

        logger.info(
            "liquidity_provided",
            caller=caller,
            shares_minted=shares_minted,
            native_amount=native_in,
            token_amount=token_required,
        )
        return token_required

    def withdraw(self, caller: str, share_amount: int) -> tuple[int, int]:
        """Burn share_amount shares for a proportional cut of both reserves.

        Args:
            caller: Share holder
            share_amount: Shares to burn

        Returns:
            Tuple of (native_out, token_out) paid to caller

        Raises:
            ZeroInput: If share_amount is zero
            InsufficientShares: If caller holds fewer than share_amount shares
            TransferFailed: If either payout fails
        """
        share_amount = checked_amount("share_amount", share_amount)
        if share_amount == 0:
            raise ZeroInput("withdraw requires a non-zero share amount")

        with self._boundary.begin("withdraw") as tx:
            held = self._state.shares_of(caller)
            if held < share_amount:
                raise InsufficientShares(
                    f"Account {caller} holds {held} shares, cannot withdraw {share_amount}"
                )

            native_reserve = self._state.native_reserve
            token_reserve = self._state.token_reserve
            total_shares = self._state.total_liquidity_shares

            native_out = self._pricing.proportional(share_amount, total_shares, native_reserve)
            token_out = self._pricing.proportional(share_amount, total_shares, token_reserve)

            self._state.debit_shares(caller, share_amount)
            self._state.set_reserves(
                (S(native_reserve) - native_out).value,
                (S(token_reserve) - token_out).value,
            )

            tx.pay_native(caller, native_out)
            tx.push_tokens(caller, token_out)
            tx.emit(
                LiquidityRemoved(
                    caller=caller,
                    shares_burned=share_amount,
                    native_amount=native_out,
                    token_amount=token_out,
                )
            )

        logger.info(
            "liquidity_removed",
            caller=caller,
            shares_burned=share_amount,
            native_amount=native_out,
            token_amount=token_out,
        )
        return native_out, token_out
