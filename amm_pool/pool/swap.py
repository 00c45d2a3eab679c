"""Swap execution between the native asset and the token."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from amm_pool.errors import NotInitialized, ZeroInput
from amm_pool.pool.events import SwapDirection, SwapExecuted
from amm_pool.pool.state import checked_amount
from amm_pool.safe_int import S

if TYPE_CHECKING:
    from amm_pool.pool.state import PoolState
    from amm_pool.pool.transaction import TransactionBoundary
    from amm_pool.pricing import PricingEngine

logger = structlog.get_logger()


class SwapEngine:
    """Executes exact-input swaps in both directions.

    Reserves are updated before any payout leaves the pool, so a callback
    triggered by a transfer can never observe pre-trade reserves.
    """

    def __init__(
        self,
        state: PoolState,
        boundary: TransactionBoundary,
        pricing: PricingEngine,
    ) -> None:
        self._state = state
        self._boundary = boundary
        self._pricing = pricing

    def swap_native_for_token(self, caller: str, value: int) -> int:
        """Sell value native units for tokens.

        Args:
            caller: Account paying native and receiving tokens
            value: Native payment sent with the call

        Returns:
            Tokens paid to caller
        """
        native_in = checked_amount("value", value)
        if native_in == 0:
            raise ZeroInput("swap_native_for_token requires a non-zero native payment")

        with self._boundary.begin("swap_native_for_token") as tx:
            self._require_initialized()
            # Reserves as they stood before this payment
            native_reserve = self._state.native_reserve
            token_reserve = self._state.token_reserve

            tx.collect_native(caller, native_in)

            token_out = self._pricing.price(native_in, native_reserve, token_reserve)
            self._state.set_reserves(
                (S(native_reserve) + native_in).value,
                (S(token_reserve) - token_out).value,
            )

            tx.push_tokens(caller, token_out)
            tx.emit(
                SwapExecuted(
                    caller=caller,
                    direction=SwapDirection.NATIVE_TO_TOKEN,
                    input_amount=native_in,
                    output_amount=token_out,
                )
            )

        logger.info(
            "swap_executed",
            direction=SwapDirection.NATIVE_TO_TOKEN.value,
            caller=caller,
            amount_in=native_in,
            amount_out=token_out,
        )
        return token_out

    def swap_token_for_native(self, caller: str, token_in: int) -> int:
        """Sell token_in tokens for native value.

        Args:
            caller: Account paying tokens (must have approved the pool)
            token_in: Tokens to sell

        Returns:
            Native value paid to caller
        """
        token_in = checked_amount("token_in", token_in)
        if token_in == 0:
            raise ZeroInput("swap_token_for_native requires a non-zero token input")

        with self._boundary.begin("swap_token_for_native") as tx:
            self._require_initialized()
            native_reserve = self._state.native_reserve
            token_reserve = self._state.token_reserve

            native_out = self._pricing.price(token_in, token_reserve, native_reserve)
            self._state.set_reserves(
                (S(native_reserve) - native_out).value,
                (S(token_reserve) + token_in).value,
            )

            tx.pull_tokens(caller, token_in)
            tx.pay_native(caller, native_out)
            tx.emit(
                SwapExecuted(
                    caller=caller,
                    direction=SwapDirection.TOKEN_TO_NATIVE,
                    input_amount=token_in,
                    output_amount=native_out,
                )
            )

        logger.info(
            "swap_executed",
            direction=SwapDirection.TOKEN_TO_NATIVE.value,
            caller=caller,
            amount_in=token_in,
            amount_out=native_out,
        )
        return native_out

    def _require_initialized(self) -> None:
        if not self._state.initialized:
            raise NotInitialized("Pool has no liquidity; call init first")
