"""One-time pool bootstrap."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from amm_pool.errors import AlreadyInitialized, ZeroInput
from amm_pool.pool.events import LiquidityProvided
from amm_pool.pool.state import checked_amount

if TYPE_CHECKING:
    from amm_pool.pool.state import PoolState
    from amm_pool.pool.transaction import TransactionBoundary

logger = structlog.get_logger()


class Initializer:
    """Seeds the reserves and the share baseline.

    The first depositor receives one share per native unit, so the share
    supply starts equal to the native reserve.
    """

    def __init__(self, state: PoolState, boundary: TransactionBoundary) -> None:
        self._state = state
        self._boundary = boundary

    def init(self, caller: str, token_amount: int, value: int) -> int:
        """Initialize the pool with value native and token_amount tokens.

        Args:
            caller: Account providing the initial liquidity
            token_amount: Tokens pulled from caller (must be approved)
            value: Native payment sent with the call

        Returns:
            The new total liquidity share supply

        Raises:
            AlreadyInitialized: If shares already exist
            ZeroInput: If either amount is zero
            TransferFailed: If the native payment or token pull fails
        """
        with self._boundary.begin("init") as tx:
            if self._state.initialized:
                raise AlreadyInitialized(
                    f"Pool already initialized with {self._state.total_liquidity_shares} shares"
                )
            native_in = checked_amount("value", value)
            token_in = checked_amount("token_amount", token_amount)
            if native_in == 0 or token_in == 0:
                raise ZeroInput(
                    f"init requires non-zero amounts, got value={native_in} token_amount={token_in}"
                )

            self._state.credit_shares(caller, native_in)
            self._state.set_reserves(native_in, token_in)

            tx.collect_native(caller, native_in)
            tx.pull_tokens(caller, token_in)
            tx.emit(
                LiquidityProvided(
                    caller=caller,
                    shares_minted=native_in,
                    native_amount=native_in,
                    token_amount=token_in,
                )
            )
            total = self._state.total_liquidity_shares

        logger.info(
            "pool_initialized",
            caller=caller,
            native_reserve=native_in,
            token_reserve=token_in,
            total_shares=total,
        )
        return total
