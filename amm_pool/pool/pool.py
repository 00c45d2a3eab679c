"""The Pool: public surface over shared state and the four engines."""

from __future__ import annotations

from amm_pool.constants import DEFAULT_POOL_ADDRESS
from amm_pool.ledgers.base import NativeLedger, TokenLedger
from amm_pool.pool.events import EventLog, PoolEvent
from amm_pool.pool.initializer import Initializer
from amm_pool.pool.liquidity import LiquidityEngine
from amm_pool.pool.state import PoolState
from amm_pool.pool.swap import SwapEngine
from amm_pool.pool.transaction import TransactionBoundary
from amm_pool.pricing import PricingEngine, pricing_engine


class Pool:
    """Constant-product pool of a native asset and one token.

    The ledgers are bound at construction and cannot be replaced. Callers
    pass the native payment that accompanies a call as ``value``.

    Example:
        pool = Pool(token_ledger, native_ledger)
        pool.init(alice, token_amount=1000, value=1000)
        tokens = pool.swap_native_for_token(bob, value=100)
    """

    def __init__(
        self,
        token_ledger: TokenLedger,
        native_ledger: NativeLedger,
        *,
        address: str = DEFAULT_POOL_ADDRESS,
        pricing: PricingEngine = pricing_engine,
    ) -> None:
        self._address = address
        self._token_ledger = token_ledger
        self._native_ledger = native_ledger
        self._pricing = pricing
        self._state = PoolState()
        self._events = EventLog()
        self._boundary = TransactionBoundary(
            address, self._state, token_ledger, native_ledger, self._events
        )
        self._initializer = Initializer(self._state, self._boundary)
        self._swaps = SwapEngine(self._state, self._boundary, pricing)
        self._liquidity = LiquidityEngine(self._state, self._boundary, pricing)

    @property
    def address(self) -> str:
        return self._address

    @property
    def token_ledger(self) -> TokenLedger:
        return self._token_ledger

    @property
    def native_ledger(self) -> NativeLedger:
        return self._native_ledger

    @property
    def state(self) -> PoolState:
        """Snapshot of the current state (mutating it has no effect)."""
        return self._state.snapshot()

    # --- Operations ---

    def init(self, caller: str, token_amount: int, value: int) -> int:
        return self._initializer.init(caller, token_amount, value)

    def swap_native_for_token(self, caller: str, value: int) -> int:
        return self._swaps.swap_native_for_token(caller, value)

    def swap_token_for_native(self, caller: str, token_in: int) -> int:
        return self._swaps.swap_token_for_native(caller, token_in)

    def deposit(self, caller: str, value: int) -> int:
        return self._liquidity.deposit(caller, value)

    def withdraw(self, caller: str, share_amount: int) -> tuple[int, int]:
        return self._liquidity.withdraw(caller, share_amount)

    # --- Read-only queries ---

    def price(self, input_amount: int, input_reserve: int, output_reserve: int) -> int:
        return self._pricing.price(input_amount, input_reserve, output_reserve)

    def get_liquidity(self, account: str) -> int:
        return self._state.shares_of(account)

    @property
    def total_liquidity(self) -> int:
        return self._state.total_liquidity_shares

    def reserves(self) -> tuple[int, int]:
        """Current (native_reserve, token_reserve)."""
        return self._state.native_reserve, self._state.token_reserve

    def quote_native_to_token(self, native_in: int) -> int:
        """Tokens a swap of native_in would return right now."""
        native_reserve, token_reserve = self.reserves()
        return self._pricing.price(native_in, native_reserve, token_reserve)

    def quote_token_to_native(self, token_in: int) -> int:
        """Native value a swap of token_in would return right now."""
        native_reserve, token_reserve = self.reserves()
        return self._pricing.price(token_in, token_reserve, native_reserve)

    @property
    def events(self) -> tuple[PoolEvent, ...]:
        return self._events.snapshot()

    def check_invariants(self) -> None:
        self._state.check_invariants()
