"""Pool state: reserves and the liquidity-share ledger."""

from __future__ import annotations

from dataclasses import dataclass, field

from amm_pool.errors import InsufficientShares
from amm_pool.safe_int import S


@dataclass
class PoolState:
    """Mutable pool state.

    Reserves are tracked explicitly rather than read from ledger balances,
    so assets sent straight to the pool account are not counted.

    Attributes:
        native_reserve: Native asset held for trading
        token_reserve: Token asset held for trading
        total_liquidity_shares: Sum of every entry in share_ledger
        share_ledger: Shares per account; entries are never deleted
    """

    native_reserve: int = 0
    token_reserve: int = 0
    total_liquidity_shares: int = 0
    share_ledger: dict[str, int] = field(default_factory=dict)

    @property
    def initialized(self) -> bool:
        return self.total_liquidity_shares > 0

    @property
    def product(self) -> int:
        """Constant-product value k = native_reserve * token_reserve."""
        return self.native_reserve * self.token_reserve

    def shares_of(self, account: str) -> int:
        return self.share_ledger.get(account, 0)

    def credit_shares(self, account: str, amount: int) -> None:
        self.share_ledger[account] = (S(self.shares_of(account)) + amount).to_uint256()
        self.total_liquidity_shares = (S(self.total_liquidity_shares) + amount).to_uint256()

    def debit_shares(self, account: str, amount: int) -> None:
        """Burn amount of account's shares.

        Raises:
            InsufficientShares: If account holds fewer than amount shares
        """
        held = self.shares_of(account)
        if held < amount:
            raise InsufficientShares(
                f"Account {account} holds {held} shares, cannot withdraw {amount}"
            )
        self.share_ledger[account] = held - amount
        self.total_liquidity_shares = (S(self.total_liquidity_shares) - amount).value

    def set_reserves(self, native_reserve: int, token_reserve: int) -> None:
        self.native_reserve = S(native_reserve).to_uint256()
        self.token_reserve = S(token_reserve).to_uint256()

    def snapshot(self) -> PoolState:
        return PoolState(
            native_reserve=self.native_reserve,
            token_reserve=self.token_reserve,
            total_liquidity_shares=self.total_liquidity_shares,
            share_ledger=dict(self.share_ledger),
        )

    def restore(self, snapshot: PoolState) -> None:
        self.native_reserve = snapshot.native_reserve
        self.token_reserve = snapshot.token_reserve
        self.total_liquidity_shares = snapshot.total_liquidity_shares
        self.share_ledger = dict(snapshot.share_ledger)

    def check_invariants(self) -> None:
        """Verify share accounting.

        Raises:
            AssertionError: If any share or reserve invariant is broken
        """
        if self.native_reserve < 0 or self.token_reserve < 0:
            raise AssertionError(
                f"Negative reserve: native={self.native_reserve} token={self.token_reserve}"
            )
        if any(v < 0 for v in self.share_ledger.values()):
            raise AssertionError("Negative share balance in ledger")
        ledger_sum = sum(self.share_ledger.values())
        if ledger_sum != self.total_liquidity_shares:
            raise AssertionError(
                f"Share ledger sums to {ledger_sum}, total is {self.total_liquidity_shares}"
            )


def checked_amount(name: str, value: int) -> int:
    """Validate a caller-supplied amount as a uint256 integer.

    Raises:
        TypeError: If value is not an int
        Uint256Overflow: If value is negative or too large
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return S(value).to_uint256()
