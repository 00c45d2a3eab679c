"""In-memory ledgers.

Used by the HTTP service and the test suite. Balances live in plain dicts;
atomic() snapshots them and restores the snapshot if the block raises, which
gives the all-or-nothing semantics a chain would provide.

Each ledger holds a reentrant lock for the whole of an atomic() block and
for every write, so a rollback never erases a write made by another thread
while the block was open.

Receive hooks model recipients with their own behaviour: a hook is called
after funds arrive and may reject them (return False) or call back into
other code, including the pool.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import structlog

logger = structlog.get_logger()

# (sender, amount) -> accept?
ReceiveHook = Callable[[str, int], bool]


class _JournaledLedger:
    """Balance table with snapshot/restore and per-account receive hooks."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        self._balances: dict[str, int] = {}
        self._hooks: dict[str, ReceiveHook] = {}
        self._lock = threading.RLock()

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def set_receive_hook(self, account: str, hook: ReceiveHook | None) -> None:
        """Install (or clear, with None) the hook run when account receives funds."""
        if hook is None:
            self._hooks.pop(account, None)
        else:
            self._hooks[account] = hook

    def _credit(self, account: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Credit amount must be non-negative: {amount}")
        with self._lock:
            self._balances[account] = self.balance_of(account) + amount

    def _move(self, sender: str, recipient: str, amount: int) -> bool:
        if amount < 0:
            return False
        with self._lock:
            if self.balance_of(sender) < amount:
                logger.debug(
                    "ledger_insufficient_balance",
                    symbol=self.symbol,
                    sender=sender,
                    balance=self.balance_of(sender),
                    amount=amount,
                )
                return False

            self._balances[sender] = self.balance_of(sender) - amount
            self._credit(recipient, amount)

            hook = self._hooks.get(recipient)
            if hook is not None and not hook(sender, amount):
                # Recipient refused the funds: undo the move
                self._balances[recipient] -= amount
                self._balances[sender] += amount
                logger.debug("ledger_receive_rejected", symbol=self.symbol, recipient=recipient)
                return False
            return True

    def _snapshot(self) -> tuple:
        return (dict(self._balances),)

    def _restore(self, snapshot: tuple) -> None:
        (self._balances,) = snapshot

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            snapshot = self._snapshot()
            try:
                yield
            except BaseException:
                self._restore(snapshot)
                logger.debug("ledger_rolled_back", symbol=self.symbol)
                raise


class InMemoryTokenLedger(_JournaledLedger):
    """Token ledger with ERC20-style transfer, transfer_from and approve."""

    def __init__(self, symbol: str = "TOKEN") -> None:
        super().__init__(symbol)
        # (owner, spender) -> remaining allowance
        self._allowances: dict[tuple[str, str], int] = {}

    def mint(self, account: str, amount: int) -> None:
        """Create amount of new tokens in account."""
        self._credit(account, amount)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def approve(self, owner: str, spender: str, amount: int) -> bool:
        if amount < 0:
            return False
        with self._lock:
            self._allowances[(owner, spender)] = amount
        return True

    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        return self._move(sender, recipient, amount)

    def transfer_from(self, spender: str, owner: str, recipient: str, amount: int) -> bool:
        with self._lock:
            allowed = self.allowance(owner, spender)
            if allowed < amount:
                logger.debug(
                    "ledger_insufficient_allowance",
                    symbol=self.symbol,
                    owner=owner,
                    spender=spender,
                    allowance=allowed,
                    amount=amount,
                )
                return False
            if not self._move(owner, recipient, amount):
                return False
            self._allowances[(owner, spender)] = allowed - amount
            return True

    def _snapshot(self) -> tuple:
        return (dict(self._balances), dict(self._allowances))

    def _restore(self, snapshot: tuple) -> None:
        self._balances, self._allowances = snapshot


class InMemoryNativeLedger(_JournaledLedger):
    """Native-asset balances with a plain send primitive."""

    def __init__(self, symbol: str = "ETH") -> None:
        super().__init__(symbol)

    def fund(self, account: str, amount: int) -> None:
        """Give account amount of native value."""
        self._credit(account, amount)

    def send(self, sender: str, recipient: str, amount: int) -> bool:
        return self._move(sender, recipient, amount)
