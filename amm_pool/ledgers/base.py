"""Collaborator protocols for the pool.

The pool never owns balances itself. Token movements go through a token
ledger and native-asset movements through a native ledger. Both report
success as a bool and expose an atomic() boundary: changes made inside the
boundary are discarded if the block raises.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenLedger(Protocol):
    """Fungible token ledger with an owner-authorization (allowance) model."""

    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        """Move amount from sender's balance to recipient.

        Returns:
            True on success, False if the transfer was rejected
        """
        ...

    def transfer_from(self, spender: str, owner: str, recipient: str, amount: int) -> bool:
        """Move amount from owner to recipient using spender's allowance.

        Returns:
            True on success, False if balance or allowance is insufficient
        """
        ...

    def approve(self, owner: str, spender: str, amount: int) -> bool:
        """Authorize spender to pull up to amount from owner."""
        ...

    def balance_of(self, account: str) -> int:
        """Current balance of account."""
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Transaction boundary: roll back all changes if the block raises."""
        ...


@runtime_checkable
class NativeLedger(Protocol):
    """Native-asset value transfer primitive."""

    def send(self, sender: str, recipient: str, amount: int) -> bool:
        """Send amount of native value from sender to recipient.

        Returns:
            True on success, False if the recipient could not receive
            or the sender's balance is insufficient
        """
        ...

    def balance_of(self, account: str) -> int:
        """Current native balance of account."""
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Transaction boundary: roll back all changes if the block raises."""
        ...
