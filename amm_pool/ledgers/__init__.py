"""Ledger collaborators: protocols and in-memory implementations."""

from amm_pool.ledgers.base import NativeLedger, TokenLedger
from amm_pool.ledgers.memory import InMemoryNativeLedger, InMemoryTokenLedger, ReceiveHook

__all__ = [
    "InMemoryNativeLedger",
    "InMemoryTokenLedger",
    "NativeLedger",
    "ReceiveHook",
    "TokenLedger",
]
