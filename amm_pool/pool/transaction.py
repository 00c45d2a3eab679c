"""Unit of work for pool operations.

Each public pool operation runs inside TransactionBoundary.begin():
- the pool lock serializes callers from different threads
- a call arriving while an operation is in progress on the same thread
  (a ledger callback re-entering the pool) raises ReentrantCall
- pool state is snapshotted and both ledgers enter their atomic() boundary
- on any exception the snapshot is restored, the ledgers roll back and
  queued events are dropped; on success the events are published

Collaborator transfers are issued through the Transaction handle, which
turns a False result into TransferFailed.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import TYPE_CHECKING

import structlog

from amm_pool.errors import ReentrantCall, TransferFailed

if TYPE_CHECKING:
    from amm_pool.ledgers.base import NativeLedger, TokenLedger
    from amm_pool.pool.events import EventLog, PoolEvent
    from amm_pool.pool.state import PoolState

logger = structlog.get_logger()


class Transaction:
    """Handle for issuing collaborator transfers within one operation."""

    def __init__(
        self,
        operation: str,
        pool_address: str,
        token_ledger: TokenLedger,
        native_ledger: NativeLedger,
    ) -> None:
        self.operation = operation
        self._pool_address = pool_address
        self._token_ledger = token_ledger
        self._native_ledger = native_ledger
        self._pending: list[PoolEvent] = []

    @property
    def pending_events(self) -> tuple[PoolEvent, ...]:
        return tuple(self._pending)

    def collect_native(self, sender: str, amount: int) -> None:
        """Accept a native payment from sender into the pool."""
        if not self._native_ledger.send(sender, self._pool_address, amount):
            raise TransferFailed(
                f"{self.operation}: native payment of {amount} from {sender} failed"
            )

    def pay_native(self, recipient: str, amount: int) -> None:
        """Send native value from the pool to recipient."""
        if not self._native_ledger.send(self._pool_address, recipient, amount):
            raise TransferFailed(
                f"{self.operation}: native payout of {amount} to {recipient} failed"
            )

    def pull_tokens(self, owner: str, amount: int) -> None:
        """Pull tokens from owner into the pool (needs owner's approval)."""
        if not self._token_ledger.transfer_from(
            self._pool_address, owner, self._pool_address, amount
        ):
            raise TransferFailed(
                f"{self.operation}: token pull of {amount} from {owner} failed"
            )

    def push_tokens(self, recipient: str, amount: int) -> None:
        """Send tokens from the pool to recipient."""
        if not self._token_ledger.transfer(self._pool_address, recipient, amount):
            raise TransferFailed(
                f"{self.operation}: token payout of {amount} to {recipient} failed"
            )

    def emit(self, event: PoolEvent) -> None:
        """Queue an event for publication on commit."""
        self._pending.append(event)


class TransactionBoundary:
    """Serializes pool operations and makes each one all-or-nothing."""

    def __init__(
        self,
        pool_address: str,
        state: PoolState,
        token_ledger: TokenLedger,
        native_ledger: NativeLedger,
        event_log: EventLog,
    ) -> None:
        self._pool_address = pool_address
        self._state = state
        self._token_ledger = token_ledger
        self._native_ledger = native_ledger
        self._event_log = event_log
        self._lock = threading.RLock()
        self._active: str | None = None

    @property
    def active_operation(self) -> str | None:
        return self._active

    @contextmanager
    def begin(self, operation: str) -> Iterator[Transaction]:
        """Run one pool operation as a unit of work.

        Raises:
            ReentrantCall: If another operation is in progress on this thread
        """
        with self._lock:
            if self._active is not None:
                raise ReentrantCall(
                    f"{operation} called while {self._active} is in progress"
                )
            self._active = operation
            snapshot = self._state.snapshot()
            tx = Transaction(operation, self._pool_address, self._token_ledger, self._native_ledger)
            try:
                with ExitStack() as stack:
                    stack.enter_context(self._token_ledger.atomic())
                    stack.enter_context(self._native_ledger.atomic())
                    yield tx
            except BaseException as exc:
                self._state.restore(snapshot)
                logger.warning(
                    "pool_operation_aborted",
                    operation=operation,
                    error=type(exc).__name__,
                    reason=str(exc),
                )
                raise
            else:
                for event in tx.pending_events:
                    self._event_log.publish(event)
            finally:
                self._active = None
