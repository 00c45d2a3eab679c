"""Pool notifications.

Events are queued while an operation runs and published to the log only
when the operation commits, so an aborted call leaves no trace.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, PlainSerializer

# Ints in Python, decimal strings on the wire like every other API amount
EventAmount = Annotated[
    int,
    Field(ge=0),
    PlainSerializer(str, return_type=str, when_used="json"),
]


class SwapDirection(str, Enum):
    """Which asset was sold into the pool."""

    NATIVE_TO_TOKEN = "native_to_token"
    TOKEN_TO_NATIVE = "token_to_native"


class PoolEvent(BaseModel):
    """Common fields for every notification."""

    # Assigned by EventLog.publish, 1-based
    sequence: int = 0
    caller: str

    model_config = {"frozen": True}


class SwapExecuted(PoolEvent):
    kind: Literal["swap_executed"] = "swap_executed"
    direction: SwapDirection
    input_amount: EventAmount
    output_amount: EventAmount


class LiquidityProvided(PoolEvent):
    kind: Literal["liquidity_provided"] = "liquidity_provided"
    shares_minted: EventAmount
    native_amount: EventAmount
    token_amount: EventAmount


class LiquidityRemoved(PoolEvent):
    kind: Literal["liquidity_removed"] = "liquidity_removed"
    shares_burned: EventAmount
    native_amount: EventAmount
    token_amount: EventAmount


AnyPoolEvent = Annotated[
    SwapExecuted | LiquidityProvided | LiquidityRemoved,
    Field(discriminator="kind"),
]


class EventLog:
    """Append-only log of committed pool events."""

    def __init__(self) -> None:
        self._events: list[PoolEvent] = []

    def publish(self, event: PoolEvent) -> PoolEvent:
        """Append event, stamping it with the next sequence number."""
        stamped = event.model_copy(update={"sequence": len(self._events) + 1})
        self._events.append(stamped)
        return stamped

    def snapshot(self) -> tuple[PoolEvent, ...]:
        return tuple(self._events)

    def __iter__(self) -> Iterator[PoolEvent]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)
