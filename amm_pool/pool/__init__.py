"""Pool state, engines and the Pool facade."""

from amm_pool.pool.events import (
    AnyPoolEvent,
    EventLog,
    LiquidityProvided,
    LiquidityRemoved,
    PoolEvent,
    SwapDirection,
    SwapExecuted,
)
from amm_pool.pool.initializer import Initializer
from amm_pool.pool.liquidity import LiquidityEngine
from amm_pool.pool.pool import Pool
from amm_pool.pool.state import PoolState
from amm_pool.pool.swap import SwapEngine
from amm_pool.pool.transaction import Transaction, TransactionBoundary

__all__ = [
    "AnyPoolEvent",
    "EventLog",
    "Initializer",
    "LiquidityEngine",
    "LiquidityProvided",
    "LiquidityRemoved",
    "Pool",
    "PoolEvent",
    "PoolState",
    "SwapDirection",
    "SwapEngine",
    "SwapExecuted",
    "Transaction",
    "TransactionBoundary",
]
