"""Pool error classes.

Every error aborts the whole operation: pool state, ledger balances and the
event log are left exactly as they were before the call.
"""

from amm_pool.safe_int import DivisionByZero, SafeIntError, Uint256Overflow, Underflow

# Arithmetic errors come from checked integer math
ArithmeticOverflow = Uint256Overflow


class PoolError(Exception):
    """Base error for pool operations."""

    pass


class AlreadyInitialized(PoolError):
    """init called while liquidity shares already exist."""

    pass


class NotInitialized(PoolError):
    """Operation needs reserves but the pool holds no liquidity shares."""

    pass


class ZeroInput(PoolError):
    """A swap, deposit or withdraw amount is zero."""

    pass


class TransferFailed(PoolError):
    """A token ledger call or a native-value send reported failure."""

    pass


class InsufficientShares(PoolError):
    """Withdraw amount exceeds the caller's recorded share balance."""

    pass


class ReentrantCall(PoolError):
    """A collaborator callback tried to enter the pool mid-operation."""

    pass


__all__ = [
    "AlreadyInitialized",
    "ArithmeticOverflow",
    "DivisionByZero",
    "InsufficientShares",
    "NotInitialized",
    "PoolError",
    "ReentrantCall",
    "SafeIntError",
    "TransferFailed",
    "Uint256Overflow",
    "Underflow",
    "ZeroInput",
]
