"""Pydantic models for the pool HTTP API."""

from amm_pool.models.api import (
    ApproveRequest,
    BalanceResponse,
    DepositResponse,
    ErrorResponse,
    FundRequest,
    InitRequest,
    InitResponse,
    LiquidityResponse,
    PaymentRequest,
    PoolStateResponse,
    PriceResponse,
    SwapResponse,
    TokenSwapRequest,
    WithdrawRequest,
    WithdrawResponse,
)
from amm_pool.models.types import Address, Uint256, is_valid_address, normalize_address

__all__ = [
    "Address",
    "ApproveRequest",
    "BalanceResponse",
    "DepositResponse",
    "ErrorResponse",
    "FundRequest",
    "InitRequest",
    "InitResponse",
    "LiquidityResponse",
    "PaymentRequest",
    "PoolStateResponse",
    "PriceResponse",
    "SwapResponse",
    "TokenSwapRequest",
    "Uint256",
    "WithdrawRequest",
    "WithdrawResponse",
    "is_valid_address",
    "normalize_address",
]
