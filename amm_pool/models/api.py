"""Pydantic models for the pool HTTP API.

Amounts travel as uint256 decimal strings; field names are camelCase on
the wire and snake_case in Python.
"""

from typing import Any

from pydantic import BaseModel, Field

from amm_pool.models.types import Address, Uint256

_MODEL_CONFIG: Any = {"populate_by_name": True}


class InitRequest(BaseModel):
    """Seed the pool with native and token liquidity."""

    caller: Address
    token_amount: Uint256 = Field(alias="tokenAmount")
    value: Uint256 = Field(description="Native payment sent with the call.")

    model_config = _MODEL_CONFIG


class PaymentRequest(BaseModel):
    """A call carrying only a native payment (native->token swap, deposit)."""

    caller: Address
    value: Uint256 = Field(description="Native payment sent with the call.")

    model_config = _MODEL_CONFIG


class TokenSwapRequest(BaseModel):
    caller: Address
    token_in: Uint256 = Field(alias="tokenIn")

    model_config = _MODEL_CONFIG


class WithdrawRequest(BaseModel):
    caller: Address
    share_amount: Uint256 = Field(alias="shareAmount")

    model_config = _MODEL_CONFIG


class FundRequest(BaseModel):
    """Create balances on the in-memory ledgers (local development)."""

    account: Address
    native: Uint256 = "0"
    token: Uint256 = "0"

    model_config = _MODEL_CONFIG


class ApproveRequest(BaseModel):
    """Authorize the pool to pull up to amount tokens from owner."""

    owner: Address
    amount: Uint256

    model_config = _MODEL_CONFIG


class InitResponse(BaseModel):
    total_shares: Uint256 = Field(alias="totalShares")

    model_config = _MODEL_CONFIG


class SwapResponse(BaseModel):
    amount_out: Uint256 = Field(alias="amountOut")

    model_config = _MODEL_CONFIG


class DepositResponse(BaseModel):
    token_required: Uint256 = Field(alias="tokenRequired")

    model_config = _MODEL_CONFIG


class WithdrawResponse(BaseModel):
    native_amount: Uint256 = Field(alias="nativeAmount")
    token_amount: Uint256 = Field(alias="tokenAmount")

    model_config = _MODEL_CONFIG


class PriceResponse(BaseModel):
    output_amount: Uint256 = Field(alias="outputAmount")

    model_config = _MODEL_CONFIG


class LiquidityResponse(BaseModel):
    account: Address
    shares: Uint256

    model_config = _MODEL_CONFIG


class PoolStateResponse(BaseModel):
    address: str
    native_symbol: str = Field(alias="nativeSymbol")
    token_symbol: str = Field(alias="tokenSymbol")
    native_reserve: Uint256 = Field(alias="nativeReserve")
    token_reserve: Uint256 = Field(alias="tokenReserve")
    total_shares: Uint256 = Field(alias="totalShares")

    model_config = _MODEL_CONFIG


class BalanceResponse(BaseModel):
    account: Address
    native: Uint256
    token: Uint256
    allowance: Uint256 = Field(description="Tokens the pool may still pull from this account.")

    model_config = _MODEL_CONFIG


class ErrorResponse(BaseModel):
    """Aborted operation: error kind plus a human-readable reason."""

    error: str
    detail: str
