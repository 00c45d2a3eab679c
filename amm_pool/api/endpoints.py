"""API endpoints for the pool service."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query

from amm_pool.models.api import (
    ApproveRequest,
    BalanceResponse,
    DepositResponse,
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
from amm_pool.models.types import normalize_address
from amm_pool.pool.events import AnyPoolEvent
from amm_pool.service import PoolService, get_default_service

logger = structlog.get_logger()

router = APIRouter()

ACCOUNT_PATTERN = r"^0x[a-fA-F0-9]{40}$"


def get_service() -> PoolService:
    """Dependency provider for the pool service.

    Override this in tests to inject a fresh pool:
        app.dependency_overrides[get_service] = lambda: create_service(config)
    """
    return get_default_service()


# --- Read-only ---


@router.get("/pool", response_model=PoolStateResponse)
def pool_state(service: PoolService = Depends(get_service)) -> PoolStateResponse:
    """Current reserves and share supply."""
    native_reserve, token_reserve = service.pool.reserves()
    return PoolStateResponse(
        address=service.pool.address,
        native_symbol=service.config.native_symbol,
        token_symbol=service.config.token_symbol,
        native_reserve=native_reserve,
        token_reserve=token_reserve,
        total_shares=service.pool.total_liquidity,
    )


@router.get("/price", response_model=PriceResponse)
def get_price(
    input_amount: int = Query(alias="inputAmount", ge=0),
    input_reserve: int = Query(alias="inputReserve", ge=0),
    output_reserve: int = Query(alias="outputReserve", ge=0),
    service: PoolService = Depends(get_service),
) -> PriceResponse:
    """Evaluate the pricing formula for arbitrary reserves."""
    output = service.pool.price(input_amount, input_reserve, output_reserve)
    return PriceResponse(output_amount=output)


@router.get("/liquidity/{account}", response_model=LiquidityResponse)
def get_liquidity(
    account: str = Path(pattern=ACCOUNT_PATTERN),
    service: PoolService = Depends(get_service),
) -> LiquidityResponse:
    account = normalize_address(account)
    return LiquidityResponse(account=account, shares=service.pool.get_liquidity(account))


@router.get("/events", response_model=list[AnyPoolEvent])
def list_events(service: PoolService = Depends(get_service)) -> list[AnyPoolEvent]:
    """Committed notifications, oldest first."""
    return list(service.pool.events)


# --- Pool operations ---


@router.post("/init", response_model=InitResponse)
def init_pool(request: InitRequest, service: PoolService = Depends(get_service)) -> InitResponse:
    total = service.pool.init(
        request.caller, token_amount=int(request.token_amount), value=int(request.value)
    )
    return InitResponse(total_shares=total)


@router.post("/swap/native-for-token", response_model=SwapResponse)
def swap_native_for_token(
    request: PaymentRequest, service: PoolService = Depends(get_service)
) -> SwapResponse:
    amount_out = service.pool.swap_native_for_token(request.caller, value=int(request.value))
    return SwapResponse(amount_out=amount_out)


@router.post("/swap/token-for-native", response_model=SwapResponse)
def swap_token_for_native(
    request: TokenSwapRequest, service: PoolService = Depends(get_service)
) -> SwapResponse:
    amount_out = service.pool.swap_token_for_native(request.caller, int(request.token_in))
    return SwapResponse(amount_out=amount_out)


@router.post("/deposit", response_model=DepositResponse)
def deposit(request: PaymentRequest, service: PoolService = Depends(get_service)) -> DepositResponse:
    token_required = service.pool.deposit(request.caller, value=int(request.value))
    return DepositResponse(token_required=token_required)


@router.post("/withdraw", response_model=WithdrawResponse)
def withdraw(
    request: WithdrawRequest, service: PoolService = Depends(get_service)
) -> WithdrawResponse:
    native_out, token_out = service.pool.withdraw(request.caller, int(request.share_amount))
    return WithdrawResponse(native_amount=native_out, token_amount=token_out)


# --- Local ledger management ---


@router.get("/ledger/{account}", response_model=BalanceResponse)
def ledger_balance(
    account: str = Path(pattern=ACCOUNT_PATTERN),
    service: PoolService = Depends(get_service),
) -> BalanceResponse:
    account = normalize_address(account)
    return BalanceResponse(
        account=account,
        native=service.native_ledger.balance_of(account),
        token=service.token_ledger.balance_of(account),
        allowance=service.token_ledger.allowance(account, service.pool.address),
    )


@router.post("/ledger/fund", response_model=BalanceResponse)
def fund_account(
    request: FundRequest, service: PoolService = Depends(get_service)
) -> BalanceResponse:
    """Create native and token balances out of thin air (local development)."""
    if not service.config.allow_funding:
        logger.warning("funding_disabled", account=request.account)
        raise HTTPException(status_code=403, detail="Funding is disabled")

    service.native_ledger.fund(request.account, int(request.native))
    service.token_ledger.mint(request.account, int(request.token))
    logger.info(
        "account_funded",
        account=request.account,
        native=request.native,
        token=request.token,
    )
    return ledger_balance(request.account, service)


@router.post("/ledger/approve", response_model=BalanceResponse)
def approve_pool(
    request: ApproveRequest, service: PoolService = Depends(get_service)
) -> BalanceResponse:
    """Let the pool pull up to amount tokens from owner."""
    service.token_ledger.approve(request.owner, service.pool.address, int(request.amount))
    return ledger_balance(request.owner, service)
