"""FastAPI application for the pool service."""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from amm_pool import __version__
from amm_pool.api.endpoints import router
from amm_pool.errors import (
    AlreadyInitialized,
    NotInitialized,
    PoolError,
    ReentrantCall,
    SafeIntError,
)
from amm_pool.models.api import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("POOL_HOST", "0.0.0.0")
PORT = int(os.environ.get("POOL_PORT", "8000"))
DEBUG = os.environ.get("POOL_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (64 KB); pool requests are tiny
MAX_REQUEST_SIZE = 64 * 1024

# Errors caused by pool lifecycle rather than by the request itself
CONFLICT_ERRORS = (AlreadyInitialized, NotInitialized, ReentrantCall)

logger = structlog.get_logger()

app = FastAPI(
    title="AMM Pool",
    description="Constant-product pool of a native asset and a token",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(PoolError)
async def pool_error_handler(request: Request, exc: PoolError) -> JSONResponse:
    """Aborted pool operation: report the error kind and reason."""
    status_code = 409 if isinstance(exc, CONFLICT_ERRORS) else 400
    logger.info(
        "request_rejected",
        path=request.url.path,
        error=type(exc).__name__,
        reason=str(exc),
    )
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(SafeIntError)
async def arithmetic_error_handler(request: Request, exc: SafeIntError) -> JSONResponse:
    """Arithmetic precondition violated (e.g. a zero reserve in a ratio)."""
    logger.warning(
        "arithmetic_error",
        path=request.url.path,
        error=type(exc).__name__,
        reason=str(exc),
    )
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def configure_logging() -> None:
    """Human-readable structured logs for the service process."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
    )


def run() -> None:
    """Run the pool API server.

    Configuration via environment variables:
    - POOL_HOST: Host to bind to (default: 0.0.0.0)
    - POOL_PORT: Port to bind to (default: 8000)
    - POOL_DEBUG: Enable debug/reload mode (default: false)
    - POOL_ADDRESS, POOL_NATIVE_SYMBOL, POOL_TOKEN_SYMBOL, POOL_ALLOW_FUNDING:
      see amm_pool.config.PoolConfig
    """
    configure_logging()
    uvicorn.run(
        "amm_pool.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
