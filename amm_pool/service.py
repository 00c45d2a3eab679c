"""Process-wide pool wiring for the HTTP service."""

from dataclasses import dataclass

import structlog

from amm_pool.config import PoolConfig
from amm_pool.ledgers.memory import InMemoryNativeLedger, InMemoryTokenLedger
from amm_pool.pool.pool import Pool

logger = structlog.get_logger()


@dataclass
class PoolService:
    """A pool bound to in-memory ledgers, plus the config it was built from."""

    config: PoolConfig
    token_ledger: InMemoryTokenLedger
    native_ledger: InMemoryNativeLedger
    pool: Pool


def create_service(config: PoolConfig | None = None) -> PoolService:
    """Build a fresh pool with empty ledgers."""
    config = config or PoolConfig.from_env()
    token_ledger = InMemoryTokenLedger(symbol=config.token_symbol)
    native_ledger = InMemoryNativeLedger(symbol=config.native_symbol)
    pool = Pool(token_ledger, native_ledger, address=config.pool_address)
    logger.info(
        "pool_service_created",
        pool_address=config.pool_address,
        native_symbol=config.native_symbol,
        token_symbol=config.token_symbol,
        allow_funding=config.allow_funding,
    )
    return PoolService(
        config=config,
        token_ledger=token_ledger,
        native_ledger=native_ledger,
        pool=pool,
    )


_default_service: PoolService | None = None


def get_default_service() -> PoolService:
    """Return the process-wide service, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = create_service()
    return _default_service
