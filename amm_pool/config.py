"""Service configuration."""

import os
from dataclasses import dataclass

from amm_pool.constants import DEFAULT_POOL_ADDRESS


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class PoolConfig:
    """Configuration for the pool service.

    The trading fee is not configurable; see amm_pool.constants.

    Attributes:
        pool_address: Account holding the pool's reserves on both ledgers
        native_symbol: Display symbol of the native asset
        token_symbol: Display symbol of the token
        allow_funding: If True, the /ledger/fund endpoint may create balances
            (local development only)
    """

    pool_address: str = DEFAULT_POOL_ADDRESS
    native_symbol: str = "ETH"
    token_symbol: str = "TOKEN"
    allow_funding: bool = True

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """Build a config from POOL_* environment variables."""
        return cls(
            pool_address=os.environ.get("POOL_ADDRESS", DEFAULT_POOL_ADDRESS).lower(),
            native_symbol=os.environ.get("POOL_NATIVE_SYMBOL", "ETH"),
            token_symbol=os.environ.get("POOL_TOKEN_SYMBOL", "TOKEN"),
            allow_funding=_env_flag("POOL_ALLOW_FUNDING", "true"),
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
