"""Tests for environment-driven configuration."""

from amm_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from amm_pool.constants import DEFAULT_POOL_ADDRESS

POOL_VARS = ("POOL_ADDRESS", "POOL_NATIVE_SYMBOL", "POOL_TOKEN_SYMBOL", "POOL_ALLOW_FUNDING")


def test_defaults_without_environment(monkeypatch):
    for name in POOL_VARS:
        monkeypatch.delenv(name, raising=False)

    assert PoolConfig.from_env() == DEFAULT_POOL_CONFIG
    assert DEFAULT_POOL_CONFIG.pool_address == DEFAULT_POOL_ADDRESS


def test_reads_pool_variables(monkeypatch):
    monkeypatch.setenv("POOL_ADDRESS", "0x" + "AB" * 20)
    monkeypatch.setenv("POOL_NATIVE_SYMBOL", "XDAI")
    monkeypatch.setenv("POOL_TOKEN_SYMBOL", "GNO")
    monkeypatch.setenv("POOL_ALLOW_FUNDING", "false")

    config = PoolConfig.from_env()

    assert config.pool_address == "0x" + "ab" * 20
    assert (config.native_symbol, config.token_symbol) == ("XDAI", "GNO")
    assert config.allow_funding is False
