"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from amm_pool.api.endpoints import get_service
from amm_pool.api.main import app
from amm_pool.config import PoolConfig
from amm_pool.ledgers.memory import InMemoryNativeLedger, InMemoryTokenLedger
from amm_pool.pool import Pool
from amm_pool.service import PoolService, create_service
from tests.helpers import ALICE, BOB, CAROL, SEED_NATIVE, SEED_TOKEN, fund, make_pool


@pytest.fixture
def ledgers() -> tuple[Pool, InMemoryTokenLedger, InMemoryNativeLedger]:
    """Uninitialized pool with ALICE, BOB and CAROL funded and approved."""
    pool, tokens, native = make_pool()
    for account in (ALICE, BOB, CAROL):
        fund(tokens, native, account)
    return pool, tokens, native


@pytest.fixture
def empty_pool(ledgers) -> Pool:
    """Uninitialized pool (accounts funded)."""
    return ledgers[0]


@pytest.fixture
def token_ledger(ledgers) -> InMemoryTokenLedger:
    return ledgers[1]


@pytest.fixture
def native_ledger(ledgers) -> InMemoryNativeLedger:
    return ledgers[2]


@pytest.fixture
def seeded_pool(ledgers) -> Pool:
    """Pool initialized by ALICE with 1000 native and 1000 tokens."""
    pool = ledgers[0]
    pool.init(ALICE, token_amount=SEED_TOKEN, value=SEED_NATIVE)
    return pool


@pytest.fixture
def service() -> PoolService:
    """Fresh pool service with funding enabled."""
    return create_service(PoolConfig(allow_funding=True))


@pytest.fixture
def client(service) -> Iterator[TestClient]:
    """Test client bound to a fresh pool service."""
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
