"""Test helpers module for shared test utilities.

- constants: Account addresses and common amounts
- factories: Pool and ledger factory functions
"""

from tests.helpers.constants import (
    ALICE,
    BOB,
    CAROL,
    POOL,
    SEED_NATIVE,
    SEED_TOKEN,
    STARTING_BALANCE,
)
from tests.helpers.factories import fund, make_initialized_pool, make_pool

__all__ = [
    # Constants
    "ALICE",
    "BOB",
    "CAROL",
    "POOL",
    "SEED_NATIVE",
    "SEED_TOKEN",
    "STARTING_BALANCE",
    # Factories
    "fund",
    "make_initialized_pool",
    "make_pool",
]
