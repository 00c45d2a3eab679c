"""Shared account constants for tests.

All addresses are lowercase, matching what the API models produce.

Usage:
    from tests.helpers import ALICE, BOB
    # or
    from tests.helpers.constants import ALICE, BOB
"""

from amm_pool.constants import DEFAULT_POOL_ADDRESS

# =============================================================================
# Accounts
# =============================================================================

ALICE = "0x00000000000000000000000000000000000a11ce"  # Initial liquidity provider
BOB = "0x0000000000000000000000000000000000000b0b"  # Trader
CAROL = "0x00000000000000000000000000000000000ca201"  # Second liquidity provider

POOL = DEFAULT_POOL_ADDRESS

# =============================================================================
# Amounts
# =============================================================================

# Starting balance given to every test account on both ledgers
STARTING_BALANCE = 10**24

# Reserves used by the reference swap scenario
SEED_NATIVE = 1000
SEED_TOKEN = 1000
