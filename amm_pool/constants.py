"""Pool constants.

The fee is fixed: 0.3% of every swap input stays in the pool.
"""

# Fee applied to swap inputs: amount_in * 997 / 1000
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# Largest amount a reserve, balance or share count may hold
UINT256_MAX = 2**256 - 1

# Account that holds the pool's reserves on the collaborating ledgers
DEFAULT_POOL_ADDRESS = "0x000000000000000000000000000000000000a11c"
