"""Economic invariants over randomized operation sequences.

Each seed drives a deterministic mix of swaps, deposits and withdrawals.
After every step:
- the share ledger sums to the total and no account exceeds it
- the pool's ledger balances equal its recorded reserves
- swaps strictly grow k = native_reserve * token_reserve
- deposits and withdrawals never dilute the reserves backing each share
"""

import random

import pytest

from amm_pool.errors import InsufficientShares
from tests.helpers import ALICE, BOB, CAROL, POOL, make_initialized_pool

PROVIDERS = (ALICE, CAROL)
TRADERS = (BOB, CAROL)


def _assert_books_balanced(pool, tokens, native):
    pool.check_invariants()
    state = pool.state
    for shares in state.share_ledger.values():
        assert shares <= state.total_liquidity_shares
    assert native.balance_of(POOL) == state.native_reserve
    assert tokens.balance_of(POOL) == state.token_reserve


def _per_share_not_diluted(before, after):
    """Reserves per share never decrease (cross-multiplied to stay in integers)."""
    if after.total_liquidity_shares == 0:
        return True
    return (
        after.native_reserve * before.total_liquidity_shares
        >= before.native_reserve * after.total_liquidity_shares
        and after.token_reserve * before.total_liquidity_shares
        >= before.token_reserve * after.total_liquidity_shares
    )


@pytest.mark.parametrize("seed", range(12))
def test_random_operation_sequences(seed):
    rng = random.Random(seed)
    pool, tokens, native = make_initialized_pool(10**6, 2 * 10**6, ALICE, BOB, CAROL)

    for _ in range(60):
        before = pool.state
        action = rng.choice(("buy", "sell", "deposit", "withdraw"))

        if action == "buy":
            pool.swap_native_for_token(rng.choice(TRADERS), value=rng.randint(1, 50_000))
            assert pool.state.product > before.product
        elif action == "sell":
            pool.swap_token_for_native(rng.choice(TRADERS), rng.randint(1, 50_000))
            assert pool.state.product > before.product
        elif action == "deposit":
            pool.deposit(rng.choice(PROVIDERS), value=rng.randint(100, 50_000))
            assert _per_share_not_diluted(before, pool.state)
        else:
            provider = rng.choice(PROVIDERS)
            held = pool.get_liquidity(provider)
            amount = rng.randint(1, held) if held else 0
            if amount == pool.total_liquidity:
                # Keep the pool alive for the remaining swaps
                amount -= 1
            if amount == 0:
                continue
            pool.withdraw(provider, amount)
            assert _per_share_not_diluted(before, pool.state)

        _assert_books_balanced(pool, tokens, native)


@pytest.mark.parametrize("amount", [1, 7, 999, 123_456])
def test_rejected_withdraw_changes_nothing(amount):
    pool, tokens, native = make_initialized_pool(amount, amount, ALICE, BOB)
    before = pool.state

    with pytest.raises(InsufficientShares):
        pool.withdraw(ALICE, amount + 1)

    assert pool.state == before
    _assert_books_balanced(pool, tokens, native)


def test_everyone_exits_to_empty_pool():
    """When every provider withdraws in full, shares and reserves reach zero."""
    pool, tokens, native = make_initialized_pool(10**6, 10**6, ALICE, BOB, CAROL)
    pool.deposit(CAROL, value=12_345)
    pool.swap_native_for_token(BOB, value=40_000)
    pool.swap_token_for_native(BOB, 10_000)

    pool.withdraw(CAROL, pool.get_liquidity(CAROL))
    pool.withdraw(ALICE, pool.get_liquidity(ALICE))

    assert pool.total_liquidity == 0
    assert pool.reserves() == (0, 0)
    _assert_books_balanced(pool, tokens, native)
