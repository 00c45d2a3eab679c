"""Constant-product AMM pool - Python Implementation."""

from amm_pool.pool import Pool
from amm_pool.pricing import PricingEngine, price

__version__ = "0.1.0"
__all__ = ["Pool", "PricingEngine", "price", "__version__"]
