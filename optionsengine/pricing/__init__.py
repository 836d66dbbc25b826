"""Option pricing: binomial tree and finite-difference Greeks."""

from optionsengine.pricing.binomial import intrinsic_value, price, price_with_steps, step_count
from optionsengine.pricing.greeks import greeks

__all__ = [
    "greeks",
    "intrinsic_value",
    "price",
    "price_with_steps",
    "step_count",
]
