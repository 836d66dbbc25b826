"""Deterministic fixed-point option pricing, Greeks, margin and volatility."""

from optionsengine.margin.quoting import position_greeks, price_quote
from optionsengine.pricing.binomial import price
from optionsengine.pricing.greeks import greeks
from optionsengine.volatility.historical import historical_volatility

__version__ = "0.1.0"

__all__ = [
    "greeks",
    "historical_volatility",
    "position_greeks",
    "price",
    "price_quote",
]
