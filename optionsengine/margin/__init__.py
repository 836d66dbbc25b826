"""Position quoting and margin requirements."""

from optionsengine.margin.quoting import (
    days_to_expiry,
    expiration_after_days,
    leg_premium,
    position_greeks,
    price_quote,
)
from optionsengine.margin.standard import (
    CONTRACT_MULTIPLIER,
    estimate_premium,
    initial_margin,
    maintenance_margin,
    short_leg_margin,
)

__all__ = [
    "CONTRACT_MULTIPLIER",
    "days_to_expiry",
    "estimate_premium",
    "expiration_after_days",
    "initial_margin",
    "leg_premium",
    "maintenance_margin",
    "position_greeks",
    "price_quote",
    "short_leg_margin",
]
