"""Quote and aggregate Greeks for multi-leg option positions."""

import logging

from optionsengine.exceptions import EmptyPositionError
from optionsengine.fixedpoint.arithmetic import mul_scaled
from optionsengine.fixedpoint.signed import SignedFixedPoint
from optionsengine.margin.standard import (
    CONTRACT_MULTIPLIER,
    initial_margin,
    maintenance_margin,
)
from optionsengine.models.greeks import Greeks
from optionsengine.models.option import PositionLeg
from optionsengine.models.position import Position
from optionsengine.models.quote import Quote
from optionsengine.pricing.binomial import price
from optionsengine.pricing.greeks import greeks

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86_400


def days_to_expiry(expiration: int, now: int) -> int:
    """Whole days from ``now`` until ``expiration``; 0 once expired."""
    if expiration > now:
        return (expiration - now) // SECONDS_PER_DAY
    return 0


def expiration_after_days(now: int, days: int) -> int:
    """Unix timestamp ``days`` whole days after ``now``."""
    return now + days * SECONDS_PER_DAY


def leg_premium(
    leg: PositionLeg,
    underlying_price: int,
    risk_free_rate: int,
    volatility: int,
    now: int,
) -> int:
    """Binomial premium for a whole leg (per-unit price x 100 x amount)."""
    days = days_to_expiry(leg.expiration, now)
    per_contract = price(
        underlying_price, leg.strike_price, risk_free_rate, volatility, days, leg.is_call
    ) * CONTRACT_MULTIPLIER
    return mul_scaled(per_contract, leg.amount)


def price_quote(
    position: Position,
    underlying_price: int,
    risk_free_rate: int,
    volatility: int,
    now: int,
) -> Quote:
    """Price a position and compute its margin requirements.

    Args:
        position: Position to price.
        underlying_price: Current underlying price, 1e18-scaled.
        risk_free_rate: Annual risk-free rate, 1e18-scaled.
        volatility: Annual volatility, 1e18-scaled.
        now: Pricing time as unix seconds.

    Returns:
        Quote with net debit, net credit and margins.

    Raises:
        EmptyPositionError: If the position has no legs.
    """
    if not position.legs:
        raise EmptyPositionError(f"Position on {position.asset_symbol} has no legs")

    net_debit = 0
    net_credit = 0
    for leg in position.legs:
        premium = leg_premium(leg, underlying_price, risk_free_rate, volatility, now)
        if leg.is_short:
            net_credit += premium
        else:
            net_debit += premium

    initial = initial_margin(position.legs, underlying_price)
    logger.debug(
        "Quoted %s (%d legs): debit=%d credit=%d margin=%d",
        position.asset_symbol, len(position.legs), net_debit, net_credit, initial,
    )
    return Quote(
        net_debit=net_debit,
        net_credit=net_credit,
        initial_margin=initial,
        maintenance_margin=maintenance_margin(initial),
        timestamp=now,
    )


def position_greeks(
    position: Position,
    underlying_price: int,
    risk_free_rate: int,
    volatility: int,
    now: int,
) -> Greeks:
    """Sum leg Greeks weighted by contracts; short legs count negatively.

    Raises:
        EmptyPositionError: If the position has no legs.
    """
    if not position.legs:
        raise EmptyPositionError(f"Position on {position.asset_symbol} has no legs")

    total = Greeks()
    for leg in position.legs:
        days = days_to_expiry(leg.expiration, now)
        leg_greeks = greeks(
            underlying_price, leg.strike_price, risk_free_rate, volatility, days, leg.is_call
        )
        size = SignedFixedPoint(
            magnitude=leg.amount * CONTRACT_MULTIPLIER, negative=leg.is_short
        )
        total = total + leg_greeks.scaled(size)
    return total
