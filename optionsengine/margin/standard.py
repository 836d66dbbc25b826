"""Standard broker margin methodology for option positions.

Margin is a risk bound, not a fair value, so the premium it charges is a
cheap estimate (intrinsic value plus a flat 5% of the underlying) rather
than the binomial price used for debits and credits.
"""

import logging
from typing import Sequence

from optionsengine.exceptions import EmptyPositionError
from optionsengine.fixedpoint.arithmetic import mul_scaled
from optionsengine.models.option import PositionLeg
from optionsengine.pricing.binomial import intrinsic_value

logger = logging.getLogger(__name__)

# Equity-option lot size
CONTRACT_MULTIPLIER = 100

SHORT_BASE_RATE = 20 * 10**16
SHORT_MINIMUM_RATE = 10 * 10**16
TIME_VALUE_RATE = 5 * 10**16
MAINTENANCE_RATE = 75 * 10**16


def notional_value(price: int, amount: int) -> int:
    """Price times amount times the contract multiplier."""
    return mul_scaled(price, amount) * CONTRACT_MULTIPLIER


def estimate_premium(leg: PositionLeg, underlying_price: int) -> int:
    """Margin premium estimate for a leg: intrinsic value plus 5% of spot.

    Args:
        leg: Option leg.
        underlying_price: Current underlying price.

    Returns:
        Estimated premium for the whole leg.
    """
    per_unit = intrinsic_value(underlying_price, leg.strike_price, leg.is_call)
    per_unit += mul_scaled(underlying_price, TIME_VALUE_RATE)
    return notional_value(per_unit, leg.amount)


def out_of_the_money_amount(leg: PositionLeg, underlying_price: int) -> int:
    """Amount by which a leg is out of the money, zero when ITM or ATM."""
    if leg.is_call:
        distance = max(leg.strike_price - underlying_price, 0)
    else:
        distance = max(underlying_price - leg.strike_price, 0)
    return notional_value(distance, leg.amount)


def short_leg_margin(leg: PositionLeg, underlying_price: int) -> int:
    """Margin for one naked short leg: the greater of two broker formulas.

    (a) 20% of contract value, less any out-of-the-money amount (never
        below zero), plus premium.
    (b) 10% of contract value (calls) or strike value (puts), plus premium.
    """
    premium = estimate_premium(leg, underlying_price)
    contract_value = notional_value(underlying_price, leg.amount)

    base = mul_scaled(contract_value, SHORT_BASE_RATE)
    otm = out_of_the_money_amount(leg, underlying_price)
    if otm > 0:
        broad = max(base - otm, 0) + premium
    else:
        broad = base + premium

    if leg.is_call:
        minimum = mul_scaled(contract_value, SHORT_MINIMUM_RATE) + premium
    else:
        strike_value = notional_value(leg.strike_price, leg.amount)
        minimum = mul_scaled(strike_value, SHORT_MINIMUM_RATE) + premium

    return max(broad, minimum)


def initial_margin(legs: Sequence[PositionLeg], underlying_price: int) -> int:
    """Initial margin for a position.

    A single long leg needs no margin and a single short leg uses
    ``short_leg_margin``. Multi-leg positions charge the greater of the
    short-call margin plus short-put premium and the short-put margin plus
    short-call premium; long legs contribute nothing.

    Raises:
        EmptyPositionError: If ``legs`` is empty.
    """
    if not legs:
        raise EmptyPositionError("Cannot margin a position without legs")

    if len(legs) == 1:
        leg = legs[0]
        if not leg.is_short:
            return 0
        return short_leg_margin(leg, underlying_price)

    call_margin = 0
    call_premium = 0
    put_margin = 0
    put_premium = 0
    for leg in legs:
        if not leg.is_short:
            continue
        if leg.is_call:
            call_margin += short_leg_margin(leg, underlying_price)
            call_premium += estimate_premium(leg, underlying_price)
        else:
            put_margin += short_leg_margin(leg, underlying_price)
            put_premium += estimate_premium(leg, underlying_price)

    logger.debug(
        "Multi-leg margin: calls %d/%d, puts %d/%d",
        call_margin, call_premium, put_margin, put_premium,
    )
    return max(call_margin + put_premium, put_margin + call_premium)


def maintenance_margin(initial: int) -> int:
    """Maintenance margin: 75% of initial margin."""
    return mul_scaled(initial, MAINTENANCE_RATE)
