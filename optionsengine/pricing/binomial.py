"""Cox-Ross-Rubinstein binomial option pricing in fixed-point arithmetic.

All monetary, rate and volatility inputs are integers scaled by 1e18. The
tree is European: values are rolled back from the leaves without early
exercise. Results are bit-identical for identical inputs.
"""

import logging

from optionsengine.fixedpoint.arithmetic import (
    SCALE,
    div_scaled,
    exp_fp,
    mul_scaled,
    pow_fp,
    sqrt_fp,
)

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365

SHORT_DATED_DAYS = 30
SHORT_DATED_STEPS = 30
LONG_DATED_STEPS = 50


def step_count(days_to_expiry: int) -> int:
    """Number of tree steps used for an expiry.

    Args:
        days_to_expiry: Whole days until expiration.

    Returns:
        30 for expiries of up to 30 days, 50 otherwise.
    """
    if days_to_expiry <= SHORT_DATED_DAYS:
        return SHORT_DATED_STEPS
    return LONG_DATED_STEPS


def intrinsic_value(spot: int, strike: int, is_call: bool) -> int:
    """Exercise value of an option right now, floored at zero."""
    if is_call:
        return max(spot - strike, 0)
    return max(strike - spot, 0)


def _risk_neutral_probability(growth: int, up: int, down: int) -> int:
    # Clamp to [0, 1] instead of failing when u and d nearly coincide.
    if growth <= down:
        logger.debug("Risk-neutral probability clamped to 0 (growth=%d, d=%d)", growth, down)
        return 0
    if growth - down >= up - down:
        logger.debug("Risk-neutral probability clamped to 1 (growth=%d, u=%d)", growth, up)
        return SCALE
    return div_scaled(growth - down, up - down)


def price_with_steps(
    spot: int,
    strike: int,
    rate: int,
    volatility: int,
    days_to_expiry: int,
    is_call: bool,
    steps: int,
) -> int:
    """Price an option on a tree with an explicit number of steps.

    The Greeks engine calls this directly so every bumped evaluation uses
    the same tree resolution as the unbumped price.

    Args:
        spot: Underlying price.
        strike: Strike price.
        rate: Annual risk-free rate.
        volatility: Annual volatility.
        days_to_expiry: Whole days until expiration.
        is_call: True for a call, False for a put.
        steps: Number of tree steps.

    Returns:
        Option premium per unit of underlying.
    """
    if days_to_expiry == 0:
        return intrinsic_value(spot, strike, is_call)

    dt = (days_to_expiry * SCALE // DAYS_PER_YEAR) // steps
    up = exp_fp(mul_scaled(volatility, sqrt_fp(dt)))
    down = SCALE * SCALE // up
    growth = exp_fp(mul_scaled(rate, dt))
    discount = SCALE * SCALE // growth

    if volatility == 0 or up == SCALE:
        # No price movement: discounted intrinsic value, no tree needed.
        logger.debug("Degenerate tree (volatility=%d, u=%d), using closed form", volatility, up)
        return mul_scaled(intrinsic_value(spot, strike, is_call), pow_fp(discount, steps))

    p = _risk_neutral_probability(growth, up, down)
    q = SCALE - p

    # Leaves from the lowest node upward: one multiplication by u/d per leaf.
    ratio = div_scaled(up, down)
    node_price = mul_scaled(spot, pow_fp(down, steps))
    values = []
    for _ in range(steps + 1):
        values.append(intrinsic_value(node_price, strike, is_call))
        node_price = mul_scaled(node_price, ratio)

    for step in range(steps, 0, -1):
        for j in range(step):
            expected = mul_scaled(p, values[j + 1]) + mul_scaled(q, values[j])
            values[j] = mul_scaled(discount, expected)

    return values[0]


def price(
    spot: int,
    strike: int,
    rate: int,
    volatility: int,
    days_to_expiry: int,
    is_call: bool,
) -> int:
    """Price a European call or put with a CRR binomial tree.

    Args:
        spot: Underlying price, 1e18-scaled.
        strike: Strike price, 1e18-scaled.
        rate: Annual risk-free rate, 1e18-scaled (0.05e18 for 5%).
        volatility: Annual volatility, 1e18-scaled.
        days_to_expiry: Whole days until expiration; 0 returns intrinsic value.
        is_call: True for a call, False for a put.

    Returns:
        Option premium per unit of underlying, 1e18-scaled.
    """
    steps = step_count(days_to_expiry)
    return price_with_steps(spot, strike, rate, volatility, days_to_expiry, is_call, steps)
