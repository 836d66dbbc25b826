"""Finite-difference Greeks around the binomial pricer.

Every bumped price is computed on a tree with the step count chosen for
the unbumped expiry, so changing the day count for theta never changes the
tree resolution.
"""

import logging

from optionsengine.fixedpoint.arithmetic import mul_scaled, signed_div
from optionsengine.fixedpoint.signed import ZERO, SignedFixedPoint
from optionsengine.models.greeks import Greeks
from optionsengine.pricing.binomial import DAYS_PER_YEAR, price_with_steps, step_count

logger = logging.getLogger(__name__)

# Relative spot bump: 0.1%
SPOT_BUMP = 10**15
# Absolute volatility bump: 0.001 (0.1 vol points)
VOLATILITY_BUMP = 10**15
# Absolute rate bump: 1bp
RATE_BUMP = 10**14


def _diff(a: int, b: int) -> SignedFixedPoint:
    return SignedFixedPoint(magnitude=a) - SignedFixedPoint(magnitude=b)


def _per(change: SignedFixedPoint, width: int) -> SignedFixedPoint:
    return signed_div(change, SignedFixedPoint(magnitude=width))


def greeks(
    spot: int,
    strike: int,
    rate: int,
    volatility: int,
    days_to_expiry: int,
    is_call: bool,
) -> Greeks:
    """Compute delta, gamma, vega, theta and rho by finite differences.

    Args:
        spot: Underlying price, 1e18-scaled.
        strike: Strike price, 1e18-scaled.
        rate: Annual risk-free rate, 1e18-scaled.
        volatility: Annual volatility, 1e18-scaled.
        days_to_expiry: Whole days until expiration.
        is_call: True for a call, False for a put.

    Returns:
        Greeks with signed fixed-point values.
    """
    steps = step_count(days_to_expiry)

    def value(s: int = spot, r: int = rate, v: int = volatility, d: int = days_to_expiry) -> int:
        return price_with_steps(s, strike, r, v, d, is_call, steps)

    base = value()

    # Delta and gamma: central differences in spot.
    h = mul_scaled(spot, SPOT_BUMP)
    if h == 0:
        delta = ZERO
        gamma = ZERO
    else:
        price_up = value(s=spot + h)
        price_down = value(s=spot - h)
        delta = _per(_diff(price_up, price_down), 2 * h)
        h_squared = mul_scaled(h, h)
        if h_squared == 0:
            gamma = ZERO
        else:
            curvature = _diff(price_up, base) - _diff(base, price_down)
            gamma = _per(curvature, h_squared)

    vol_up = value(v=volatility + VOLATILITY_BUMP)
    vol_down = value(v=max(volatility - VOLATILITY_BUMP, 0))
    vega = _per(_diff(vol_up, vol_down), 2 * VOLATILITY_BUMP)

    rate_up = value(r=rate + RATE_BUMP)
    rate_down = value(r=max(rate - RATE_BUMP, 0))
    rho = _per(_diff(rate_up, rate_down), 2 * RATE_BUMP)

    if days_to_expiry >= 2:
        change = _diff(value(d=days_to_expiry - 1), value(d=days_to_expiry + 1))
        theta = SignedFixedPoint(
            magnitude=change.magnitude * DAYS_PER_YEAR // 2, negative=change.negative
        )
    else:
        # No earlier day to sample at expiry, so step forward only.
        change = _diff(base, value(d=days_to_expiry + 1))
        theta = SignedFixedPoint(
            magnitude=change.magnitude * DAYS_PER_YEAR, negative=change.negative
        )

    logger.debug(
        "Greeks for S=%d K=%d days=%d steps=%d: delta=%d gamma=%d",
        spot, strike, days_to_expiry, steps, delta.value, gamma.value,
    )
    return Greeks(delta=delta, gamma=gamma, vega=vega, theta=theta, rho=rho)
