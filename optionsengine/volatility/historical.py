"""Historical volatility from a price series.

Log returns are computed with the fixed-point logarithm, so the estimate is
deterministic for a given series.
"""

import logging
from typing import Sequence

from optionsengine.exceptions import (
    InsufficientPriceDataError,
    InvalidInputError,
    NonPositivePriceError,
)
from optionsengine.fixedpoint.arithmetic import ln_fp, mul_scaled, sqrt_fp
from optionsengine.fixedpoint.signed import ZERO, SignedFixedPoint

logger = logging.getLogger(__name__)


def _validate_prices(prices: Sequence[int]) -> None:
    if len(prices) < 2:
        raise InsufficientPriceDataError(
            f"Need at least 2 prices, got {len(prices)}"
        )
    for i, p in enumerate(prices):
        if p <= 0:
            raise NonPositivePriceError(f"Price at index {i} is not positive: {p}")


def log_returns(prices: Sequence[int]) -> list[SignedFixedPoint]:
    """Calculate period-over-period log returns.

    Args:
        prices: Fixed-point prices, oldest first.

    Returns:
        List of ``ln(p[i]) - ln(p[i-1])``, one shorter than ``prices``.

    Raises:
        InsufficientPriceDataError: If fewer than 2 prices are given.
        NonPositivePriceError: If any price is zero or negative.
    """
    _validate_prices(prices)
    logs = [ln_fp(p) for p in prices]
    return [current - previous for previous, current in zip(logs, logs[1:])]


def historical_volatility(prices: Sequence[int], periods_per_year: int) -> int:
    """Calculate annualized historical volatility.

    Uses the sample variance of log returns (n/(n-1) correction when there
    are at least two returns), scaled by ``periods_per_year`` before the
    square root.

    Args:
        prices: Fixed-point prices, oldest first.
        periods_per_year: Sampling frequency, e.g. 365 for daily prices.

    Returns:
        Annualized volatility, 1e18-scaled.

    Raises:
        InsufficientPriceDataError: If fewer than 2 prices are given.
        NonPositivePriceError: If any price is zero or negative.
        InvalidInputError: If ``periods_per_year`` is less than 1.
    """
    prices = list(prices)
    _validate_prices(prices)
    if periods_per_year < 1:
        raise InvalidInputError(f"periods_per_year must be positive, got {periods_per_year}")

    returns = log_returns(prices)
    n = len(returns)

    total = ZERO
    total_squared = 0
    for r in returns:
        total = total + r
        total_squared += mul_scaled(r.magnitude, r.magnitude)

    mean_squared = total_squared // n
    mean = total.magnitude // n
    # Rounding can push the difference below zero for near-constant returns.
    variance = max(mean_squared - mul_scaled(mean, mean), 0)
    if n > 1:
        variance = variance * n // (n - 1)

    logger.debug("Historical volatility over %d returns: variance=%d", n, variance)
    return sqrt_fp(variance * periods_per_year)
