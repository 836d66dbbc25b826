"""Tests for historical volatility estimation.

**Feature: options-engine**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from optionsengine.exceptions import (
    InsufficientPriceDataError,
    InvalidInputError,
    NonPositivePriceError,
)
from optionsengine.fixedpoint import SCALE, ZERO, ln_fp, to_fixed
from optionsengine.volatility import historical_volatility, log_returns


def prices(*values: str) -> list[int]:
    return [to_fixed(v) for v in values]


class TestLogReturns:
    """Period-over-period log returns."""

    def test_one_fewer_return_than_prices(self):
        returns = log_returns(prices("100", "110", "100"))
        assert len(returns) == 2

    def test_up_and_down_cancel(self):
        first, second = log_returns(prices("100", "110", "100"))
        assert first.negative is False
        assert second.negative is True
        assert (first + second) == ZERO

    def test_return_matches_log_difference(self):
        (r,) = log_returns(prices("100", "110"))
        assert r.value == ln_fp(110 * SCALE).value - ln_fp(100 * SCALE).value


class TestHistoricalVolatility:
    """
    **Feature: options-engine, Property 11: Historical Volatility**

    *For any* positive price series, volatility is non-negative, depends
    only on relative moves and is zero for a single return.
    """

    def test_constant_growth_has_no_volatility(self):
        series = prices("100", "105", "110.25", "115.7625")
        assert historical_volatility(series, 365) < 10**15

    def test_alternating_series(self):
        # sqrt(ln(1.1)^2 * 4/3 * 365) = 2.1025924...
        series = prices("100", "110", "100", "110", "100")
        result = historical_volatility(series, 365)
        assert abs(result - 2_102_592_400_000_000_000) < 10**15

    def test_annualization_scales_with_sqrt_periods(self):
        series = prices("100", "110", "100", "110", "100")
        daily = historical_volatility(series, 1)
        yearly = historical_volatility(series, 4)
        assert abs(yearly - 2 * daily) <= 2

    def test_two_prices_give_zero(self):
        assert historical_volatility(prices("100", "120"), 365) == 0

    def test_single_price_raises(self):
        with pytest.raises(InsufficientPriceDataError):
            historical_volatility(prices("100"), 365)

    def test_empty_series_raises(self):
        with pytest.raises(InsufficientPriceDataError):
            historical_volatility([], 365)

    def test_zero_price_raises(self):
        with pytest.raises(NonPositivePriceError):
            historical_volatility([100 * SCALE, 0, 100 * SCALE], 365)

    def test_negative_price_raises(self):
        with pytest.raises(NonPositivePriceError):
            historical_volatility([100 * SCALE, -SCALE], 365)

    def test_bad_periods_raise(self):
        with pytest.raises(InvalidInputError):
            historical_volatility(prices("100", "110", "100"), 0)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            historical_volatility(prices("100"), 365)

    def test_accepts_any_sequence(self):
        series = prices("100", "110", "100", "110", "100")
        assert historical_volatility(tuple(series), 365) == historical_volatility(series, 365)

    @given(
        series=st.lists(
            st.integers(min_value=2 * SCALE, max_value=1000 * SCALE), min_size=2, max_size=20
        )
    )
    @settings(max_examples=50, deadline=None)
    def test_scale_invariant(self, series):
        doubled = [2 * p for p in series]
        assert historical_volatility(doubled, 365) == historical_volatility(series, 365)

    @given(
        series=st.lists(
            st.integers(min_value=1, max_value=10**24), min_size=2, max_size=20
        ),
        periods=st.integers(min_value=1, max_value=400),
    )
    @settings(max_examples=50, deadline=None)
    def test_non_negative(self, series, periods):
        assert historical_volatility(series, periods) >= 0
