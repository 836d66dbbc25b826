"""Tests for quoting, margin and position Greeks.

**Feature: options-engine**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from optionsengine.exceptions import EmptyPositionError
from optionsengine.fixedpoint import SCALE, ZERO
from optionsengine.margin import (
    days_to_expiry,
    estimate_premium,
    expiration_after_days,
    initial_margin,
    maintenance_margin,
    position_greeks,
    price_quote,
    short_leg_margin,
)
from optionsengine.models import OptionType, Position, PositionLeg, Side
from optionsengine.pricing import greeks, price

PERCENT = SCALE // 100
NOW = 1_700_000_000
SPOT = 100 * SCALE
RATE = 5 * PERCENT
VOL = 25 * PERCENT


def make_leg(
    option_type: OptionType = OptionType.CALL,
    side: Side = Side.SHORT,
    strike: int = 100,
    amount: int = SCALE,
    days: int = 30,
) -> PositionLeg:
    return PositionLeg(
        option_type=option_type,
        side=side,
        amount=amount,
        strike_price=strike * SCALE,
        expiration=expiration_after_days(NOW, days),
    )


def make_position(*legs: PositionLeg) -> Position:
    return Position(asset_symbol="BTC", legs=legs)


class TestModels:
    """Leg and position validation."""

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_leg(amount=0)

    def test_position_needs_legs(self):
        with pytest.raises(ValidationError):
            Position(asset_symbol="BTC", legs=[])

    def test_position_needs_symbol(self):
        with pytest.raises(ValidationError):
            Position(asset_symbol="", legs=[make_leg()])

    def test_leg_properties(self):
        leg = make_leg(option_type=OptionType.PUT, side=Side.LONG)
        assert leg.is_call is False
        assert leg.is_short is False

    def test_leg_accepts_strings(self):
        leg = PositionLeg(
            option_type="call", side="short", amount=SCALE, strike_price=SCALE, expiration=0
        )
        assert leg.is_call is True
        assert leg.is_short is True


class TestSingleLegMargin:
    """
    **Feature: options-engine, Property 9: Standard Broker Margin**

    *For any* single short leg, margin is the greater of the 20%-less-OTM
    formula and the 10% minimum, each plus the estimated premium.
    """

    def test_atm_short_call(self):
        leg = make_leg()
        # 20% of 10,000 plus 5% premium of 500
        assert initial_margin([leg], SPOT) == 2500 * SCALE
        assert maintenance_margin(2500 * SCALE) == 1875 * SCALE

    def test_otm_short_call(self):
        assert initial_margin([make_leg(strike=110)], SPOT) == 1500 * SCALE

    def test_far_otm_short_call_hits_minimum(self):
        assert initial_margin([make_leg(strike=150)], SPOT) == 1500 * SCALE

    def test_otm_short_put(self):
        leg = make_leg(option_type=OptionType.PUT, strike=90)
        assert initial_margin([leg], SPOT) == 1500 * SCALE

    def test_itm_short_put_includes_intrinsic(self):
        leg = make_leg(option_type=OptionType.PUT, strike=120)
        assert estimate_premium(leg, SPOT) == 2500 * SCALE
        assert initial_margin([leg], SPOT) == 4500 * SCALE

    def test_single_long_leg_needs_no_margin(self):
        assert initial_margin([make_leg(side=Side.LONG)], SPOT) == 0

    def test_margin_scales_with_amount(self):
        assert initial_margin([make_leg(amount=2 * SCALE)], SPOT) == 5000 * SCALE

    def test_empty_legs_raise(self):
        with pytest.raises(EmptyPositionError):
            initial_margin([], SPOT)

    @given(
        strike=st.integers(min_value=1, max_value=300),
        is_call=st.booleans(),
        amount=st.integers(min_value=1, max_value=10 * SCALE),
    )
    @settings(max_examples=100)
    def test_margin_covers_premium(self, strike, is_call, amount):
        option_type = OptionType.CALL if is_call else OptionType.PUT
        leg = make_leg(option_type=option_type, strike=strike, amount=amount)
        assert short_leg_margin(leg, SPOT) >= estimate_premium(leg, SPOT)


class TestMultiLegMargin:
    """Spread and combination margins."""

    def test_short_straddle(self):
        legs = [make_leg(), make_leg(option_type=OptionType.PUT)]
        margin = initial_margin(legs, SPOT)
        assert margin == 3000 * SCALE
        assert maintenance_margin(margin) == 2250 * SCALE

    def test_short_strangle(self):
        legs = [make_leg(strike=110), make_leg(option_type=OptionType.PUT, strike=90)]
        assert initial_margin(legs, SPOT) == 2000 * SCALE

    def test_long_legs_contribute_nothing(self):
        legs = [make_leg(side=Side.LONG, strike=95), make_leg(strike=105)]
        assert initial_margin(legs, SPOT) == 2000 * SCALE

    def test_all_long_legs(self):
        legs = [make_leg(side=Side.LONG), make_leg(option_type=OptionType.PUT, side=Side.LONG)]
        assert initial_margin(legs, SPOT) == 0


class TestExpiry:
    """Day counting from unix timestamps."""

    def test_whole_days_floor(self):
        assert days_to_expiry(NOW + 86_399, NOW) == 0
        assert days_to_expiry(NOW + 86_400, NOW) == 1
        assert days_to_expiry(expiration_after_days(NOW, 30), NOW) == 30

    def test_expired_is_zero(self):
        assert days_to_expiry(NOW - 10, NOW) == 0


class TestPriceQuote:
    """
    **Feature: options-engine, Property 10: Quote Composition**

    *For any* position, long legs add to the debit, short legs add to the
    credit and maintenance margin is 75% of initial margin.
    """

    def test_short_call_credit(self):
        quote = price_quote(make_position(make_leg()), SPOT, RATE, VOL, NOW)
        assert quote.net_debit == 0
        assert quote.net_credit == price(SPOT, 100 * SCALE, RATE, VOL, 30, True) * 100
        assert quote.initial_margin == 2500 * SCALE
        assert quote.maintenance_margin == 1875 * SCALE
        assert quote.timestamp == NOW

    def test_expired_long_call_pays_intrinsic(self):
        leg = make_leg(side=Side.LONG, strike=90, days=0)
        quote = price_quote(make_position(leg), SPOT, RATE, VOL, NOW)
        assert quote.net_debit == 1000 * SCALE
        assert quote.net_credit == 0
        assert quote.initial_margin == 0

    def test_spread_has_debit_and_credit(self):
        position = make_position(make_leg(side=Side.LONG, strike=95), make_leg(strike=105))
        quote = price_quote(position, SPOT, RATE, VOL, NOW)
        assert quote.net_debit > quote.net_credit > 0

    def test_empty_position_raises(self):
        position = Position.model_construct(legs=(), asset_symbol="BTC")
        with pytest.raises(EmptyPositionError):
            price_quote(position, SPOT, RATE, VOL, NOW)

    @given(
        strike=st.integers(min_value=80, max_value=120),
        days=st.integers(min_value=0, max_value=90),
        is_call=st.booleans(),
    )
    @settings(max_examples=20, deadline=None)
    def test_maintenance_is_three_quarters(self, strike, days, is_call):
        option_type = OptionType.CALL if is_call else OptionType.PUT
        leg = make_leg(option_type=option_type, strike=strike, days=days)
        quote = price_quote(make_position(leg), SPOT, RATE, VOL, NOW)
        assert quote.maintenance_margin == quote.initial_margin * 3 // 4
        assert quote.net_debit == 0


class TestPositionGreeks:
    """Leg Greeks summed by contract count, short legs negated."""

    def test_short_call_negates_delta(self):
        single = greeks(SPOT, 100 * SCALE, RATE, VOL, 30, True)
        total = position_greeks(make_position(make_leg()), SPOT, RATE, VOL, NOW)
        assert total.delta.value == -single.delta.value * 100
        assert total.vega.value == -single.vega.value * 100

    def test_offsetting_legs_cancel(self):
        position = make_position(make_leg(side=Side.LONG), make_leg())
        total = position_greeks(position, SPOT, RATE, VOL, NOW)
        assert total.delta == ZERO
        assert total.gamma == ZERO
        assert total.theta == ZERO

    def test_long_straddle_is_long_gamma(self):
        position = make_position(
            make_leg(side=Side.LONG), make_leg(option_type=OptionType.PUT, side=Side.LONG)
        )
        total = position_greeks(position, SPOT, RATE, VOL, NOW)
        assert total.gamma.value > 0
        assert total.vega.value > 0
