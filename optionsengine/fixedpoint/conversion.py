"""Conversions between human decimals, fixed-point and token units."""

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from optionsengine.exceptions import InvalidInputError
from optionsengine.fixedpoint.arithmetic import SCALE
from optionsengine.fixedpoint.signed import SignedFixedPoint

# Settlement tokens carry 6 decimals.
TOKEN_DECIMALS = 6

_PRECISION = 100


def to_fixed(value: Union[int, str, Decimal]) -> int:
    """Convert a decimal quantity into a 1e18-scaled integer.

    Digits past the 18th decimal place are truncated toward zero.

    Args:
        value: Whole number, decimal string or Decimal.

    Returns:
        Fixed-point integer.

    Raises:
        TypeError: If ``value`` is a float or bool.
        InvalidInputError: If ``value`` is not a finite decimal.
    """
    if isinstance(value, (bool, float)):
        raise TypeError(f"Expected int, str or Decimal, got {type(value).__name__}")
    if isinstance(value, int):
        return value * SCALE

    try:
        dec = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except InvalidOperation as e:
        raise InvalidInputError(f"Not a decimal number: {value!r}") from e

    if not dec.is_finite():
        raise InvalidInputError(f"Not a finite number: {value!r}")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return int((dec * SCALE).to_integral_value(rounding=ROUND_DOWN))


def from_fixed(value: Union[int, SignedFixedPoint]) -> Decimal:
    """Exact decimal view of a fixed-point or signed fixed-point value."""
    if isinstance(value, SignedFixedPoint):
        value = value.value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(value) / Decimal(SCALE)


def to_token_units(value: int, decimals: int = TOKEN_DECIMALS) -> int:
    """Rescale a fixed-point amount to integer token units (floored)."""
    return value * 10**decimals // SCALE


def from_token_units(amount: int, decimals: int = TOKEN_DECIMALS) -> int:
    """Rescale integer token units to a fixed-point amount."""
    return amount * SCALE // 10**decimals
