"""Fixed-point arithmetic on integers scaled by 1e18.

Every operation floors its result. Callers must tolerate the small
downward drift this produces over long chains of operations; it is
deterministic and identical on every platform.
"""

from optionsengine.exceptions import LogarithmDomainError
from optionsengine.fixedpoint.signed import ZERO, SignedFixedPoint

SCALE = 10**18

# ln(2) scaled by 1e18
LN2 = 693_147_180_559_945_309

EXP_TERMS = 10
LN_TERMS = 18

_LN_LOWER = SCALE // 2
_LN_UPPER = SCALE * 3 // 2


def mul_scaled(a: int, b: int) -> int:
    """Multiply two fixed-point magnitudes and rescale."""
    return a * b // SCALE


def div_scaled(a: int, d: int) -> int:
    """Divide two fixed-point magnitudes and rescale.

    Raises:
        ZeroDivisionError: If ``d`` is zero.
    """
    return a * SCALE // d


def signed_mul(a: SignedFixedPoint, b: SignedFixedPoint) -> SignedFixedPoint:
    """Multiply signed values; the sign is the XOR of the operand signs."""
    return SignedFixedPoint(
        magnitude=mul_scaled(a.magnitude, b.magnitude),
        negative=a.negative != b.negative,
    )


def signed_div(a: SignedFixedPoint, d: SignedFixedPoint) -> SignedFixedPoint:
    """Divide signed values; the sign is the XOR of the operand signs."""
    return SignedFixedPoint(
        magnitude=div_scaled(a.magnitude, d.magnitude),
        negative=a.negative != d.negative,
    )


def sqrt_fp(x: int) -> int:
    """Square root of a fixed-point value using integer Newton iteration.

    The radicand is pre-multiplied by SCALE so the root comes out at the
    same 1e18 scale as the input.
    """
    if x == 0:
        return 0
    n = x * SCALE
    r = n
    y = (n + 1) // 2
    while y < r:
        r = y
        y = (n // y + y) // 2
    return r


def exp_fp(x: int) -> int:
    """e**x for a small non-negative fixed-point ``x``.

    Evaluates the first EXP_TERMS terms of the Taylor series without any
    range reduction, so it is only accurate for the per-step rate and
    volatility factors the pricer feeds it.
    """
    result = SCALE
    term = SCALE
    for n in range(1, EXP_TERMS):
        term = mul_scaled(term, x) // n
        result += term
    return result


def ln_fp(x: int) -> SignedFixedPoint:
    """Natural logarithm of a positive fixed-point value.

    Args:
        x: Fixed-point value, must be positive.

    Returns:
        Signed fixed-point logarithm.

    Raises:
        LogarithmDomainError: If ``x`` is zero or negative.
    """
    if x <= 0:
        raise LogarithmDomainError(f"ln is undefined for {x}")

    # Bring x into [0.5, 1.5] while counting net halvings.
    y = x
    k = 0
    while y > _LN_UPPER:
        y //= 2
        k += 1
    while y < _LN_LOWER:
        y *= 2
        k -= 1

    z = SignedFixedPoint.from_int(y - SCALE)
    power = SignedFixedPoint(magnitude=SCALE)
    series = ZERO
    for n in range(1, LN_TERMS + 1):
        power = signed_mul(power, z)
        term = SignedFixedPoint(magnitude=power.magnitude // n, negative=power.negative)
        series = series + term if n % 2 else series - term

    return series + SignedFixedPoint.from_int(k * LN2)


def pow_fp(base: int, exponent: int) -> int:
    """Raise a fixed-point value to a non-negative integer power by squaring."""
    result = SCALE
    while exponent > 0:
        if exponent & 1:
            result = mul_scaled(result, base)
        base = mul_scaled(base, base)
        exponent >>= 1
    return result
