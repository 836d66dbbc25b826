"""Fixed-point arithmetic primitives."""

from optionsengine.fixedpoint.arithmetic import (
    LN2,
    SCALE,
    div_scaled,
    exp_fp,
    ln_fp,
    mul_scaled,
    pow_fp,
    signed_div,
    signed_mul,
    sqrt_fp,
)
from optionsengine.fixedpoint.conversion import (
    TOKEN_DECIMALS,
    from_fixed,
    from_token_units,
    to_fixed,
    to_token_units,
)
from optionsengine.fixedpoint.signed import ZERO, SignedFixedPoint

__all__ = [
    "LN2",
    "SCALE",
    "TOKEN_DECIMALS",
    "ZERO",
    "SignedFixedPoint",
    "div_scaled",
    "exp_fp",
    "from_fixed",
    "from_token_units",
    "ln_fp",
    "mul_scaled",
    "pow_fp",
    "signed_div",
    "signed_mul",
    "sqrt_fp",
    "to_fixed",
    "to_token_units",
]
