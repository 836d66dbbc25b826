"""Greeks data model."""

from pydantic import BaseModel, Field

from optionsengine.fixedpoint.arithmetic import signed_mul
from optionsengine.fixedpoint.signed import ZERO, SignedFixedPoint


class Greeks(BaseModel):
    """Signed option sensitivities.

    Delta is per unit of underlying, gamma per unit squared, vega per 1.0 of
    volatility, rho per 1.0 of rate and theta per year of elapsed time.
    """

    delta: SignedFixedPoint = Field(default=ZERO, description="dV/dS")
    gamma: SignedFixedPoint = Field(default=ZERO, description="d2V/dS2")
    vega: SignedFixedPoint = Field(default=ZERO, description="dV/dsigma")
    theta: SignedFixedPoint = Field(default=ZERO, description="dV/dt")
    rho: SignedFixedPoint = Field(default=ZERO, description="dV/dr")

    model_config = {"frozen": True}

    def scaled(self, factor: SignedFixedPoint) -> "Greeks":
        """Return Greeks multiplied by a signed fixed-point position size."""
        return Greeks(
            delta=signed_mul(self.delta, factor),
            gamma=signed_mul(self.gamma, factor),
            vega=signed_mul(self.vega, factor),
            theta=signed_mul(self.theta, factor),
            rho=signed_mul(self.rho, factor),
        )

    def __add__(self, other: "Greeks") -> "Greeks":
        if not isinstance(other, Greeks):
            return NotImplemented
        return Greeks(
            delta=self.delta + other.delta,
            gamma=self.gamma + other.gamma,
            vega=self.vega + other.vega,
            theta=self.theta + other.theta,
            rho=self.rho + other.rho,
        )
