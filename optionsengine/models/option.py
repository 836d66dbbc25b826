"""Option leg data models."""

from enum import Enum

from pydantic import BaseModel, Field


class OptionType(str, Enum):
    """Right conveyed by an option."""

    CALL = "call"
    PUT = "put"


class Side(str, Enum):
    """Direction of a leg."""

    LONG = "long"
    SHORT = "short"


class PositionLeg(BaseModel):
    """One call or put component of a position."""

    option_type: OptionType = Field(..., description="Call or put")
    side: Side = Field(..., description="Long or short")
    amount: int = Field(..., gt=0, description="Number of contracts, 1e18-scaled")
    strike_price: int = Field(..., ge=0, description="Strike price, 1e18-scaled")
    expiration: int = Field(..., ge=0, description="Expiration as unix seconds")

    model_config = {"frozen": True}

    @property
    def is_call(self) -> bool:
        return self.option_type is OptionType.CALL

    @property
    def is_short(self) -> bool:
        return self.side is Side.SHORT
