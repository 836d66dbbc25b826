"""Position data model."""

from pydantic import BaseModel, Field

from optionsengine.models.option import PositionLeg


class Position(BaseModel):
    """An ordered set of option legs on one underlying asset."""

    legs: tuple[PositionLeg, ...] = Field(..., min_length=1, description="Option legs")
    asset_symbol: str = Field(..., min_length=1, description="Underlying asset symbol")

    model_config = {"frozen": True}
