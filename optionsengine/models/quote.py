"""Quote data model."""

from pydantic import BaseModel, Field


class Quote(BaseModel):
    """Premiums and collateral requirements for a position at one instant.

    Long legs contribute to ``net_debit`` and short legs to ``net_credit``,
    so mixed positions can carry both.
    """

    net_debit: int = Field(..., ge=0, description="Premium paid for long legs")
    net_credit: int = Field(..., ge=0, description="Premium received for short legs")
    initial_margin: int = Field(..., ge=0, description="Collateral to open")
    maintenance_margin: int = Field(..., ge=0, description="Collateral to keep open")
    timestamp: int = Field(..., description="Pricing time as unix seconds")

    model_config = {"frozen": True}
