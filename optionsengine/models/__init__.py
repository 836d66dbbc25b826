"""Data models for the options engine."""

from optionsengine.fixedpoint.signed import SignedFixedPoint
from optionsengine.models.greeks import Greeks
from optionsengine.models.option import OptionType, PositionLeg, Side
from optionsengine.models.position import Position
from optionsengine.models.quote import Quote

__all__ = [
    "Greeks",
    "OptionType",
    "Position",
    "PositionLeg",
    "Quote",
    "Side",
    "SignedFixedPoint",
]
