"""Error types raised by the options engine.

Every error subclasses ValueError so callers that already guard pricing
calls with ``except ValueError`` keep working.
"""


class OptionsEngineError(ValueError):
    """Base class for all engine errors."""


class InvalidInputError(OptionsEngineError):
    """Raised when a top-level call receives inputs it cannot price."""


class EmptyPositionError(InvalidInputError):
    """Raised when a position has no legs."""


class InsufficientPriceDataError(InvalidInputError):
    """Raised when a price history has fewer than two samples."""


class NonPositivePriceError(InvalidInputError):
    """Raised when a price history contains a zero or negative sample."""


class LogarithmDomainError(InvalidInputError):
    """Raised when the natural logarithm of zero is requested."""
