"""Historical volatility estimation."""

from optionsengine.volatility.historical import historical_volatility, log_returns

__all__ = ["historical_volatility", "log_returns"]
