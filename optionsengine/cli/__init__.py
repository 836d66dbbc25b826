"""CLI commands for optionsengine.

This package provides the command-line interface for pricing options,
computing Greeks, quoting positions and estimating volatility.
"""

from optionsengine.cli.main import cli, main

__all__ = ["cli", "main"]
