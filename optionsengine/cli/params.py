"""Shared click parameter types and formatting for the CLI."""

from typing import Union

import click

from optionsengine.exceptions import InvalidInputError
from optionsengine.fixedpoint.conversion import from_fixed, to_fixed
from optionsengine.fixedpoint.signed import SignedFixedPoint


class FixedPointType(click.ParamType):
    """Decimal command-line value converted to a non-negative fixed-point int."""

    name = "decimal"

    def convert(self, value, param, ctx) -> int:
        if isinstance(value, int):
            return value
        try:
            result = to_fixed(value)
        except (InvalidInputError, TypeError):
            self.fail(f"{value!r} is not a valid decimal number", param, ctx)
        if result < 0:
            self.fail(f"{value!r} must not be negative", param, ctx)
        return result


FIXED = FixedPointType()


def config_fixed(section: dict, key: str) -> int:
    """Read a decimal setting from a config section as fixed-point."""
    value = section.get(key)
    try:
        return to_fixed(str(value))
    except InvalidInputError as e:
        raise click.ClickException(f"Invalid config value {key}={value!r}") from e


def format_fixed(value: Union[int, SignedFixedPoint], places: int = 6) -> str:
    """Render a fixed-point value as a grouped decimal string."""
    return f"{from_fixed(value):,.{places}f}"
