"""Quote command for the optionsengine CLI.

Builds a multi-leg position from the command line and shows premiums,
margin requirements and optionally the aggregate Greeks.
"""

import time

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from optionsengine.cli.params import FIXED, format_fixed
from optionsengine.cli.pricing import market_inputs
from optionsengine.exceptions import InvalidInputError
from optionsengine.fixedpoint.conversion import to_fixed
from optionsengine.margin.quoting import (
    expiration_after_days,
    leg_premium,
    position_greeks,
    price_quote,
)
from optionsengine.models import OptionType, Position, PositionLeg, Side

console = Console()


class LegType(click.ParamType):
    """Leg written as TYPE:SIDE:AMOUNT:STRIKE:DAYS, e.g. call:short:1:105:30."""

    name = "leg"

    def convert(self, value, param, ctx) -> tuple:
        if isinstance(value, tuple):
            return value
        parts = [p.strip() for p in value.split(":")]
        if len(parts) != 5:
            self.fail(f"{value!r} is not TYPE:SIDE:AMOUNT:STRIKE:DAYS", param, ctx)

        option_type, side, amount, strike, days = parts
        try:
            leg = (
                OptionType(option_type.lower()),
                Side(side.lower()),
                to_fixed(amount),
                to_fixed(strike),
                int(days),
            )
        except (InvalidInputError, ValueError) as e:
            self.fail(f"Invalid leg {value!r}: {e}", param, ctx)

        if leg[4] < 0:
            self.fail(f"Invalid leg {value!r}: DAYS must not be negative", param, ctx)
        return leg


LEG = LegType()


def build_position(symbol: str, legs: tuple, now: int) -> Position:
    """Build a Position from parsed legs, expiring each leg DAYS after now."""
    try:
        return Position(
            asset_symbol=symbol,
            legs=[
                PositionLeg(
                    option_type=option_type,
                    side=side,
                    amount=amount,
                    strike_price=strike,
                    expiration=expiration_after_days(now, days),
                )
                for option_type, side, amount, strike, days in legs
            ],
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid position: {e}") from e


@click.command()
@click.option("--spot", "-s", type=FIXED, required=True, help="Underlying price.")
@click.option("--rate", "-r", type=FIXED, default=None, help="Annual risk-free rate.")
@click.option("--vol", type=FIXED, default=None, help="Annual volatility.")
@click.option("--symbol", default="BTC", show_default=True, help="Underlying asset symbol.")
@click.option(
    "--leg",
    "-l",
    "legs",
    type=LEG,
    multiple=True,
    required=True,
    help="Leg as TYPE:SIDE:AMOUNT:STRIKE:DAYS (repeatable).",
)
@click.option("--now", type=int, default=None, help="Pricing time as unix seconds.")
@click.option("--greeks", "show_greeks", is_flag=True, help="Also show position Greeks.")
@click.pass_context
def quote(
    ctx: click.Context,
    spot: int,
    rate: int | None,
    vol: int | None,
    symbol: str,
    legs: tuple,
    now: int | None,
    show_greeks: bool,
) -> None:
    """Quote a multi-leg option position.

    \b
    Examples:
      optionsengine quote -s 100 -l call:short:1:105:30
      optionsengine quote -s 100 -l call:short:1:100:30 -l put:short:1:100:30
      optionsengine quote -s 100 -l call:long:2:95:60 -l call:short:2:105:60 --greeks
    """
    rate, vol = market_inputs(ctx, rate, vol)
    if now is None:
        now = time.time_ns() // 1_000_000_000

    position = build_position(symbol, legs, now)
    result = price_quote(position, spot, rate, vol, now)

    table = Table(title=f"{symbol} Position")
    table.add_column("#", style="dim")
    table.add_column("Type")
    table.add_column("Side")
    table.add_column("Amount", justify="right")
    table.add_column("Strike", justify="right")
    table.add_column("Premium", justify="right")

    for i, leg in enumerate(position.legs, start=1):
        side_color = "red" if leg.is_short else "green"
        table.add_row(
            str(i),
            leg.option_type.value,
            f"[{side_color}]{leg.side.value}[/{side_color}]",
            format_fixed(leg.amount, 2),
            format_fixed(leg.strike_price, 2),
            format_fixed(leg_premium(leg, spot, rate, vol, now), 2),
        )
    console.print(table)

    console.print(Panel(
        f"Net debit:          [yellow]{format_fixed(result.net_debit, 2)}[/yellow]\n"
        f"Net credit:         [yellow]{format_fixed(result.net_credit, 2)}[/yellow]\n"
        f"Initial margin:     [bold]{format_fixed(result.initial_margin, 2)}[/bold]\n"
        f"Maintenance margin: [bold]{format_fixed(result.maintenance_margin, 2)}[/bold]",
        title="[bold cyan]Quote[/bold cyan]",
        border_style="cyan",
    ))

    if show_greeks:
        total = position_greeks(position, spot, rate, vol, now)
        greeks_table = Table(title="Position Greeks")
        greeks_table.add_column("Greek", style="cyan")
        greeks_table.add_column("Value", justify="right")
        for name in ("delta", "gamma", "vega", "theta", "rho"):
            greeks_table.add_row(name.capitalize(), format_fixed(getattr(total, name), 4))
        console.print(greeks_table)
