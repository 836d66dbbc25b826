"""Pricing commands for the optionsengine CLI.

Prices a single option and reports its Greeks.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from optionsengine.cli.params import FIXED, config_fixed, format_fixed
from optionsengine.pricing.binomial import intrinsic_value, price as compute_price, step_count
from optionsengine.pricing.greeks import greeks as compute_greeks

console = Console()


def market_inputs(ctx: click.Context, rate: int | None, vol: int | None) -> tuple[int, int]:
    """Fill missing rate and volatility from the [market] config section."""
    market = ctx.obj["config"]["market"]
    if rate is None:
        rate = config_fixed(market, "risk_free_rate")
    if vol is None:
        vol = config_fixed(market, "volatility")
    return rate, vol


def option_arguments(func):
    """Attach the options shared by price and greeks."""
    decorators = [
        click.option("--spot", "-s", type=FIXED, required=True, help="Underlying price."),
        click.option("--strike", "-k", type=FIXED, required=True, help="Strike price."),
        click.option("--rate", "-r", type=FIXED, default=None,
                     help="Annual risk-free rate, e.g. 0.05 (default from config)."),
        click.option("--vol", type=FIXED, default=None,
                     help="Annual volatility, e.g. 0.25 (default from config)."),
        click.option("--days", "-d", type=click.IntRange(min=0), required=True,
                     help="Whole days to expiry."),
        click.option("--call/--put", "is_call", default=True, help="Option type (default call)."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.command()
@option_arguments
@click.pass_context
def price(
    ctx: click.Context,
    spot: int,
    strike: int,
    rate: int | None,
    vol: int | None,
    days: int,
    is_call: bool,
) -> None:
    """Price a European option on a binomial tree.

    \b
    Examples:
      optionsengine price -s 100 -k 100 -d 30
      optionsengine price -s 100 -k 110 -d 90 --vol 0.4 --put
    """
    rate, vol = market_inputs(ctx, rate, vol)
    premium = compute_price(spot, strike, rate, vol, days, is_call)
    intrinsic = intrinsic_value(spot, strike, is_call)

    kind = "Call" if is_call else "Put"
    console.print(Panel(
        f"Premium:        [bold green]{format_fixed(premium)}[/bold green]\n"
        f"Intrinsic:      {format_fixed(intrinsic)}\n"
        f"Time value:     {format_fixed(premium - intrinsic if premium > intrinsic else 0)}\n"
        f"Tree steps:     {step_count(days) if days else 0}",
        title=f"[bold cyan]{kind} K={format_fixed(strike, 2)} {days}d[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@option_arguments
@click.pass_context
def greeks(
    ctx: click.Context,
    spot: int,
    strike: int,
    rate: int | None,
    vol: int | None,
    days: int,
    is_call: bool,
) -> None:
    """Show delta, gamma, vega, theta and rho for one option.

    \b
    Examples:
      optionsengine greeks -s 100 -k 100 -d 30
    """
    rate, vol = market_inputs(ctx, rate, vol)
    result = compute_greeks(spot, strike, rate, vol, days, is_call)

    table = Table(title=f"Greeks ({'Call' if is_call else 'Put'} K={format_fixed(strike, 2)} {days}d)")
    table.add_column("Greek", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Unit", style="dim")

    rows = [
        ("Delta", result.delta, "per 1.0 underlying"),
        ("Gamma", result.gamma, "per 1.0 underlying squared"),
        ("Vega", result.vega, "per 1.00 volatility"),
        ("Theta", result.theta, "per year"),
        ("Rho", result.rho, "per 1.00 rate"),
    ]
    for name, value, unit in rows:
        color = "red" if value.negative else "green"
        table.add_row(name, f"[{color}]{format_fixed(value)}[/{color}]", unit)

    console.print(table)
