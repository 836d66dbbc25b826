"""Historical volatility command for the optionsengine CLI."""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from optionsengine.cli.params import FIXED, format_fixed
from optionsengine.exceptions import InvalidInputError
from optionsengine.fixedpoint.conversion import to_fixed
from optionsengine.volatility.historical import historical_volatility

console = Console()


def read_price_file(path: Path) -> list[int]:
    """Read one price per line; for CSV rows the last column is used.

    Blank lines and lines starting with ``#`` are skipped.
    """
    prices = []
    for line_no, line in enumerate(path.read_text().splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        field = line.split(",")[-1].strip()
        try:
            prices.append(to_fixed(field))
        except InvalidInputError as e:
            raise click.BadParameter(
                f"line {line_no}: {field!r} is not a price", param_hint="--file"
            ) from e
    return prices


@click.command()
@click.argument("prices", nargs=-1, type=FIXED)
@click.option(
    "--file",
    "-f",
    "price_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File with one price per line (or CSV with price in the last column).",
)
@click.option(
    "--periods",
    "-p",
    type=click.IntRange(min=1),
    default=None,
    help="Periods per year, e.g. 365 for daily prices (default from config).",
)
@click.pass_context
def hvol(ctx: click.Context, prices: tuple, price_file: Path | None, periods: int | None) -> None:
    """Annualized historical volatility of a price series.

    \b
    Examples:
      optionsengine hvol 100 101.5 99.8 102.2
      optionsengine hvol --file closes.csv --periods 252
    """
    series = list(prices)
    if price_file is not None:
        series.extend(read_price_file(price_file))

    if periods is None:
        periods = int(ctx.obj["config"]["volatility"]["periods_per_year"])

    try:
        volatility = historical_volatility(series, periods)
    except InvalidInputError as e:
        raise click.ClickException(str(e)) from e

    console.print(Panel(
        f"Samples:     {len(series)}\n"
        f"Periods/yr:  {periods}\n"
        f"Volatility:  [bold green]{format_fixed(volatility)}[/bold green]",
        title="[bold cyan]Historical Volatility[/bold cyan]",
        border_style="cyan",
    ))
