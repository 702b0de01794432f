"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig
from ..domain.charge_calculator import ChargeCalculator
from ..domain.exceptions import SitterChargeError
from ..domain.models import ChargeBreakdown
from ..services.quote import ShiftQuoteService

app = typer.Typer(
    name="sittercharge",
    help="Calculate the nightly charge for a babysitting job",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml if present")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Babysitter charge calculator.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _render_breakdown(breakdown: ChargeBreakdown) -> Table:
    """Build a table with one row per billed segment."""
    table = Table(
        title="Nightly charge",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Segment", style="bold yellow")
    table.add_column("Hours", justify="right")
    table.add_column("Rate", justify="right", style="dim")
    table.add_column("Amount", justify="right")

    rates = breakdown.rates
    table.add_row(
        "Start to bedtime",
        str(breakdown.pre_bedtime_hours),
        f"${rates.pre_bedtime_rate}/h",
        f"${breakdown.pre_bedtime_amount}",
    )
    table.add_row(
        "Bedtime to midnight",
        str(breakdown.post_bedtime_hours),
        f"${rates.post_bedtime_rate}/h",
        f"${breakdown.post_bedtime_amount}",
    )
    table.add_row(
        "After midnight",
        str(breakdown.post_midnight_hours),
        f"${rates.post_midnight_rate}/h",
        f"${breakdown.post_midnight_amount}",
    )
    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{breakdown.total_hours}[/bold]",
        "",
        f"[bold green]${breakdown.total}[/bold green]",
    )
    return table


@app.command()
def charge(
    start: Annotated[str, typer.Argument(help="Start time, e.g. 17:00 or 5PM")],
    bed: Annotated[str, typer.Argument(help="Bedtime, e.g. 21:30 or midnight as 00:00")],
    end: Annotated[str, typer.Argument(help="End time, e.g. 02:15 (no later than 04:00)")],
    config_file: ConfigOption = None,
    breakdown: Annotated[bool, typer.Option("--breakdown/--no-breakdown", help="Show hours and amount per segment.")] = False,
):
    """
    Calculate the charge for one night of babysitting.

    Examples:

        sittercharge charge 17:00 21:00 02:00

        sittercharge charge 7:15PM 9:30PM 2:10AM --breakdown
    """
    try:
        config = AppConfig.load_or_default(config_file)
        calculator = ChargeCalculator(rates=config.rates.to_rate_table())
        service = ShiftQuoteService(calculator=calculator)

        result = service.quote(start=start, bed=bed, end=end)
    except (SitterChargeError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if breakdown:
        console.print()
        console.print(_render_breakdown(result))
        console.print()
    else:
        console.print(result.format_display())


@app.command()
def rates(config_file: ConfigOption = None):
    """
    Show the hourly rates in use.
    """
    try:
        config = AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title="Hourly rates",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Segment", style="bold yellow")
    table.add_column("Rate", justify="right")

    table.add_row("Start to bedtime", f"${config.rates.pre_bedtime}/h")
    table.add_row("Bedtime to midnight", f"${config.rates.post_bedtime}/h")
    table.add_row("After midnight", f"${config.rates.post_midnight}/h")

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]sittercharge[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
