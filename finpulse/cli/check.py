"""Implementation of 'finpulse check' command.

Compares the authored stat card figures with the figures derived from the
revenue/expenses series. Differences are reported, never corrected.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from finpulse.core.exceptions import FinPulseError
from finpulse.engine.calculator import check_stats
from finpulse.engine.dataset import TIME_RANGES, lookup, parse_time_range

console = Console()


def check_command(
    time_range: str = typer.Option(
        None,
        "--range",
        "-r",
        help="Range to check (default: all ranges)",
    ),
) -> None:
    """Compare authored stats with totals derived from the series."""
    try:
        keys = [parse_time_range(time_range)] if time_range else list(TIME_RANGES)
    except FinPulseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Range")
    table.add_column("Metric")
    table.add_column("Authored", justify="right")
    table.add_column("Derived", justify="right")
    table.add_column("")

    mismatches = 0
    for key in keys:
        for check in check_stats(lookup(key)):
            if check.matches:
                status = "[green]✓[/green]"
            else:
                status = "[yellow]≠[/yellow]"
                mismatches += 1
            table.add_row(key.value, check.metric, check.authored, check.derived, status)

    console.print(table)
    if mismatches:
        console.print(f"[yellow]{mismatches} figure(s) differ from the series.[/yellow]")
        console.print("Display copy is authored independently; review before publishing.")
    else:
        console.print("[green]All figures match the series.[/green]")
