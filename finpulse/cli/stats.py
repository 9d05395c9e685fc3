"""Implementation of 'finpulse stats' and 'finpulse ranges' commands.

Shows the stat cards of a range in the terminal.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from finpulse.core.config import get_settings
from finpulse.core.exceptions import FinPulseError
from finpulse.dashboard import DashboardView
from finpulse.dashboard.cards import get_trend_arrow
from finpulse.engine.dataset import TIME_RANGES, lookup

console = Console()


def stats_command(
    time_range: str = typer.Option(
        None,
        "--range",
        "-r",
        help="Range to show (default: FINPULSE_DEFAULT_RANGE)",
    ),
) -> None:
    """Show the four summary cards for a range."""
    try:
        view = DashboardView(time_range, settings=get_settings())
    except FinPulseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Change")

    for card in view.stat_cards:
        color = "green" if card.is_positive else "red"
        table.add_row(
            f"{card.icon} {card.title}",
            card.value,
            f"[{color}]{get_trend_arrow(card.is_positive)} {card.change}[/{color}]",
        )

    entry = view.entry
    console.print(
        Panel(
            f"[bold]{view.subtitle}[/bold]\n"
            f"Labels: {', '.join(entry.labels)}",
            title=f"Financial Overview - {view.time_range.value}",
        )
    )
    console.print(table)


def ranges_command() -> None:
    """List the available time ranges."""
    try:
        default = get_settings().default_range
    except FinPulseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Range")
    table.add_column("Points", justify="right")
    table.add_column("Labels")

    for key in TIME_RANGES:
        entry = lookup(key)
        name = f"{key.value} [cyan](default)[/cyan]" if key == default else key.value
        table.add_row(name, str(len(entry.labels)), f"{entry.labels[0]} - {entry.labels[-1]}")

    console.print(table)
