"""Implementation of 'finpulse report' command.

Generates the interactive HTML dashboard:
- Header with the time range selector
- Four stat cards
- Revenue vs Expenses chart
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from finpulse.core.config import get_settings
from finpulse.core.exceptions import FinPulseError
from finpulse.core.models import Theme
from finpulse.dashboard import DashboardView, save_dashboard

console = Console()


def report_command(
    time_range: str = typer.Option(
        None,
        "--range",
        "-r",
        help="Initially selected range: 1M, 3M, 6M, 1Y or ALL (default: FINPULSE_DEFAULT_RANGE)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: <reports_dir>/dashboard-<range>.html)",
    ),
    theme: Theme = typer.Option(
        None,
        "--theme",
        "-t",
        help="Colour theme (default: FINPULSE_THEME)",
    ),
) -> None:
    """Generate interactive HTML dashboard.

    Creates a self-contained HTML file; all ranges are embedded, so the
    range buttons work offline once Chart.js is loaded.
    """
    try:
        settings = get_settings()
        if theme is not None:
            settings = settings.model_copy(update={"theme": theme})
        view = DashboardView(time_range, settings=settings)
    except FinPulseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    html = view.render()

    if output:
        output_path = output
    else:
        output_path = settings.reports_dir / f"dashboard-{view.time_range.value}.html"

    save_dashboard(html, output_path)

    console.print(f"[green]Dashboard generated:[/green] {output_path}")
    console.print(f"Open in browser: file://{output_path.absolute()}")
