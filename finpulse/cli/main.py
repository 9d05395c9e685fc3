"""FinPulse command line interface."""

import typer

from finpulse import __version__
from finpulse.cli.check import check_command
from finpulse.cli.report import report_command
from finpulse.cli.stats import ranges_command, stats_command
from finpulse.core.config import get_settings
from finpulse.core.exceptions import ConfigurationError
from finpulse.core.logger import setup_logging

app = typer.Typer(
    name="finpulse",
    help="Financial metrics dashboard: revenue vs expenses by time range.",
    no_args_is_help=True,
)

app.command(name="report")(report_command)
app.command(name="stats")(stats_command)
app.command(name="ranges")(ranges_command)
app.command(name="check")(check_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"finpulse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """FinPulse dashboard tools."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    setup_logging("DEBUG" if verbose else settings.log_level)


if __name__ == "__main__":
    app()
