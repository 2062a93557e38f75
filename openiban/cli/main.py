"""Main CLI entry point for OpenIBAN."""

import typer
from rich.console import Console

from openiban import __version__
from openiban.metrics import start_metrics_server
from openiban.utils.config import get_settings
from openiban.utils.logging import configure_logging

from .commands import countries, iban

app = typer.Typer(
    name="openiban",
    help="🏦 Validate and normalize International Bank Account Numbers",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]OpenIBAN[/bold blue] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    OpenIBAN - IBAN validation for 75+ countries.

    Checks country, length, ISO 7064 MOD 97-10 checksum and the SWIFT BBAN
    structure of each value.
    """
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        dev_mode=settings.dev_mode,
    )

    if settings.metrics_enabled:
        start_metrics_server(settings.metrics_port)


app.command("validate")(iban.validate)
app.command("format")(iban.format_iban)
app.command("check-digits")(iban.check_digits)
app.add_typer(countries.app, name="countries", help="🌍 Supported countries")


if __name__ == "__main__":
    app()
