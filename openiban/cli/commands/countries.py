"""Country registry commands."""

import json

import typer
from rich.console import Console
from rich.table import Table

from .iban import load_registry

app = typer.Typer()
console = Console()


@app.command("list")
def list_countries(
    sepa: bool = typer.Option(False, "--sepa", help="Only SEPA countries"),
    json_output: bool = typer.Option(False, "--json", help="Print countries as JSON"),
) -> None:
    """List supported IBAN countries."""
    registry = load_registry()
    countries = registry.sepa_countries() if sepa else registry.all_countries()

    if json_output:
        typer.echo(json.dumps([country.model_dump() for country in countries], indent=2))
        return

    table = Table(title=f"IBAN Countries ({len(countries)})", show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country")
    table.add_column("Length", justify="right")
    table.add_column("BBAN Structure", style="magenta")
    table.add_column("SEPA", justify="center")

    for country in countries:
        table.add_row(
            country.code,
            country.name,
            str(country.length),
            country.bban_pattern,
            "[green]✓[/green]" if country.is_sepa else "",
        )

    console.print(table)


@app.command("show")
def show_country(
    code: str = typer.Argument(..., help="ISO country code, e.g. NL"),
) -> None:
    """Show the IBAN definition of one country."""
    registry = load_registry()
    country = registry.lookup(code)
    if country is None:
        console.print(f"[red]✗ Unknown country code {code!r}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{country.name or country.code}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Code", country.code)
    table.add_row("IBAN length", str(country.length))
    table.add_row("BBAN length", str(country.bban_length))
    table.add_row("BBAN structure", country.bban_pattern)
    table.add_row("SEPA", "Yes" if country.is_sepa else "No")
    table.add_row("Example", country.example or "[dim]-[/dim]")

    console.print(table)
