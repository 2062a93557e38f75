"""IBAN commands: validate, format, check-digits."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from openiban.exceptions import IbanFormatError, InvalidCharacterError
from openiban.metrics import batch_validation_duration_seconds
from openiban.parser import IbanParser
from openiban.registry.registry import IbanRegistry
from openiban.utils.config import get_settings
from openiban.utils.logging import LogPerformance, get_logger, set_correlation_id
from openiban.utils.text import normalize
from openiban.validation.checksum import compute_check_digits
from openiban.validation.methods import ValidationMethod
from openiban.validation.result import ValidationResult
from openiban.validator import IbanValidator, IbanValidatorOptions

console = Console()
logger = get_logger(__name__)


def build_validator(method: Optional[ValidationMethod] = None) -> IbanValidator:
    """Validator from the settings, optionally overriding the method."""
    options = IbanValidatorOptions.from_settings(get_settings())
    if method is not None:
        options = options.model_copy(update={"method": method})
    return IbanValidator(options)


def load_registry() -> IbanRegistry:
    """Registry from the settings (YAML dataset or the built-in one)."""
    settings = get_settings()
    if settings.registry_path is not None:
        return IbanRegistry.from_yaml(settings.registry_path)
    return IbanRegistry.default()


def _read_values(file: Path) -> list[str]:
    lines = file.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip() and not line.lstrip().startswith("#")]


def _render_table(results: list[ValidationResult]) -> None:
    table = Table(title="IBAN Validation", show_header=True)
    table.add_column("IBAN", style="cyan", no_wrap=True)
    table.add_column("Valid", justify="center")
    table.add_column("Country")
    table.add_column("Error", style="red")

    for result in results:
        table.add_row(
            result.attempted_value or "[dim](empty)[/dim]",
            "[green]✓[/green]" if result.is_valid else "[red]✗[/red]",
            str(result.country) if result.country else "[dim]-[/dim]",
            "; ".join(error.message for error in result.errors),
        )

    console.print(table)


def validate(
    values: Optional[list[str]] = typer.Argument(None, help="IBANs to validate"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="File with one IBAN per line"
    ),
    method: Optional[ValidationMethod] = typer.Option(
        None, "--method", "-m", case_sensitive=False, help="Validation method (fast|strict)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """✅ Validate one or more IBANs.

    Examples:
        openiban validate NL91ABNA0417164300

        openiban validate "DE89 3704 0044 0532 0130 00" --method fast

        openiban validate --file accounts.txt --json
    """
    candidates = list(values or [])
    if file is not None:
        candidates.extend(_read_values(file))

    if not candidates:
        console.print("[red]Provide at least one IBAN or --file[/red]")
        raise typer.Exit(2)

    validator = build_validator(method)
    set_correlation_id()

    with LogPerformance("batch_validation", logger):
        with batch_validation_duration_seconds.labels(method=validator.method.value).time():
            results = [validator.validate(candidate) for candidate in candidates]

    if json_output:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        _render_table(results)

    invalid = sum(1 for result in results if not result.is_valid)
    if invalid:
        if not json_output:
            console.print(f"[red]{invalid} of {len(results)} values are not valid IBANs[/red]")
        raise typer.Exit(1)


def format_iban(
    value: str = typer.Argument(..., help="IBAN to format"),
    partitioned: bool = typer.Option(
        True, "--partitioned/--flat", help="Groups of four characters, or a single block"
    ),
) -> None:
    """🔤 Print an IBAN in canonical form.

    Examples:
        openiban format nl91abna0417164300
        # NL91 ABNA 0417 1643 00

        openiban format "nl91 abna 0417 1643 00" --flat
        # NL91ABNA0417164300
    """
    parser = IbanParser(build_validator())
    try:
        iban = parser.parse(value)
    except IbanFormatError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1)

    typer.echo(iban.format("S" if partitioned else "F"))


def check_digits(
    country_code: str = typer.Argument(..., help="ISO country code, e.g. NL"),
    bban: str = typer.Argument(..., help="Basic Bank Account Number"),
) -> None:
    """🔢 Compute the check digits and print the complete IBAN.

    Example:
        openiban check-digits NL ABNA0417164300
        # NL91ABNA0417164300
    """
    registry = load_registry()
    country = registry.lookup(country_code)
    if country is None:
        console.print(f"[red]✗ Unknown country code {country_code!r}[/red]")
        raise typer.Exit(1)

    bban = normalize(bban)
    try:
        digits = compute_check_digits(country.code, bban)
    except InvalidCharacterError as e:
        console.print(f"[red]✗ Illegal character {e.character!r} in BBAN[/red]")
        raise typer.Exit(1)

    if len(bban) != country.bban_length:
        console.print(
            f"[yellow]Warning: {country.code} BBANs have {country.bban_length} characters, "
            f"got {len(bban)}[/yellow]"
        )

    typer.echo(f"{country.code}{digits}{bban}")
