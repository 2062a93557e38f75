"""Country registry: ISO code to IBAN country metadata.

The registry is fully built in ``__init__`` and read-only afterwards, so a
single instance can be shared across threads without synchronization.

Usage:
    >>> registry = IbanRegistry.default()
    >>> registry.lookup("nl").length
    18
    >>> registry.lookup("ZZ") is None
    True
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from openiban.exceptions import ConfigurationError, wrap_exception
from openiban.utils.logging import get_logger

from .country import IbanCountry
from .dataset import COUNTRIES

logger = get_logger(__name__)


class IbanRegistry:
    """Immutable index of IBAN countries keyed by uppercase ISO code."""

    def __init__(self, countries: Iterable[IbanCountry]) -> None:
        """Build the registry.

        Args:
            countries: Country definitions; codes must be unique

        Raises:
            ConfigurationError: If a country code appears twice, or a BBAN
                pattern does not cover exactly the BBAN length of its country
            PatternFormatError: If a BBAN pattern cannot be compiled
        """
        index: dict[str, IbanCountry] = {}
        for country in countries:
            if country.code in index:
                raise ConfigurationError(
                    f"Duplicate country code in IBAN registry: {country.code}",
                    setting="countries",
                )
            _check_pattern(country)
            index[country.code] = country

        self._countries = index
        self._ordered = tuple(sorted(index.values(), key=lambda c: c.code))

    @classmethod
    def default(cls) -> "IbanRegistry":
        """Registry built from the bundled SWIFT dataset."""
        return cls(COUNTRIES)

    @classmethod
    def from_rows(cls, rows: Iterable[dict[str, Any]]) -> "IbanRegistry":
        """Build a registry from plain mappings (e.g. parsed YAML or JSON).

        Raises:
            ConfigurationError: If a row does not describe a valid country
        """
        countries = []
        for position, row in enumerate(rows):
            try:
                countries.append(IbanCountry.model_validate(row))
            except PydanticValidationError as e:
                raise wrap_exception(
                    e,
                    f"Invalid country definition at row {position}",
                    exception_class=ConfigurationError,
                    row=position,
                    errors=e.error_count(),
                ) from e
        return cls(countries)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "IbanRegistry":
        """Load a country dataset from a YAML file.

        The file holds either a list of rows or a mapping with a ``countries``
        list::

            countries:
              - code: NL
                bban_pattern: 4!a10!n
                length: 18
                is_sepa: true

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except OSError as e:
            raise wrap_exception(
                e,
                "Cannot read IBAN country dataset",
                exception_class=ConfigurationError,
                path=str(path),
            ) from e
        except yaml.YAMLError as e:
            raise wrap_exception(
                e,
                "IBAN country dataset is not valid YAML",
                exception_class=ConfigurationError,
                path=str(path),
            ) from e

        rows = data.get("countries") if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise ConfigurationError(
                "IBAN country dataset must be a list of countries",
                setting="registry_path",
                expected="list of country rows",
                context={"path": str(path)},
            )

        registry = cls.from_rows(rows)
        logger.info("registry_loaded", path=str(path), countries=len(registry))
        return registry

    def lookup(self, code: str | None) -> IbanCountry | None:
        """Find a country by ISO code (case-insensitive).

        Returns:
            The country, or None when the code is unknown
        """
        if not code or not code.isascii():
            return None
        return self._countries.get(code.upper())

    def all_countries(self) -> tuple[IbanCountry, ...]:
        """All countries, ordered by ISO code."""
        return self._ordered

    def sepa_countries(self) -> tuple[IbanCountry, ...]:
        """Countries participating in SEPA, ordered by ISO code."""
        return tuple(c for c in self._ordered if c.is_sepa)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.isascii() and code.upper() in self._countries

    def __iter__(self) -> Iterator[IbanCountry]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return f"<IbanRegistry countries={len(self)}>"


def _check_pattern(country: IbanCountry) -> None:
    """Require the BBAN pattern to compile to exactly ``bban_length`` characters."""
    # openiban.validation imports this module
    from openiban.validation.structure import compile_pattern

    matcher = compile_pattern(country.bban_pattern)
    if matcher.length != country.bban_length:
        raise ConfigurationError(
            f"BBAN pattern {country.bban_pattern} of {country.code} covers "
            f"{matcher.length} characters, expected {country.bban_length}",
            setting="bban_pattern",
            expected=f"{country.bban_length} characters",
            context={"country": country.code, "pattern": country.bban_pattern},
        )
