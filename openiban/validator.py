"""IBAN validator: normalization plus the configured rule chain.

A validator is built once and shared: the rule chain, the registry and the
structure matcher cache are all safe for concurrent use.

Usage:
    >>> validator = IbanValidator()
    >>> validator.validate("NL91 ABNA 0417 1643 00").is_valid
    True
    >>> validator.validate("ZZ91ABNA0417164300").error.kind
    <ErrorKind.UNKNOWN_COUNTRY: 'unknown_country'>
"""

import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from openiban.exceptions import ConfigurationError
from openiban.metrics import record_validation
from openiban.registry.registry import IbanRegistry
from openiban.utils.config import Settings, get_settings
from openiban.utils.logging import get_logger
from openiban.utils.text import normalize
from openiban.validation.methods import ValidationMethod, build_builtin_rules
from openiban.validation.result import ValidationContext, ValidationResult
from openiban.validation.rules import FunctionRule, ValidationRule
from openiban.validation.structure import StructureMatcherCache

logger = get_logger(__name__)


class IbanValidatorOptions(BaseModel):
    """Validator configuration.

    Attributes:
        method: Built-in rule set (strict by default)
        registry: Country registry (the bundled SWIFT registry by default)
        rules: Custom rules run after the built-in ones; plain callables are
            wrapped in FunctionRule
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: ValidationMethod = Field(default=ValidationMethod.STRICT)
    registry: InstanceOf[IbanRegistry] = Field(default_factory=IbanRegistry.default)
    rules: tuple[Any, ...] = Field(default=())

    @field_validator("rules", mode="before")
    @classmethod
    def coerce_rules(cls, v: Any) -> tuple[Any, ...]:
        """Accept any iterable of rules or callables."""
        coerced = []
        for item in v or ():
            if isinstance(item, ValidationRule):
                coerced.append(item)
            elif callable(item):
                coerced.append(FunctionRule(item))
            else:
                raise ValueError(f"Custom rule must provide evaluate() or be callable: {item!r}")
        return tuple(coerced)

    @classmethod
    def from_settings(cls, settings: Settings) -> "IbanValidatorOptions":
        """Options for the default validator."""
        if settings.registry_path is not None:
            registry = IbanRegistry.from_yaml(settings.registry_path)
        else:
            registry = IbanRegistry.default()
        return cls(method=settings.validation_method, registry=registry)


class IbanValidator:
    """Validate IBANs with a fixed rule chain.

    Built-in rules stop at the first failure, since each assumes the previous
    ones passed. Custom rules always run afterwards, can inspect the built-in
    diagnostics through ``context.errors`` and only ever append their own.
    Exceptions raised by custom rules propagate to the caller.
    """

    def __init__(self, options: IbanValidatorOptions | None = None) -> None:
        """Build the rule chain.

        Raises:
            PatternFormatError: If a registry pattern is malformed (strict method)
        """
        self.options = options or IbanValidatorOptions()
        self.registry: IbanRegistry = self.options.registry
        self._cache = StructureMatcherCache()
        self._builtin_rules = build_builtin_rules(self.options.method, self.registry, self._cache)
        self._custom_rules: tuple[ValidationRule, ...] = self.options.rules

        if self.method is ValidationMethod.STRICT:
            self._warm_structure_cache()

        logger.debug(
            "iban_validator_created",
            method=self.method.value,
            countries=len(self.registry),
            custom_rules=len(self._custom_rules),
        )

    @property
    def method(self) -> ValidationMethod:
        return self.options.method

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        """The complete chain in execution order."""
        return self._builtin_rules + self._custom_rules

    @property
    def structure_cache(self) -> StructureMatcherCache:
        return self._cache

    def _warm_structure_cache(self) -> None:
        # Compile every registry pattern up front so a bad dataset fails here
        for country in self.registry.all_countries():
            self._cache.get_or_compile(country.bban_pattern)

    def validate(self, value: str | None) -> ValidationResult:
        """Validate a raw value.

        Args:
            value: IBAN in any case, with or without whitespace; None is treated
                as an empty value

        Returns:
            ValidationResult with every diagnostic produced
        """
        normalized = normalize(value) if value is not None else ""
        context = ValidationContext(value=normalized, method=self.method)

        for rule in self._builtin_rules:
            outcome = rule.evaluate(normalized, context)
            if outcome.error is not None:
                context.errors.append(outcome.error)
                break

        for rule in self._custom_rules:
            outcome = rule.evaluate(normalized, context)
            if outcome.error is not None:
                context.errors.append(outcome.error)

        result = ValidationResult(
            attempted_value=normalized,
            country=context.country,
            errors=tuple(context.errors),
        )

        record_validation(
            self.method.value,
            result.is_valid,
            [error.kind.value for error in result.errors],
        )
        if result.error is not None:
            logger.debug(
                "iban_validation_failed",
                value=normalized,
                rule=result.error.rule_name,
                kind=result.error.kind.value,
                error_count=len(result.errors),
            )
        return result

    def is_valid(self, value: str | None) -> bool:
        """Shortcut for ``validate(value).is_valid``."""
        return self.validate(value).is_valid

    def __repr__(self) -> str:
        return f"<IbanValidator method={self.method.value} rules={len(self.rules)}>"


# Process-wide default validator. Configure it (optionally) once, before the
# first get_default_validator() call; it cannot be replaced afterwards.
_default_validator: IbanValidator | None = None
_default_options: IbanValidatorOptions | None = None
_default_lock = threading.Lock()


def configure_default_validator(options: IbanValidatorOptions) -> None:
    """Set the options of the process-wide validator.

    Raises:
        ConfigurationError: If the default validator has already been created
    """
    global _default_options

    with _default_lock:
        if _default_validator is not None:
            raise ConfigurationError(
                "The default IBAN validator is already in use and cannot be reconfigured",
                setting="default_validator",
            )
        _default_options = options


def get_default_validator() -> IbanValidator:
    """The process-wide validator, created on first use.

    Without configure_default_validator() it is built from the application
    settings (method and optional YAML registry).
    """
    global _default_validator

    validator = _default_validator
    if validator is not None:
        return validator

    with _default_lock:
        if _default_validator is None:
            options = _default_options or IbanValidatorOptions.from_settings(get_settings())
            _default_validator = IbanValidator(options)
        return _default_validator
