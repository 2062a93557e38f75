"""Validation methods: which built-in rules run, and in which order.

``FAST`` runs the country, length and checksum rules. ``STRICT`` adds the BBAN
structure rule right after the checksum, before any custom rule. The choice is
made once, when a validator builds its chain.
"""

from collections.abc import Iterable
from enum import Enum

from openiban.exceptions import ConfigurationError
from openiban.registry.registry import IbanRegistry

from .rules import (
    ChecksumRule,
    CountryCodeRule,
    LengthRule,
    NotEmptyRule,
    StructureRule,
    ValidationRule,
)
from .structure import StructureMatcherCache


class ValidationMethod(str, Enum):
    """Named rule sets trading thoroughness for speed."""

    FAST = "fast"
    STRICT = "strict"


def build_builtin_rules(
    method: ValidationMethod,
    registry: IbanRegistry,
    cache: StructureMatcherCache,
) -> tuple[ValidationRule, ...]:
    """Built-in rules for ``method``, in execution order.

    Raises:
        ConfigurationError: If ``method`` is not a ValidationMethod
    """
    if not isinstance(method, ValidationMethod):
        raise ConfigurationError(
            f"Unsupported validation method: {method!r}",
            setting="method",
            expected=", ".join(m.value for m in ValidationMethod),
        )

    rules: list[ValidationRule] = [
        NotEmptyRule(),
        CountryCodeRule(registry),
        LengthRule(),
        ChecksumRule(),
    ]
    if method is ValidationMethod.STRICT:
        rules.append(StructureRule(cache))
    return tuple(rules)


def build_rule_chain(
    method: ValidationMethod,
    registry: IbanRegistry,
    cache: StructureMatcherCache,
    custom_rules: Iterable[ValidationRule] = (),
) -> tuple[ValidationRule, ...]:
    """Full chain: built-in rules for ``method`` followed by ``custom_rules``."""
    return build_builtin_rules(method, registry, cache) + tuple(custom_rules)
