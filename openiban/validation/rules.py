"""Validation rules.

Every rule exposes a ``name`` and ``evaluate(value, context) -> RuleOutcome``.
Rules hold only immutable configuration (the registry, the matcher cache), so
one chain is built per validator and shared across threads.

Built-in rules, in chain order:

    NotEmptyRule      value holds at least a country code and check digits
    CountryCodeRule   prefix is a registry country (stores it in the context)
    LengthRule        total length matches the country definition
    ChecksumRule      check digits and MOD 97-10 remainder
    StructureRule     BBAN matches the country pattern (strict method only)

Each rule may assume the rules before it passed.

Custom rules are any objects with the same shape, or plain callables wrapped
with ``FunctionRule`` / the ``rule`` decorator:

    >>> @rule("no_test_accounts", message="Test accounts are not accepted")
    ... def no_test_accounts(value, context):
    ...     return not value.endswith("0000000000")
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from openiban.exceptions import InvalidCharacterError
from openiban.registry.registry import IbanRegistry

from .checksum import mod97, rearrange
from .result import ErrorKind, RuleOutcome, ValidationContext
from .structure import StructureMatcherCache

# Country code + check digits
MIN_LENGTH = 4

# Check digits a conforming generator never produces (range is 02-98)
RESERVED_CHECK_DIGITS = frozenset({"00", "01", "99"})


@runtime_checkable
class ValidationRule(Protocol):
    """Capability shared by built-in and custom rules."""

    name: str

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        """Check a normalized value.

        Args:
            value: Normalized IBAN (no whitespace, uppercase)
            context: Per-call validation state

        Returns:
            RuleOutcome.passed() or RuleOutcome.failed(...)
        """
        ...


class NotEmptyRule:
    """Reject values too short to carry a country code and check digits."""

    name = "not_empty"

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        if not value:
            return RuleOutcome.failed(self.name, ErrorKind.EMPTY, "The value is empty")
        if len(value) < MIN_LENGTH:
            return RuleOutcome.failed(
                self.name,
                ErrorKind.EMPTY,
                f"The value is too short to be an IBAN ({len(value)} characters)",
                length=len(value),
            )
        return RuleOutcome.passed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class CountryCodeRule:
    """Resolve the two-letter prefix against the registry."""

    name = "country_code"

    def __init__(self, registry: IbanRegistry) -> None:
        self.registry = registry

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        code = value[:2]
        country = self.registry.lookup(code)
        if country is None:
            return RuleOutcome.failed(
                self.name,
                ErrorKind.UNKNOWN_COUNTRY,
                f"Unknown country code {code!r}",
                country_code=code,
            )
        context.country = country
        return RuleOutcome.passed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} countries={len(self.registry)}>"


class LengthRule:
    """Compare the total length with the country definition."""

    name = "length"

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        country = context.country
        if country is None:
            # Only reachable when the chain is assembled by hand without CountryCodeRule
            return RuleOutcome.failed(
                self.name, ErrorKind.UNKNOWN_COUNTRY, "Country has not been resolved"
            )
        if len(value) != country.length:
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_LENGTH,
                f"Expected {country.length} characters for {country.code}, got {len(value)}",
                expected=country.length,
                actual=len(value),
            )
        return RuleOutcome.passed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class ChecksumRule:
    """Validate the check digits with ISO 7064 MOD 97-10.

    Check digits 00, 01 and 99 are rejected even when the remainder is 1: a
    generator only produces 02-98, and 01/99 are the MOD 97 aliases of 98/02.
    """

    name = "checksum"

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        check_digits = value[2:4]
        if not (check_digits.isascii() and check_digits.isdigit()):
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_CHECKSUM,
                f"Check digits must be numeric, got {check_digits!r}",
                check_digits=check_digits,
            )
        if check_digits in RESERVED_CHECK_DIGITS:
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_CHECKSUM,
                f"Check digits {check_digits} are out of range",
                check_digits=check_digits,
            )

        try:
            remainder = mod97(rearrange(value))
        except InvalidCharacterError as e:
            position = _original_position(e.position, len(value))
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_CHECKSUM,
                f"Illegal character {e.character!r} at position {position}",
                character=e.character,
                position=position,
            )

        if remainder != 1:
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_CHECKSUM,
                "Checksum verification failed",
                remainder=remainder,
            )
        return RuleOutcome.passed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class StructureRule:
    """Match the BBAN against the country's compiled SWIFT pattern."""

    name = "structure"

    def __init__(self, cache: StructureMatcherCache) -> None:
        self.cache = cache

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        country = context.country
        if country is None:
            return RuleOutcome.failed(
                self.name, ErrorKind.UNKNOWN_COUNTRY, "Country has not been resolved"
            )

        matcher = self.cache.get_or_compile(country.bban_pattern)
        if not matcher.matches(value[MIN_LENGTH:]):
            return RuleOutcome.failed(
                self.name,
                ErrorKind.INVALID_STRUCTURE,
                f"BBAN does not match the {country.code} structure {country.bban_pattern}",
                pattern=country.bban_pattern,
            )
        return RuleOutcome.passed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class FunctionRule:
    """Adapt a plain callable to the rule capability.

    The callable receives ``(value, context)`` and returns either a
    ``RuleOutcome`` or a truthy/falsy verdict; a falsy verdict becomes a
    ``CUSTOM`` failure carrying ``message``.
    """

    def __init__(
        self,
        func: Callable[[str, ValidationContext], RuleOutcome | bool],
        *,
        name: str | None = None,
        message: str | None = None,
    ) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "custom_rule")
        self.message = message or f"Rule {self.name!r} rejected the value"

    def evaluate(self, value: str, context: ValidationContext) -> RuleOutcome:
        verdict = self._func(value, context)
        if isinstance(verdict, RuleOutcome):
            return verdict
        if verdict:
            return RuleOutcome.passed()
        return RuleOutcome.failed(self.name, ErrorKind.CUSTOM, self.message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def rule(
    name: str | None = None, *, message: str | None = None
) -> Callable[[Callable[[str, ValidationContext], RuleOutcome | bool]], FunctionRule]:
    """Decorator turning a function into a custom ``FunctionRule``."""

    def decorator(func: Callable[[str, ValidationContext], RuleOutcome | bool]) -> FunctionRule:
        return FunctionRule(func, name=name, message=message)

    return decorator


def _original_position(rearranged_position: int, length: int) -> int:
    """Map a position in the rearranged value back to the input value."""
    bban_length = length - MIN_LENGTH
    if rearranged_position < bban_length:
        return rearranged_position + MIN_LENGTH
    return rearranged_position - bban_length
