"""Value objects produced by the validation rule chain."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openiban.registry.country import IbanCountry

    from .methods import ValidationMethod


class ErrorKind(Enum):
    """Categories of validation failures."""

    EMPTY = "empty"
    UNKNOWN_COUNTRY = "unknown_country"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_STRUCTURE = "invalid_structure"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Diagnostic:
    """Why a rule rejected a value.

    Attributes:
        rule_name: Name of the failing rule
        kind: Failure category
        message: Human-readable explanation
        context: Structured details (expected length, offending character, ...)
    """

    rule_name: str
    kind: ErrorKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class RuleOutcome:
    """Result of a single rule: passed, or failed with a diagnostic."""

    error: Diagnostic | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def passed(cls) -> "RuleOutcome":
        return _PASSED

    @classmethod
    def failed(
        cls,
        rule_name: str,
        kind: ErrorKind,
        message: str,
        **context: Any,
    ) -> "RuleOutcome":
        return cls(error=Diagnostic(rule_name=rule_name, kind=kind, message=message, context=context))


_PASSED = RuleOutcome()


@dataclass
class ValidationContext:
    """Per-call state handed to every rule.

    Built-in rules fill ``country`` once it is known; ``errors`` collects the
    diagnostics produced so far so custom rules can inspect them.
    """

    value: str
    method: "ValidationMethod"
    country: "IbanCountry | None" = None
    errors: list[Diagnostic] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one input value.

    Attributes:
        attempted_value: Normalized value that was validated
        country: Country matched by the prefix, if any
        errors: Every diagnostic, in the order rules produced them
    """

    attempted_value: str
    country: "IbanCountry | None" = None
    errors: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error(self) -> Diagnostic | None:
        """First diagnostic, or None for a valid value."""
        return self.errors[0] if self.errors else None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "value": self.attempted_value,
            "valid": self.is_valid,
            "country": self.country.code if self.country else None,
            "errors": [
                {
                    "rule": error.rule_name,
                    "kind": error.kind.value,
                    "message": error.message,
                }
                for error in self.errors
            ],
        }
