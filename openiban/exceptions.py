"""Exception hierarchy for OpenIBAN.

Per-value validation failures are never raised: they are returned as
diagnostics inside a ``ValidationResult``. Exceptions are reserved for
configuration defects (a malformed registry pattern, a broken dataset file) and
for the parse layer, where callers explicitly ask for an ``Iban`` or an error.

    OpenIbanError
    ├── ConfigurationError
    │   └── PatternFormatError
    ├── InvalidCharacterError (also a ValueError)
    └── IbanFormatError (also a ValueError)

Usage:
    from openiban.exceptions import IbanFormatError

    try:
        iban = parser.parse(raw)
    except IbanFormatError as e:
        logger.warning("iban_rejected", error=str(e), context=e.context)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openiban.validation.result import ValidationResult


def _with_context(kwargs: dict[str, Any], **fields: Any) -> dict[str, Any]:
    """Merge the non-None ``fields`` into the ``context`` keyword argument."""
    context = dict(kwargs.get("context") or {})
    context.update({key: value for key, value in fields.items() if value is not None})
    kwargs["context"] = context
    return kwargs


class OpenIbanError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Structured details for logs (dict)
        original_error: Wrapped exception, if any
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append("(" + ", ".join(f"{k}={v}" for k, v in self.context.items()) + ")")
        if self.original_error is not None:
            parts.append(f"[caused by: {type(self.original_error).__name__}]")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OpenIbanError):
    """Raised when the validator configuration or country dataset is invalid.

    These are startup defects: they must surface when the registry or the
    validator is built, never be downgraded to "invalid IBAN".
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            message: What is wrong
            setting: Option or dataset field at fault
            expected: Accepted values
            **kwargs: ``context`` / ``original_error`` of OpenIbanError
        """
        super().__init__(message, **_with_context(kwargs, setting=setting, expected=expected))


class PatternFormatError(ConfigurationError):
    """Raised when a SWIFT BBAN pattern string cannot be compiled."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str | None = None,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **_with_context(kwargs, pattern=pattern, position=position))
        self.pattern = pattern
        self.position = position


# =============================================================================
# Value Errors
# =============================================================================


class InvalidCharacterError(OpenIbanError, ValueError):
    """Raised by the checksum arithmetic on a character outside 0-9 and A-Z."""

    def __init__(self, character: str, position: int, **kwargs: Any) -> None:
        super().__init__(
            f"Illegal character {character!r} at position {position}",
            **_with_context(kwargs, character=character, position=position),
        )
        self.character = character
        self.position = position


class IbanFormatError(OpenIbanError, ValueError):
    """Raised by ``IbanParser.parse`` when a value cannot become an ``Iban``.

    Exactly one of ``result`` and ``original_error`` is set: ``result`` when the
    value was rejected by the rule chain, ``original_error`` when validation
    itself blew up (typically inside a custom rule).
    """

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        result: ValidationResult | None = None,
        **kwargs: Any,
    ) -> None:
        first = result.error if result is not None else None
        super().__init__(
            message,
            **_with_context(
                kwargs,
                value=value[:40] if value is not None else None,
                rule=first.rule_name if first else None,
                kind=first.kind.value if first else None,
            ),
        )
        self.value = value
        self.result = result


# =============================================================================
# Utility Functions
# =============================================================================


def wrap_exception(
    error: Exception,
    message: str,
    *,
    exception_class: type[OpenIbanError] = OpenIbanError,
    **context: Any,
) -> OpenIbanError:
    """Re-raise a third-party exception inside the OpenIBAN hierarchy.

    Example:
        try:
            rows = yaml.safe_load(handle)
        except yaml.YAMLError as e:
            raise wrap_exception(
                e,
                "Country dataset is not valid YAML",
                exception_class=ConfigurationError,
                path=str(path),
            ) from e
    """
    return exception_class(message, context=context, original_error=error)


__all__ = [
    "OpenIbanError",
    "ConfigurationError",
    "PatternFormatError",
    "InvalidCharacterError",
    "IbanFormatError",
    "wrap_exception",
]
