"""Parse raw strings into ``Iban`` values.

The parser is the boundary between untrusted input and the core: it never
lets an exception raised during validation (a buggy custom rule, a broken
injected validator) escape as anything but an ``IbanFormatError``, and it keeps
that case distinguishable from an ordinary rejection.
"""

from openiban.exceptions import IbanFormatError
from openiban.iban import Iban
from openiban.utils.logging import get_logger
from openiban.utils.text import normalize
from openiban.validation.result import ValidationResult
from openiban.validator import IbanValidator

logger = get_logger(__name__)


class IbanParser:
    """Turn strings into validated ``Iban`` values.

    Example:
        >>> parser = IbanParser(IbanValidator())
        >>> parser.parse("NL91 ABNA 0417 1643 00")
        Iban(value='NL91ABNA0417164300')
        >>> parser.try_parse("NL91ABNA0417164301") is None
        True
    """

    def __init__(self, validator: IbanValidator) -> None:
        if validator is None:
            raise TypeError("validator is required")
        self.validator = validator

    def parse(self, value: str | None) -> Iban:
        """Parse ``value`` into an ``Iban``.

        Raises:
            TypeError: If value is None
            IbanFormatError: If the value is invalid (``result`` is set) or
                validation raised (``original_error`` is set)
        """
        if value is None:
            raise TypeError("value is required")

        iban, result, error = self._parse(value)
        if iban is not None:
            return iban

        if error is not None:
            raise IbanFormatError(
                f"Validation of the value {value!r} raised an exception",
                value=value,
                original_error=error,
            ) from error

        message = (
            result.error.message
            if result is not None and result.error is not None
            else f"The value {value!r} is not a valid IBAN"
        )
        raise IbanFormatError(message, value=value, result=result)

    def try_parse(self, value: str | None) -> Iban | None:
        """Parse ``value``, returning None when it is not a valid IBAN."""
        if value is None:
            return None
        iban, _, _ = self._parse(value)
        return iban

    def _parse(
        self, value: str
    ) -> tuple[Iban | None, ValidationResult | None, Exception | None]:
        # Normalize here as well: an injected validator may not do it
        normalized = normalize(value)
        try:
            result = self.validator.validate(normalized)
        except Exception as e:
            logger.warning(
                "iban_validation_exception",
                value=normalized,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None, None, e

        if not result.is_valid:
            logger.debug(
                "iban_rejected",
                value=normalized,
                rule=result.error.rule_name if result.error else None,
            )
            return None, result, None

        return Iban(normalized), result, None
