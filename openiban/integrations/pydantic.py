"""Pydantic field types backed by the IBAN validator.

Usage:
    from pydantic import BaseModel
    from openiban.integrations.pydantic import IbanStr, iban_validator

    class Beneficiary(BaseModel):
        name: str
        iban: IbanStr                      # default validator
        backup_iban: IbanStr | None = None  # None stays None

    class SepaTransfer(BaseModel):
        iban: Annotated[str, iban_validator(sepa_validator)]

Valid values are stored in normalized form ("NL91ABNA0417164300").
"""

from typing import Annotated

from pydantic import AfterValidator

from openiban.utils.logging import get_logger
from openiban.validator import IbanValidator, get_default_validator

logger = get_logger(__name__)


def iban_validator(validator: IbanValidator | None = None) -> AfterValidator:
    """Build an ``AfterValidator`` running ``validator`` (default validator when omitted).

    The default validator is resolved at validation time, not at import time,
    so it can still be configured after models are declared. A rule that
    raises is reported as its own error, not as an invalid IBAN.
    """

    def check(value: str) -> str:
        active = validator or get_default_validator()
        try:
            result = active.validate(value)
        except Exception as e:
            logger.warning(
                "iban_validation_exception",
                value=value,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ValueError(f"IBAN validation raised {type(e).__name__}: {e}") from e
        if not result.is_valid:
            reason = result.error.message if result.error else "rejected"
            raise ValueError(f"Not a valid IBAN: {reason}")
        return result.attempted_value

    return AfterValidator(check)


IbanStr = Annotated[str, iban_validator()]


__all__ = ["IbanStr", "iban_validator"]
