"""Tests for the pydantic IBAN field types."""

from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from openiban.integrations.pydantic import IbanStr, iban_validator
from openiban.validation.checksum import compute_check_digits
from openiban.validator import IbanValidator, IbanValidatorOptions

pytestmark = pytest.mark.unit


class Beneficiary(BaseModel):
    name: str
    iban: IbanStr
    backup_iban: IbanStr | None = None


class TestIbanStr:
    """Test the default-validator field type."""

    def test_normalizes(self, reset_default_validator):
        """Test that valid values are stored in canonical form."""
        beneficiary = Beneficiary(name="ACME", iban="de89 3704 0044 0532 0130 00")

        assert beneficiary.iban == "DE89370400440532013000"
        assert beneficiary.backup_iban is None

    def test_rejects_invalid(self, reset_default_validator):
        """Test that the validation message names the failure."""
        with pytest.raises(ValidationError) as exc_info:
            Beneficiary(name="ACME", iban="DE89370400440532013001")

        assert "Not a valid IBAN" in str(exc_info.value)

    def test_optional_field(self, reset_default_validator):
        """Test that optional fields validate when set."""
        with pytest.raises(ValidationError):
            Beneficiary(name="ACME", iban="DE89370400440532013000", backup_iban="ZZ00")

    def test_non_string_rejected(self, reset_default_validator):
        """Test that non-string input fails before validation."""
        with pytest.raises(ValidationError):
            Beneficiary(name="ACME", iban=12345)


class TestIbanValidatorFactory:
    """Test fields bound to a specific validator."""

    def test_explicit_validator(self, fast_validator, strict_validator):
        """Test that the bound validator decides."""

        class FastAccount(BaseModel):
            iban: Annotated[str, iban_validator(fast_validator)]

        class StrictAccount(BaseModel):
            iban: Annotated[str, iban_validator(strict_validator)]

        bban = "1234" + "0417164300"
        value = "NL" + compute_check_digits("NL", bban) + bban

        assert FastAccount(iban=value).iban == value
        with pytest.raises(ValidationError):
            StrictAccount(iban=value)

    def test_rule_exception_reported_separately(self, registry):
        """Test that a rule raising is a validation error of its own, not a rejection."""

        def broken(value, context):
            raise RuntimeError("lookup service down")

        validator = IbanValidator(IbanValidatorOptions(registry=registry, rules=[broken]))

        class Account(BaseModel):
            iban: Annotated[str, iban_validator(validator)]

        with pytest.raises(ValidationError) as exc_info:
            Account(iban="NL91ABNA0417164300")

        message = str(exc_info.value)
        assert "IBAN validation raised RuntimeError: lookup service down" in message
        assert "Not a valid IBAN" not in message
        assert isinstance(exc_info.value.errors()[0]["ctx"]["error"], ValueError)
