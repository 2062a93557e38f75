"""Tests for the individual validation rules."""

import pytest

from openiban.validation.checksum import compute_check_digits, is_valid_checksum
from openiban.validation.methods import ValidationMethod
from openiban.validation.result import ErrorKind, RuleOutcome, ValidationContext
from openiban.validation.rules import (
    ChecksumRule,
    CountryCodeRule,
    FunctionRule,
    LengthRule,
    NotEmptyRule,
    StructureRule,
    ValidationRule,
    rule,
)
from openiban.validation.structure import StructureMatcherCache

pytestmark = pytest.mark.unit

VALID = "NL91ABNA0417164300"


def dutch_bban_with_check_digits(target: str) -> str:
    """First ABNA account whose computed check digits are ``target``."""
    for account in range(97):
        bban = f"ABNA{account:010d}"
        if compute_check_digits("NL", bban) == target:
            return bban
    pytest.fail(f"no Dutch BBAN with check digits {target}")


def make_context(value: str, country=None) -> ValidationContext:
    return ValidationContext(value=value, method=ValidationMethod.STRICT, country=country)


@pytest.fixture
def netherlands(registry):
    return registry.lookup("NL")


class TestNotEmptyRule:
    """Test the minimum length rule."""

    @pytest.mark.parametrize("value", ["", "N", "NL9"])
    def test_too_short(self, value):
        """Test values that cannot hold a country code and check digits."""
        outcome = NotEmptyRule().evaluate(value, make_context(value))

        assert outcome.is_success is False
        assert outcome.error.kind is ErrorKind.EMPTY
        assert outcome.error.rule_name == "not_empty"

    def test_four_characters_pass(self):
        """Test the boundary value."""
        assert NotEmptyRule().evaluate("NL91", make_context("NL91")).is_success


class TestCountryCodeRule:
    """Test country resolution."""

    def test_known_country_is_stored(self, registry):
        """Test that the resolved country is put into the context."""
        context = make_context(VALID)

        outcome = CountryCodeRule(registry).evaluate(VALID, context)

        assert outcome.is_success
        assert context.country.code == "NL"

    def test_unknown_country(self, registry):
        """Test an unregistered prefix."""
        context = make_context("ZZ91ABNA0417164300")

        outcome = CountryCodeRule(registry).evaluate(context.value, context)

        assert outcome.error.kind is ErrorKind.UNKNOWN_COUNTRY
        assert outcome.error.context == {"country_code": "ZZ"}
        assert context.country is None


class TestLengthRule:
    """Test the country length check."""

    def test_matching_length(self, netherlands):
        """Test a value of the expected length."""
        assert LengthRule().evaluate(VALID, make_context(VALID, netherlands)).is_success

    @pytest.mark.parametrize("value", [VALID[:-1], VALID + "0"])
    def test_wrong_length(self, netherlands, value):
        """Test values one character short or long."""
        outcome = LengthRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_LENGTH
        assert outcome.error.context == {"expected": 18, "actual": len(value)}

    def test_requires_resolved_country(self):
        """Test use outside a chain that resolves the country."""
        outcome = LengthRule().evaluate(VALID, make_context(VALID))

        assert outcome.is_success is False


class TestChecksumRule:
    """Test check digit verification."""

    def test_valid(self, netherlands):
        """Test a correct checksum."""
        assert ChecksumRule().evaluate(VALID, make_context(VALID, netherlands)).is_success

    def test_remainder_mismatch(self, netherlands):
        """Test a wrong check digit."""
        value = "NL92ABNA0417164300"

        outcome = ChecksumRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_CHECKSUM
        assert outcome.error.message == "Checksum verification failed"

    def test_non_numeric_check_digits(self, netherlands):
        """Test letters in the check digit position."""
        value = "NLX1ABNA0417164300"

        outcome = ChecksumRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_CHECKSUM
        assert outcome.error.context["check_digits"] == "X1"

    @pytest.mark.parametrize("digits", ["00", "01", "99"])
    def test_reserved_check_digits(self, netherlands, digits):
        """Test check digits no generator produces."""
        value = "NL" + digits + "ABNA0417164300"

        outcome = ChecksumRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_CHECKSUM
        assert "out of range" in outcome.error.message

    @pytest.mark.parametrize("generated,alias", [("98", "01"), ("02", "99")])
    def test_reserved_check_digits_with_valid_remainder(self, netherlands, generated, alias):
        """Test that 01 and 99 are rejected even though the remainder is 1."""
        value = "NL" + alias + dutch_bban_with_check_digits(generated)
        assert is_valid_checksum(value)

        outcome = ChecksumRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_CHECKSUM
        assert "out of range" in outcome.error.message

    @pytest.mark.parametrize(
        "value,position",
        [
            ("NL91ABNA04171643-0", 16),
            ("NL91ABNA0417_64300", 12),
            ("NL91ÄBNA0417164300", 4),
        ],
    )
    def test_illegal_character(self, netherlands, value, position):
        """Test that the position refers to the input value."""
        outcome = ChecksumRule().evaluate(value, make_context(value, netherlands))

        assert outcome.error.kind is ErrorKind.INVALID_CHECKSUM
        assert outcome.error.context["position"] == position
        assert value[position] == outcome.error.context["character"]


class TestStructureRule:
    """Test BBAN structure matching."""

    def test_valid(self, netherlands):
        """Test a BBAN following the country pattern."""
        rule_ = StructureRule(StructureMatcherCache())

        assert rule_.evaluate(VALID, make_context(VALID, netherlands)).is_success

    def test_digits_in_bank_code(self, netherlands):
        """Test a BBAN with digits where the bank code letters belong."""
        bban = "1234" + "0417164300"
        value = "NL" + compute_check_digits("NL", bban) + bban

        outcome = StructureRule(StructureMatcherCache()).evaluate(
            value, make_context(value, netherlands)
        )

        assert outcome.error.kind is ErrorKind.INVALID_STRUCTURE
        assert outcome.error.context == {"pattern": "4!a10!n"}

    def test_uses_cache(self, netherlands):
        """Test that the matcher is compiled into the shared cache."""
        cache = StructureMatcherCache()

        StructureRule(cache).evaluate(VALID, make_context(VALID, netherlands))

        assert "4!a10!n" in cache


class TestFunctionRule:
    """Test custom rules built from callables."""

    def test_false_verdict_becomes_custom_failure(self):
        """Test that a falsy return value fails with the configured message."""
        custom = FunctionRule(lambda value, context: False, name="never", message="Nope")

        outcome = custom.evaluate(VALID, make_context(VALID))

        assert outcome.error.kind is ErrorKind.CUSTOM
        assert outcome.error.rule_name == "never"
        assert outcome.error.message == "Nope"

    def test_true_verdict_passes(self):
        """Test that a truthy return value passes."""
        custom = FunctionRule(lambda value, context: True)

        assert custom.evaluate(VALID, make_context(VALID)).is_success

    def test_outcome_is_passed_through(self):
        """Test that a RuleOutcome return value is used as is."""
        failure = RuleOutcome.failed("mine", ErrorKind.CUSTOM, "Custom reason", hint=1)
        custom = FunctionRule(lambda value, context: failure)

        assert custom.evaluate(VALID, make_context(VALID)) is failure

    def test_name_defaults_to_function_name(self):
        """Test the default rule name and message."""

        def only_dutch(value, context):
            return value.startswith("NL")

        custom = FunctionRule(only_dutch)

        assert custom.name == "only_dutch"
        assert "only_dutch" in custom.message

    def test_decorator(self):
        """Test the rule decorator."""

        @rule("no_test_accounts", message="Test accounts are not accepted")
        def no_test_accounts(value, context):
            return not value.endswith("0000000000")

        assert isinstance(no_test_accounts, FunctionRule)
        assert no_test_accounts.name == "no_test_accounts"
        assert no_test_accounts.evaluate(VALID, make_context(VALID)).is_success


class TestRuleProtocol:
    """Test that rules satisfy the shared capability."""

    @pytest.mark.parametrize(
        "candidate",
        [
            NotEmptyRule(),
            LengthRule(),
            ChecksumRule(),
            StructureRule(StructureMatcherCache()),
            FunctionRule(lambda value, context: True),
        ],
        ids=lambda r: type(r).__name__,
    )
    def test_is_validation_rule(self, candidate):
        """Test runtime protocol checks."""
        assert isinstance(candidate, ValidationRule)

    def test_plain_object_is_not_a_rule(self):
        """Test that objects without evaluate() are not rules."""
        assert not isinstance(object(), ValidationRule)

    def test_passed_is_shared(self):
        """Test that the success outcome is a singleton."""
        assert RuleOutcome.passed() is RuleOutcome.passed()
