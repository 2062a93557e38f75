"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

import pytest

import openiban.utils.config as config_module
import openiban.validator as validator_module
from openiban.registry import IbanRegistry
from openiban.validation.methods import ValidationMethod
from openiban.validator import IbanValidator, IbanValidatorOptions


@pytest.fixture(scope="session")
def registry() -> IbanRegistry:
    """Registry built from the bundled SWIFT dataset."""
    return IbanRegistry.default()


@pytest.fixture(scope="session")
def strict_validator(registry) -> IbanValidator:
    """Shared strict validator (validators are safe to reuse)."""
    return IbanValidator(IbanValidatorOptions(method=ValidationMethod.STRICT, registry=registry))


@pytest.fixture(scope="session")
def fast_validator(registry) -> IbanValidator:
    """Shared fast validator."""
    return IbanValidator(IbanValidatorOptions(method=ValidationMethod.FAST, registry=registry))


@pytest.fixture
def reset_default_validator(monkeypatch):
    """Give the test a pristine process-wide validator and settings."""
    monkeypatch.setattr(validator_module, "_default_validator", None)
    monkeypatch.setattr(validator_module, "_default_options", None)
    monkeypatch.setattr(config_module, "_settings", None)
    for name in ("OPENIBAN_VALIDATION_METHOD", "OPENIBAN_REGISTRY_PATH"):
        monkeypatch.delenv(name, raising=False)
