"""OpenIBAN - validation and normalization of International Bank Account Numbers.

Usage:
    >>> from openiban import IbanParser, IbanValidator
    >>> validator = IbanValidator()
    >>> validator.validate("NL91 ABNA 0417 1643 00").is_valid
    True
    >>> IbanParser(validator).parse("nl91abna0417164300").format("S")
    'NL91 ABNA 0417 1643 00'
"""

__version__ = "1.0.0"

from .exceptions import ConfigurationError, IbanFormatError, OpenIbanError, PatternFormatError
from .iban import Iban
from .parser import IbanParser
from .registry import IbanCountry, IbanRegistry
from .validation import (
    Diagnostic,
    ErrorKind,
    FunctionRule,
    RuleOutcome,
    ValidationContext,
    ValidationMethod,
    ValidationResult,
    ValidationRule,
    rule,
)
from .validator import (
    IbanValidator,
    IbanValidatorOptions,
    configure_default_validator,
    get_default_validator,
)

__all__ = [
    "__version__",
    # Core
    "IbanValidator",
    "IbanValidatorOptions",
    "IbanParser",
    "Iban",
    "configure_default_validator",
    "get_default_validator",
    # Registry
    "IbanCountry",
    "IbanRegistry",
    # Validation
    "ValidationMethod",
    "ValidationResult",
    "ValidationContext",
    "ValidationRule",
    "RuleOutcome",
    "Diagnostic",
    "ErrorKind",
    "FunctionRule",
    "rule",
    # Errors
    "OpenIbanError",
    "ConfigurationError",
    "PatternFormatError",
    "IbanFormatError",
]
