"""IBAN validation pipeline: structure patterns, checksum, rules and methods."""

from .checksum import compute_check_digits, is_valid_checksum, mod97
from .methods import ValidationMethod, build_builtin_rules, build_rule_chain
from .result import Diagnostic, ErrorKind, RuleOutcome, ValidationContext, ValidationResult
from .rules import (
    ChecksumRule,
    CountryCodeRule,
    FunctionRule,
    LengthRule,
    NotEmptyRule,
    StructureRule,
    ValidationRule,
    rule,
)
from .structure import (
    CharClass,
    CompiledMatcher,
    PatternToken,
    StructureMatcherCache,
    compile_pattern,
)

__all__ = [
    # Structure
    "CharClass",
    "PatternToken",
    "CompiledMatcher",
    "StructureMatcherCache",
    "compile_pattern",
    # Checksum
    "mod97",
    "is_valid_checksum",
    "compute_check_digits",
    # Rules
    "ValidationRule",
    "NotEmptyRule",
    "CountryCodeRule",
    "LengthRule",
    "ChecksumRule",
    "StructureRule",
    "FunctionRule",
    "rule",
    # Methods
    "ValidationMethod",
    "build_builtin_rules",
    "build_rule_chain",
    # Results
    "ErrorKind",
    "Diagnostic",
    "RuleOutcome",
    "ValidationContext",
    "ValidationResult",
]
