"""IBAN country registry."""

from .country import IbanCountry
from .registry import IbanRegistry

__all__ = [
    "IbanCountry",
    "IbanRegistry",
]
