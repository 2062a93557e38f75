"""Immutable IBAN value type.

An ``Iban`` always holds the normalized form (no whitespace, uppercase) of a
value that passed validation. Obtain instances through ``IbanParser`` (or the
``Iban.parse`` / ``Iban.try_parse`` shortcuts using the default validator).

Example:
    >>> iban = Iban.parse("nl91 abna 0417 1643 00")
    >>> str(iban)
    'NL91ABNA0417164300'
    >>> f"{iban:S}"
    'NL91 ABNA 0417 1643 00'
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from openiban.utils.text import partition

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

    from openiban.validator import IbanValidator

# Characters per group in the partitioned display form
GROUP_SIZE = 4


@dataclass(frozen=True)
class Iban:
    """A validated International Bank Account Number."""

    FLAT: ClassVar[str] = "F"
    PARTITIONED: ClassVar[str] = "S"

    value: str

    @property
    def country_code(self) -> str:
        return self.value[:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        return self.value[4:]

    def format(self, fmt: str = FLAT) -> str:
        """Render the IBAN.

        Args:
            fmt: "F" for the flat form, "S" for groups of four separated by spaces

        Raises:
            ValueError: On any other format
        """
        if fmt == self.FLAT:
            return self.value
        if fmt == self.PARTITIONED:
            return " ".join(partition(self.value, GROUP_SIZE))
        raise ValueError(
            f"Unsupported IBAN format {fmt!r}; use {self.FLAT!r} (flat) "
            f"or {self.PARTITIONED!r} (partitioned)"
        )

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or self.FLAT)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None, validator: "IbanValidator | None" = None) -> "Iban":
        """Parse with ``validator`` (default validator when omitted).

        Raises:
            TypeError: If value is None
            IbanFormatError: If the value is not a valid IBAN
        """
        from openiban.parser import IbanParser
        from openiban.validator import get_default_validator

        return IbanParser(validator or get_default_validator()).parse(value)

    @classmethod
    def try_parse(cls, value: str | None, validator: "IbanValidator | None" = None) -> "Iban | None":
        """Like ``parse`` but returns None instead of raising."""
        from openiban.parser import IbanParser
        from openiban.validator import get_default_validator

        return IbanParser(validator or get_default_validator()).try_parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: "GetCoreSchemaHandler"
    ) -> "CoreSchema":
        """Let ``Iban`` be used as a pydantic field type (validated with the default validator)."""
        from pydantic_core import core_schema

        def validate(value: Any) -> "Iban":
            if isinstance(value, Iban):
                return value
            if not isinstance(value, str):
                raise ValueError("IBAN must be a string")
            return cls.parse(value)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
