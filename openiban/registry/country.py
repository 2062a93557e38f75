"""Country metadata consumed by the validation rules."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IbanCountry(BaseModel):
    """IBAN definition for a single country.

    Attributes:
        code: ISO 3166-1 alpha-2 code (e.g., "NL"); lowercase input is uppercased
        bban_pattern: SWIFT BBAN structure, e.g. "4!a10!n"
        length: Total IBAN length including country code and check digits
        is_sepa: Whether the country is part of the Single Euro Payments Area
        name: English country name
        example: Example IBAN from the SWIFT registry
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 3166-1 alpha-2 country code")
    bban_pattern: str = Field(..., min_length=1, description="SWIFT BBAN structure pattern")
    length: int = Field(..., gt=4, description="Total IBAN length")
    is_sepa: bool = Field(default=False, description="SEPA member")
    name: str = Field(default="", description="English country name")
    example: str | None = Field(default=None, description="Example IBAN")

    @field_validator("code", mode="before")
    @classmethod
    def normalize_code(cls, v: object) -> object:
        """Uppercase the country code and require exactly two ASCII letters."""
        if not isinstance(v, str):
            return v
        code = v.strip()
        if len(code) != 2 or not (code.isascii() and code.isalpha()):
            raise ValueError(f"country code must be two letters, got {v!r}")
        return code.upper()

    @property
    def bban_length(self) -> int:
        """Length of the BBAN part (IBAN length minus country code and check digits)."""
        return self.length - 4

    def __str__(self) -> str:
        return f"{self.code} ({self.name})" if self.name else self.code
