"""ISO 7064 MOD 97-10 check for IBANs.

The IBAN is rearranged (first four characters moved to the end), letters are
replaced by two-digit numbers (A=10 ... Z=35) and the resulting numeral must
leave a remainder of 1 when divided by 97. The numeral can be dozens of digits
long, so the remainder is folded in one digit at a time instead of building an
integer from the whole string.
"""

from openiban.exceptions import InvalidCharacterError
from openiban.utils.text import ascii_upper

# Character -> decimal digits it contributes to the numeral
_DIGIT_VALUES: dict[str, tuple[int, ...]] = {str(d): (d,) for d in range(10)}
_DIGIT_VALUES.update(
    {chr(ord("A") + i): divmod(10 + i, 10) for i in range(26)}
)


def rearrange(iban: str) -> str:
    """Move country code and check digits behind the BBAN."""
    return iban[4:] + iban[:4]


def mod97(value: str) -> int:
    """Remainder of the decimal numeral encoded by ``value`` modulo 97.

    Args:
        value: Uppercase alphanumeric string, already rearranged

    Returns:
        Remainder in the range 0-96

    Raises:
        InvalidCharacterError: On a character outside 0-9 and A-Z
    """
    remainder = 0
    for position, char in enumerate(value):
        digits = _DIGIT_VALUES.get(char)
        if digits is None:
            raise InvalidCharacterError(char, position)
        for digit in digits:
            remainder = (remainder * 10 + digit) % 97
    return remainder


def is_valid_checksum(iban: str) -> bool:
    """Check the MOD 97-10 remainder of a normalized IBAN.

    Raises:
        InvalidCharacterError: On a character outside 0-9 and A-Z; the
            position refers to the rearranged value
    """
    return mod97(rearrange(iban)) == 1


def compute_check_digits(country_code: str, bban: str) -> str:
    """Compute the two check digits for a country code and BBAN.

    Example:
        >>> compute_check_digits("NL", "ABNA0417164300")
        '91'

    Raises:
        InvalidCharacterError: On a character outside 0-9 and A-Z
    """
    remainder = mod97(ascii_upper(bban + country_code) + "00")
    return f"{98 - remainder:02d}"
