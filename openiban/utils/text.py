"""String helpers shared by the validator, the parser and the display layer."""

import string
from collections.abc import Iterator

# a-z to A-Z and nothing else
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def strip_whitespace(value: str) -> str:
    """Remove every whitespace character, including inner and non-ASCII ones."""
    return "".join(value.split())


def ascii_upper(value: str) -> str:
    """Uppercase a-z only; unlike ``str.upper`` no other character is case-mapped."""
    return value.translate(_ASCII_UPPER)


def normalize(value: str) -> str:
    """Canonical IBAN form: no whitespace, ASCII letters uppercased.

    Other characters are kept as they are, so the checksum reports them as
    illegal instead of validating a look-alike.

    >>> normalize(" nl91 abna 0417 1643 00 ")
    'NL91ABNA0417164300'
    """
    return ascii_upper(strip_whitespace(value))


class partition:
    """Fixed-size chunks of a string.

    Iterating twice yields the same chunks; the last chunk is shorter when the
    length is not a multiple of ``size``.

    >>> list(partition("NL91ABNA0417164300", 4))
    ['NL91', 'ABNA', '0417', '1643', '00']
    """

    def __init__(self, text: str, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Partition size must be positive, got {size}")
        self.text = text
        self.size = size

    def __iter__(self) -> Iterator[str]:
        for start in range(0, len(self.text), self.size):
            yield self.text[start : start + self.size]

    def __len__(self) -> int:
        return -(-len(self.text) // self.size)
