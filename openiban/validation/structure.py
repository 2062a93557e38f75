"""SWIFT BBAN structure patterns.

A pattern such as ``"4!a10!n"`` is a sequence of fixed-width groups, each a
count followed by a character class:

    n   digits 0-9
    a   uppercase letters A-Z
    c   uppercase letters and digits

The ``!`` marker (exact length in SWIFT notation) is optional; every group is
exact length. ``compile_pattern`` turns the string into a ``CompiledMatcher``
that checks a BBAN in a single left-to-right pass.

Example:
    >>> matcher = compile_pattern("4!n4!a2!c")
    >>> matcher.matches("1234ABCDZ9")
    True
    >>> matcher.matches("1234ABCD")
    False
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from openiban.exceptions import PatternFormatError
from openiban.metrics import record_pattern_compiled
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

_DIGITS = frozenset("0123456789")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class CharClass(Enum):
    """Character classes of the SWIFT notation."""

    NUMERIC = "n"
    UPPER_ALPHA = "a"
    ALPHANUMERIC = "c"

    @property
    def allowed(self) -> frozenset[str]:
        """Characters accepted by this class."""
        return _CLASS_CHARS[self]


_CLASS_CHARS = {
    CharClass.NUMERIC: _DIGITS,
    CharClass.UPPER_ALPHA: _UPPER,
    CharClass.ALPHANUMERIC: _DIGITS | _UPPER,
}


@dataclass(frozen=True)
class PatternToken:
    """A fixed-width run of characters from one class."""

    count: int
    char_class: CharClass

    def __str__(self) -> str:
        return f"{self.count}!{self.char_class.value}"


@dataclass(frozen=True)
class CompiledMatcher:
    """Executable form of a BBAN pattern.

    Attributes:
        pattern: Source pattern string
        tokens: Groups in pattern order
        length: Expected text length (sum of token counts)
    """

    pattern: str
    tokens: tuple[PatternToken, ...]
    length: int

    def matches(self, text: str) -> bool:
        """Check ``text`` against the pattern, failing on the first bad character."""
        if len(text) != self.length:
            return False

        offset = 0
        for token in self.tokens:
            allowed = token.char_class.allowed
            end = offset + token.count
            for char in text[offset:end]:
                if char not in allowed:
                    return False
            offset = end
        return True


def compile_pattern(pattern: str) -> CompiledMatcher:
    """Parse a SWIFT pattern into a matcher.

    Args:
        pattern: Pattern string such as ``"8!n10!n"``

    Returns:
        CompiledMatcher for the pattern

    Raises:
        PatternFormatError: On an empty pattern, a missing or zero count, an
            unknown class letter or trailing characters
    """
    if not pattern:
        raise PatternFormatError("Pattern is empty", pattern=pattern, position=0)

    tokens: list[PatternToken] = []
    position = 0
    size = len(pattern)

    while position < size:
        start = position
        while position < size and pattern[position] in _DIGITS:
            position += 1
        if position == start:
            raise PatternFormatError(
                f"Expected a group length, found {pattern[position]!r}",
                pattern=pattern,
                position=position,
            )

        count = int(pattern[start:position])
        if count == 0:
            raise PatternFormatError(
                "Group length must be positive", pattern=pattern, position=start
            )

        if position < size and pattern[position] == "!":
            position += 1
        if position >= size:
            raise PatternFormatError(
                "Pattern ends without a character class", pattern=pattern, position=position
            )

        letter = pattern[position]
        try:
            char_class = CharClass(letter)
        except ValueError:
            raise PatternFormatError(
                f"Unknown character class {letter!r}", pattern=pattern, position=position
            ) from None
        position += 1

        tokens.append(PatternToken(count=count, char_class=char_class))

    return CompiledMatcher(
        pattern=pattern,
        tokens=tuple(tokens),
        length=sum(token.count for token in tokens),
    )


class StructureMatcherCache:
    """Compiled matchers keyed by pattern string.

    Hits are plain dict reads with no locking. A miss takes the lock, checks
    again and compiles, so each pattern is compiled once and every caller sees
    the same matcher instance. Entries are never evicted: the key space is the
    set of registry patterns.
    """

    def __init__(self, compiler: Callable[[str], CompiledMatcher] = compile_pattern) -> None:
        self._compiler = compiler
        self._matchers: dict[str, CompiledMatcher] = {}
        self._lock = threading.Lock()

    def get_or_compile(self, pattern: str) -> CompiledMatcher:
        """Return the matcher for ``pattern``, compiling it on first use.

        Raises:
            PatternFormatError: If the pattern is malformed (nothing is cached)
        """
        matcher = self._matchers.get(pattern)
        if matcher is not None:
            return matcher

        with self._lock:
            matcher = self._matchers.get(pattern)
            if matcher is None:
                matcher = self._compiler(pattern)
                self._matchers[pattern] = matcher
                record_pattern_compiled()
                logger.debug("structure_pattern_compiled", pattern=pattern, length=matcher.length)
        return matcher

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._matchers

    def __len__(self) -> int:
        return len(self._matchers)
