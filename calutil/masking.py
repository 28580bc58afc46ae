"""Placeholder masks for phone numbers, social security numbers and the like.

A mask pattern mixes literal characters with two placeholders:

- ``#`` reveals the next unconsumed character of the value
- ``*`` consumes the next character but renders a literal ``*``

    >>> mask_format(1234567890, "(###) ###-####")
    '(123) 456-7890'
    >>> mask_format("1234567890123456", "****-****-####-####")
    '****-****-9012-3456'

Substitution is positional: the result is always as long as the pattern,
and placeholders left over once the value runs out stay as they are.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from typing_extensions import override

REVEAL = "#"
MASK = "*"

_NON_DIGITS_RE = re.compile(r"[^0-9]+")


def mask_format(value: Any, pattern: str) -> str:
    """Substitute the characters of ``value`` into the placeholders of ``pattern``."""
    text = "" if value is None else str(value)
    result = list(pattern)
    pos = 0

    for i, char in enumerate(pattern):
        if char in (REVEAL, MASK) and pos < len(text):
            result[i] = MASK if char == MASK else text[pos]
            pos += 1

    return "".join(result)


class PhonePattern(ABC):
    """Chooses the mask pattern for a number given its digits."""

    @abstractmethod
    def select(self, digits: str) -> str:
        pass


@dataclass(frozen=True)
class SinglePattern(PhonePattern):
    pattern: str

    @override
    def select(self, digits: str) -> str:
        return self.pattern


@dataclass(frozen=True)
class PatternByDigitCount(PhonePattern):
    """
    Pick a pattern by how many digits the number has.

    Keys 11 (11 or more digits), 10 (exactly 10) and 7 (anything shorter)
    are consulted; only the keys actually needed must be present.

    Example:
        >>> patterns = PatternByDigitCount({
        ...     7: "###-####",
        ...     10: "(###) ###-####",
        ...     11: "# (###) ###-####",
        ... })
        >>> format_phone("1-800-555-0199", patterns)
        '1 (800) 555-0199'
    """

    patterns: Mapping[int, str]

    @override
    def select(self, digits: str) -> str:
        count = len(digits)
        if count >= 11:
            key = 11
        elif count >= 10:
            key = 10
        else:
            key = 7

        if key not in self.patterns:
            available = ", ".join(str(k) for k in sorted(self.patterns))
            raise ValueError(
                f"No phone pattern for {count}-digit numbers (key {key}).\n"
                f"Available keys: {available or 'none'}\n"
                f"Hint: Provide patterns under keys 7, 10 and 11"
            )
        return self.patterns[key]


def format_phone(value: Any, pattern: str | PhonePattern) -> str:
    """
    Mask a phone number after stripping everything but its digits.

    Args:
        value: Phone number in any notation ("555-0199", "+1 (800) 555-0199")
        pattern: Mask pattern, or a PhonePattern choosing one by digit count

    Returns:
        Masked number; placeholders stay in place if there are too few digits
    """
    digits = _NON_DIGITS_RE.sub("", "" if value is None else str(value))
    if isinstance(pattern, str):
        pattern = SinglePattern(pattern)
    return mask_format(digits, pattern.select(digits))


def format_ssn(value: Any, pattern: str) -> str:
    """Mask a social security number, e.g. ``"***-**-####"``."""
    return mask_format(value, pattern)
