"""Small text helpers with the exact rules the scene format relies on."""

from __future__ import annotations

WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def is_space(c: str) -> bool:
    """Return True if ``c`` is a single blank character (space or 9..13)."""
    return len(c) == 1 and c in WHITESPACE


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop empty fields."""
    return [part for part in text.split(sep) if part]


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def parse_int(text: str) -> int:
    """Parse a signed decimal integer.

    Leading blanks and one sign are allowed; after the digits only spaces may
    follow. Anything else raises ValueError. Text without digits parses as 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    rest = text[pos:]
    if rest.strip(" "):
        raise ValueError(f"unexpected characters after number: {text!r}")
    return sign * int(digits) if digits else 0