"""Small string helpers with C-library style semantics."""

from __future__ import annotations

from itertools import islice, zip_longest

from .parsing import parse_long


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def atoi(text: str) -> int:
    """Parse leading whitespace, a sign and digits, wrapping to a 32-bit int."""
    value = parse_long(text) & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    index = haystack[:max(length, 0)].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as NUL."""
    for c1, c2 in islice(zip_longest(s1, s2, fillvalue="\0"), max(n, 0)):
        if c1 != c2 or c1 == "\0":
            return ord(c1) - ord(c2)
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char``; NUL is found at the end of the text."""
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char``; NUL is found at the end of the text."""
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None