"""Reading the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read an optional sign and leading digits after leading whitespace.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(text) and text[i] in _DIGITS:
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def has_syntax_error(text: str) -> bool:
    """True unless ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return not body or not all(ch in _DIGITS for ch in body)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into a list of distinct 32-bit integers."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if has_syntax_error(arg):
            raise InputError()
        value = parse_long(arg)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        if value in seen:
            raise InputError()
        seen.add(value)
        values.append(value)
    return values