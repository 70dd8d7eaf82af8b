"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1


def _as_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >= 1 << (_INT_BITS - 1) else value


def _as_unsigned(value: int) -> int:
    return value & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return f"0x{int(value):x}"


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_as_signed(int(v))),
    "i": lambda v: str(_as_signed(int(v))),
    "u": lambda v: str(_as_unsigned(int(v))),
    "x": lambda v: f"{_as_unsigned(int(v)):x}",
    "X": lambda v: f"{_as_unsigned(int(v)):X}",
    "p": _pointer,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            spec = fmt[i + 1]
            i += 2
            if spec == "%":
                yield "%"
                continue
            convert = _CONVERSIONS.get(spec)
            if convert is None:
                continue
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            yield convert(value)
        else:
            yield fmt[i]
            i += 1


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Unknown conversions produce nothing; a lone ``%`` at the end is kept.
    """
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)