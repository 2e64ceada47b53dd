"""Formatted output with the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("cspdiuxX")


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _c_int(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def format_hex(value: int, upper: bool = False) -> str:
    """Return ``value`` as an unsigned 32-bit number in hexadecimal."""
    text = format(_require_int(value, "x") & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_pointer(address: int | None) -> str:
    """Return an address as 0x followed by hex digits; null gives (nil)."""
    if address is None or address == 0:
        return "(nil)"
    return "0x" + format(_require_int(address, "p") & _POINTER_MASK, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec in "di":
        return str(_c_int(_require_int(value, spec)))
    if spec == "u":
        return str(_require_int(value, spec) & _UINT_MASK)
    if spec == "x":
        return format_hex(value, False)
    if spec == "X":
        return format_hex(value, True)
    return format_pointer(value)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write.

    A '%' followed by a character that is not a known conversion writes
    nothing, and so does a '%' at the very end. Extra arguments are ignored.
    """
    out: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            out.append(_convert(spec, _next_arg(values, spec)))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character."""
    _stream(stream).write(_format_char(c))


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(str(_require_int(n, "d")))