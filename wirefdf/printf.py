"""A small printf supporting the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def format_char(value: int | str) -> str:
    """Return the single character written for ``%c`` (the low byte of an int)."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def format_string(value: str | None) -> str:
    """Return the text written for ``%s``; ``None`` becomes ``(null)``."""
    return "(null)" if value is None else value


def format_signed(value: int) -> str:
    """Return ``value`` in decimal, with a leading minus sign when negative."""
    return str(value)


def format_unsigned(value: int) -> str:
    """Return ``value`` as an unsigned 32-bit decimal number."""
    return str(value & _UINT_MASK)


def format_hex(value: int, upper: bool = False) -> str:
    """Return ``value`` as an unsigned 32-bit hexadecimal number."""
    return format(value & _UINT_MASK, "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex; null is ``0x0``."""
    if address is None:
        return "0x0"
    return "0x" + format(address & _POINTER_MASK, "x")


def _convert(conversion: str, args: list[Any]) -> str | None:
    """Format one conversion, consuming an argument; None if unknown."""
    if conversion == "%":
        return "%"
    if conversion not in "csdixXup":
        return None
    if not args:
        raise TypeError(f"not enough arguments for %{conversion}")
    value = args.pop(0)
    if conversion == "c":
        return format_char(value)
    if conversion == "s":
        return format_string(value)
    if conversion in "di":
        return format_signed(_to_int32(value))
    if conversion == "u":
        return format_unsigned(value)
    if conversion == "x":
        return format_hex(value, False)
    if conversion == "X":
        return format_hex(value, True)
    return format_pointer(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``.

    An unknown conversion and a trailing lone ``%`` produce nothing.
    Raises TypeError when there are fewer arguments than conversions.
    """
    pending = list(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent == -1:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        conversion = fmt[percent + 1:percent + 2]
        if conversion:
            text = _convert(conversion, pending)
            if text is not None:
                parts.append(text)
        pos = percent + 2
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)