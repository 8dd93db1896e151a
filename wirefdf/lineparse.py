"""Helpers that read single lines and tokens of a height-map file."""

from __future__ import annotations

import re
from pathlib import Path

MAPS_DIR = Path("maps")
DEFAULT_COLOR = 0xFFFFFF

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_SPACE_RUN = re.compile(" {2,}")


def parse_hex(text: str) -> int:
    """Parse bare hexadecimal digits (no prefix); the empty string is 0.

    Raises ValueError on any character that is not a hex digit.
    """
    bad = [char for char in text if char not in _HEX_DIGITS]
    if bad:
        raise ValueError(f"invalid hexadecimal digit {bad[0]!r} in {text!r}")
    return int(text, 16) if text else 0


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does; 0 if none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def parse_color(token: str) -> int:
    """Return the colour of a ``z[,0xRRGGBB]`` token, white when absent.

    The two characters after the comma (the ``0x`` prefix) are skipped.
    """
    _, comma, rest = token.partition(",")
    if not comma:
        return DEFAULT_COLOR
    return parse_hex(rest[2:])


def count_columns(line: str | None) -> int:
    """Count the space-separated columns of a cleaned line.

    A single leading space and a trailing space are not counted as
    separators.
    """
    if not line:
        return 0
    body = line[1:] if line.startswith(" ") else line
    return body.count(" ") + (0 if line.endswith(" ") else 1)


def clean_line(line: str | None) -> str | None:
    """Cut a line at its newline and squeeze runs of spaces to one.

    Returns None for a missing line, an empty line or one that starts
    with a newline.
    """
    if not line or line.startswith("\n"):
        return None
    body = line.split("\n", 1)[0]
    return _SPACE_RUN.sub(" ", body)


def map_path(name: str) -> Path:
    """Return the location of a map file inside the ``maps`` directory."""
    return MAPS_DIR / name