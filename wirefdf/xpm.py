"""Reader for XPM (X PixMap) images, from in-memory lines or from a file."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from wirefdf.colornames import lookup_color
from wirefdf.wordtab import find_outside_quotes, find_substring, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63

_ATOI = re.compile(r"\s*([+-]?\d+)")
_STRTOL16 = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: row-major 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _strtol16(text: str) -> int:
    match = _STRTOL16.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def color_key(text: str, size: int) -> int:
    """Pack the first ``size`` characters of ``text`` into one integer key."""
    if len(text) < size:
        raise XpmError(f"expected {size} characters, got {text!r}")
    result = 0
    for char in text[:size]:
        result = (result << 8) + ord(char)
    return result


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve a colour spec: ``#hex`` or a (possibly two-word) colour name.

    Unknown names resolve to 0; ``None`` resolves to -1.
    """
    if name.startswith("#"):
        return _strtol16(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    chars = list(text)
    size = len(chars)

    def current() -> str:
        return "".join(chars)

    while (begin := find_outside_quotes(current(), "/*", size)) != -1:
        rest = current()[begin + 2:]
        end = find_substring(rest, "*/", size - begin - 2) if rest else -1
        span = end + 4
        chars[begin:begin + span] = " " * len(chars[begin:begin + span])
    while (begin := find_outside_quotes(current(), "//", size)) != -1:
        rest = current()[begin + 2:]
        end = find_substring(rest, "\n", size - begin - 2) if rest else -1
        span = end + 3
        chars[begin:begin + span] = " " * len(chars[begin:begin + span])
    return current()


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM values: a header, colour definitions, then pixel rows."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError(f"header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values {header[:4]!r}")

    direct = cpp <= 2
    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = color_key(line, cpp)
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        for x in range(width):
            color = colors.get(color_key(line[cpp * x:], cpp), 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, tuple(pixels))


def xpm_to_image(xpm_data: Iterable[str]) -> XpmImage:
    """Decode an XPM image given as its list of string values."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))