"""Small string helpers used by the XPM reader: searching and word splitting."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find_substring(text: str, needle: str, limit: int) -> int:
    """Return the offset of ``needle`` in ``text``, or -1.

    When ``needle`` is longer than ``limit`` nothing is searched and -1 is
    returned.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Return the offset of the first ``needle`` not inside double quotes, or -1.

    Every double quote met while scanning flips the quoted state; a match
    is only accepted at a position where the state is unquoted.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]