"""Small string helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def str_str(text: str, find: str, length: int) -> int:
    """Return the position of ``find`` in ``text``, or -1.

    -1 is also returned when ``find`` is longer than ``length``.
    """
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return -1
    return _cstr(text).find(find)


def str_str_cote(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but ignore matches inside double quotes."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return -1
    text = _cstr(text)
    inside = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return -1


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(_cstr(text)) if word]