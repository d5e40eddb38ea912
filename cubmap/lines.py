"""Line and file-name helpers for reading map files."""

from __future__ import annotations

import os
from os import PathLike

from cubmap.scene import TextureType

_PREFIXES = (
    ("NO", TextureType.NO),
    ("SO", TextureType.SO),
    ("WE", TextureType.WE),
    ("EA", TextureType.EA),
    ("F", TextureType.F),
    ("C", TextureType.C),
)


def is_empty_line(text: str | None) -> bool:
    """Return True if ``text`` is None or holds only spaces, tabs and newlines."""
    if text is None:
        return True
    return all(char in " \t\n" for char in text)


def skip_tab_spaces(line: str) -> str:
    """Drop leading spaces and tabs."""
    return line.lstrip(" \t")


def get_index(text: str) -> TextureType | None:
    """Return the element a line starts with, or None if it names none."""
    for prefix, kind in _PREFIXES:
        if text.startswith(prefix):
            return kind
    return None


def valid_file(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def check_file_format(path: str) -> bool:
    """Return True if ``path`` ends with the ``.cub`` extension."""
    return len(path) >= 4 and path.endswith(".cub")