"""Reader for XPM images, either as files or as lists of strings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from cubmap.colornames import color_by_name
from cubmap.image import Image, new_image
from cubmap.wordtab import str_str, str_str_cote, str_to_wordtab

_TRANSPARENT = 0xFF000000
_HEX = re.compile(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")


class XpmError(Exception):
    """Raised when XPM data cannot be read or decoded."""


def _to_int32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def _atoi(text: str) -> int:
    match = _DEC.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def _strtol_hex(text: str) -> int:
    match = _HEX.match(text)
    digits = match.group(2)
    value = int(digits, 16) if digits else 0
    return -value if match.group(1) == "-" else value


def text_rgb(name: str, end: str | None) -> int:
    """Return the colour for an XPM colour word.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given) is looked up by colour name. Unknown names give 0.
    """
    if name.startswith("#"):
        return _to_int32(_strtol_hex(name[1:]))
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def col_name(chars: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    result = 0
    for char in chars:
        result = (result << 8) + ord(char)
    return result


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces."""
    while (begin := str_str_cote(text, "/*", len(text))) != -1:
        end = str_str(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := str_str_cote(text, "//", len(text))) != -1:
        end = str_str(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_lines(text: str) -> list[str]:
    """Return the contents of every double-quoted string in ``text``."""
    text = text.split("\0", 1)[0]
    lines = []
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            break
        lines.append(text[opening + 1:closing])
        pos = closing + 1
    return lines


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def _chars(line: str, start: int, count: int) -> str:
    return line[start:start + count].ljust(count, "\0")


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[int, int]:
    direct = cpp <= 2
    table: dict[int, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour")
        words = str_to_wordtab(line[cpp:])
        try:
            key_at = words.index("c")
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if key_at + 1 >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        end = words[key_at + 2] if key_at + 2 < len(words) else None
        rgb = text_rgb(words[key_at + 1], end)
        key = col_name(_chars(line, 0, cpp))
        if direct:
            table[key] = rgb
        else:
            table.setdefault(key, rgb)
    return table


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: values, colours, then pixel rows."""
    rows = iter(lines)
    header = str_to_wordtab(_next_line(rows, "values"))
    if len(header) < 4:
        raise XpmError(f"incomplete values line: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid values line: {header!r}")
    if ncolors < 0 or cpp < 0:
        raise XpmError(f"invalid values line: {header!r}")
    table = _read_colors(rows, ncolors, cpp)
    try:
        image = new_image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for row in range(height):
        line = _next_line(rows, "pixel")
        for x in range(width):
            color = table.get(col_name(_chars(line, cpp * x, cpp)), 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_raw_pixel(x, row, color)
    return image


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    text = raw.decode("latin-1")
    return parse_xpm(extract_lines(strip_comments(text)))


def xpm_to_image(data: Iterable[str]) -> Image:
    """Decode XPM data given as a sequence of strings."""
    return parse_xpm(data)