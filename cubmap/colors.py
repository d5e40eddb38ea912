"""Parsing of floor and ceiling colour lines such as ``F 220,100,0``."""

from __future__ import annotations

import re

from cubmap.lines import skip_tab_spaces
from cubmap.scene import ParseError, Rgb, Scene

_DIGITS = re.compile(r"[0-9]+")


def set_color_value(line: str, is_comma: bool) -> tuple[int, str]:
    """Read one colour component from the start of ``line``.

    Returns the value and the rest of the line. When ``is_comma`` is true a
    comma must follow the value; otherwise a comma is an error.
    """
    match = _DIGITS.match(line)
    if match is None:
        raise ParseError("expected digit")
    value = int(match.group())
    if value > 255:
        raise ParseError("value should be in [0,255]")
    rest = skip_tab_spaces(line[match.end():])
    if is_comma:
        if not rest.startswith(","):
            raise ParseError("expected comma after value")
        return value, skip_tab_spaces(rest[1:])
    if rest.startswith(","):
        raise ParseError("unexpected comma after last value")
    return value, rest


def convert_rgb(rgb: Rgb) -> int:
    """Pack the components of ``rgb`` into 0xRRGGBB."""
    return rgb.red * 256 ** 2 + rgb.green * 256 + rgb.blue


def validate_colors(line: str, scene: Scene) -> Rgb:
    """Parse a floor (``F``) or ceiling (``C``) line into ``scene``."""
    if line[1:2] not in (" ", "\t"):
        raise ParseError("colour line should start with 'F' or 'C'")
    if line[0] == "F":
        layer = scene.floor
    elif line[0] == "C":
        layer = scene.ceiling
    else:
        raise ParseError("colour line should start with 'F' or 'C'")
    if layer.is_set:
        raise ParseError("duplicate colours")
    rest = skip_tab_spaces(line[1:])
    red, rest = set_color_value(rest, True)
    green, rest = set_color_value(rest, True)
    blue, rest = set_color_value(rest, False)
    rest = skip_tab_spaces(rest)
    if rest and not rest.startswith("\n"):
        raise ParseError("extra characters after colour")
    layer.red, layer.green, layer.blue = red, green, blue
    layer.is_set = True
    layer.in_int = convert_rgb(layer)
    return layer