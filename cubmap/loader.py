"""Reading a ``.cub`` file into a :class:`~cubmap.scene.Scene`."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from cubmap.colors import validate_colors
from cubmap.lines import get_index, is_empty_line, skip_tab_spaces
from cubmap.mapgrid import parse_map
from cubmap.scene import ParseError, Scene, TextureType, new_scene
from cubmap.textures import load_gun_texture, validate_textures

_ELEMENT_COUNT = 6
_MIN_FILLED_LINES = 7
_WALLS = (TextureType.NO, TextureType.SO, TextureType.WE, TextureType.EA)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_content(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a map file without their newlines.

    Raises ParseError if the file cannot be read or has fewer than seven
    non-blank lines.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"cannot read {path}") from exc
    lines = _split_lines(text)
    filled = sum(1 for line in lines if not is_empty_line(line))
    if filled < _MIN_FILLED_LINES:
        raise ParseError("file has too few lines")
    return lines


def valid_content(lines: Iterable[str], scene: Scene) -> Scene:
    """Read the six scene elements and then the map from ``lines`` into ``scene``."""
    lines = list(lines)
    found = 0
    for position, raw in enumerate(lines):
        line = skip_tab_spaces(raw)
        if is_empty_line(line):
            continue
        kind = get_index(line)
        if kind is None:
            raise ParseError(f"unexpected line: {line}")
        if kind in _WALLS:
            validate_textures(line, scene)
        else:
            validate_colors(line, scene)
        found += 1
        if found == _ELEMENT_COUNT:
            break
    else:
        raise ParseError("missing scene elements")
    load_gun_texture(scene)
    parse_map(lines, position + 1, scene)
    missing = [texture.type.name for texture in scene.textures if texture.path is None]
    if missing:
        raise ParseError(f"missing texture: {', '.join(missing)}")
    return scene


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and validate a map file, returning a new scene."""
    return valid_content(read_content(path), new_scene())