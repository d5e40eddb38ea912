"""Parsing of wall texture lines such as ``NO ./textures/north.xpm``."""

from __future__ import annotations

from cubmap.lines import get_index, is_empty_line
from cubmap.scene import ParseError, Scene, Texture, TextureType
from cubmap.xpm import XpmError, xpm_file_to_image

GUN_TEXTURE = "textures/gun.xpm"
_WALLS = (TextureType.NO, TextureType.SO, TextureType.WE, TextureType.EA)


def is_valid_path(path: str | None) -> bool:
    """Return True if ``path`` is non-blank and ends with ``.xpm``."""
    if path is None or is_empty_line(path):
        return False
    trimmed = path.strip(" \n")
    return len(trimmed) >= 4 and trimmed.endswith(".xpm")


def _set_path(kind_word: str, path: str, scene: Scene) -> Texture:
    kind = get_index(kind_word)
    if kind not in _WALLS or scene.textures[kind].path is not None:
        raise ParseError("invalid texture type or duplicate texture")
    if not is_valid_path(path):
        raise ParseError(f"invalid texture path: {path}")
    texture = scene.textures[kind]
    try:
        image = xpm_file_to_image(path)
    except XpmError as exc:
        raise ParseError(f"incorrect texture file: {path}") from exc
    texture.path = path
    texture.image = image
    return texture


def validate_textures(line: str, scene: Scene) -> Texture:
    """Parse a texture line, load its image and store it in ``scene``."""
    if get_index(line) is None:
        raise ParseError(f"wrong texture type: {line}")
    parts = [part for part in line.split(" ") if part]
    if len(parts) < 2 or (len(parts) > 2 and not is_empty_line(parts[2])):
        raise ParseError(f"invalid split in line: {line}")
    return _set_path(parts[0], parts[1], scene)


def load_gun_texture(scene: Scene, path: str = GUN_TEXTURE) -> None:
    """Load the weapon sprite into ``scene.gun``."""
    try:
        scene.gun = xpm_file_to_image(path)
    except XpmError as exc:
        raise ParseError("gun image not found") from exc