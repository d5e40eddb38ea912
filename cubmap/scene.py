"""Scene description built from a map file: textures, colours, map and player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from cubmap.image import Image

WIN_W = 1280
WIN_H = 720
MOVE_SPEED = 0.08
ROT_SPEED = 0.05
COLLISION_RADIUS = 0.2
DIM = 64

_START_ANGLES = {
    "N": 0.0,
    "E": 1.5709,
    "S": 3.14159,
    "W": 4.71239,
}


class ParseError(ValueError):
    """Raised when a map file or one of its elements is invalid."""


class TextureType(IntEnum):
    """Identifiers of the scene elements, in the order they are indexed."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3
    F = 4
    C = 5


@dataclass
class Rgb:
    """A floor or ceiling colour; components are -1 until set."""

    red: int = -1
    green: int = -1
    blue: int = -1
    in_int: int = -1
    is_set: bool = False


@dataclass
class Texture:
    """A wall texture: its kind, the path it came from and its pixels."""

    type: TextureType
    path: str | None = None
    image: Image | None = None


@dataclass
class Player:
    """Player position, view angle, direction vector and camera plane."""

    dir: float = 0.0
    pos_x: float = -1.0
    pos_y: float = -1.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    player: int = 0


def _wall_textures() -> list[Texture]:
    return [Texture(kind) for kind in (TextureType.NO, TextureType.SO, TextureType.WE, TextureType.EA)]


@dataclass
class Scene:
    """Everything read from a map file."""

    textures: list[Texture] = field(default_factory=_wall_textures)
    gun: Image | None = None
    floor: Rgb = field(default_factory=Rgb)
    ceiling: Rgb = field(default_factory=Rgb)
    player: Player = field(default_factory=Player)
    maplines: list[str] | None = None
    map_height: int = 0
    map_width: int = 0
    screen_width: int = WIN_W
    screen_height: int = WIN_H

    def init_dir(self) -> None:
        """Set the player's view angle from the map cell under the player."""
        if self.maplines is None:
            raise ParseError("no map loaded")
        x = int(self.player.pos_x)
        y = int(self.player.pos_y)
        if x < 0 or y < 0:
            raise ParseError("player position is not set")
        try:
            cell = self.maplines[y][x]
        except IndexError:
            raise ParseError(f"player position ({x}, {y}) is outside the map") from None
        angle = _START_ANGLES.get(cell)
        if angle is not None:
            self.player.dir = angle


def new_scene() -> Scene:
    """Return a scene with every element unset."""
    return Scene()