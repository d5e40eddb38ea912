"""Reading and checking the map grid that follows the scene elements."""

from __future__ import annotations

from collections.abc import Sequence

from cubmap.lines import is_empty_line
from cubmap.scene import ParseError, Player, Scene

_MAP_CHARS = frozenset("NEWS01 ")
_PLAYER_CHARS = frozenset("NEWS")

# dir_x, dir_y, plane_x, plane_y for each starting orientation
_ORIENTATIONS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


def _rows(scene: Scene) -> list[str]:
    if scene.maplines is None:
        raise ParseError("no map loaded")
    return scene.maplines


def get_map_size(lines: Sequence[str], start: int, scene: Scene) -> tuple[int, int]:
    """Measure the map from ``start`` to the end of ``lines``.

    Stores and returns (height, width). Raises ParseError on an empty line
    inside the map or a map shorter than three rows.
    """
    rows = list(lines[start:])
    if any(is_empty_line(row) for row in rows):
        raise ParseError("empty line in the map")
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    scene.map_height = height
    scene.map_width = width
    if height < 3:
        raise ParseError("map is too small")
    return height, width


def store_map(lines: Sequence[str], start: int, scene: Scene) -> list[str]:
    """Copy the map rows into ``scene``, padding each with spaces to the map width."""
    if scene.map_height < 3:
        raise ParseError("map is too small")
    rows = list(lines[start:start + scene.map_height])
    if len(rows) < scene.map_height:
        raise ParseError("map has fewer rows than its height")
    width = scene.map_width
    scene.maplines = [row[:width].ljust(width) for row in rows]
    return scene.maplines


def check_chars(scene: Scene) -> None:
    """Raise ParseError if the map holds a character other than ``NEWS01`` or space."""
    for row in _rows(scene)[:scene.map_height]:
        if any(cell not in _MAP_CHARS for cell in row):
            raise ParseError("invalid characters in the map")


def find_player(scene: Scene) -> Player:
    """Locate the single player start, set its position and orientation.

    The start cell is replaced with floor (``0``).
    """
    rows = _rows(scene)
    player = scene.player
    for y in range(min(scene.map_height, len(rows))):
        for x, cell in enumerate(rows[y]):
            if cell not in _PLAYER_CHARS:
                continue
            if player.player:
                raise ParseError("extra player")
            player.dir_x, player.dir_y, player.plane_x, player.plane_y = _ORIENTATIONS[cell]
            player.pos_y = y + 0.5
            player.pos_x = x + 0.5
            player.player += 1
            rows[y] = rows[y][:x] + "0" + rows[y][x + 1:]
    if player.player != 1:
        raise ParseError("no player")
    return player


def _neighbours(scene: Scene, y: int, x: int):
    if x > 0:
        yield y, x - 1
    if x < scene.map_width - 1:
        yield y, x + 1
    if y > 0:
        yield y - 1, x
    if y < scene.map_height - 1:
        yield y + 1, x


def check_void(scene: Scene) -> None:
    """Raise ParseError if a floor cell touches an empty (space) cell."""
    rows = _rows(scene)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell != " ":
                continue
            for ny, nx in _neighbours(scene, y, x):
                if nx < len(rows[ny]) and rows[ny][nx] == "0":
                    raise ParseError("empty space within the map")


def validate_map(scene: Scene) -> None:
    """Check the player start and that no floor is open to empty space."""
    find_player(scene)
    check_void(scene)


def parse_map(lines: Sequence[str], start: int, scene: Scene) -> list[str]:
    """Read the map starting at ``start`` (after blank lines) into ``scene``."""
    while start < len(lines) and is_empty_line(lines[start]):
        start += 1
    get_map_size(lines, start, scene)
    store_map(lines, start, scene)
    check_chars(scene)
    validate_map(scene)
    return _rows(scene)