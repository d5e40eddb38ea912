"""Command that loads and checks a ``.cub`` map file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubmap.lines import check_file_format, valid_file
from cubmap.loader import read_content, valid_content
from cubmap.scene import ParseError, new_scene


def _fail(message: str, detail: Exception | None = None) -> int:
    print(message, file=sys.stderr)
    if detail is not None:
        print(detail, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map file named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("Error: need the path for map file")
    path = args[0]
    print(">>> Stage 1: checking file format")
    if not check_file_format(path):
        return _fail("Error: wrong format file: .cub")
    print(">>> Stage 2: checking if file can be opened")
    if not valid_file(path):
        return _fail("Error: file can not be opened")
    print(">>> Stage 3: parsing content")
    try:
        lines = read_content(path)
    except ParseError as exc:
        return _fail("Error: invalid content", exc)
    print(">>> Stage 4: validating content")
    try:
        scene = valid_content(lines, new_scene())
        scene.init_dir()
    except ParseError as exc:
        return _fail("Error: invalid content", exc)
    player = scene.player
    print(
        f"map {scene.map_width}x{scene.map_height}, "
        f"player at ({player.pos_x}, {player.pos_y}), "
        f"floor #{scene.floor.in_int:06x}, ceiling #{scene.ceiling.in_int:06x}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())