import pytest

from cubmap.mapgrid import (
    check_chars,
    check_void,
    find_player,
    get_map_size,
    parse_map,
    store_map,
    validate_map,
)
from cubmap.scene import ParseError, new_scene

VALID = ["111111", "100001", "10N001", "111111"]


def _scene_with(rows):
    scene = new_scene()
    scene.maplines = list(rows)
    scene.map_height = len(rows)
    scene.map_width = max(len(r) for r in rows)
    return scene


def test_parse_map_valid_sets_player_and_clears_cell():
    scene = new_scene()
    rows = parse_map(VALID, 0, scene)
    assert rows[2] == "100001"
    assert (scene.player.pos_x, scene.player.pos_y) == (2.5, 2.5)
    assert scene.player.player == 1
    assert (scene.map_height, scene.map_width) == (len(VALID), len(VALID[0]))


def test_parse_map_skips_leading_empty_lines():
    scene = new_scene()
    lines = ["NO a.xpm", "", "   ", *VALID]
    rows = parse_map(lines, 1, scene)
    assert len(rows) == len(VALID)
    assert rows[0] == VALID[0]


@pytest.mark.parametrize(
    "letter, expected",
    [
        ("N", (0.0, -1.0, 0.66, 0.0)),
        ("S", (0.0, 1.0, -0.66, 0.0)),
        ("E", (1.0, 0.0, 0.0, 0.66)),
        ("W", (-1.0, 0.0, 0.0, -0.66)),
    ],
)
def test_orientation(letter, expected):
    scene = new_scene()
    parse_map(["1111", "1" + letter + "01", "1111"], 0, scene)
    p = scene.player
    assert (p.dir_x, p.dir_y, p.plane_x, p.plane_y) == expected


def test_get_map_size_uses_longest_row():
    scene = new_scene()
    lines = ["111", "10N11", "1111"]
    assert get_map_size(lines, 0, scene) == (len(lines), len(lines[1]))


def test_get_map_size_rejects_empty_line():
    with pytest.raises(ParseError):
        get_map_size(["111", "", "111"], 0, new_scene())


def test_get_map_size_rejects_small_map():
    with pytest.raises(ParseError):
        get_map_size(["111", "1N1"], 0, new_scene())


def test_store_map_pads_rows():
    scene = new_scene()
    lines = ["1", "10N1", "11"]
    get_map_size(lines, 0, scene)
    rows = store_map(lines, 0, scene)
    assert all(len(row) == scene.map_width for row in rows)
    assert [row.rstrip(" ") for row in rows] == lines


def test_store_map_requires_height():
    with pytest.raises(ParseError):
        store_map(VALID, 0, new_scene())


def test_check_chars_rejects_unknown():
    with pytest.raises(ParseError):
        check_chars(_scene_with(["111", "1X1", "111"]))


def test_check_chars_rejects_tab():
    with pytest.raises(ParseError):
        check_chars(_scene_with(["111", "1\t1", "111"]))


def test_find_player_extra_player():
    with pytest.raises(ParseError, match="extra"):
        find_player(_scene_with(["1111", "1NS1", "1111"]))


def test_find_player_missing():
    with pytest.raises(ParseError, match="no player"):
        find_player(_scene_with(["111", "101", "111"]))


def test_check_void_rejects_space_next_to_floor():
    with pytest.raises(ParseError):
        check_void(_scene_with(["11111", "10 01", "11111"]))


def test_check_void_accepts_space_outside_walls():
    scene = _scene_with([" 111 ", "11011", "11111"])
    check_void(scene)
    assert scene.maplines[0] == " 111 "


def test_validate_map_rejects_player_next_to_space():
    with pytest.raises(ParseError):
        validate_map(_scene_with(["1111", "1N 1", "1111"]))


def test_parse_map_rejects_missing_map():
    with pytest.raises(ParseError):
        parse_map(["NO a.xpm", "", ""], 1, new_scene())