import pytest

from cubmap.colors import convert_rgb, set_color_value, validate_colors
from cubmap.scene import ParseError, Rgb, new_scene


def test_set_color_value_with_comma():
    assert set_color_value("12 ,\t34", True) == (12, "34")


def test_set_color_value_last():
    assert set_color_value("7 \t", False) == (7, "")
    assert set_color_value("7 x", False) == (7, "x")


def test_set_color_value_bounds():
    assert set_color_value("0,", True) == (0, "")
    assert set_color_value("255", False) == (255, "")
    with pytest.raises(ParseError):
        set_color_value("256", False)


@pytest.mark.parametrize(
    "line, is_comma",
    [("a", True), ("-1,", True), (" 1,", True), ("12 34", True), ("12,", False), ("", False)],
)
def test_set_color_value_errors(line, is_comma):
    with pytest.raises(ParseError):
        set_color_value(line, is_comma)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (220, 100, 0), (1, 2, 3), (255, 255, 255)])
def test_convert_rgb_round_trip(rgb):
    red, green, blue = rgb
    packed = convert_rgb(Rgb(red, green, blue))
    assert (packed >> 16, (packed >> 8) & 0xFF, packed & 0xFF) == rgb


def test_convert_rgb_white():
    assert convert_rgb(Rgb(255, 255, 255)) == 0xFFFFFF


def test_validate_floor():
    scene = new_scene()
    layer = validate_colors("F 220,100,0", scene)
    assert layer is scene.floor
    assert (layer.red, layer.green, layer.blue) == (220, 100, 0)
    assert layer.is_set is True
    assert layer.in_int == convert_rgb(layer)
    assert scene.ceiling.is_set is False


def test_validate_ceiling_with_tabs():
    scene = new_scene()
    validate_colors("C\t 1 , 2 ,\t3 \t", scene)
    assert (scene.ceiling.red, scene.ceiling.green, scene.ceiling.blue) == (1, 2, 3)
    assert scene.floor.is_set is False


def test_validate_colors_allows_trailing_newline():
    scene = new_scene()
    validate_colors("F 1,2,3\n", scene)
    assert scene.floor.is_set is True


def test_duplicate_colour_raises():
    scene = new_scene()
    validate_colors("F 1,2,3", scene)
    with pytest.raises(ParseError):
        validate_colors("F 4,5,6", scene)
    assert (scene.floor.red, scene.floor.green, scene.floor.blue) == (1, 2, 3)


@pytest.mark.parametrize(
    "line",
    ["F1,2,3", "X 1,2,3", "F", "F 1,2", "F 1,2,3,", "F 1,2,3 x", "C 1,,3", "C 300,0,0"],
)
def test_invalid_colour_lines(line):
    scene = new_scene()
    with pytest.raises(ParseError):
        validate_colors(line, scene)
    assert scene.floor.is_set is False and scene.ceiling.is_set is False