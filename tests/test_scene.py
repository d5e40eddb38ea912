import pytest

from cubmap.scene import WIN_H, WIN_W, ParseError, Player, Rgb, Scene, TextureType, new_scene


def test_new_scene_has_unset_colours():
    scene = new_scene()
    for layer in (scene.floor, scene.ceiling):
        assert (layer.red, layer.green, layer.blue, layer.in_int) == (-1, -1, -1, -1)
        assert layer.is_set is False


def test_new_scene_textures_are_ordered_and_empty():
    scene = new_scene()
    assert [t.type for t in scene.textures] == [
        TextureType.NO, TextureType.SO, TextureType.WE, TextureType.EA,
    ]
    assert all(t.path is None and t.image is None for t in scene.textures)


def test_new_scene_player_and_screen():
    scene = new_scene()
    assert (scene.player.pos_x, scene.player.pos_y) == (-1, -1)
    assert scene.player.player == 0
    assert (scene.screen_width, scene.screen_height) == (WIN_W, WIN_H)
    assert WIN_W == 1280 and WIN_H == 720
    assert scene.maplines is None
    assert (scene.map_height, scene.map_width) == (0, 0)


def test_scenes_do_not_share_state():
    first = new_scene()
    second = new_scene()
    first.textures[0].path = "a.xpm"
    first.floor.red = 3
    assert second.textures[0].path is None
    assert second.floor.red == -1


def test_texture_slots_use_type_values():
    scene = new_scene()
    assert [int(t.type) for t in scene.textures] == [0, 1, 2, 3]
    assert [int(t) for t in TextureType] == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "cell, expected",
    [("N", 0.0), ("E", 1.5709), ("S", 3.14159), ("W", 4.71239)],
)
def test_init_dir_from_cell(cell, expected):
    scene = Scene(maplines=["1111", f"1{cell}01", "1111"])
    scene.player = Player(pos_x=1.5, pos_y=1.5)
    scene.init_dir()
    assert scene.player.dir == expected


def test_init_dir_keeps_angle_for_floor_cell():
    scene = Scene(maplines=["111", "101", "111"])
    scene.player = Player(dir=2.5, pos_x=1.5, pos_y=1.5)
    scene.init_dir()
    assert scene.player.dir == 2.5


def test_init_dir_without_position_raises():
    scene = Scene(maplines=["111", "1N1", "111"])
    with pytest.raises(ParseError):
        scene.init_dir()


def test_init_dir_without_map_raises():
    with pytest.raises(ParseError):
        new_scene().init_dir()


def test_rgb_defaults_match_scene():
    assert Rgb() == new_scene().floor