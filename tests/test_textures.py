import pytest

from cubmap.scene import ParseError, TextureType, new_scene
from cubmap.textures import is_valid_path, load_gun_texture, validate_textures

_XPM = '/* XPM */\nstatic char *img[] = {\n"2 1 2 1",\n". c #FF0000",\n"x c #0000FF",\n".x"\n};\n'


@pytest.fixture
def xpm_path(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(_XPM)
    return path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a.xpm", True),
        ("  ./textures/n.xpm \n", True),
        (".xpm", True),
        ("xpm", False),
        ("a.png", False),
        ("a.xpm\t", False),
        ("   ", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_path(path, expected):
    assert is_valid_path(path) is expected


def test_validate_textures_loads_image(xpm_path):
    scene = new_scene()
    texture = validate_textures(f"NO {xpm_path}", scene)
    assert texture is scene.textures[TextureType.NO]
    assert texture.path == str(xpm_path)
    assert (texture.image.width, texture.image.height) == (2, 1)
    assert texture.image.get_pixel(0, 0) == 0xFF0000
    assert texture.image.get_pixel(1, 0) == 0x0000FF
    assert scene.textures[TextureType.SO].path is None


def test_validate_textures_extra_spaces(xpm_path):
    scene = new_scene()
    validate_textures(f"EA   {xpm_path}  ", scene)
    assert scene.textures[TextureType.EA].path == str(xpm_path)


def test_duplicate_texture_raises(xpm_path):
    scene = new_scene()
    validate_textures(f"WE {xpm_path}", scene)
    with pytest.raises(ParseError):
        validate_textures(f"WE {xpm_path}", scene)


@pytest.mark.parametrize(
    "line",
    ["XX a.xpm", "NO", "NO a.xpm extra", "NO a.png", "F 1,2,3", "C a.xpm"],
)
def test_invalid_texture_lines(line):
    scene = new_scene()
    with pytest.raises(ParseError):
        validate_textures(line, scene)
    assert all(t.path is None for t in scene.textures)


def test_missing_texture_file_raises(tmp_path):
    scene = new_scene()
    with pytest.raises(ParseError):
        validate_textures(f"SO {tmp_path / 'absent.xpm'}", scene)
    assert scene.textures[TextureType.SO].path is None


def test_load_gun_texture(xpm_path):
    scene = new_scene()
    load_gun_texture(scene, str(xpm_path))
    assert scene.gun.get_pixel(1, 0) == 0x0000FF


def test_load_gun_texture_missing(tmp_path):
    scene = new_scene()
    with pytest.raises(ParseError):
        load_gun_texture(scene, str(tmp_path / "gun.xpm"))
    assert scene.gun is None