from cubmap.cli import main

XPM = (
    "/* XPM */\n"
    "static char *tile[] = {\n"
    '"2 2 2 1",\n'
    '"a c #FF0000",\n'
    '"b c #0000FF",\n'
    '"ab",\n'
    '"ba"\n'
    "};\n"
)

ELEMENTS = [
    "NO north.xpm",
    "SO south.xpm",
    "WE west.xpm",
    "EA east.xpm",
    "F 220,100,0",
    "C 225,30,0",
]
MAP = ["111111", "100001", "10N001", "111111"]


def _prepare(tmp_path, monkeypatch, lines, name="level.cub"):
    monkeypatch.chdir(tmp_path)
    for tex in ("north", "south", "west", "east"):
        (tmp_path / f"{tex}.xpm").write_text(XPM)
    (tmp_path / "textures").mkdir()
    (tmp_path / "textures" / "gun.xpm").write_text(XPM)
    (tmp_path / name).write_text("\n".join(lines) + "\n")
    return name


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "need the path" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert "need the path" in capsys.readouterr().err


def test_wrong_extension(capsys):
    assert main(["level.txt"]) == 1
    assert "wrong format" in capsys.readouterr().err


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.cub"]) == 1
    captured = capsys.readouterr()
    assert "can not be opened" in captured.err
    assert ">>> Stage 2" in captured.out


def test_invalid_content(tmp_path, monkeypatch, capsys):
    name = _prepare(tmp_path, monkeypatch, ELEMENTS + ["111111", "100001", "111111"])
    assert main([name]) == 1
    captured = capsys.readouterr()
    assert "invalid content" in captured.err
    assert ">>> Stage 4" in captured.out


def test_valid_map(tmp_path, monkeypatch, capsys):
    name = _prepare(tmp_path, monkeypatch, ELEMENTS + [""] + MAP)
    assert main([name]) == 0
    out = capsys.readouterr().out
    assert f"map {len(MAP[0])}x{len(MAP)}" in out
    assert ">>> Stage 1" in out