import pytest

from cub3d.scene import (
    Config,
    Scene,
    check_file_extension,
    convert_rgb,
    is_color_line,
    is_map_line,
    is_texture_line,
    parse_color_line,
    parse_file,
    parse_lines,
    parse_texture_line,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("NO ./north.xpm\n", True),
        ("SO ./south.xpm", True),
        ("WE ./west.xpm", True),
        ("EA ./east.xpm", True),
        ("NO./north.xpm", False),
        ("F 1,2,3", False),
        ("", False),
        (None, False),
    ],
)
def test_is_texture_line(line, expected):
    assert is_texture_line(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("F 1,2,3\n", True), ("C 0,0,0", True), ("FF 1,2,3", False), ("NO x", False), ("", False)],
)
def test_is_color_line(line, expected):
    assert is_color_line(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("   111\n", True), ("N", True), ("  \n", False), ("abc", False), ("xyz\n111", False)],
)
def test_is_map_line(line, expected):
    assert is_map_line(line) is expected


def test_convert_rgb_values():
    assert convert_rgb("0,0,0") == 0
    assert convert_rgb(" 0 , 0 , 0 ") == 0
    assert convert_rgb("255,255,255") == 0xFFFFFF


def test_convert_rgb_orders_components():
    assert convert_rgb("0,0,1") < convert_rgb("0,1,0") < convert_rgb("1,0,0")


@pytest.mark.parametrize("text", ["256,0,0", "1,2", "-1,0,0", "", ",,"])
def test_convert_rgb_rejects(text):
    with pytest.raises(ValueError):
        convert_rgb(text)


def test_parse_texture_line_strips_path():
    config = Config()
    parse_texture_line("NO ./tex/north.xpm  \n", config)
    parse_texture_line("EA ./tex/east.xpm\n", config)
    assert config.texture_north == "./tex/north.xpm"
    assert config.texture_east == "./tex/east.xpm"
    assert config.texture_south is None


def test_parse_texture_line_without_space(capsys):
    config = Config()
    parse_texture_line("NO", config)
    assert "Erreur : ligne de texture invalide." in capsys.readouterr().out
    assert config.texture_north is None


def test_parse_color_line_sets_floor_and_ceiling():
    config = Config()
    parse_color_line("F 220,100,0\n", config)
    parse_color_line("C 225,30,0\n", config)
    assert config.floor_color == convert_rgb("220,100,0")
    assert config.ceiling_color == convert_rgb("225,30,0")


def test_parse_color_line_invalid_keeps_default(capsys):
    config = Config()
    parse_color_line("F 300,0,0\n", config)
    assert config.floor_color == -1
    assert "Erreur : couleur invalide." in capsys.readouterr().out


def test_add_map_line_trims_tabs_and_newlines_only():
    scene = Scene()
    scene.add_map_line("  1111\n")
    scene.add_map_line("\t11\t\n")
    assert scene.map == ["  1111", "11"]
    assert scene.map_width == len("  1111")
    assert scene.map_height == 2


def test_parse_lines_builds_scene(capsys):
    scene = Scene()
    lines = ["NO ./n.xpm\n", "\n", "F 0,0,0\n", "hello\n", "1111\n", "1N01\n", "1111"]
    parse_lines(lines, scene)
    out = capsys.readouterr().out
    assert scene.config.texture_north == "./n.xpm"
    assert scene.config.floor_color == 0
    assert scene.map == ["1111", "1N01", "1111"]
    assert "Ligne 2:" not in out
    assert "Ligne ignorée : hello" in out


def test_parse_file_reads_file(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("SO ./s.xpm\nC 0,0,0\n\n111\n1N1\n111\n")
    scene = Scene()
    parse_file(str(path), scene)
    assert scene.config.texture_south == "./s.xpm"
    assert scene.config.ceiling_color == 0
    assert scene.map == ["111", "1N1", "111"]


def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(str(tmp_path / "absent.cub"), Scene())


def test_check_file_extension(capsys):
    assert check_file_extension("map.cub") is True
    assert check_file_extension(".cub") is True
    assert check_file_extension("cub") is False
    assert check_file_extension("map.txt") is False
    assert "Error: Map should be in a .cub extension." in capsys.readouterr().out


def test_clear_resets_textures_and_map():
    scene = Scene()
    scene.config.texture_west = "./w.xpm"
    scene.config.floor_color = 0
    scene.add_map_line("111")
    scene.clear()
    assert scene.config.texture_west is None
    assert scene.config.floor_color == 0
    assert scene.map == []
    assert scene.map_width == 0
    assert scene.map_height == 0