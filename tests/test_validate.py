import pytest

from cub3d.scene import Config, Scene
from cub3d.validate import (
    MapError,
    check_content,
    check_files,
    check_map,
    check_path,
    check_spaces,
    check_walls,
    find_player,
)

VALID = ["111111", "100001", "10N001", "111111"]


def make_scene(rows):
    scene = Scene()
    for row in rows:
        scene.add_map_line(row + "\n")
    return scene


def make_textures(tmp_path, config):
    for name in ("north", "south", "west", "east"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("xpm")
        setattr(config, f"texture_{name}", str(path))


def test_check_content():
    assert check_content(make_scene(VALID)) is True
    assert check_content(make_scene(["111", "1X1", "111"])) is False


def test_find_player_records_and_replaces():
    scene = make_scene(VALID)
    assert find_player(scene) is True
    assert (scene.player.x, scene.player.y, scene.player.direction) == (2, 2, "N")
    assert scene.map[2] == "100001"


@pytest.mark.parametrize("rows", [["111", "101", "111"], ["1111", "1NS1", "1111"]])
def test_find_player_requires_exactly_one(rows):
    scene = make_scene(rows)
    assert find_player(scene) is False
    assert scene.map == rows


def test_check_walls():
    assert check_walls(make_scene(VALID)) is True
    assert check_walls(make_scene(["111111", "100001", "10N000", "111111"])) is False
    assert check_walls(make_scene(["110111", "1N01", "1111"])) is False
    assert check_walls(make_scene(["  111", "  1N1", "  111"])) is True
    assert check_walls(Scene()) is False


def test_check_spaces():
    assert check_spaces(make_scene(["  111", " 11N1", "  111"])) is True
    assert check_spaces(make_scene(["1111111", "1 0N001", "1111111"])) is False


def test_check_path():
    closed = make_scene(VALID)
    find_player(closed)
    assert check_path(closed) is True

    leaking = make_scene(["111", "0N0", "111"])
    find_player(leaking)
    assert check_path(leaking) is False


def test_check_files(tmp_path):
    config = Config()
    assert check_files(config) is False
    make_textures(tmp_path, config)
    assert check_files(config) is True
    config.texture_west = str(tmp_path / "missing.xpm")
    assert check_files(config) is False


def test_check_map_valid(tmp_path):
    scene = make_scene(VALID)
    make_textures(tmp_path, scene.config)
    check_map(scene)
    assert scene.player.direction == "N"


@pytest.mark.parametrize(
    "rows, message",
    [
        (["111", "1X1", "111"], "Invalid characters in map"),
        (["111", "101", "111"], "No player or multiple players found"),
        (["111111", "100001", "10N000", "111111"], "Map is not closed by walls"),
        (["1111111", "1 0N001", "1111111"], "Invalid space configuration"),
        (VALID, "Texture files not found"),
    ],
)
def test_check_map_errors(rows, message):
    with pytest.raises(MapError, match=message):
        check_map(make_scene(rows))