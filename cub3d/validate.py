"""Checks that a parsed scene describes a playable, closed map."""

from __future__ import annotations

from typing import Iterator

from cub3d.scene import Config, Player, Scene

PLAYER_CHARS = frozenset("NSEW")
ALLOWED_CHARS = frozenset("10NSEW ")


class MapError(ValueError):
    """Raised when a scene fails validation."""


def _cell(rows: list[str], x: int, y: int) -> str | None:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return None


def _neighbours(x: int, y: int) -> Iterator[tuple[int, int]]:
    yield x - 1, y
    yield x + 1, y
    yield x, y - 1
    yield x, y + 1


def check_content(scene: Scene) -> bool:
    return all(set(row) <= ALLOWED_CHARS for row in scene.map)


def find_player(scene: Scene) -> bool:
    """Locate the single player, record it and replace its cell with floor."""
    found = [
        (x, y, char)
        for y, row in enumerate(scene.map)
        for x, char in enumerate(row)
        if char in PLAYER_CHARS
    ]
    if len(found) != 1:
        return False
    x, y, direction = found[0]
    scene.player = Player(x, y, direction)
    row = scene.map[y]
    scene.map[y] = row[:x] + "0" + row[x + 1:]
    return True


def _only_walls(row: str) -> bool:
    return set(row) <= {"1", " "}


def _closed_sides(row: str) -> bool:
    body = row.strip(" ")
    return not body or (body[0] == "1" and body[-1] == "1")


def check_walls(scene: Scene) -> bool:
    rows = scene.map
    if not rows:
        return False
    if not (_only_walls(rows[0]) and _only_walls(rows[-1])):
        return False
    return all(_closed_sides(row) for row in rows[1:-1])


def check_spaces(scene: Scene) -> bool:
    """Every space may only touch walls, other spaces or the outside."""
    rows = scene.map
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char != " ":
                continue
            for nx, ny in _neighbours(x, y):
                if _cell(rows, nx, ny) not in (None, "1", " "):
                    return False
    return True


def _is_border(rows: list[str], x: int, y: int) -> bool:
    return y in (0, len(rows) - 1) or x == 0 or x >= len(rows[y]) - 1


def check_path(scene: Scene) -> bool:
    """Flood from the player; reaching a border cell means the area leaks."""
    rows = scene.map
    seen: set[tuple[int, int]] = set()
    stack = [(scene.player.x, scene.player.y)]
    while stack:
        x, y = stack.pop()
        if (x, y) in seen:
            continue
        char = _cell(rows, x, y)
        if char is None or char == "1":
            continue
        if _is_border(rows, x, y):
            return False
        seen.add((x, y))
        stack.extend(_neighbours(x, y))
    return True


def _readable(path: str | None) -> bool:
    if not path:
        return False
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def check_files(config: Config) -> bool:
    return all(
        _readable(path)
        for path in (
            config.texture_north,
            config.texture_south,
            config.texture_west,
            config.texture_east,
        )
    )


def check_map(scene: Scene) -> None:
    """Run every check in order; raise MapError at the first failure."""
    checks = (
        (check_content, "Invalid characters in map"),
        (find_player, "No player or multiple players found"),
        (check_walls, "Map is not closed by walls"),
        (check_spaces, "Invalid space configuration"),
        (check_path, "Player area is not properly enclosed"),
        (lambda s: check_files(s.config), "Texture files not found"),
    )
    for check, message in checks:
        if not check(scene):
            raise MapError(message)