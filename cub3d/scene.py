"""Scene description (.cub) parsing: textures, colours and the map grid."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

TEXTURE_PREFIXES = {
    "NO ": "texture_north",
    "SO ": "texture_south",
    "WE ": "texture_west",
    "EA ": "texture_east",
}
COLOR_PREFIXES = ("F ", "C ")
MAP_CHARS = frozenset("01NSEW")

_TRIM = " \t\n"
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


@dataclass
class Config:
    """Texture paths and floor/ceiling colours of a scene."""

    texture_north: str | None = None
    texture_south: str | None = None
    texture_west: str | None = None
    texture_east: str | None = None
    floor_color: int = -1
    ceiling_color: int = -1


@dataclass
class Player:
    """Starting position and facing direction of the player."""

    x: int = 0
    y: int = 0
    direction: str = ""


@dataclass
class Scene:
    """A parsed scene: its configuration, map rows and player."""

    config: Config = field(default_factory=Config)
    map: list[str] = field(default_factory=list)
    map_width: int = 0
    player: Player = field(default_factory=Player)

    @property
    def map_height(self) -> int:
        return len(self.map)

    def add_map_line(self, line: str) -> None:
        """Append a map row, dropping surrounding tabs and newlines."""
        row = line.strip("\t\n")
        self.map.append(row)
        self.map_width = max(self.map_width, len(row))

    def clear(self) -> None:
        """Forget the texture paths and the map."""
        self.config.texture_north = None
        self.config.texture_south = None
        self.config.texture_west = None
        self.config.texture_east = None
        self.map.clear()
        self.map_width = 0


def is_texture_line(line: str | None) -> bool:
    if not line:
        return False
    return line.startswith(tuple(TEXTURE_PREFIXES))


def is_color_line(line: str | None) -> bool:
    if not line:
        return False
    return line.startswith(COLOR_PREFIXES)


def is_map_line(line: str | None) -> bool:
    """True if the line, up to its first newline, holds any map character."""
    if not line:
        return False
    content = line.split("\n", 1)[0]
    return any(char in MAP_CHARS for char in content)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _component(text: str) -> int:
    value = _atoi(text.strip(_TRIM))
    if not 0 <= value <= 255:
        raise ValueError(f"colour component out of range: {text.strip(_TRIM)!r}")
    return value


def convert_rgb(text: str) -> int:
    """Turn "R,G,B" into a 0xRRGGBB integer; raise ValueError if invalid."""
    parts = [part for part in text.split(",") if part]
    if len(parts) < 3:
        raise ValueError(f"expected three colour components in {text!r}")
    red, green, blue = (_component(part) for part in parts[:3])
    return red * 65536 + green * 256 + blue


def parse_texture_line(line: str, config: Config) -> None:
    _, sep, rest = line.partition(" ")
    if not sep:
        print("Erreur : ligne de texture invalide.")
        return
    path = rest.strip(_TRIM)
    for prefix, attribute in TEXTURE_PREFIXES.items():
        if line.startswith(prefix):
            setattr(config, attribute, path)
            break


def parse_color_line(line: str, config: Config) -> None:
    _, sep, rest = line.partition(" ")
    if not sep:
        print("Erreur : ligne de couleur invalide.")
        return
    try:
        value = convert_rgb(rest.strip(_TRIM))
    except ValueError:
        print("Erreur : couleur invalide.")
        return
    if line.startswith("F"):
        config.floor_color = value
    elif line.startswith("C"):
        config.ceiling_color = value


def _process_line(line: str, scene: Scene) -> None:
    if is_texture_line(line):
        print(f"Texture trouvée: {line}", end="")
        parse_texture_line(line, scene.config)
    elif is_color_line(line):
        print(f"Couleur trouvée: {line}", end="")
        parse_color_line(line, scene.config)
    elif is_map_line(line):
        print(f"Ligne de carte trouvée: {line}", end="")
        scene.add_map_line(line)
    else:
        print(f"Ligne ignorée : {line}", end="")


def parse_lines(lines: Iterable[str], scene: Scene) -> None:
    """Feed raw lines (newlines kept) into the scene, skipping blank ones."""
    for number, line in enumerate(lines, start=1):
        if not line or line.startswith("\n"):
            continue
        print(f"Ligne {number}:")
        _process_line(line, scene)


def _split_lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


def parse_file(filename: str, scene: Scene) -> None:
    """Parse a .cub file into the scene; OSError if it cannot be read."""
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    parse_lines(_split_lines(text), scene)


def check_file_extension(filename: str | None) -> bool:
    if not filename or len(filename) < 4:
        return False
    valid = filename.endswith(".cub")
    if not valid:
        print("Error: Map should be in a .cub extension.")
    return valid