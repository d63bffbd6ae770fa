"""Command line entry point: parse and validate a .cub scene."""

from __future__ import annotations

import sys
from typing import Sequence

from cub3d.scene import Config, Scene, check_file_extension, parse_file
from cub3d.validate import MapError, check_map

PROGRAM = "cub3d"


def format_config(config: Config) -> str:
    lines = ["=== CONFIGURATION ==="]
    textures = (
        ("Nord", config.texture_north),
        ("Sud", config.texture_south),
        ("Ouest", config.texture_west),
        ("Est", config.texture_east),
    )
    for label, texture in textures:
        shown = texture if texture is not None else "Non définie"
        lines.append(f"Texture {label}: {shown}")
    lines.append(f"Couleur sol: {config.floor_color}")
    lines.append(f"Couleur plafond: {config.ceiling_color}")
    lines.append("=====================")
    return "\n".join(lines) + "\n"


def format_map(scene: Scene) -> str:
    player = scene.player
    lines = [
        "=== CARTE ===",
        f"Dimensions: {scene.map_width} x {scene.map_height}",
        f"Joueur: ({player.x}, {player.y}) direction '{player.direction}'",
    ]
    if not scene.map:
        lines.append("ERREUR: data->map est NULL!")
        return "\n".join(lines) + "\n"
    lines.extend(f"[{index}] {row}" for index, row in enumerate(scene.map))
    lines.append("============")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_file_extension(args[0]):
        print(f"usage: {PROGRAM} <map.cub>")
        return 1

    scene = Scene()
    try:
        parse_file(args[0], scene)
    except OSError as exc:
        print(f"Erreur ouverture fichier: {exc.strerror or exc}", file=sys.stderr)
        print("Erreur pendant le parsing")
        return 1
    print("Parsing terminé")

    try:
        check_map(scene)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1

    print("Carte valide !")
    print(format_config(scene.config), end="")
    print(format_map(scene), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())