"""Reading and validating a complete scene description."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .colors import Color, parse_color
from .errors import SceneError
from .grid import check_map, split_map

# Identifier letter -> (second letter expected, name of the face).
_TEXTURES = {
    "N": ("O", "north"),
    "S": ("O", "south"),
    "E": ("A", "east"),
    "W": ("E", "west"),
}
_COLORS = {"F": "floor", "C": "ceiling"}
_MAP_START = frozenset("10")
_ALLOWED_LEADS = frozenset(_TEXTURES) | frozenset(_COLORS) | {"1", "\n"}


class _Stage(Enum):
    HEADER = auto()
    IN_MAP = auto()
    AFTER_MAP = auto()


@dataclass(frozen=True)
class Scene:
    """A validated scene: wall textures, surface colours and the map grid."""

    north: str
    south: str
    east: str
    west: str
    floor: Color
    ceiling: Color
    rows: tuple[str, ...]
    spawn: tuple[int, int, str]


def _check_entry(lead: str, textures: dict[str, str], colors: dict[str, Color]) -> None:
    """Reject repeated entries and lines that start with an unknown character."""
    if lead in _TEXTURES and _TEXTURES[lead][1] in textures:
        raise SceneError("Put one texture per face")
    if lead in _COLORS and _COLORS[lead] in colors:
        raise SceneError(f"Put three colors for the {_COLORS[lead]} one time")
    if lead not in _ALLOWED_LEADS:
        raise SceneError("Put path, colors and closed map only")


def _texture_path(body: str, second: str, name: str) -> str:
    """Extract and check the path of a texture entry starting at ``body``."""
    if body[1:2] != second:
        raise SceneError(f"Bad format for {name}")
    # The character right after the two-letter identifier is skipped.
    rest = body[3:].lstrip(" ")
    if not rest:
        raise SceneError(f"Missing path for {name}")
    path = rest.split("\n", 1)[0]
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        raise SceneError(f"Bad path for {name}") from None
    os.close(descriptor)
    return path


def _missing(textures: dict[str, str], colors: dict[str, Color], has_map: bool) -> str | None:
    for name in ("north", "south", "east", "west"):
        if name not in textures:
            return f"{name.capitalize()} path missing"
    if "floor" not in colors:
        return "Floor color missing"
    if "ceiling" not in colors:
        return "Ceiling path missing"
    if not has_map:
        return "Map missing"
    return None


def parse_scene(lines: Iterable[str] | str) -> Scene:
    """Parse a scene from its lines (each keeping its newline) or whole text.

    Raises :class:`SceneError` on the first problem found.
    """
    if isinstance(lines, str):
        lines = lines.splitlines(keepends=True)

    textures: dict[str, str] = {}
    colors: dict[str, Color] = {}
    map_lines: list[str] = []
    stage = _Stage.HEADER

    for line in lines:
        body = line.lstrip(" ")
        lead = body[:1]
        _check_entry(lead, textures, colors)
        if lead == "1" and stage is _Stage.AFTER_MAP:
            raise SceneError("Put one map only")

        if lead in _MAP_START and lead:
            if stage is _Stage.HEADER:
                if len(textures) < len(_TEXTURES) or len(colors) < len(_COLORS):
                    raise SceneError("Put 4 path and 2 colors before the map")
                stage = _Stage.IN_MAP
                map_lines.append(line)
            elif stage is _Stage.IN_MAP:
                map_lines.append(line)
        elif stage is _Stage.IN_MAP:
            stage = _Stage.AFTER_MAP

        if lead in _TEXTURES:
            second, name = _TEXTURES[lead]
            textures[name] = _texture_path(body, second, name)
        elif lead in _COLORS:
            surface = _COLORS[lead]
            colors[surface] = parse_color(body[1:], surface)

    problem = _missing(textures, colors, bool(map_lines))
    if problem is not None:
        raise SceneError(problem)

    rows = split_map("".join(map_lines))
    spawn = check_map(rows)
    return Scene(
        north=textures["north"],
        south=textures["south"],
        east=textures["east"],
        west=textures["west"],
        floor=colors["floor"],
        ceiling=colors["ceiling"],
        rows=tuple(rows),
        spawn=spawn,
    )


def read_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate the scene file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_scene(handle)


def _summary(scene: Scene) -> str:
    row, column, direction = scene.spawn
    return "\n".join(
        [
            f"north: {scene.north}",
            f"south: {scene.south}",
            f"east: {scene.east}",
            f"west: {scene.west}",
            f"floor: 0x{scene.floor.packed():06X}",
            f"ceiling: 0x{scene.ceiling.packed():06X}",
            f"spawn: {direction} at row {row}, column {column}",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Validate a scene file and print what it describes."""
    parser = argparse.ArgumentParser(description="Validate a scene description file.")
    parser.add_argument("scene", help="path of the scene file")
    args = parser.parse_args(argv)
    try:
        scene = read_scene(args.scene)
    except SceneError as error:
        sys.stderr.write(f"Error\n{error}\n")
        return 1
    except OSError as error:
        sys.stderr.write(f"Error\n{error.strerror}: {args.scene}\n")
        return 1
    print(_summary(scene))
    return 0