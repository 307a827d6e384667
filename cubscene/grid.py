"""Map layout and validation."""

from __future__ import annotations

from .errors import SceneError

_SPAWNS = frozenset("NSEW")
_ALLOWED = frozenset(" 01") | _SPAWNS
_WALKABLE = frozenset("0") | _SPAWNS


def _grid_width(text: str) -> int:
    """Width of the padded grid, grown in steps as longer lines appear."""
    width = 0
    column = 0
    for char in text:
        if char == "\n":
            column = 0
        column += 1
        if column > width:
            width = column + 3
    return width


def split_map(text: str) -> list[str]:
    """Lay the map text out on a rectangular grid padded with spaces.

    The grid has one blank row above the map and blank rows below it;
    every row has the same width.
    """
    width = _grid_width(text)
    lines = text.split("\n")
    blank = " " * width
    rows = [blank]
    rows.extend(line.ljust(width) for line in lines)
    rows.append(blank)
    return rows


def _cell(rows: list[str], row: int, column: int) -> str:
    if 0 <= row < len(rows) and 0 <= column < len(rows[row]):
        return rows[row][column]
    return " "


def _find_spawn(rows: list[str]) -> tuple[int, int, str]:
    spawns = []
    for row_index, row in enumerate(rows):
        for column, char in enumerate(row):
            if char not in _ALLOWED:
                raise SceneError("Bad character in the map")
            if char in _SPAWNS:
                spawns.append((row_index, column, char))
    if not spawns:
        raise SceneError("Put N, S, E or W for player spawn")
    if len(spawns) > 1:
        raise SceneError("Several spawn in the map")
    return spawns[0]


def check_map(rows: list[str]) -> tuple[int, int, str]:
    """Validate a grid from :func:`split_map`.

    Returns the spawn as ``(row, column, direction)``.  Raises
    :class:`SceneError` for unknown characters, a missing or repeated
    spawn, or a floor cell that touches empty space.
    """
    spawn = _find_spawn(rows)
    for row_index in range(1, len(rows) - 1):
        row = rows[row_index]
        for column in range(1, len(row) - 1):
            if row[column] not in _WALKABLE:
                continue
            neighbours = (
                _cell(rows, row_index, column + 1),
                _cell(rows, row_index, column - 1),
                _cell(rows, row_index + 1, column),
                _cell(rows, row_index - 1, column),
            )
            if " " in neighbours:
                raise SceneError("The map is open")
    return spawn