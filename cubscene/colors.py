"""Floor and ceiling colour entries of a scene file."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SceneError

_DIGITS = frozenset("0123456789")
_MAX_DIGITS = 3
_MAX_CHANNEL = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= _MAX_CHANNEL:
                raise ValueError(f"colour channel out of range: {channel}")

    def packed(self) -> int:
        """Return the colour as a 0x00RRGGBB integer."""
        return (self.red << 16) | (self.green << 8) | self.blue


def _is_number(field: str) -> bool:
    return 0 < len(field) <= _MAX_DIGITS and set(field) <= _DIGITS


def parse_color(text: str, surface: str) -> Color:
    """Parse the value of an ``F`` or ``C`` entry.

    ``text`` is what follows the identifier on the line; leading spaces
    are skipped and a trailing newline ends the value.  ``surface`` names
    the entry ("floor" or "ceiling") in error messages.
    """
    body = text.lstrip(" ")
    if not body or body.startswith("\n"):
        raise SceneError(f"Colors missing on {surface}")

    value = body.split("\n", 1)[0]
    fields = value.split(",")
    # A single trailing comma is tolerated.
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()

    if not all(_is_number(field) for field in fields) or len(fields) != 3:
        raise SceneError(f"Bad format of {surface}")

    channels = [int(field) for field in fields]
    if any(channel > _MAX_CHANNEL for channel in channels):
        raise SceneError("Bad color of ceiling or floor")
    return Color(*channels)