"""Reading XPM images used as wall textures."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .rgbnames import lookup_color

# Pixel value stored for the transparent colour ("None").
TRANSPARENT = 0xFF000000
_TRANSPARENT_NAME_VALUE = -1
_NAME_BUFFER = 63
_LONG_MAX = 2**63 - 1
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_STRTOL_HEX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)"
)


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds ``height`` rows of ``width`` values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def to_bytes(self, big_endian: bool = False) -> bytes:
        """Return the pixels as 32-bit values, row after row."""
        order = "big" if big_endian else "little"
        return b"".join(
            pixel.to_bytes(4, order) for row in self.pixels for pixel in row
        )


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _strtol_hex(text: str) -> int:
    match = _STRTOL_HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        return -min(value, _LONG_MAX + 1)
    return min(value, _LONG_MAX)


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, marker: str) -> int:
    """Position of ``marker`` outside double-quoted strings, or -1."""
    quoted = False
    for position, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(marker, position):
            return position
    return -1


def _blank(text: str, start: int, length: int) -> str:
    length = min(length, len(text) - start)
    return text[:start] + " " * length + text[start + length:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are blanked first, then line comments together with
    the newline that ends them.  The length of ``text`` is preserved.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        length = end - begin + 2 if end != -1 else 3
        text = _blank(text, begin, length)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        length = end - begin + 1 if end != -1 else 2
        text = _blank(text, begin, length)
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve an XPM colour specification to a 0xRRGGBB value.

    ``#``-prefixed values are read as hexadecimal.  Otherwise ``name`` and
    the optional following word ``end`` are joined by a space and looked up
    among the known colour names; ``None`` gives -1 and unknown names 0.
    """
    if name.startswith("#"):
        return _to_int32(_strtol_hex(name[1:]))
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def convert_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display depth.

    ``shifts`` holds, for red, green and blue in turn, the position of the
    channel's mask and its width in bits.  Depths of 24 and above keep the
    colour unchanged.
    """
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    pixel = (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )
    return _to_int32(pixel)


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError(f"XPM data ends before the {what}") from None


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    table: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
            name = words[index]
        except (ValueError, IndexError):
            raise ValueError(f"bad XPM colour definition: {line!r}") from None
        end = words[index + 1] if index + 1 < len(words) else None
        key = line[:cpp]
        value = text_to_rgb(name, end)
        # Short codes keep the last definition, longer ones the first.
        if cpp <= 2:
            table[key] = value
        else:
            table.setdefault(key, value)
    return table


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its strings, without quotes.

    Raises :class:`ValueError` for a bad header, a colour definition
    without a ``c`` entry, or data that ends too early.
    """
    rows_in = iter(lines)
    header = split_words(_next_line(rows_in, "header"))
    if len(header) < 4:
        raise ValueError("XPM header needs width, height, colours and chars")
    width, height, count, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, count, cpp) <= 0:
        raise ValueError("invalid XPM header")

    table = _read_colors(rows_in, count, cpp)

    pixels = []
    for _ in range(height):
        line = _next_line(rows_in, "pixel rows")
        row = []
        for x in range(width):
            color = table.get(line[cpp * x:cpp * x + cpp], 0)
            if color == _TRANSPARENT_NAME_VALUE:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        pixels.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    position = 0
    while True:
        start = text.find('"', position)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        position = end + 1


def read_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)))