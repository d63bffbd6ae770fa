"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from cub3d.colors import text_to_rgb
from cub3d.image import Image

# Pixel value used for the "None" (transparent) colour.
TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def str_to_wordtab(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def str_str(text: str, find: str) -> int:
    """Position of the first occurrence of ``find`` in ``text``, or -1."""
    return text.find(find)


def str_str_quoted(text: str, find: str) -> int:
    """Like str_str, but skip matches inside double-quoted strings."""
    if not find:
        return 0
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + max(length, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := str_str_quoted(text, "/*")) != -1:
        end = str_str(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := str_str_quoted(text, "//")) != -1:
        end = str_str(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what} line") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(rows, "header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _parse_color(_next_line(rows, "colour"), cpp)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_file_to_image(filename: str) -> Image:
    """Load an XPM file; OSError if unreadable, XpmError if malformed."""
    with open(filename, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from in-memory XPM strings."""
    return parse_xpm(xpm_data)