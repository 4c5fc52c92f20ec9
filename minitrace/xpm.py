"""Reading XPM pixmaps, from a file or from a list of strings, into an Image."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from minitrace.colornames import lookup_color
from minitrace.image import Image

TRANSPARENT_PIXEL = 0xFF000000
"""Pixel value written for the colour "None"."""

_NAME_LIMIT = 63

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9A-Fa-f]))?([0-9A-Fa-f]*)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def find_substring(text: str, find: str, length: int) -> int:
    """Position of the first ``find`` in ``text``, or -1.

    Gives -1 at once when ``find`` is longer than ``length``.
    """
    if len(find) > length:
        return -1
    return text.find(find)


def find_substring_unquoted(text: str, find: str, length: int) -> int:
    """Like :func:`find_substring`, skipping matches inside double quotes."""
    if len(find) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace /* */ and // comments outside quotes with spaces.

    The text keeps its length, so positions in it stay the same.
    """
    while (begin := find_substring_unquoted(text, "/*", len(text))) != -1:
        end = find_substring(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_substring_unquoted(text, "//", len(text))) != -1:
        end = find_substring(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def color_key(chars: str) -> int:
    """Number identifying the characters that name a colour in the pixel rows."""
    result = 0
    for ch in chars:
        result = (result << 8) + ord(ch)
    return result


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_rgb(name: str, end: Optional[str] = None) -> int:
    """Colour value of a "#RRGGBB" or named colour.

    A name is joined with ``end`` by a space before it is looked up; an
    unknown name gives 0, and "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _chunk(line: str, start: int, size: int) -> str:
    part = line[start:start + size]
    return part + "\0" * (size - len(part))


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour lines, then pixel rows."""
    source = iter(lines)
    header = str_to_wordtab(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("invalid header")
    if ncolors < 0 or cpp < 0:
        raise XpmError("invalid header")

    direct = cpp <= 2
    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError("colour definition without 'c'") from None
        if index >= len(words):
            raise XpmError("colour definition without a value")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_rgb(words[index], end)
        key = color_key(_chunk(line, 0, cpp))
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        line = _next_line(source, "pixel row")
        for x in range(width):
            col = colors.get(color_key(_chunk(line, cpp * x, cpp)), 0)
            if col == -1:
                col = TRANSPARENT_PIXEL
            image.put_pixel(x, y, col)
    return image


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data given as a list of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Read an XPM file, ignoring its comments, and build an image from it."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))