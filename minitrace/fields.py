"""Splitting and validating the textual fields of a scene description."""

from __future__ import annotations

import re
import string
from itertools import takewhile
from typing import Sequence

from minitrace.color import Color

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]*)")
_DIGITS = frozenset(string.digits)


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: whitespace, sign, digits."""
    match = _ATOI.match(text)
    number = match.group(1) if match else ""
    if number in ("", "+", "-"):
        return 0
    return int(number)


def split_words(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def expected_words(expected: int, words: Sequence[str]) -> bool:
    """Tell whether ``words`` holds exactly ``expected`` words before a newline word."""
    count = sum(1 for _ in takewhile(lambda word: not word.startswith("\n"), words))
    return count == expected


def is_all_digits(values: Sequence[str]) -> bool:
    """Tell whether every word is made of digits and newlines.

    The first word alone may start with a '+' or '-' sign.
    """
    for index, word in enumerate(values):
        body = word[1:] if index == 0 and word.startswith(("+", "-")) else word
        if any(ch not in _DIGITS and ch != "\n" for ch in body):
            return False
    return True


def check_colors(rgb: str) -> Color:
    """Read an "R,G,B" triple with channels from 0 to 255.

    The second number is stored as blue and the third as green.
    Raises ValueError on malformed or out-of-range input.
    """
    parts = split_words(rgb, ",")
    if not expected_words(3, parts) or not is_all_digits(parts):
        raise ValueError(f"malformed colour {rgb!r}")
    channels = [_atoi(part) for part in parts[:3]]
    if any(not 0 <= channel <= 255 for channel in channels):
        raise ValueError(f"colour channel out of range in {rgb!r}")
    red, blue, green = channels
    return Color(r=red, g=green, b=blue, t=0)


def char_to_double(value: str) -> float:
    """Read a decimal number of the form [sign]digits[.digits].

    The fractional scale counts every character after the point, newline
    included. Raises ValueError on malformed input.
    """
    parts = split_words(value, ".")
    if expected_words(1, parts) and is_all_digits(parts):
        return float(_atoi(parts[0]))
    if expected_words(2, parts) and is_all_digits(parts):
        whole = _atoi(parts[0])
        fraction = 0.1 ** len(parts[1]) * _atoi(parts[1])
        if whole < 0 or parts[0].startswith("-"):
            return whole + -1 * fraction
        return 1 * whole + fraction
    raise ValueError(f"malformed number {value!r}")