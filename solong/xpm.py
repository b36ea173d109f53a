"""Reading XPM images into pixel arrays.

An XPM image is C source holding an array of quoted strings: a header
with width, height, colour count and characters per pixel, one line per
colour, then one line per row of pixels. Pixels whose colour is ``None``
are stored as 0xFF000000.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .colors import lookup_color
from .textops import atoi
from .wordtab import str_str, str_str_quoted, str_to_wordtab

__all__ = [
    "XpmError",
    "XpmImage",
    "text_to_rgb",
    "strip_comments",
    "parse_xpm_lines",
    "parse_xpm_text",
    "read_xpm_file",
]

TRANSPARENT = -1
TRANSPARENT_PIXEL = 0xFF000000

_NAME_BUFFER = 64
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_HEX_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(Exception):
    """XPM data is missing, truncated or malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds each pixel's value."""

    width: int
    height: int
    pixels: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.height or any(len(row) != self.width for row in self.pixels):
            raise ValueError("pixel rows do not match the image size")

    def pixel(self, x: int, y: int) -> int:
        """Return the value of the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} image")
        return self.pixels[y][x]

    def to_bytes(self, bytes_per_pixel: int, big_endian: bool) -> bytes:
        """Lay the pixels out row by row, ``bytes_per_pixel`` bytes each."""
        if isinstance(bytes_per_pixel, bool) or not isinstance(bytes_per_pixel, int):
            raise TypeError("bytes_per_pixel must be an integer")
        if bytes_per_pixel < 1:
            raise ValueError(f"bytes_per_pixel must be positive, got {bytes_per_pixel}")
        mask = (1 << (8 * bytes_per_pixel)) - 1
        order = "big" if big_endian else "little"
        return b"".join(
            (value & mask).to_bytes(bytes_per_pixel, order)
            for row in self.pixels
            for value in row
        )


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    if sign == "-":
        value = -value
    return _to_int32(min(max(value, _LONG_MIN), _LONG_MAX))


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Return the colour a colour specification names.

    ``#`` introduces a hexadecimal value. Otherwise ``name``, joined with
    ``suffix`` by a space when one is given, is looked up among the named
    colours, ignoring case. Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[: _NAME_BUFFER - 1]
    found = lookup_color(name)
    return 0 if found is None else found


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The text keeps its length. A line comment is blanked up to and
    including its newline.
    """
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := str_str_quoted(text, opener, len(text))) != -1:
            end = str_str(text[begin + 2 :], closer, len(text) - begin - 2)
            text = _blank(text, begin, end + extra)
    return text


def _color_key(chars: str) -> int:
    key = 0
    for char in chars:
        byte = ord(char) & 0xFF
        if byte > 127:
            byte -= 256
        key = ((key << 8) + byte) & 0xFFFFFFFF
    return key


def _take(lines: Iterator[str], what: str) -> str:
    try:
        line = next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None
    if not isinstance(line, str):
        raise TypeError(f"XPM lines must be strings, not {type(line).__name__}")
    return line


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM array."""
    source = iter(lines)
    header = str_to_wordtab(_take(source, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    for label, value in (("width", width), ("height", height),
                         ("colour count", ncolors), ("characters per pixel", cpp)):
        if value <= 0:
            raise XpmError(f"XPM {label} must be positive, got {value}")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a name is kept.
    later_wins = cpp <= 2
    palette: Dict[int, int] = {}
    for _ in range(ncolors):
        line = _take(source, "colour definitions")
        if len(line) < cpp:
            raise XpmError(f"colour line {line!r} is shorter than a pixel name")
        words = str_to_wordtab(line[cpp:])
        if "c" not in words or words.index("c") + 1 >= len(words):
            raise XpmError(f"colour line {line!r} has no colour value")
        at = words.index("c") + 1
        rgb = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        key = _color_key(line[:cpp])
        if later_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _take(source, "pixel rows")
        if len(line) < cpp * width:
            raise XpmError(f"pixel row {line!r} is shorter than {width} pixels")
        row = []
        for start in range(0, cpp * width, cpp):
            value = palette.get(_color_key(line[start : start + cpp]), 0)
            row.append(TRANSPARENT_PIXEL if value == TRANSPARENT else value)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    text = strip_comments(text.split("\0", 1)[0])
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(text))


def read_xpm_file(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"could not read {path}") from exc
    return parse_xpm_text(data.decode("latin-1"))