"""Reader for XPM texture images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .colornames import lookup_color
from .textparse import atoi

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_LONG_MAX = 2**63 - 1


class XpmError(ValueError):
    """The XPM data could not be read or parsed."""


@dataclass(frozen=True)
class Image:
    """A decoded image: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, pattern: str) -> int:
    inside = False
    for pos in range(len(text) - len(pattern) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(pattern, pos):
            return pos
    return -1


def _blank_comment(text: str, begin: int, terminator: str, extra: int) -> str:
    found = text.find(terminator, begin + 2)
    relative = found - (begin + 2) if found != -1 else -1
    end = min(len(text), begin + relative + extra)
    return text[:begin] + " " * (end - begin) + text[end:]


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    The text keeps its length: every comment character becomes a space.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        text = _blank_comment(text, begin, "*/", 4)
    while (begin := _find_unquoted(text, "//")) != -1:
        text = _blank_comment(text, begin, "\n", 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each successive pair of double quotes."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def text_to_rgb(name: str, rest: str | None = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#hex`` is read as hexadecimal.  Otherwise ``name`` (joined with
    ``rest`` when given) is looked up among the named colours; "none"
    gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = max(-value, -_LONG_MAX - 1)
        else:
            value = min(value, _LONG_MAX)
        return _to_int32(value)
    if rest is not None:
        name = f"{name} {rest}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> Image:
    """Decode an image from its XPM strings: header, colours, then rows."""
    stream = iter(lines)
    fields = words(_next_line(stream, "header"))
    if len(fields) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (atoi(field) for field in fields[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("header values must be non-zero")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError("header values must be positive")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(stream, "colour definition")
        tokens = words(line[cpp:])
        try:
            index = tokens.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index >= len(tokens):
            raise XpmError(f"no colour value in {line!r}")
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        rgb = text_to_rgb(tokens[index], following)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    pixels: list[int] = []
    row_length = width * cpp
    for _ in range(height):
        row = _next_line(stream, "pixel row")
        if len(row) < row_length:
            raise XpmError(f"pixel row too short: {row!r}")
        for start in range(0, row_length, cpp):
            color = colors.get(row[start:start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return Image(width, height, tuple(pixels))


def load_xpm(path: str | Path) -> Image:
    """Read and decode an XPM file."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    text = raw.decode("latin-1")
    return parse_xpm(quoted_strings(strip_comments(text)))