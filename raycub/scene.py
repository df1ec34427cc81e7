"""Reading of ``.cub`` scene descriptions."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .textparse import CubError, read_lines, rgb_component, split
from .xpm import load_xpm

_MAP_CHARS = frozenset("01NSEW ")


class EntryType(enum.IntEnum):
    """Kind of a line in a scene description."""

    ERROR = 0
    NO = 1
    SO = 2
    WE = 3
    EA = 4
    FLOOR = 5
    CEILING = 6
    MAP = 7


# Texture slot used by the renderer for each wall identifier.
_TEXTURE_SLOTS = {
    EntryType.NO: 0,
    EntryType.EA: 1,
    EntryType.WE: 2,
    EntryType.SO: 3,
}

_PREFIXES = (
    ("NO", EntryType.NO),
    ("SO", EntryType.SO),
    ("WE", EntryType.WE),
    ("EA", EntryType.EA),
    ("F ", EntryType.FLOOR),
    ("C ", EntryType.CEILING),
)


@dataclass
class Scene:
    """A parsed scene: wall textures, background colours and the map grid.

    ``textures`` holds the north, east, west and south textures in that
    order.  ``grid`` is indexed ``grid[row][col]`` and every row is padded
    with spaces to ``width`` cells.
    """

    textures: tuple[Any, Any, Any, Any]
    floor: int
    ceiling: int
    grid: list[list[str]]
    width: int
    height: int


def check_name(path: str | Path) -> bool:
    """Tell whether ``path`` names a ``.cub`` file."""
    return str(path).endswith(".cub")


def classify(line: str) -> EntryType:
    """Return the kind of a scene line."""
    head = line[:2]
    for prefix, kind in _PREFIXES:
        if head == prefix:
            return kind
    if all(ch in _MAP_CHARS for ch in line):
        return EntryType.MAP
    return EntryType.ERROR


def split_value(line: str, kind: EntryType) -> str:
    """Return the value of an identifier line; map lines come back unchanged."""
    if kind is EntryType.MAP:
        return line
    parts = split(line, " ")
    if len(parts) != 2:
        raise CubError("wrong amount of value")
    return parts[1]


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a 0xRRGGBB value."""
    parts = split(text, ",")
    if len(parts) != 3:
        raise CubError("wrong amount of value")
    red, green, blue = (rgb_component(part) for part in parts)
    return red << 16 | green << 8 | blue


def build_grid(rows: list[str]) -> tuple[list[list[str]], int, int]:
    """Pad the map rows to a rectangle; return ``(grid, width, height)``."""
    if not rows:
        raise CubError("Missing map")
    width = max(len(row) for row in rows)
    grid = [list(row.ljust(width)) for row in rows]
    return grid, width, len(rows)


def _load(load_texture: Callable[[str], Any], path: str) -> Any:
    try:
        return load_texture(path)
    except (OSError, ValueError) as exc:
        raise CubError("Wrong file") from exc


def parse_scene(
    lines: Iterable[str],
    load_texture: Callable[[str], Any] | None = None,
) -> Scene:
    """Build a scene from its lines; textures are read by ``load_texture``."""
    loader = load_xpm if load_texture is None else load_texture
    textures: dict[int, Any] = {}
    colors: dict[EntryType, int] = {}
    rows: list[str] = []

    for line in lines:
        kind = classify(line)
        if kind is EntryType.ERROR:
            raise CubError("Wrong map information")
        slot = _TEXTURE_SLOTS.get(kind)
        if (slot is not None and slot in textures) or kind in colors:
            raise CubError("info repeated")
        value = split_value(line, kind)
        if slot is not None:
            textures[slot] = _load(loader, value)
        elif kind in (EntryType.FLOOR, EntryType.CEILING):
            colors[kind] = parse_color(value)
        else:
            rows.append(value)

    if len(textures) != len(_TEXTURE_SLOTS) or len(colors) != 2:
        raise CubError("Missing source")
    grid, width, height = build_grid(rows)
    return Scene(
        textures=(textures[0], textures[1], textures[2], textures[3]),
        floor=colors[EntryType.FLOOR],
        ceiling=colors[EntryType.CEILING],
        grid=grid,
        width=width,
        height=height,
    )


def load_scene(
    path: str | Path,
    load_texture: Callable[[str], Any] | None = None,
) -> Scene:
    """Read a ``.cub`` file and parse it."""
    if not check_name(path):
        raise CubError("Wrong argument")
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise CubError("Wrong argument") from exc
    with handle:
        return parse_scene(read_lines(handle), load_texture)