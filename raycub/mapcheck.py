"""Validation of the map grid and placement of the player on it."""

from __future__ import annotations

from collections.abc import MutableSequence

from .player import EAST_RADIANS, NORTH_RADIANS, SOUTH_RADIANS, WEST_RADIANS, Player
from .textparse import CubError

_HEADINGS = {
    "N": NORTH_RADIANS,
    "S": SOUTH_RADIANS,
    "E": EAST_RADIANS,
    "W": WEST_RADIANS,
}

# Cells that must be enclosed by non-space neighbours.
_OPEN_CELLS = frozenset("NSFW0")
_SKIPPED_CELLS = frozenset("1 ")

Grid = MutableSequence[MutableSequence[str]]


def place_player(grid: Grid, width: int, height: int, player: Player) -> int:
    """Put ``player`` on each starting cell found and return how many there were.

    Every starting cell turns the player towards its heading, moves the
    player to the centre of the cell and becomes an empty floor cell.
    """
    count = 0
    for row, line in enumerate(grid[:height]):
        for col, cell in enumerate(line[:width]):
            angle = _HEADINGS.get(cell)
            if angle is None:
                continue
            player.rotate(angle)
            player.pos_x = row + 0.5
            player.pos_y = col + 0.5
            grid[row][col] = "0"
            count += 1
    return count


def wall_surrounded(grid: Grid, width: int, height: int, row: int, col: int) -> bool:
    """Tell whether the cell lies inside the map with no space next to it."""
    if row <= 0 or row >= height - 1 or col <= 0 or col >= width - 1:
        return False
    neighbours = (
        grid[row - 1][col],
        grid[row + 1][col],
        grid[row][col - 1],
        grid[row][col + 1],
    )
    return " " not in neighbours


def check_walls(grid: Grid, width: int, height: int) -> bool:
    """Tell whether every open cell of the map is closed in by walls."""
    for row, line in enumerate(grid[:height]):
        for col, cell in enumerate(line[:width]):
            if cell in _SKIPPED_CELLS:
                continue
            if cell in _OPEN_CELLS and not wall_surrounded(grid, width, height, row, col):
                return False
    return True


def check_map(grid: Grid, width: int, height: int, player: Player) -> None:
    """Place the single player and make sure the map is closed."""
    if place_player(grid, width, height, player) != 1:
        raise CubError("Wrong amount of character")
    if not check_walls(grid, width, height):
        raise CubError("Wrong map")