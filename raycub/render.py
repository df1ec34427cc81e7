"""Ray casting and drawing of frames."""

from __future__ import annotations

import math
import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .player import HEIGHT, TEXTURE_SIZE, WIDTH, Player

MINIMAP_SIZE = 7

_PLAYER_COLOR = 0xFF0000
_FLOOR_COLOR = 0xFFFFFF
_WALL_COLOR = 0x000000
_MASK = 0xFFFFFFFF
_INT_MAX = 2**31 - 1
_TYPECODE = "I" if array("I").itemsize == 4 else "L"


class Frame:
    """A rectangle of 32-bit 0xRRGGBB pixels, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array(_TYPECODE, [0]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x`` and row ``y``."""
        self.pixels[self._index(x, y)] = color & _MASK

    def get(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        return self.pixels[self._index(x, y)]

    def _fill_rows(self, start: int, end: int, color: int) -> None:
        count = (end - start) * self.width
        self.pixels[start * self.width:end * self.width] = (
            array(_TYPECODE, [color & _MASK]) * count
        )

    def to_bytes(self) -> bytes:
        """Return the frame as packed RGB, three bytes per pixel, row by row."""
        if sys.byteorder == "little":
            raw = self.pixels.tobytes()
        else:
            swapped = array(_TYPECODE, self.pixels)
            swapped.byteswap()
            raw = swapped.tobytes()
        out = bytearray(3 * len(self.pixels))
        out[0::3] = raw[2::4]
        out[1::3] = raw[1::4]
        out[2::3] = raw[0::4]
        return bytes(out)


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall: the cell, the side crossed and the distance."""

    map_x: int
    map_y: int
    side: int
    step_x: int
    step_y: int
    ray_dir_x: float
    ray_dir_y: float
    per_dist: float


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def cast_ray(
    player: Player,
    grid: Sequence[Sequence[str]],
    column: int,
    width: int = WIDTH,
) -> RayHit:
    """Follow the ray of screen ``column`` through the grid to the first wall."""
    camera_x = 2 * column / width - 1
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _inverse_abs(ray_x)
    delta_y = _inverse_abs(ray_y)

    if ray_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_x < len(grid) and 0 <= map_y < len(grid[map_x])):
            raise IndexError("ray left the map")
        if grid[map_x][map_y] > "0":
            break

    if side == 0:
        per_dist = (map_x - player.pos_x + (1 - step_x) // 2) / ray_x
    else:
        per_dist = (map_y - player.pos_y + (1 - step_y) // 2) / ray_y
    return RayHit(map_x, map_y, side, step_x, step_y, ray_x, ray_y, per_dist)


def draw_background(frame: Frame, ceiling: int, floor: int) -> None:
    """Paint the upper half with ``ceiling`` and the lower half with ``floor``."""
    half = frame.height // 2
    frame._fill_rows(0, half, ceiling)
    frame._fill_rows(half, frame.height, floor)


def draw_column(
    frame: Frame,
    column: int,
    hit: RayHit,
    player: Player,
    textures: Sequence[Any],
) -> None:
    """Draw the textured wall slice that ``hit`` describes into ``column``.

    ``textures`` holds the north, east, west and south textures.
    """
    height = frame.height
    if hit.per_dist > 0:
        line_height = min(int(min(height / hit.per_dist, _INT_MAX)), _INT_MAX)
    else:
        line_height = _INT_MAX
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)

    if hit.side == 0:
        wall_x = player.pos_y + hit.per_dist * hit.ray_dir_y
        index = 0
    else:
        wall_x = player.pos_x + hit.per_dist * hit.ray_dir_x
        index = 1
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEXTURE_SIZE)
    if hit.side == 0 and hit.ray_dir_x > 0:
        tex_x = TEXTURE_SIZE - tex_x - 1
        index = 3
    if hit.side == 1 and hit.ray_dir_y < 0:
        tex_x = TEXTURE_SIZE - tex_x - 1
        index = 2

    if draw_start >= draw_end:
        return
    step = TEXTURE_SIZE / line_height
    tex_pos = (draw_start - height // 2 + line_height // 2) * step

    texture = textures[index]
    tex_x %= texture.width
    pixels = frame.pixels
    width = frame.width
    if not 0 <= column < width:
        raise IndexError(f"column {column} outside frame of width {width}")
    for y in range(draw_start, draw_end):
        tex_y = (int(tex_pos) & (TEXTURE_SIZE - 1)) % texture.height
        tex_pos += step
        pixels[y * width + column] = texture.pixel(tex_x, tex_y) & _MASK


def draw_walls(
    frame: Frame,
    player: Player,
    grid: Sequence[Sequence[str]],
    textures: Sequence[Any],
) -> None:
    """Cast one ray per column and draw the wall it meets."""
    for column in range(frame.width):
        hit = cast_ray(player, grid, column, frame.width)
        draw_column(frame, column, hit, player, textures)


def _fill_square(frame: Frame, left: int, top: int, color: int) -> None:
    right = min(left + MINIMAP_SIZE, frame.width)
    bottom = min(top + MINIMAP_SIZE, frame.height)
    for y in range(max(top, 0), bottom):
        for x in range(max(left, 0), right):
            frame.put(x, y, color)


def draw_minimap(
    frame: Frame,
    player: Player,
    grid: Sequence[Sequence[str]],
    width: int,
    height: int,
) -> None:
    """Draw the map in the top-left corner: player red, floor white, rest black.

    Squares that fall outside the frame are clipped.
    """
    player_row, player_col = int(player.pos_x), int(player.pos_y)
    for row in range(height):
        for col in range(width):
            if row == player_row and col == player_col:
                color = _PLAYER_COLOR
            elif grid[row][col] == "0":
                color = _FLOOR_COLOR
            else:
                color = _WALL_COLOR
            _fill_square(frame, MINIMAP_SIZE * col, MINIMAP_SIZE * row, color)


def render(frame: Frame, scene: Any, player: Player, minimap: bool = False) -> Frame:
    """Draw a whole view of ``scene`` as seen by ``player`` into ``frame``."""
    draw_background(frame, scene.ceiling, scene.floor)
    draw_walls(frame, player, scene.grid, scene.textures)
    if minimap:
        draw_minimap(frame, player, scene.grid, scene.width, scene.height)
    return frame