"""Player state, keyboard state and movement."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

WIDTH = 1320
HEIGHT = 880
TEXTURE_SIZE = 64

NORTH_RADIANS = 0.01
SOUTH_RADIANS = 3.14
EAST_RADIANS = 4.71
WEST_RADIANS = 1.58


class Key(enum.IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53
    LEFT = 123
    RIGHT = 124


@dataclass
class KeyState:
    """Which movement keys are currently held."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    l: bool = False  # noqa: E741
    r: bool = False

    _FIELDS = {
        Key.W: "w",
        Key.S: "s",
        Key.A: "a",
        Key.D: "d",
        Key.LEFT: "l",
        Key.RIGHT: "r",
    }

    def _set(self, keycode: int, held: bool) -> None:
        try:
            field = self._FIELDS[Key(keycode)]
        except (ValueError, KeyError):
            return
        setattr(self, field, held)

    def press(self, keycode: int) -> bool:
        """Record a key press; return True when the key asks to quit."""
        if keycode == Key.ESC:
            return True
        self._set(keycode, True)
        return False

    def release(self, keycode: int) -> None:
        """Record a key release."""
        self._set(keycode, False)


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    move_speed: float = 0.1
    rot_speed: float = 0.05

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos - self.dir_y * sin,
            self.dir_y * cos + self.dir_x * sin,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos - self.plane_y * sin,
            self.plane_y * cos + self.plane_x * sin,
        )


def move(
    player: Player,
    keys: KeyState,
    grid: Sequence[Sequence[str]],
    mouse_dx: int = 0,
) -> None:
    """Advance the player one frame according to the held keys.

    ``mouse_dx`` is the horizontal mouse offset from the window centre; a
    negative offset turns like the left key, a positive one like the right.
    Each axis of the move is blocked separately by wall cells.
    """
    step = player.move_speed
    dest_x, dest_y = player.pos_x, player.pos_y
    if keys.w:
        dest_x += player.dir_x * step
        dest_y += player.dir_y * step
    if keys.s:
        dest_x -= player.dir_x * step
        dest_y -= player.dir_y * step
    if keys.a:
        dest_x -= player.plane_x * step
        dest_y -= player.plane_y * step
    if keys.d:
        dest_x += player.plane_x * step
        dest_y += player.plane_y * step

    if keys.l:
        player.rotate(player.rot_speed)
    if keys.r:
        player.rotate(-player.rot_speed)
    if mouse_dx < 0:
        player.rotate(player.rot_speed)
    if mouse_dx > 0:
        player.rotate(-player.rot_speed)

    if grid[int(dest_x)][int(player.pos_y)] != "1":
        player.pos_x = dest_x
    if grid[int(player.pos_x)][int(dest_y)] != "1":
        player.pos_y = dest_y