"""Player position, view vectors, movement and the set of held keys."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

MOVE_SPEED = 1.0 / 50
ROTATION_SPEED = 0.01
PLANE_LENGTH = 0.66
WALL = "1"

KEY_NAMES = ("w", "a", "s", "d", "left", "right")

# direction -> (dir_x, dir_y, plane_x, plane_y)
_SPAWN_VECTORS = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
}


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    # Cells outside the grid block movement like walls do.
    if row < 0 or row >= len(grid) or col < 0 or col >= len(grid[row]):
        return True
    return grid[row][col] == WALL


@dataclass
class Keys:
    """Which movement and rotation keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False

    def press(self, key: str) -> None:
        """Mark ``key`` (one of :data:`KEY_NAMES`) as held; other keys are ignored."""
        self._set(key, True)

    def release(self, key: str) -> None:
        """Mark ``key`` as released; other keys are ignored."""
        self._set(key, False)

    def _set(self, key: str, state: bool) -> None:
        if key in KEY_NAMES:
            setattr(self, key, state)


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    direction: str

    @classmethod
    def from_spawn(cls, x: int, y: int, direction: str) -> "Player":
        """Create a player standing on map cell ``(x, y)`` facing ``direction``."""
        try:
            dir_x, dir_y, plane_x, plane_y = _SPAWN_VECTORS[direction]
        except KeyError:
            raise ValueError(f"unknown spawn direction {direction!r}") from None
        return cls(float(x), float(y), dir_x, dir_y, plane_x, plane_y, direction)

    def _step(self, grid: Sequence[str], vx: float, vy: float, multiplier: int) -> None:
        des_x = self.x + vx * 1.0 / 50 * multiplier
        des_y = self.y + vy * 1.0 / 50 * multiplier
        if not _is_wall(grid, int(self.y), int(des_x)):
            self.x = des_x
        if not _is_wall(grid, int(des_y), int(self.x)):
            self.y = des_y

    def move_forward(self, grid: Sequence[str], multiplier: int) -> None:
        """Walk along the view direction (``multiplier`` 1 forward, -1 back)."""
        self._step(grid, self.dir_x, self.dir_y, multiplier)

    def strafe(self, grid: Sequence[str], multiplier: int) -> None:
        """Walk along the camera plane (``multiplier`` 1 right, -1 left)."""
        self._step(grid, self.plane_x, self.plane_y, multiplier)

    def rotate(self, multiplier: int) -> None:
        """Turn the view and camera plane by one rotation step."""
        angle = ROTATION_SPEED * multiplier
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def apply_keys(self, keys: Keys, grid: Sequence[str]) -> None:
        """Move and turn according to the keys held down for one frame."""
        if keys.w:
            self.move_forward(grid, 1)
        if keys.s:
            self.move_forward(grid, -1)
        if keys.d:
            self.strafe(grid, 1)
        if keys.a:
            self.strafe(grid, -1)
        if keys.right:
            self.rotate(1)
        if keys.left:
            self.rotate(-1)