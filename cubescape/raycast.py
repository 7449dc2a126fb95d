"""Ray casting through the grid and drawing of the frame buffer."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import MutableSequence, Sequence

from .player import Player

SCREEN_WIDTH = 1500
SCREEN_HEIGHT = 1000
TILE = 64
WALL = "1"
_MIN_PERP_DIST = 0.000001
_CLAMPED_PERP_DIST = 0.00001


class WallSide(enum.IntEnum):
    """Face of a wall struck by a ray; also the index of its texture."""

    EAST = 0
    WEST = 1
    NORTH = 2
    SOUTH = 3


@dataclass
class RayHit:
    """Where one screen column's ray met a wall and how to draw it."""

    side: WallSide
    map_x: int
    map_y: int
    ray_dir_x: float
    ray_dir_y: float
    perp_dist: float
    wall_height: int
    tex_x: int
    start_y: int
    end_y: int


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one pixel value."""
    return t << 24 | r << 16 | g << 8 | b


def _delta(component: float) -> float:
    return abs(1 / component) if component != 0 else math.inf


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    # Leaving the grid ends the ray as if it struck a wall.
    if row < 0 or row >= len(grid) or col < 0 or col >= len(grid[row]):
        return True
    return grid[row][col] == WALL


def cast_ray(player: Player, grid: Sequence[str], x: int) -> RayHit:
    """Cast the ray of screen column ``x`` and describe the wall it hits."""
    camera_x = 2 * x / SCREEN_WIDTH - 1
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.x)
    map_y = int(player.y)
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)

    if ray_x < 0:
        step_x = -1
        side_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = WallSide.WEST if step_x == 1 else WallSide.EAST
        else:
            side_y += delta_y
            map_y += step_y
            side = WallSide.NORTH if step_y == 1 else WallSide.SOUTH
        if _is_wall(grid, map_y, map_x):
            break

    if side in (WallSide.EAST, WallSide.WEST):
        perp = (map_x - player.x + (1 - step_x) // 2) / ray_x
        if perp <= _MIN_PERP_DIST:
            perp = _CLAMPED_PERP_DIST
        wall_x = player.y + perp * ray_y
    else:
        perp = (map_y - player.y + (1 - step_y) // 2) / ray_y
        if perp <= _MIN_PERP_DIST:
            perp = _CLAMPED_PERP_DIST
        wall_x = player.x + perp * ray_x
    wall_x -= math.floor(wall_x)

    wall_height = int(SCREEN_HEIGHT / perp)
    tex_x = int(wall_x * TILE)
    if side == WallSide.NORTH and ray_y > 0:
        tex_x = TILE - tex_x - 1
    if side == WallSide.EAST and ray_x < 0:
        tex_x = TILE - tex_x - 1
    start_y = max(-(wall_height // 2) + SCREEN_HEIGHT // 2, 0)
    end_y = min(wall_height // 2 + SCREEN_HEIGHT // 2, SCREEN_HEIGHT - 1)
    return RayHit(
        side=side,
        map_x=map_x,
        map_y=map_y,
        ray_dir_x=ray_x,
        ray_dir_y=ray_y,
        perp_dist=perp,
        wall_height=wall_height,
        tex_x=tex_x,
        start_y=start_y,
        end_y=end_y,
    )


def draw_background(buffer: MutableSequence[int], ceiling: int, floor: int) -> None:
    """Fill the upper half of the frame with ``ceiling`` and the rest with ``floor``."""
    half = (SCREEN_HEIGHT // 2) * SCREEN_WIDTH
    total = SCREEN_HEIGHT * SCREEN_WIDTH
    buffer[:half] = [ceiling] * half
    buffer[half:total] = [floor] * (total - half)


def render_wall_slice(buffer: MutableSequence[int], hit: RayHit, texture, x: int) -> None:
    """Draw the textured wall column described by ``hit`` at screen column ``x``."""
    step = TILE / hit.wall_height if hit.wall_height > 0 else 0.0
    tex_pos = (hit.start_y - SCREEN_HEIGHT // 2 + hit.wall_height // 2) * step
    pixels = texture.pixels
    count = len(pixels)
    for row in range(hit.start_y, hit.end_y + 1):
        tex_y = int(tex_pos) & (TILE - 1)
        tex_pos += step
        index = TILE * tex_y + hit.tex_x
        buffer[row * SCREEN_WIDTH + x] = pixels[index] if 0 <= index < count else 0


def render_frame(
    buffer: MutableSequence[int],
    player: Player,
    grid: Sequence[str],
    textures: Sequence,
    ceiling: int,
    floor: int,
) -> None:
    """Draw a whole frame: background, then one wall slice per screen column."""
    draw_background(buffer, ceiling, floor)
    for x in range(SCREEN_WIDTH):
        hit = cast_ray(player, grid, x)
        render_wall_slice(buffer, hit, textures[hit.side], x)