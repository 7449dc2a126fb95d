"""Game window, event loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Optional, Sequence

from .errors import CubError, format_error
from .player import Keys, Player
from .raycast import SCREEN_HEIGHT, SCREEN_WIDTH, create_trgb, render_frame
from .scene import Scene, load_scene
from .textures import load_wall_textures

WINDOW_TITLE = "cubescape"
OPAQUE = 255

KEY_ESCAPE = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_RIGHT = 65363
KEY_LEFT = 65361

_KEY_NAMES = {
    KEY_ESCAPE: "escape",
    KEY_W: "w",
    KEY_A: "a",
    KEY_S: "s",
    KEY_D: "d",
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
}


def key_name(key_code: int) -> Optional[str]:
    """Return the name of a handled X11 key code, or None for other keys."""
    return _KEY_NAMES.get(key_code)


def _pygame_key_names(pygame) -> dict:
    return {
        pygame.K_ESCAPE: "escape",
        pygame.K_w: "w",
        pygame.K_a: "a",
        pygame.K_s: "s",
        pygame.K_d: "d",
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
    }


def _frame_bytes(buffer: Sequence[int]) -> tuple:
    data = array("I", buffer).tobytes()
    fmt = "BGRA" if sys.byteorder == "little" else "ARGB"
    return data, fmt


def run(scene: Scene) -> None:
    """Open the game window for ``scene`` and play until it is closed."""
    textures = load_wall_textures(scene.elements)
    ceiling = create_trgb(OPAQUE, *scene.elements.ceiling)
    floor = create_trgb(OPAQUE, *scene.elements.floor)
    game_map = scene.game_map
    player = Player.from_spawn(game_map.spawn_x, game_map.spawn_y, game_map.direction)
    keys = Keys()
    buffer = [0] * (SCREEN_WIDTH * SCREEN_HEIGHT)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    if pygame.init()[0] == 0 and not pygame.display.get_init():
        raise CubError("mlx cannot initialized")
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise CubError("mlx window cannot initialized") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        names = _pygame_key_names(pygame)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    name = names.get(event.key)
                    if name == "escape":
                        running = False
                    elif name is not None:
                        keys.press(name)
                elif event.type == pygame.KEYUP:
                    name = names.get(event.key)
                    if name is not None:
                        keys.release(name)
            if not running:
                break
            player.apply_keys(keys, game_map.grid)
            render_frame(buffer, player, game_map.grid, textures, ceiling, floor)
            data, fmt = _frame_bytes(buffer)
            image = pygame.image.frombuffer(data, (SCREEN_WIDTH, SCREEN_HEIGHT), fmt)
            screen.blit(image, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and start the game."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise CubError("The number of arguments must be 2!")
        scene = load_scene(args[0])
        run(scene)
    except CubError as exc:
        sys.stdout.write(format_error(exc.message))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())