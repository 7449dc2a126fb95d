# cubescape

A small first-person maze explorer. It reads a `.cub` scene file, checks it
carefully, and renders the maze with a grid raycaster in a 1500×1000 window
opened with pygame.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Running

    cubescape path/to/level.cub

The command takes exactly one argument, which must end in `.cub`. If the
arguments or the scene are not valid, or a texture cannot be loaded, it prints
`Error`, then a line that explains what is wrong, and exits with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| ← / →        | turn                |
| Esc          | quit                |

Closing the window also quits. Walls block movement.

## The scene file

Blank lines before the map are ignored. The first six non-blank lines are
elements, in any order, each given once; leading blanks on a line are allowed:

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

- `NO`, `SO`, `WE` and `EA` name wall textures. Each path must be readable and
  end in `.xpm`. Textures are read with Pillow; they are drawn as 64×64 tiles.
- `F` and `C` give the floor and ceiling colours as exactly three
  comma-separated channels from 0 to 255. Only digits, commas and blanks are
  allowed.

The map follows, made only of ` `, `0`, `1` and exactly one spawn letter from
`N`, `S`, `E` or `W`, which also gives the direction the player faces:

    111111
    100101
    101001
    1100N1
    111111

Shorter rows are padded with spaces on the right. The map must have no empty
lines in it, must be closed by walls (the border holds only walls or spaces,
and a space may only touch walls or other spaces), and every floor and wall
cell must be reachable from the spawn point.

## Using it as a library

    from cubescape.scene import load_scene
    from cubescape.errors import CubError

    try:
        scene = load_scene("level.cub")
    except CubError as exc:
        print(exc)

- `cubescape.scene.parse_scene` checks scene text that is already in memory
  and returns a `Scene` with `elements` and `game_map`.
- `cubescape.mapcheck.validate_map` checks a list of map rows alone and
  returns a `GameMap` (`grid`, `spawn_x`, `spawn_y`, `direction`).
- `cubescape.elements.parse_elements` and `parse_rgb` check element lines.
- `cubescape.player.Player.from_spawn` builds a player; `Keys` tracks held
  keys and `Player.apply_keys` moves the player for one frame.
- `cubescape.raycast.cast_ray` describes the wall a screen column sees, and
  `render_frame` draws a whole frame into a plain list of
  1500 × 1000 integer pixels, so it can be used without a window.
- `cubescape.textures.load_texture` reads an image into a `Texture` of packed
  `0xRRGGBB` pixels.
- `cubescape.app.run` opens the window for a loaded scene; `main` is the
  command above.

## What it does not do

There are no enemies, sprites, doors, minimap, mouse look or sound: the game
is walking and turning inside the maze. Scenes are only checked and loaded,
never written.