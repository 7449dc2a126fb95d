"""Loading of wall texture images into flat pixel lists."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Tuple, Union

from PIL import Image

from .elements import Elements
from .errors import CubError


@dataclass
class Texture:
    """An image stored row by row as packed ``0xRRGGBB`` pixel values."""

    width: int
    height: int
    pixels: List[int]


def load_texture(path: Union[str, os.PathLike]) -> Texture:
    """Read the image at ``path`` into a :class:`Texture`."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except (OSError, ValueError) as exc:
        raise CubError("surface cannot initialized") from exc
    channels = iter(rgb.tobytes())
    pixels = [(r << 16) | (g << 8) | b for r, g, b in zip(channels, channels, channels)]
    if not pixels:
        raise CubError("mlx image data cannot initialized")
    width, height = rgb.size
    return Texture(width=width, height=height, pixels=pixels)


def load_wall_textures(elements: Elements) -> Tuple[Texture, Texture, Texture, Texture]:
    """Load the east, west, north and south textures, in that order."""
    paths = (elements.east, elements.west, elements.north, elements.south)
    if any(path is None for path in paths):
        raise CubError("surface cannot initialized")
    east, west, north, south = (load_texture(path) for path in paths)
    return east, west, north, south