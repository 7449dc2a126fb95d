"""Reading a ``.cub`` scene file into elements and a validated map."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterator, Union

from .elements import ELEMENT_COUNT, Elements, parse_elements
from .errors import CubError
from .mapcheck import GameMap, is_connected_lines, validate_map
from .text import WHITESPACE, is_space, split_fields, trim

SCENE_EXTENSION = ".cub"

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


@dataclass
class Scene:
    """A fully parsed scene: texture paths, colours and the map."""

    elements: Elements
    game_map: GameMap


def has_extension(path: str, ext: str) -> bool:
    """Return True if ``path`` ends with the extension ``ext``."""
    return len(path) >= len(ext) and path.endswith(ext)


def _lines(raw: str) -> Iterator[str]:
    for match in _LINE.finditer(raw):
        yield match.group(0)


def _is_blank(line: str) -> bool:
    return all(is_space(ch) for ch in line)


def read_content(path: Union[str, os.PathLike]) -> str:
    """Read a scene file, dropping blank lines until the map starts, and trim it."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            raw = handle.read()
    except OSError as exc:
        raise CubError("Invalid fd!") from exc
    kept = []
    for line in _lines(raw):
        if len(kept) > ELEMENT_COUNT or not _is_blank(line):
            kept.append(line)
    return trim("".join(kept), WHITESPACE)


def parse_scene(text: str) -> Scene:
    """Parse the trimmed content of a scene file."""
    if not text:
        raise CubError("empty map")
    if not is_connected_lines(text):
        raise CubError("Map is not connected.")
    content = split_fields(text, "\n")
    elements = parse_elements(content)
    rows = content[ELEMENT_COUNT:]
    if not rows:
        raise CubError("There is no map in the .cub file!")
    return Scene(elements=elements, game_map=validate_map(rows))


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Load and validate the scene stored at ``path``."""
    path = os.fspath(path)
    if not has_extension(path, SCENE_EXTENSION):
        raise CubError("not cub file")
    return parse_scene(read_content(path))