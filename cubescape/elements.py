"""Parsing of the six element lines at the top of a scene file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .errors import CubError
from .text import WHITESPACE, parse_int, split_fields, trim, is_space

ELEMENT_COUNT = 6
TEXTURE_IDENTIFIERS = ("NO", "SO", "EA", "WE")
COLOR_IDENTIFIERS = ("F", "C")

_TEXTURE_FIELDS = {"N": "north", "S": "south", "E": "east", "W": "west"}
_COLOR_NAMES = {"F": "Floor", "C": "Ceiling"}
_RGB_CHARS = set(",0123456789") | (set(WHITESPACE) - {"\n"})

RGB = Tuple[int, int, int]


@dataclass
class Elements:
    """Texture paths and floor/ceiling colours declared by a scene."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None
    floor: Optional[RGB] = None
    ceiling: Optional[RGB] = None

    @property
    def is_complete(self) -> bool:
        return None not in (
            self.north,
            self.south,
            self.west,
            self.east,
            self.floor,
            self.ceiling,
        )


@dataclass
class IdentifierTracker:
    """Checks element identifiers and rejects repeated texture identifiers."""

    counts: dict = field(default_factory=dict)

    def accept(self, c1: str, c2: str, c3: str) -> bool:
        """Return True if the first three characters of a line form a valid identifier."""
        ident = c1 + c2
        if len(c1) == 1 and ident in TEXTURE_IDENTIFIERS:
            self.counts[ident] = self.counts.get(ident, 0) + 1
            if self.counts[ident] > 1:
                return False
            return is_space(c3)
        if c1 in COLOR_IDENTIFIERS and c1:
            # A line ending right after the identifier is accepted as well.
            return c2 == "" or c2 in WHITESPACE
        return False


def is_valid_rgb(rgb: Iterable[int]) -> bool:
    """Return True if every channel lies in 0..255."""
    return all(0 <= channel <= 255 for channel in rgb)


def _channel(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return -1


def parse_rgb(data: str, kind: str) -> RGB:
    """Parse an ``R,G,B`` colour for the floor ('F') or ceiling ('C')."""
    if kind not in COLOR_IDENTIFIERS:
        raise ValueError(f"unknown colour element {kind!r}")
    fields = split_fields(data, ",")
    if len(fields) != 3:
        raise CubError("Wrong RGB channel count!")
    if any(c not in _RGB_CHARS for c in data):
        raise CubError("RGB channels contain only digits!")
    if data.count(",") != 2:
        raise CubError("RGB color array contains 3 channels!")
    rgb = (_channel(fields[0]), _channel(fields[1]), _channel(fields[2]))
    if not is_valid_rgb(rgb):
        raise CubError(f"Invalid {_COLOR_NAMES[kind]} RGB channel range!")
    return rgb


def has_texture_path(path: str) -> bool:
    """Return True if ``path`` can be opened for reading and ends in ``.xpm``."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        return False
    os.close(fd)
    return path.endswith(".xpm")


def parse_elements(lines: Iterable[str]) -> Elements:
    """Parse the first six lines of a scene into an :class:`Elements`."""
    lines = list(lines)
    if len(lines) < ELEMENT_COUNT:
        raise CubError("Missed or Invalid Element!")
    tracker = IdentifierTracker()
    elements = Elements()
    for line in lines[:ELEMENT_COUNT]:
        body = line.lstrip(WHITESPACE)
        c1, c2, c3 = body[0:1], body[1:2], body[2:3]
        if not tracker.accept(c1, c2, c3):
            raise CubError("Element has incorrect type identifier!")
        data = trim(body[2:], WHITESPACE)
        if c1 in _TEXTURE_FIELDS:
            if not has_texture_path(data):
                raise CubError("Element has incorrect path!")
            setattr(elements, _TEXTURE_FIELDS[c1], data)
        elif c1 == "F":
            elements.floor = parse_rgb(data, c1)
        elif c1 == "C":
            elements.ceiling = parse_rgb(data, c1)
        else:
            raise CubError("Missed or Invalid Element!")
    if not elements.is_complete:
        raise CubError("Missed or Invalid Element!")
    return elements