"""Compass headings and their rotation tables."""

from enum import Enum


class Heading(Enum):
    """Rover facing direction, clockwise order N, E, S, W."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def rotate_left(self):
        return _LEFT[self]

    def rotate_right(self):
        return _RIGHT[self]

    @property
    def step(self):
        """Unit (dx, dy) for one move forward."""
        return _STEP[self]


_LEFT = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}

_RIGHT = {
    Heading.NORTH: Heading.EAST,
    Heading.EAST: Heading.SOUTH,
    Heading.SOUTH: Heading.WEST,
    Heading.WEST: Heading.NORTH,
}

_STEP = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


def rotate_left(heading):
    """Counter-clockwise quarter turn."""
    return _LEFT[heading]


def rotate_right(heading):
    """Clockwise quarter turn."""
    return _RIGHT[heading]
