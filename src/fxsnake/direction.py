# src/fxsnake/direction.py
from enum import Enum

from .vector import GridVector


class Direction(Enum):
    NONE = -1
    RIGHT = 0
    UP = 1
    LEFT = 2
    DOWN = 3

    @property
    def step(self) -> GridVector:
        """Unit step on the grid (y grows downwards). NONE does not move."""
        return _STEPS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_STEPS = {
    Direction.NONE:  GridVector(0, 0),
    Direction.RIGHT: GridVector(1, 0),
    Direction.UP:    GridVector(0, -1),
    Direction.LEFT:  GridVector(-1, 0),
    Direction.DOWN:  GridVector(0, 1),
}

_OPPOSITES = {
    Direction.NONE:  Direction.NONE,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP:    Direction.DOWN,
    Direction.LEFT:  Direction.RIGHT,
    Direction.DOWN:  Direction.UP,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    return a is not Direction.NONE and a.opposite is b
