# src/fxsnake/vector.py
"""
Two small 2D value types.

Vector2 holds real components. GridVector holds integer components and floors
whatever it is built from, so arithmetic on it always lands on a grid cell.
Both compare equal to each other when their components match.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, eq=False)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def plus(self, other: AnyVector) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def equals(self, other: object) -> bool:
        if not isinstance(other, (Vector2, GridVector)):
            return False
        return self.x == other.x and self.y == other.y

    def to_grid(self) -> GridVector:
        return GridVector(self.x, self.y)

    __add__ = plus
    __eq__ = equals

    def __hash__(self) -> int:
        return hash((self.x, self.y))


@dataclass(frozen=True, eq=False)
class GridVector:
    x: int = 0
    y: int = 0

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to store the floored values.
        object.__setattr__(self, "x", math.floor(self.x))
        object.__setattr__(self, "y", math.floor(self.y))

    def plus(self, other: AnyVector) -> GridVector:
        return GridVector(self.x + other.x, self.y + other.y)

    def equals(self, other: object) -> bool:
        if not isinstance(other, (Vector2, GridVector)):
            return False
        return self.x == other.x and self.y == other.y

    def to_vector2(self) -> Vector2:
        return Vector2(float(self.x), float(self.y))

    __add__ = plus
    __eq__ = equals

    def __hash__(self) -> int:
        return hash((self.x, self.y))


AnyVector = Union[Vector2, GridVector]
