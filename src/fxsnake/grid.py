# src/fxsnake/grid.py
from __future__ import annotations

import random
from dataclasses import dataclass

from .vector import GridVector


class MissingSurfaceError(RuntimeError):
    """Raised when the game is wired up without a drawing surface."""


@dataclass(frozen=True)
class Grid:
    """
    The movement lattice laid over a pixel surface.

    Cells are `cell_size` pixels square; a partial cell at the right or bottom
    edge of the surface is not part of the grid.
    """
    pixel_width: int
    pixel_height: int
    cell_size: int

    @classmethod
    def from_surface(cls, surface, cell_size: int) -> Grid:
        """Build a grid covering a pygame Surface (anything with get_size())."""
        if surface is None:
            raise MissingSurfaceError(
                "No drawing surface given; the game cannot run without one."
            )
        w, h = surface.get_size()
        return cls(w, h, cell_size)

    @property
    def width(self) -> int:
        return self.pixel_width // self.cell_size

    @property
    def height(self) -> int:
        return self.pixel_height // self.cell_size

    # Not floored: callers go through GridVector when they need a cell.
    def to_grid(self, coord: float) -> float:
        return coord / self.cell_size

    def to_pixel(self, coord: float) -> float:
        return coord * self.cell_size

    def center(self) -> GridVector:
        return GridVector(self.width / 2, self.height / 2)

    def random_cell(self, rng: random.Random) -> GridVector:
        return GridVector(self.width * rng.random(), self.height * rng.random())

    def contains(self, cell: GridVector) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def wrap(self, cell: GridVector) -> GridVector:
        """Toroidal wrap for a cell at most one step outside the grid."""
        x, y = cell.x, cell.y
        if x < 0:
            x = self.width - 1
        elif x > self.width - 1:
            x = 0
        if y < 0:
            y = self.height - 1
        elif y > self.height - 1:
            y = 0
        return GridVector(x, y)
