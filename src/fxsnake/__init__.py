# src/fxsnake/__init__.py
"""Grid snake on a toroidal board, driven by a cancellable tick scheduler."""

from .direction import Direction
from .game import GameState, new_game_state, step_game
from .grid import Grid, MissingSurfaceError
from .loop import GameLoop
from .scheduler import Scheduler
from .vector import GridVector, Vector2

__all__ = [
    "Direction",
    "GameState",
    "new_game_state",
    "step_game",
    "Grid",
    "MissingSurfaceError",
    "GameLoop",
    "Scheduler",
    "GridVector",
    "Vector2",
]
