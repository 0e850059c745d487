# src/fxsnake/game.py
from dataclasses import dataclass
from typing import List, Optional
import math
import random

from .config import Config, CFG
from .direction import Direction, is_opposite
from .grid import Grid
from .vector import GridVector

# Outcomes of a single tick
MOVED = "moved"
COLLECTED = "collected"
DIED = "died"

# ---------- State ----------
@dataclass
class GameState:
    snake: List[GridVector]        # head at index 0
    direction: Direction
    tail_length: int
    food: Optional[GridVector]     # None -> respawn on next tick
    score: int
    delay_ms: int                  # current tick interval

    @property
    def head(self) -> GridVector:
        return self.snake[0]

def new_game_state(grid: Grid, cfg: Config = CFG) -> GameState:
    return GameState(
        snake=[grid.center()],
        direction=Direction.UP,
        tail_length=cfg.initial_tail_length,
        food=None,
        score=0,
        delay_ms=cfg.base_delay_ms,
    )

# ---------- Helpers ----------
def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def change_direction(state: GameState, direction: Direction) -> bool:
    """Turn unless it would reverse onto the body. Returns True if accepted."""
    if is_opposite(state.direction, direction):
        return False
    state.direction = direction
    return True

# ---------- Movement & collision ----------
def next_head(state: GameState, grid: Grid) -> GridVector:
    return grid.wrap(state.head + state.direction.step)

def move_snake(state: GameState, grid: Grid) -> bool:
    """
    Advance the head one cell and trim the tail.
    Returns True if the new head landed on the rest of the body.
    """
    new_head = next_head(state, grid)
    state.snake.insert(0, new_head)
    if len(state.snake) > state.tail_length:
        state.snake.pop()

    return any(new_head == cell for cell in state.snake[1:])

# ---------- Food & scoring ----------
def spawn_food(state: GameState, grid: Grid, rng: random.Random) -> None:
    # Body cells are not excluded; food may appear under the snake.
    if state.food is None:
        state.food = grid.random_cell(rng)

def collect_food(state: GameState, rng: random.Random, cfg: Config = CFG) -> int:
    """Grow, clear the food, add a random score and speed up. Returns the gain."""
    state.tail_length += 1
    state.food = None
    gained = round_half_up(cfg.score_scale * (cfg.cell_size / 8) * rng.random())
    state.score += gained
    state.delay_ms = max(cfg.min_delay_ms, math.floor(state.delay_ms * cfg.speedup))
    return gained

def step_game(state: GameState, grid: Grid, rng: random.Random, cfg: Config = CFG) -> str:
    """
    Advance the game by one tick:
    spawn food if needed, move, check self-collision, then check for food.
    Returns MOVED, COLLECTED or DIED. On DIED the food check is skipped.
    """
    spawn_food(state, grid, rng)

    if move_snake(state, grid):
        return DIED

    if state.head == state.food:
        collect_food(state, rng, cfg)
        return COLLECTED
    return MOVED
