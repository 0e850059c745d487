"""Tests for the movement, collision, food and scoring rules in game.py."""

import random
from unittest.mock import Mock

import pytest

from fxsnake.config import Config
from fxsnake.direction import Direction, is_opposite
from fxsnake.game import (
    COLLECTED,
    DIED,
    MOVED,
    change_direction,
    collect_food,
    move_snake,
    new_game_state,
    next_head,
    spawn_food,
    step_game,
)
from fxsnake.vector import GridVector

FAR_AWAY = GridVector(0, 0)


@pytest.fixture
def state(grid):
    s = new_game_state(grid)
    s.food = FAR_AWAY
    return s


class TestDirection:
    def test_steps(self):
        """Unit steps point the right way with y growing downwards."""
        assert Direction.UP.step == GridVector(0, -1)
        assert Direction.DOWN.step == GridVector(0, 1)
        assert Direction.RIGHT.step == GridVector(1, 0)
        assert Direction.LEFT.step == GridVector(-1, 0)
        assert Direction.NONE.step == GridVector(0, 0)

    def test_opposites(self):
        """Up/Down and Left/Right are the forbidden pairs."""
        assert is_opposite(Direction.UP, Direction.DOWN)
        assert is_opposite(Direction.LEFT, Direction.RIGHT)
        assert not is_opposite(Direction.UP, Direction.LEFT)
        assert not is_opposite(Direction.NONE, Direction.NONE)


class TestChangeDirection:
    @pytest.mark.parametrize("current", [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT])
    @pytest.mark.parametrize("requested", [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT])
    def test_only_reversal_is_rejected(self, state, current, requested):
        """Any turn is accepted except the exact opposite."""
        state.direction = current
        accepted = change_direction(state, requested)
        if requested is current.opposite:
            assert not accepted
            assert state.direction is current
        else:
            assert accepted
            assert state.direction is requested

    def test_any_direction_from_none(self, state):
        """Before moving, nothing counts as a reversal."""
        state.direction = Direction.NONE
        assert change_direction(state, Direction.DOWN)
        assert state.direction is Direction.DOWN


class TestMovement:
    def test_scenario_single_step_up(self, grid, state):
        """(10,7) moving up on a 20x15 grid gives [(10,6), (10,7)]."""
        assert state.snake == [GridVector(10, 7)]
        collided = move_snake(state, grid)
        assert not collided
        assert state.snake == [GridVector(10, 6), GridVector(10, 7)]

    def test_scenario_wrap_left(self, grid, state):
        """(0,5) moving left re-enters at (19,5)."""
        state.snake = [GridVector(0, 5)]
        state.direction = Direction.LEFT
        move_snake(state, grid)
        assert state.head == GridVector(19, 5)

    @pytest.mark.parametrize(
        "start, direction, expected",
        [
            (GridVector(19, 3), Direction.RIGHT, GridVector(0, 3)),
            (GridVector(4, 0), Direction.UP, GridVector(4, 14)),
            (GridVector(4, 14), Direction.DOWN, GridVector(4, 0)),
        ],
    )
    def test_wraparound(self, grid, state, start, direction, expected):
        """Every edge wraps to the opposite one."""
        state.snake = [start]
        state.direction = direction
        assert next_head(state, grid) == expected

    def test_none_stands_still(self, grid, state):
        """With no direction the head is re-inserted in place."""
        state.direction = Direction.NONE
        move_snake(state, grid)
        assert state.snake == [GridVector(10, 7), GridVector(10, 7)]

    @pytest.mark.parametrize("ticks", [0, 1, 3, 4, 5, 9])
    def test_body_length_capped_by_tail_length(self, grid, state, ticks):
        """After N ticks the body is min(N + 1, 5) long."""
        state.direction = Direction.RIGHT
        for _ in range(ticks):
            move_snake(state, grid)
        assert len(state.snake) == min(ticks + 1, 5)

    def test_self_collision(self, grid, state):
        """Turning back into the body is detected."""
        state.snake = [
            GridVector(5, 5), GridVector(6, 5), GridVector(6, 6),
            GridVector(5, 6), GridVector(4, 6),
        ]
        state.tail_length = 6
        state.direction = Direction.DOWN
        assert move_snake(state, grid)
        assert state.head == GridVector(5, 6)

    def test_vacated_tail_cell_is_not_a_collision(self, grid, state):
        """The trimmed tail cell is free again on the same tick."""
        state.snake = [GridVector(5, 5), GridVector(6, 5), GridVector(6, 6), GridVector(5, 6)]
        state.tail_length = 4
        state.direction = Direction.DOWN
        assert not move_snake(state, grid)
        assert len(state.snake) == 4


class TestFood:
    def test_spawn_only_when_absent(self, grid, state, rng):
        """Existing food stays put; missing food is placed in bounds."""
        spawn_food(state, grid, rng)
        assert state.food == FAR_AWAY

        state.food = None
        spawn_food(state, grid, rng)
        assert state.food is not None
        assert grid.contains(state.food)

    def test_collect_effects(self, state):
        """Collecting grows by one, clears food, scores and speeds up."""
        cfg = Config()
        for seed in range(20):
            s = new_game_state_copy(state)
            gained = collect_food(s, random.Random(seed), cfg)
            assert s.tail_length == state.tail_length + 1
            assert s.food is None
            assert 0 <= gained <= round(175 * (cfg.cell_size / 8))
            assert s.score == state.score + gained
            assert s.delay_ms == 216

    def test_score_uses_cell_size(self, state):
        """The score gain scales with the cell size."""
        fixed = Mock()
        fixed.random.return_value = 0.5
        assert collect_food(state, fixed, Config(cell_size=8)) == 88
        assert collect_food(state, fixed, Config(cell_size=16)) == 175

    def test_delay_has_a_floor(self, state, rng):
        """The delay never drops below 20ms."""
        for _ in range(100):
            collect_food(state, rng)
        assert state.delay_ms == 20
        assert state.tail_length == 105


class TestStepGame:
    def test_moves(self, grid, state, rng):
        """A plain step reports MOVED."""
        assert step_game(state, grid, rng) == MOVED
        assert state.snake[0] == GridVector(10, 6)

    def test_collects_food_in_the_way(self, grid, state, rng):
        """Landing on food collects it on the same tick."""
        state.food = GridVector(10, 6)
        assert step_game(state, grid, rng) == COLLECTED
        assert state.tail_length == 6
        assert state.food is None

    def test_spawned_food_can_be_collected_same_tick(self, grid, state):
        """Food spawned this tick is collected if the head moves onto it."""
        state.food = None
        rng = Mock()
        # random_cell -> (10.x, 6.x), then the score roll
        rng.random.side_effect = [10.5 / 20, 6.5 / 15, 0.0]
        assert step_game(state, grid, rng) == COLLECTED
        assert state.score == 0
        assert state.tail_length == 6

    def test_death_skips_collection(self, grid, state, rng):
        """If the head hits the body, food under it is not collected."""
        state.snake = [
            GridVector(5, 5), GridVector(6, 5), GridVector(6, 6),
            GridVector(5, 6), GridVector(4, 6),
        ]
        state.tail_length = 6
        state.direction = Direction.DOWN
        state.food = GridVector(5, 6)
        assert step_game(state, grid, rng) == DIED
        assert state.tail_length == 6
        assert state.score == 0
        assert state.food == GridVector(5, 6)


def new_game_state_copy(state):
    return type(state)(
        snake=list(state.snake),
        direction=state.direction,
        tail_length=state.tail_length,
        food=state.food,
        score=state.score,
        delay_ms=state.delay_ms,
    )
