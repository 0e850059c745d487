# src/fxsnake/loop.py
"""
The game loop controller.

Owns the run / pause / restart lifecycle and drives ticks through a Scheduler.
There is never more than one tick pending: every transition that must
invalidate the next tick (restart, pause, an explicit tick) cancels the
outstanding handle before scheduling a new one.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .config import Config, CFG
from .controls import Command, resolve_key
from .direction import Direction
from .game import GameState, COLLECTED, DIED, new_game_state, step_game, change_direction
from .grid import Grid
from .scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        grid: Grid,
        scheduler: Scheduler,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
        renderer=None,
        on_death: Optional[Callable[[GameState], None]] = None,
    ):
        logger.info("Constructing a new game.")

        self.grid = grid
        self.scheduler = scheduler
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.renderer = renderer
        self.death_hook = on_death

        self.state: GameState = new_game_state(grid, cfg)
        self.running = False
        self._pending: Optional[ScheduledCall] = None

        self.start()

    # Lifecycle -----------------------------------------------------------------
    def start(self) -> None:
        """Reset the run and schedule its first tick right away."""
        logger.info("Starting a new game.")

        self._cancel_pending()
        self.state = new_game_state(self.grid, self.cfg)
        self.running = True
        self._schedule(0)

    restart = start

    def toggle_pause(self) -> None:
        self.running = not self.running
        if self.running:
            self._schedule(0)
        else:
            self._cancel_pending()

        logger.info(f"Game {'resumed' if self.running else 'paused'}.")

    @property
    def has_pending_tick(self) -> bool:
        return self._pending is not None and not self._pending.cancelled

    # Tick ----------------------------------------------------------------------
    def tick(self) -> str:
        self._cancel_pending()

        score_before = self.state.score
        outcome = step_game(self.state, self.grid, self.rng, self.cfg)

        if outcome == DIED:
            self.on_death()
        elif outcome == COLLECTED:
            logger.info(
                f"Collected food. New tail length: {self.state.tail_length}, "
                f"added score: {self.state.score - score_before}, "
                f"loop delay: {self.state.delay_ms}"
            )

        if self.renderer is not None:
            self.renderer.draw(self.state)

        # Delay is read after the step so a speed-up applies immediately
        if self.running:
            self._schedule(self.state.delay_ms)
        return outcome

    def on_death(self) -> None:
        # The run keeps ticking after a death; only the hook is told.
        logger.info("YOU'RE DEAD.")
        if self.death_hook is not None:
            self.death_hook(self.state)

    # Input ---------------------------------------------------------------------
    def handle_key(self, key: Optional[str]) -> None:
        action = resolve_key(key, self.cfg.controls)

        if action is Command.RESTART:
            self.restart()
        elif action is Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif isinstance(action, Direction) and self.running:
            self.change_direction(action)

    def change_direction(self, direction: Direction) -> bool:
        accepted = change_direction(self.state, direction)
        if accepted:
            logger.info(f"Switched to direction {direction.name}")
        return accepted

    # Scheduling ----------------------------------------------------------------
    def _schedule(self, delay_ms: int) -> None:
        self._cancel_pending()
        self._pending = self.scheduler.call_later(delay_ms, self.tick)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
