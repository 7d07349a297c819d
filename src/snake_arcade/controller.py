# controller.py
from __future__ import annotations

import logging
import random
from typing import Optional

from .config import UP, DOWN, LEFT, RIGHT, CFG, Config
from .game import (
    Direction, GameState, new_game_state, move_snake, steer, toggle_pause, game_speed,
)
from .highscore import ScoreStorage, get_high_score, save_high_score
from .scheduler import Scheduler, TimerHandle

log = logging.getLogger(__name__)

# browser-style key names, lower case
KEY_DIRECTIONS = {
    "arrowup": UP, "w": UP,
    "arrowdown": DOWN, "s": DOWN,
    "arrowleft": LEFT, "a": LEFT,
    "arrowright": RIGHT, "d": RIGHT,
}
PAUSE_KEY = "space"
ENTER_KEY = "enter"


class GameController:
    """
    Owns the live GameState and the timer chain that advances it.

    Every state change re-arms a single one-shot timer whose delay comes from
    game_speed(score). Nothing is armed while paused or after game over.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        storage: Optional[ScoreStorage] = None,
        rng: Optional[random.Random] = None,
        cfg: Config = CFG,
    ) -> None:
        self.scheduler = scheduler
        self.storage = storage
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.state: GameState = new_game_state(self.rng, cfg)
        self.started = False
        self.high_score = get_high_score(storage, cfg.high_score_key)
        self._timer: Optional[TimerHandle] = None

    # ---------- Lifecycle ----------
    def start(self) -> None:
        self.state = new_game_state(self.rng, self.cfg)
        self.started = True
        log.info("New game started (high score %d)", self.high_score)
        self._rearm()

    restart = start

    def tick(self) -> None:
        self._timer = None
        prev = self.state
        self.state = move_snake(prev, self.rng, self.cfg)
        if self.state.game_over and not prev.game_over:
            self._finish()
        self._rearm()

    def _finish(self) -> None:
        score = self.state.score
        log.info("Game over with score %d (length %d)", score, len(self.state.snake))
        if save_high_score(self.storage, score, self.cfg.high_score_key):
            log.info("New high score: %d", score)
        # storage may be None; keep the in-memory best either way
        self.high_score = max(self.high_score, score)

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _rearm(self) -> None:
        self._cancel()
        if not self.started or self.state.game_over or self.state.paused:
            return
        self._timer = self.scheduler.call_later(self.tick_interval, self.tick)

    @property
    def tick_interval(self) -> int:
        return game_speed(self.state.score, self.cfg)

    @property
    def running(self) -> bool:
        return self._timer is not None

    # ---------- Input ----------
    def toggle_pause(self) -> None:
        if not self.started or self.state.game_over:
            return
        self.state = toggle_pause(self.state)
        self._rearm()

    def steer(self, direction: Direction) -> None:
        if not self.started or self.state.game_over or self.state.paused:
            return
        # applied now, picked up by the next tick; the pending timer keeps its slot
        self.state = steer(self.state, direction)

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False for keys the game does not use."""
        key = key.lower()
        if key == ENTER_KEY:
            if not self.started or self.state.game_over:
                self.restart()
            return True
        if key == PAUSE_KEY:
            self.toggle_pause()
            return True
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        self.steer(direction)
        return True

    def stop(self) -> None:
        self._cancel()
