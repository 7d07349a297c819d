# game.py
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple
import random

from .config import RIGHT, CFG, Config

Position = Tuple[int, int]
Direction = Tuple[int, int]


class BoardFullError(ValueError):
    """Raised when there is no free cell left to place food on."""


# ---------- Helpers ----------
def in_bounds(pos: Position, board_size: int = CFG.board_size) -> bool:
    x, y = pos
    return 0 <= x < board_size and 0 <= y < board_size

def spawn_food(snake: Sequence[Position], rng=random, board_size: int = CFG.board_size) -> Position:
    """Pick a uniformly random free cell by resampling until one misses the snake."""
    occupied = set(snake)
    if len(occupied) >= board_size * board_size:
        raise BoardFullError(f"no free cell on a {board_size}x{board_size} board")
    while True:
        fx = rng.randrange(board_size)
        fy = rng.randrange(board_size)
        if (fx, fy) not in occupied:
            return (fx, fy)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0

def change_direction(current: Direction, requested: Direction) -> Direction:
    """Return the heading for the next tick; a 180° turn is ignored."""
    if is_opposite(current, requested):
        return current
    return requested

def game_speed(score: int, cfg: Config = CFG) -> int:
    """Tick interval in ms: faster every ``points_per_speedup`` points, floored."""
    speedup = (score // cfg.points_per_speedup) * cfg.speed_step_ms
    return max(cfg.min_speed_ms, cfg.base_speed_ms - speedup)


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Position, ...]   # head at index 0
    food: Position
    direction: Direction
    score: int = 0
    game_over: bool = False
    paused: bool = False
    moved: Optional[Direction] = None   # heading the last tick moved in

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def committed(self) -> Direction:
        return self.direction if self.moved is None else self.moved

def new_game_state(rng=random, cfg: Config = CFG) -> GameState:
    mid = cfg.board_size // 2
    snake = (
        (mid, mid),
        (mid - 1, mid),
        (mid - 2, mid),
    )
    return GameState(
        snake=snake,
        food=spawn_food(snake, rng, cfg.board_size),
        direction=RIGHT,
        moved=RIGHT,
    )


# ---------- Update ----------
def move_snake(state: GameState, rng=random, cfg: Config = CFG) -> GameState:
    """
    Advance the game by one tick and return the next state.
    - game over / paused: the same object comes back untouched.
    - wall or self collision: same snake and score, game_over set.
    - food: grow by one, add ``food_points`` and respawn food.
    """
    if state.game_over or state.paused:
        return state

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, cfg.board_size):
        return replace(state, game_over=True)

    # Self collision
    if new_head in state.snake:
        return replace(state, game_over=True)

    snake = (new_head,) + state.snake

    # Move / grow
    if new_head == state.food:
        return replace(
            state,
            snake=snake,
            food=spawn_food(snake, rng, cfg.board_size),
            score=state.score + cfg.food_points,
            moved=state.direction,
        )
    return replace(state, snake=snake[:-1], moved=state.direction)

def steer(state: GameState, requested: Direction) -> GameState:
    """
    Apply a turn right away. Reversal is judged against the heading of the
    last tick, not the live direction.
    """
    if change_direction(state.committed, requested) != requested:
        return state
    if requested == state.direction:
        return state
    return replace(state, direction=requested)

def toggle_pause(state: GameState) -> GameState:
    if state.game_over:
        return state
    return replace(state, paused=not state.paused)
