"""Numeric board view of a GameState.

The renderer and the text dump both work off this array rather than walking
the snake tuple themselves.
"""

from __future__ import annotations

from typing import List

import numpy as np  # type: ignore

from .config import CFG
from .game import GameState, Position

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

GLYPHS = {
    EMPTY: ".",
    BODY: "o",
    HEAD: "@",
    FOOD: "*",
}


def board_grid(state: GameState, board_size: int = CFG.board_size) -> np.ndarray:
    """
    Return a (board_size, board_size) int8 array indexed [y, x].

    The head is written last so it wins over a body cell; on a game-over
    state produced by a wall hit the head is still on the board.
    """
    grid = np.zeros((board_size, board_size), dtype=np.int8)
    fx, fy = state.food
    grid[fy, fx] = FOOD
    if state.snake:
        xs, ys = zip(*state.snake)
        grid[list(ys), list(xs)] = BODY
        hx, hy = state.head
        grid[hy, hx] = HEAD
    return grid


def cells(grid: np.ndarray, kind: int) -> List[Position]:
    """(x, y) positions of every cell holding ``kind``, in row-major order."""
    return [(int(x), int(y)) for y, x in np.argwhere(grid == kind)]


def render_text(state: GameState, board_size: int = CFG.board_size) -> str:
    grid = board_grid(state, board_size)
    rows = ["".join(GLYPHS[int(c)] for c in row) for row in grid]
    return "\n".join(rows)
