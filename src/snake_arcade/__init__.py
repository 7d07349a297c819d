# src/snake_arcade/__init__.py
"""Grid Snake: pure game rules plus a pygame front end."""

from snake_arcade.game import (
    GameState,
    BoardFullError,
    new_game_state,
    move_snake,
    change_direction,
    game_speed,
    spawn_food,
)
from snake_arcade.highscore import get_high_score, save_high_score

__all__ = [
    "GameState",
    "BoardFullError",
    "new_game_state",
    "move_snake",
    "change_direction",
    "game_speed",
    "spawn_food",
    "get_high_score",
    "save_high_score",
]
