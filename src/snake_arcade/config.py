from dataclasses import dataclass
from typing import Optional

# ----- Board -----
BOARD_SIZE = 20
CELL_SIZE = 20
HUD_HEIGHT = 48

# ----- Colors -----
BG         = (26, 10, 10)      # #1a0a0a
GRID_LINE  = (74, 21, 21)      # #4a1515
SNAKE_HEAD = (220, 38, 38)     # #dc2626
SNAKE_BODY = (153, 27, 27)     # #991b1b
FOOD       = (251, 191, 36)    # #fbbf24
TEXT       = (220, 220, 230)
SCORE_TEXT = (74, 222, 128)
HIGH_TEXT  = (250, 204, 21)
ALERT_TEXT = (248, 113, 113)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

HIGH_SCORE_KEY = "snakeHighScore"

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    board_size: int = BOARD_SIZE
    cell_size: int = CELL_SIZE
    base_speed_ms: int = 200
    speed_step_ms: int = 20
    points_per_speedup: int = 50
    min_speed_ms: int = 100
    food_points: int = 10
    seed: Optional[int] = None
    high_score_key: str = HIGH_SCORE_KEY

    def __post_init__(self):
        if self.board_size < 4:
            raise ValueError(f"board_size must be at least 4, got {self.board_size}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.points_per_speedup <= 0:
            raise ValueError("points_per_speedup must be positive")
        if self.food_points <= 0:
            raise ValueError(f"food_points must be positive, got {self.food_points}")
        if self.min_speed_ms <= 0 or self.speed_step_ms < 0:
            raise ValueError("speeds must be positive")
        if self.min_speed_ms > self.base_speed_ms:
            raise ValueError(
                f"min_speed_ms ({self.min_speed_ms}) exceeds base_speed_ms ({self.base_speed_ms})"
            )

    @property
    def board_px(self) -> int:
        return self.board_size * self.cell_size

CFG = Config()
