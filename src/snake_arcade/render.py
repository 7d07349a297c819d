# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CFG, Config, HUD_HEIGHT,
    BG, GRID_LINE, SNAKE_HEAD, SNAKE_BODY, FOOD,
    TEXT, SCORE_TEXT, HIGH_TEXT, ALERT_TEXT,
)
from .controller import GameController
from .game import GameState
from .grid import board_grid, cells, BODY, HEAD, FOOD as FOOD_CELL

# ---------- Helpers ----------
def draw_cell(surface: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell: int) -> None:
    # 1px inset so the grid lines stay visible
    rect = pygame.Rect(gx * cell + 1, gy * cell + 1, cell - 2, cell - 2)
    pygame.draw.rect(surface, color, rect)

def draw_grid_lines(surface: pygame.Surface, cfg: Config = CFG) -> None:
    size = cfg.board_px
    for i in range(cfg.board_size + 1):
        p = i * cfg.cell_size
        pygame.draw.line(surface, GRID_LINE, (p, 0), (p, size))
        pygame.draw.line(surface, GRID_LINE, (0, p), (size, p))

# ---------- Board ----------
def draw_board(surface: pygame.Surface, state: GameState, cfg: Config = CFG) -> None:
    surface.fill(BG, pygame.Rect(0, 0, cfg.board_px, cfg.board_px))
    draw_grid_lines(surface, cfg)

    grid = board_grid(state, cfg.board_size)
    for kind, color in ((BODY, SNAKE_BODY), (HEAD, SNAKE_HEAD), (FOOD_CELL, FOOD)):
        for x, y in cells(grid, kind):
            draw_cell(surface, x, y, color, cfg.cell_size)

# ---------- HUD / overlays ----------
def status_line(controller: GameController) -> Tuple[str, Tuple[int, int, int]]:
    state = controller.state
    if not controller.started:
        return "Press Enter to start", TEXT
    if state.game_over:
        return "GAME OVER - press Enter", ALERT_TEXT
    if state.paused:
        return "PAUSED - press Space", HIGH_TEXT
    return "Arrows/WASD move, Space pauses", TEXT

def draw_hud(surface: pygame.Surface, font: pygame.font.Font, controller: GameController, cfg: Config = CFG) -> None:
    top = cfg.board_px
    surface.fill(BG, pygame.Rect(0, top, cfg.board_px, HUD_HEIGHT))

    score = font.render(f"Score: {controller.state.score}", True, SCORE_TEXT)
    high = font.render(f"High: {controller.high_score}", True, HIGH_TEXT)
    surface.blit(score, (8, top + 4))
    surface.blit(high, high.get_rect(topright=(cfg.board_px - 8, top + 4)))

    text, color = status_line(controller)
    status = font.render(text, True, color)
    surface.blit(status, status.get_rect(midbottom=(cfg.board_px // 2, top + HUD_HEIGHT - 4)))

def draw_overlay(surface: pygame.Surface, font: pygame.font.Font, title: str, subtitle: str, cfg: Config = CFG) -> None:
    size = cfg.board_px
    # Dim with translucent overlay
    overlay = pygame.Surface((size, size), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    surface.blit(overlay, (0, 0))

    head = font.render(title, True, (240, 240, 250))
    sub  = font.render(subtitle, True, TEXT)
    surface.blit(head, head.get_rect(center=(size // 2, size // 2 - 16)))
    surface.blit(sub, sub.get_rect(center=(size // 2, size // 2 + 16)))

def draw_frame(surface: pygame.Surface, font: pygame.font.Font, controller: GameController, cfg: Config = CFG) -> None:
    state = controller.state
    draw_board(surface, state, cfg)
    if not controller.started:
        draw_overlay(surface, font, "SNAKE", "Press Enter to start", cfg)
    elif state.game_over:
        draw_overlay(surface, font, "GAME OVER", f"Score {state.score} - Enter to play again", cfg)
    elif state.paused:
        draw_overlay(surface, font, "PAUSED", "Press Space to resume", cfg)
    draw_hud(surface, font, controller, cfg)
