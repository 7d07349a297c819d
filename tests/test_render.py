"""
Tests for render.py and keys.py. Drawing happens on an off-screen surface.
"""

import pygame
import pytest

from snake_arcade.config import BG, FOOD, GRID_LINE, SNAKE_BODY, SNAKE_HEAD
from snake_arcade.keys import key_name
from snake_arcade.render import draw_board, status_line


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestDrawBoard:

    @pytest.fixture
    def surface(self, initial_state):
        surface = pygame.Surface((400, 400))
        draw_board(surface, initial_state)
        return surface

    def test_head_and_body_colors(self, surface):
        assert pixel(surface, 210, 210) == SNAKE_HEAD
        assert pixel(surface, 190, 210) == SNAKE_BODY
        assert pixel(surface, 170, 210) == SNAKE_BODY

    def test_food_color(self, surface):
        assert pixel(surface, 10, 10) == FOOD

    def test_empty_cell_and_grid_line(self, surface):
        assert pixel(surface, 250, 250) == BG
        assert pixel(surface, 40, 45) == GRID_LINE


class TestStatusLine:

    def test_states(self, controller):
        assert status_line(controller)[0] == "Press Enter to start"
        controller.start()
        controller.toggle_pause()
        assert status_line(controller)[0].startswith("PAUSED")


class TestKeys:

    def test_mapping(self):
        assert key_name(pygame.K_UP) == "arrowup"
        assert key_name(pygame.K_d) == "d"
        assert key_name(pygame.K_SPACE) == "space"
        assert key_name(pygame.K_RETURN) == "enter"
        assert key_name(pygame.K_KP_ENTER) == "enter"
        assert key_name(pygame.K_q) is None

    def test_keys_drive_controller(self, controller):
        controller.handle_key(key_name(pygame.K_RETURN))
        controller.handle_key(key_name(pygame.K_w))
        assert controller.state.direction == (0, -1)
