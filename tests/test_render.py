import copy
import random

import pygame
import pytest

from apishooter.colors import BLUE, DARKGRAY, GREEN, RED, YELLOW
from apishooter.game_state import GameState
from apishooter.render import BACKGROUND, ENEMY_CORE, draw


@pytest.fixture
def surface(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    return pygame.Surface((800, 600))


@pytest.fixture
def state():
    game = GameState.new(random.Random(7))
    game.enemy.x = 200.0
    game.enemy.y = 200.0
    return game


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_background_fills_empty_field(surface, state):
    draw(surface, state)
    assert _pixel(surface, 5, 450) == BACKGROUND.to_rgba()[:3]


def test_player_ship_is_blue(surface, state):
    draw(surface, state)
    assert _pixel(surface, 400, 500) == BLUE.to_rgba()[:3]


def test_enemy_core_drawn_at_enemy_position(surface, state):
    draw(surface, state)
    assert _pixel(surface, 200, 200) == ENEMY_CORE.to_rgba()[:3]


def test_bullet_core_uses_bullet_color(surface, state):
    state.fire_bullet("DELETE")
    state.bullets[0].x = 600.0
    state.bullets[0].y = 400.0
    draw(surface, state)
    assert _pixel(surface, 600, 400) == RED.to_rgba()[:3]


def test_full_health_bar_is_green(surface, state):
    draw(surface, state)
    assert _pixel(surface, 25, 550) == GREEN.to_rgba()[:3]
    assert _pixel(surface, 300, 550) == GREEN.to_rgba()[:3]


def test_half_health_bar_is_yellow_and_shortened(surface, state):
    state.player.hp = 50
    draw(surface, state)
    assert _pixel(surface, 25, 550) == YELLOW.to_rgba()[:3]
    assert _pixel(surface, 300, 550) == DARKGRAY.to_rgba()[:3]


def test_low_health_bar_is_red(surface, state):
    state.player.hp = 20
    draw(surface, state)
    assert _pixel(surface, 25, 550) == RED.to_rgba()[:3]


def test_victory_screen_panel_is_green(surface, state):
    state.enemy = None
    state.victory_screen = True
    draw(surface, state)
    r, g, b = _pixel(surface, 155, 155)
    assert g > r and g > b


def test_game_over_panel_is_red(surface, state):
    draw(surface, state)
    playing = _pixel(surface, 155, 155)
    state.game_over = True
    draw(surface, state)
    r, g, b = _pixel(surface, 155, 155)
    assert r > g and r > b
    assert (r, g, b) != playing


def test_draw_leaves_state_unchanged(surface, state):
    state.fire_bullet("POST")
    state.enemy_attack()
    before = copy.deepcopy(state)
    draw(surface, state)
    assert state == before