from unittest import mock

import pygame
import pytest

from apishooter.app import main, read_controls
from apishooter.game_state import Controls


@pytest.mark.parametrize("key", [pygame.K_a, pygame.K_LEFT])
def test_left_keys_move_left(key):
    controls = read_controls({key}, set())
    assert controls.left is True
    assert controls.right is False


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({pygame.K_d}, Controls(right=True)),
        ({pygame.K_RIGHT}, Controls(right=True)),
        ({pygame.K_w}, Controls(up=True)),
        ({pygame.K_UP}, Controls(up=True)),
        ({pygame.K_s}, Controls(down=True)),
        ({pygame.K_DOWN}, Controls(down=True)),
        ({pygame.K_w, pygame.K_d}, Controls(up=True, right=True)),
    ],
)
def test_held_direction_keys(keys, expected):
    assert read_controls(keys, set()) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_1, Controls(fire_get=True)),
        (pygame.K_2, Controls(fire_post=True)),
        (pygame.K_3, Controls(fire_put=True)),
        (pygame.K_4, Controls(fire_delete=True)),
        (pygame.K_SPACE, Controls(next_target=True)),
    ],
)
def test_pressed_keys_trigger_actions(key, expected):
    assert read_controls({key}, {key}) == expected


def test_held_fire_key_does_not_repeat():
    controls = read_controls({pygame.K_1, pygame.K_SPACE}, set())
    assert controls == Controls()


def test_no_keys_gives_idle_controls():
    assert read_controls([], []) == Controls()


def test_invalid_seed_is_rejected():
    with pytest.raises(SystemExit):
        main(["--seed", "not-a-number"])


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_main_stops_on_escape(headless):
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    with mock.patch("pygame.event.get", return_value=[escape]) as get_events:
        assert main([]) == 0
    assert get_events.call_count == 1


def test_main_runs_frames_until_window_closed(headless):
    frames = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1)],
        [pygame.event.Event(pygame.KEYUP, key=pygame.K_1)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=frames) as get_events:
        assert main(["--seed", "3"]) == 0
    assert get_events.call_count == len(frames)