"""The windowed game loop and keyboard handling."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable

import pygame

from apishooter.game_state import FIELD_HEIGHT, FIELD_WIDTH, Controls, GameState
from apishooter.render import draw

TITLE = "API Shooter"
FPS = 60

_LEFT = frozenset({pygame.K_a, pygame.K_LEFT})
_RIGHT = frozenset({pygame.K_d, pygame.K_RIGHT})
_UP = frozenset({pygame.K_w, pygame.K_UP})
_DOWN = frozenset({pygame.K_s, pygame.K_DOWN})


def read_controls(held: Iterable[int], pressed: Iterable[int]) -> Controls:
    """Translate held and newly pressed pygame key codes into game controls."""
    held = frozenset(held)
    pressed = frozenset(pressed)
    return Controls(
        left=not held.isdisjoint(_LEFT),
        right=not held.isdisjoint(_RIGHT),
        up=not held.isdisjoint(_UP),
        down=not held.isdisjoint(_DOWN),
        fire_get=pygame.K_1 in pressed,
        fire_post=pygame.K_2 in pressed,
        fire_put=pygame.K_3 in pressed,
        fire_delete=pygame.K_4 in pressed,
        next_target=pygame.K_SPACE in pressed,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="api-shooter",
        description="Shoot HTTP methods at API resources.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(FIELD_WIDTH), int(FIELD_HEIGHT)))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = GameState.new(rng)
        held: set[int] = set()

        while True:
            dt = clock.tick(FPS) / 1000.0
            pressed: set[int] = set()
            quit_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    held.add(event.key)
                    pressed.add(event.key)
                elif event.type == pygame.KEYUP:
                    held.discard(event.key)

            if quit_requested or pygame.K_ESCAPE in pressed:
                break

            if pygame.K_r in pressed and game.game_over:
                game = GameState.new(rng)

            game.update(dt, read_controls(held, pressed))
            draw(screen, game)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0