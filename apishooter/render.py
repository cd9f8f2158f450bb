"""Drawing the game onto a pygame surface."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import pygame

from apishooter.colors import (
    BLUE,
    DARKGRAY,
    GRAY,
    GREEN,
    LIGHTGRAY,
    ORANGE,
    RED,
    WHITE,
    YELLOW,
    Color,
)
from apishooter.game_state import FIELD_HEIGHT, FIELD_WIDTH, GameState

BACKGROUND = Color(0.05, 0.05, 0.15, 1.0)
HUD_BACK = Color(0.0, 0.0, 0.0, 0.8)
HUD_EDGE = Color(0.0, 0.8, 1.0, 0.5)
ACCENT = Color(0.0, 0.8, 1.0, 1.0)
PLAYER_GLOW = Color(0.0, 0.5, 1.0, 0.5)
ENEMY_GLOW = Color(1.0, 0.0, 0.0, 0.3)
ENEMY_CORE = Color(0.8, 0.0, 0.0, 1.0)

_RGBA = tuple[int, int, int, int]
_Shape = Callable[[pygame.Surface, _RGBA, int, int], object]

_FONTS: dict[int, pygame.font.Font] = {}


def _font(size: float) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _FONTS.clear()
    key = max(1, round(size))
    font = _FONTS.get(key)
    if font is None:
        font = _FONTS[key] = pygame.font.Font(None, key)
    return font


class _Painter:
    """Shape primitives that honour the alpha channel of a colour."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def _paint(self, bounds: pygame.Rect, color: Color, shape: _Shape) -> None:
        rgba = color.to_rgba()
        if rgba[3] == 0:
            return
        if rgba[3] >= 255:
            shape(self.surface, rgba, 0, 0)
            return
        clipped = bounds.clip(self.surface.get_rect())
        if clipped.width == 0 or clipped.height == 0:
            return
        layer = pygame.Surface(clipped.size, pygame.SRCALPHA)
        shape(layer, rgba, clipped.x, clipped.y)
        self.surface.blit(layer, clipped.topleft)

    def rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        if w <= 0 or h <= 0:
            return
        bounds = pygame.Rect(round(x), round(y), max(1, round(w)), max(1, round(h)))
        self._paint(
            bounds,
            color,
            lambda target, rgba, ox, oy: pygame.draw.rect(target, rgba, bounds.move(-ox, -oy)),
        )

    def rect_lines(
        self, x: float, y: float, w: float, h: float, thickness: float, color: Color
    ) -> None:
        bounds = pygame.Rect(round(x), round(y), max(1, round(w)), max(1, round(h)))
        width = max(1, round(thickness))
        self._paint(
            bounds,
            color,
            lambda target, rgba, ox, oy: pygame.draw.rect(
                target, rgba, bounds.move(-ox, -oy), width
            ),
        )

    def circle(self, x: float, y: float, radius: float, color: Color) -> None:
        if radius <= 0:
            return
        left = math.floor(x - radius) - 1
        top = math.floor(y - radius) - 1
        span = math.ceil(2 * radius) + 3
        bounds = pygame.Rect(left, top, span, span)
        self._paint(
            bounds,
            color,
            lambda target, rgba, ox, oy: pygame.draw.circle(
                target, rgba, (x - ox, y - oy), radius
            ),
        )

    def triangle(self, points: Sequence[tuple[float, float]], color: Color) -> None:
        xs = [px for px, _ in points]
        ys = [py for _, py in points]
        left, top = math.floor(min(xs)) - 1, math.floor(min(ys)) - 1
        bounds = pygame.Rect(
            left, top, math.ceil(max(xs)) - left + 2, math.ceil(max(ys)) - top + 2
        )
        self._paint(
            bounds,
            color,
            lambda target, rgba, ox, oy: pygame.draw.polygon(
                target, rgba, [(px - ox, py - oy) for px, py in points]
            ),
        )

    def text(self, text: str, x: float, y: float, size: float, color: Color) -> None:
        """Draw ``text`` with its baseline at ``y``."""
        font = _font(size)
        rgba = color.to_rgba()
        image = font.render(text, True, rgba[:3])
        if rgba[3] < 255:
            image.set_alpha(rgba[3])
        self.surface.blit(image, (round(x), round(y - font.get_ascent())))

    def measure(self, text: str, size: float) -> int:
        return _font(size).size(text)[0]


def _tiered_color(fraction: float, high: float, low: float) -> Color:
    if fraction > high:
        return GREEN
    if fraction > low:
        return YELLOW
    return RED


def draw(surface: pygame.Surface, state: GameState) -> None:
    """Render the whole frame for ``state`` onto ``surface``."""
    painter = _Painter(surface)
    painter.rect(0.0, 0.0, FIELD_WIDTH, FIELD_HEIGHT, BACKGROUND)

    if state.game_over:
        _draw_game_over(painter, state)
        return
    if state.victory_screen:
        _draw_victory_screen(painter, state)
        return

    _draw_player(painter, state)
    _draw_enemy(painter, state)
    _draw_bullets(painter, state)
    _draw_hud(painter, state)


def _draw_player(painter: _Painter, state: GameState) -> None:
    player = state.player
    painter.circle(player.x, player.y, player.size + 2.0, PLAYER_GLOW)
    painter.triangle(
        (
            (player.x, player.y - player.size),
            (player.x - player.size * 0.7, player.y + player.size * 0.5),
            (player.x + player.size * 0.7, player.y + player.size * 0.5),
        ),
        BLUE,
    )


def _draw_enemy(painter: _Painter, state: GameState) -> None:
    enemy = state.enemy
    if enemy is None:
        return
    painter.circle(enemy.x, enemy.y, enemy.size + 3.0, ENEMY_GLOW)
    painter.circle(enemy.x, enemy.y, enemy.size, RED)
    painter.circle(enemy.x, enemy.y, enemy.size * 0.7, ENEMY_CORE)

    health_width = 120.0
    fraction = enemy.hp / enemy.max_hp
    bar_x = enemy.x - health_width / 2.0
    bar_y = enemy.y - enemy.size - 25.0
    painter.rect(bar_x, bar_y, health_width, 6.0, DARKGRAY)
    painter.rect(
        bar_x, bar_y, health_width * fraction, 6.0, _tiered_color(fraction, 0.7, 0.3)
    )


def _draw_bullets(painter: _Painter, state: GameState) -> None:
    for bullet in state.bullets:
        for step in range(1, 5):
            alpha = min(1.0, max(0.0, 0.8 - step * 0.2))
            painter.circle(
                bullet.x,
                bullet.y + step * 8.0,
                4.0 - step,
                bullet.color.with_alpha(alpha),
            )
        painter.circle(bullet.x, bullet.y, 6.0, bullet.color)

    for enemy_bullet in state.enemy_bullets:
        painter.circle(enemy_bullet.x, enemy_bullet.y, 8.0, enemy_bullet.color)
        painter.circle(enemy_bullet.x, enemy_bullet.y, 4.0, WHITE.with_alpha(0.8))


def _draw_hud(painter: _Painter, state: GameState) -> None:
    painter.rect(0.0, 0.0, 800.0, 100.0, HUD_BACK)
    painter.rect_lines(0.0, 0.0, 800.0, 100.0, 2.0, HUD_EDGE)

    painter.text("API SHOOTER", 20.0, 35.0, 32.0, ACCENT)
    painter.text(f"SCORE: {state.score}", 20.0, 65.0, 24.0, YELLOW)
    painter.text(f"TARGETS: {state.enemies_defeated}", 200.0, 65.0, 24.0, GREEN)

    enemy = state.enemy
    if enemy is not None:
        panel_x = 450.0
        painter.rect(panel_x, 10.0, 340.0, 80.0, Color(0.8, 0.0, 0.0, 0.3))
        painter.rect_lines(panel_x, 10.0, 340.0, 80.0, 2.0, RED)
        painter.text("TARGET", panel_x + 10.0, 35.0, 20.0, WHITE)
        painter.text(enemy.name, panel_x + 10.0, 55.0, 18.0, ORANGE)
        if state.enemy_weakness_revealed:
            painter.text(
                f"WEAKNESS: {enemy.weakness}", panel_x + 10.0, 75.0, 16.0, YELLOW
            )
        else:
            painter.text("Press 1 to scan", panel_x + 10.0, 75.0, 16.0, GRAY)

    painter.rect(0.0, 520.0, 800.0, 80.0, HUD_BACK)
    painter.rect_lines(0.0, 520.0, 800.0, 80.0, 2.0, HUD_EDGE)

    player = state.player
    bar_x, bar_y, bar_w, bar_h = 20.0, 540.0, 300.0, 20.0
    painter.rect(bar_x - 2.0, bar_y - 2.0, bar_w + 4.0, bar_h + 4.0, PLAYER_GLOW.with_alpha(0.3))
    painter.rect(bar_x, bar_y, bar_w, bar_h, DARKGRAY)
    fraction = player.hp / player.max_hp
    painter.rect(bar_x, bar_y, bar_w * fraction, bar_h, _tiered_color(fraction, 0.6, 0.3))
    painter.text("HEALTH", bar_x, bar_y - 5.0, 16.0, WHITE)
    painter.text(f"{player.hp}/{player.max_hp}", bar_x + 10.0, bar_y + 15.0, 14.0, WHITE)

    weapon_x, weapon_y = 450.0, 540.0
    painter.rect(weapon_x, weapon_y, 330.0, 40.0, Color(0.2, 0.2, 0.2, 0.8))
    painter.rect_lines(weapon_x, weapon_y, 330.0, 40.0, 1.0, GRAY)
    weapons = (
        ("1:GET", player.get_ammo, BLUE),
        ("2:POST", player.post_ammo, GREEN),
        ("3:PUT", player.put_ammo, YELLOW),
        ("4:DEL", player.delete_ammo, RED),
    )
    for index, (label, ammo, color) in enumerate(weapons):
        x = weapon_x + 10.0 + index * 75.0
        painter.text(label, x, weapon_y + 15.0, 12.0, color)
        painter.text(str(ammo), x + 5.0, weapon_y + 30.0, 14.0, WHITE)

    painter.text("WASD: Move | 1-4: Weapons", 20.0, 590.0, 14.0, LIGHTGRAY)

    if state.ui_message_timer > 0.0:
        msg_y = 300.0
        text_width = painter.measure(state.ui_message, 24)
        box_x = 400.0 - text_width / 2.0 - 20.0
        painter.rect(box_x, msg_y - 30.0, text_width + 40.0, 50.0, HUD_BACK)
        painter.rect_lines(box_x, msg_y - 30.0, text_width + 40.0, 50.0, 2.0, YELLOW)
        painter.text(state.ui_message, 400.0 - text_width / 2.0, msg_y, 24.0, YELLOW)


def _centered_panel(painter: _Painter, fill: Color, edge: Color) -> tuple[float, float]:
    width, height = 500.0, 300.0
    panel_x = (FIELD_WIDTH - width) / 2.0
    panel_y = (FIELD_HEIGHT - height) / 2.0
    painter.rect(panel_x, panel_y, width, height, fill)
    painter.rect_lines(panel_x, panel_y, width, height, 3.0, edge)
    return panel_x, panel_y


def _draw_victory_screen(painter: _Painter, state: GameState) -> None:
    painter.rect(0.0, 0.0, FIELD_WIDTH, FIELD_HEIGHT, Color(0.0, 0.0, 0.0, 0.7))
    x, y = _centered_panel(painter, Color(0.0, 0.2, 0.0, 0.9), GREEN)
    painter.text("TARGET ELIMINATED!", x + 80.0, y + 60.0, 36.0, GREEN)
    painter.text(f"Score: +100 (Total: {state.score})", x + 120.0, y + 120.0, 24.0, YELLOW)
    painter.text(f"Targets Defeated: {state.enemies_defeated}", x + 100.0, y + 160.0, 20.0, WHITE)
    painter.text("Press SPACE for next target", x + 100.0, y + 220.0, 20.0, YELLOW)
    painter.text("Press ESC to quit", x + 150.0, y + 250.0, 18.0, LIGHTGRAY)


def _draw_game_over(painter: _Painter, state: GameState) -> None:
    painter.rect(0.0, 0.0, FIELD_WIDTH, FIELD_HEIGHT, Color(0.5, 0.0, 0.0, 0.8))
    x, y = _centered_panel(painter, Color(0.2, 0.0, 0.0, 0.9), RED)
    painter.text("MISSION FAILED", x + 110.0, y + 80.0, 36.0, RED)
    painter.text(f"Final Score: {state.score}", x + 150.0, y + 140.0, 24.0, WHITE)
    painter.text(f"Targets Eliminated: {state.enemies_defeated}", x + 120.0, y + 180.0, 20.0, WHITE)
    painter.text("Press R to restart", x + 160.0, y + 230.0, 20.0, YELLOW)
    painter.text("Press ESC to quit", x + 160.0, y + 260.0, 18.0, LIGHTGRAY)