"""The game's rules: movement, shooting, enemy attacks, collisions and scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from apishooter.bullet import Bullet, EnemyBullet
from apishooter.colors import BLUE, GREEN, RED, WHITE, YELLOW, Color
from apishooter.enemy import Enemy
from apishooter.player import Player

FIELD_WIDTH = 800.0
FIELD_HEIGHT = 600.0
PLAYER_Y_MIN = 250.0
PLAYER_Y_MAX = 550.0
BULLET_SPEED = 500.0
ENEMY_BULLET_SPEED = 250.0
ENEMY_ATTACK_INTERVAL = 1.5
DEFEAT_BONUS = 100

WELCOME_MESSAGE = "Use WASD to move, 1/2/3/4 to shoot different HTTP methods!"

ENEMY_ATTACKS: tuple[tuple[str, int, Color], ...] = (
    ("400 Bad Request", 15, Color(1.0, 1.0, 0.0, 1.0)),
    ("401 Unauthorized", 20, Color(1.0, 0.0, 0.0, 1.0)),
    ("403 Forbidden", 25, Color(0.8, 0.0, 0.0, 1.0)),
    ("429 Too Many Requests", 30, Color(0.5, 0.0, 1.0, 1.0)),
    ("500 Internal Server Error", 35, Color(0.2, 0.2, 0.2, 1.0)),
)


@dataclass(frozen=True)
class Controls:
    """The player's input for one frame.

    Direction flags are keys held down; the other flags are keys pressed
    during this frame.
    """

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire_get: bool = False
    fire_post: bool = False
    fire_put: bool = False
    fire_delete: bool = False
    next_target: bool = False


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    player: Player = field(default_factory=Player)
    enemy: Enemy | None = None
    bullets: list[Bullet] = field(default_factory=list)
    enemy_bullets: list[EnemyBullet] = field(default_factory=list)
    score: int = 0
    enemies_defeated: int = 0
    game_over: bool = False
    victory_screen: bool = False
    enemy_weakness_revealed: bool = False
    enemy_attack_timer: float = 0.0
    ui_message: str = WELCOME_MESSAGE
    ui_message_timer: float = 3.0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def new(cls, rng: random.Random | None = None) -> GameState:
        """Start a fresh game with one enemy on the field."""
        rng = rng if rng is not None else random.Random()
        return cls(enemy=Enemy.spawn(rng), rng=rng)

    def _show(self, message: str, seconds: float) -> None:
        self.ui_message = message
        self.ui_message_timer = seconds

    def update(self, dt: float, controls: Controls | None = None) -> None:
        """Advance the game by ``dt`` seconds using this frame's input."""
        controls = controls if controls is not None else Controls()
        if self.game_over:
            return

        if self.victory_screen:
            if controls.next_target:
                self.enemy = Enemy.spawn(self.rng)
                self.victory_screen = False
                self.enemy_weakness_revealed = False
                self._show("New target acquired!", 2.0)
            return

        if self.ui_message_timer > 0.0:
            self.ui_message_timer -= dt

        self._move_player(dt, controls)

        if self.enemy is not None:
            player = self.player
            triggers = (
                (controls.fire_get, player.get_ammo, "GET"),
                (controls.fire_post, player.post_ammo, "POST"),
                (controls.fire_put, player.put_ammo, "PUT"),
                (controls.fire_delete, player.delete_ammo, "DELETE"),
            )
            for pressed, _ammo, method in triggers:
                if pressed and self._ammo_for(method) > 0:
                    self.fire_bullet(method)

        if self.enemy is not None:
            self.enemy.update(dt, self.rng)
            self.enemy_attack_timer += dt
            if self.enemy_attack_timer > ENEMY_ATTACK_INTERVAL:
                self.enemy_attack()
                self.enemy_attack_timer = 0.0

        for bullet in self.bullets:
            bullet.y -= bullet.speed * dt
        self.bullets = [b for b in self.bullets if b.y > 0.0]

        for enemy_bullet in self.enemy_bullets:
            enemy_bullet.y += enemy_bullet.speed * dt
        self.enemy_bullets = [b for b in self.enemy_bullets if b.y < FIELD_HEIGHT]

        self.check_collisions()

        if self.enemy is not None and self.enemy.hp <= 0:
            self.score += DEFEAT_BONUS
            self.enemies_defeated += 1
            self.enemy = None
            self.victory_screen = True
            self.enemy_bullets.clear()

        if self.player.hp <= 0:
            self.game_over = True

    def _ammo_for(self, method: str) -> int:
        return {
            "GET": self.player.get_ammo,
            "POST": self.player.post_ammo,
            "PUT": self.player.put_ammo,
            "DELETE": self.player.delete_ammo,
        }[method]

    def _move_player(self, dt: float, controls: Controls) -> None:
        player = self.player
        step = player.speed * dt
        if controls.left:
            player.x = max(player.x - step, player.size)
        if controls.right:
            player.x = min(player.x + step, FIELD_WIDTH - player.size)
        if controls.up:
            player.y = max(player.y - step, PLAYER_Y_MIN)
        if controls.down:
            player.y = min(player.y + step, PLAYER_Y_MAX)

    def fire_bullet(self, bullet_type: str) -> None:
        """Spend one round of ``bullet_type`` and launch it from the player."""
        weakness = self.enemy.weakness if self.enemy is not None else None
        player = self.player
        if bullet_type == "GET":
            player.get_ammo -= 1
            damage, color = 0, BLUE
        elif bullet_type == "POST":
            player.post_ammo -= 1
            damage, color = (40 if weakness == "POST" else 20), GREEN
        elif bullet_type == "PUT":
            player.put_ammo -= 1
            damage, color = (45 if weakness == "PUT" else 25), YELLOW
        elif bullet_type == "DELETE":
            player.delete_ammo -= 1
            damage, color = 100, RED
        else:
            damage, color = 10, WHITE

        self.bullets.append(
            Bullet(
                x=player.x,
                y=player.y - player.size,
                speed=BULLET_SPEED,
                bullet_type=bullet_type,
                damage=damage,
                color=color,
            )
        )

    def enemy_attack(self) -> None:
        """Have the enemy fire a randomly chosen HTTP error at the player."""
        enemy = self.enemy
        if enemy is None:
            return
        attack_name, damage, color = self.rng.choice(ENEMY_ATTACKS)
        self.enemy_bullets.append(
            EnemyBullet(
                x=enemy.x,
                y=enemy.y + enemy.size,
                speed=ENEMY_BULLET_SPEED,
                damage=damage,
                attack_name=attack_name,
                color=color,
            )
        )

    def check_collisions(self) -> None:
        """Resolve hits on the enemy and on the player, removing spent bullets."""
        enemy = self.enemy
        if enemy is not None:
            remaining: list[Bullet] = []
            for bullet in self.bullets:
                hit = (
                    abs(bullet.x - enemy.x) < enemy.size
                    and abs(bullet.y - enemy.y) < enemy.size
                )
                if not hit:
                    remaining.append(bullet)
                    continue
                if bullet.bullet_type == "GET":
                    if not self.enemy_weakness_revealed:
                        self.enemy_weakness_revealed = True
                        self._show(f"Target weakness: {enemy.weakness}", 3.0)
                else:
                    enemy.hp -= bullet.damage
                    self.score += bullet.damage
                    if enemy.weakness == bullet.bullet_type:
                        self._show("CRITICAL HIT!", 1.0)
            self.bullets = remaining

        player = self.player
        remaining_enemy: list[EnemyBullet] = []
        for enemy_bullet in self.enemy_bullets:
            hit = (
                abs(enemy_bullet.x - player.x) < player.size
                and abs(enemy_bullet.y - player.y) < player.size
            )
            if hit:
                player.hp -= enemy_bullet.damage
                self._show(f"Hit by {enemy_bullet.attack_name}!", 1.5)
            else:
                remaining_enemy.append(enemy_bullet)
        self.enemy_bullets = remaining_enemy