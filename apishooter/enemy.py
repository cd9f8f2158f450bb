"""The enemy target: an API resource that wanders across the top of the field."""

from __future__ import annotations

import random
from dataclasses import dataclass

ENEMY_TYPES = ("User", "Order", "Product", "Payment")
WEAKNESSES = ("POST", "PUT", "DELETE")

X_MIN = 80.0
X_MAX = 720.0
Y_MIN = 140.0
Y_MAX = 260.0
MOVE_INTERVAL = 1.5

_DEFAULT_RNG = random.Random()


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Enemy:
    """A target with hit points, a weakness and a patrolling motion."""

    x: float
    y: float
    size: float
    name: str
    hp: int
    max_hp: int
    weakness: str
    speed: float
    direction: float
    move_timer: float = 0.0

    @classmethod
    def spawn(cls, rng: random.Random | None = None) -> Enemy:
        """Create a randomly chosen enemy."""
        rng = rng if rng is not None else _DEFAULT_RNG
        enemy_type = rng.choice(ENEMY_TYPES)
        ident = rng.randrange(100, 999)
        hp = rng.randrange(80, 120)
        return cls(
            x=rng.uniform(X_MIN, X_MAX),
            y=rng.uniform(Y_MIN, Y_MAX),
            size=35.0,
            name=f"{enemy_type}-{ident}",
            hp=hp,
            max_hp=hp,
            weakness=rng.choice(WEAKNESSES),
            speed=rng.uniform(120.0, 200.0),
            direction=1.0 if rng.random() < 0.5 else -1.0,
        )

    def update(self, dt: float, rng: random.Random | None = None) -> None:
        """Advance the enemy's movement by ``dt`` seconds."""
        rng = rng if rng is not None else _DEFAULT_RNG
        self.move_timer += dt

        if self.move_timer > MOVE_INTERVAL:
            if rng.random() < 0.7:
                self.direction *= -1.0
            if rng.random() < 0.3:
                self.y = _clamp(self.y + rng.uniform(-30.0, 30.0), Y_MIN, Y_MAX)
            self.move_timer = 0.0

        self.x += self.direction * self.speed * dt

        if self.x < X_MIN or self.x > X_MAX:
            self.direction *= -1.0
            self.x = _clamp(self.x, X_MIN, X_MAX)