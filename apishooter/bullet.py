"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from dataclasses import dataclass

from apishooter.colors import Color


@dataclass
class Bullet:
    """A shot fired by the player, named after an HTTP method."""

    x: float
    y: float
    speed: float
    bullet_type: str
    damage: int
    color: Color


@dataclass
class EnemyBullet:
    """A shot fired by an enemy, named after an HTTP error."""

    x: float
    y: float
    speed: float
    damage: int
    attack_name: str
    color: Color