"""The player's ship."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """Position, ammunition and health of the player's ship."""

    x: float = 400.0
    y: float = 500.0
    size: float = 30.0
    speed: float = 300.0
    get_ammo: int = 99
    post_ammo: int = 20
    put_ammo: int = 20
    delete_ammo: int = 3
    hp: int = 100
    max_hp: int = 100