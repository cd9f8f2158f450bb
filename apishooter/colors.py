"""RGBA colours with floating-point components and the game's palette."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour whose components lie between 0.0 and 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"colour component {name}={value} outside 0.0..1.0")

    def with_alpha(self, alpha: float) -> Color:
        """Return the same colour with a different alpha."""
        return Color(self.r, self.g, self.b, alpha)

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Return the colour as four 0-255 integers."""
        return (
            round(self.r * 255),
            round(self.g * 255),
            round(self.b * 255),
            round(self.a * 255),
        )


LIGHTGRAY = Color(0.78, 0.78, 0.78, 1.0)
GRAY = Color(0.51, 0.51, 0.51, 1.0)
DARKGRAY = Color(0.31, 0.31, 0.31, 1.0)
YELLOW = Color(0.99, 0.98, 0.0, 1.0)
ORANGE = Color(1.0, 0.63, 0.0, 1.0)
RED = Color(0.90, 0.16, 0.22, 1.0)
GREEN = Color(0.0, 0.89, 0.19, 1.0)
BLUE = Color(0.0, 0.47, 0.95, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)