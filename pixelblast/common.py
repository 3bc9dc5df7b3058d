"""Small geometry value types shared by the game's components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)


@dataclass
class Rect:
    """An axis-aligned rectangle with a float origin and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0