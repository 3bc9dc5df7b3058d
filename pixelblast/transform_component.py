"""Position, scale and rotation of an entity."""

from __future__ import annotations

from .common import Vector2
from .ecs import Component


class TransformComponent(Component):
    """Where an entity is and how large it is drawn."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        rotation: float = 0.0,
    ) -> None:
        self.position = Vector2(x, y)
        self.scale = Vector2(scale_x, scale_y)
        self.rotation = rotation

    def translate(self, dx: float, dy: float) -> None:
        self.position.x += dx
        self.position.y += dy

    def set_position(self, x: float, y: float) -> None:
        self.position.x = x
        self.position.y = y