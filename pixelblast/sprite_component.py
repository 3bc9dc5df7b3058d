"""A component that draws a texture at its entity's transform."""

from __future__ import annotations

import pygame

from .common import Rect
from .ecs import Component
from .texture import draw as draw_texture
from .transform_component import TransformComponent


class SpriteComponent(Component):
    """Draws a texture at the entity's position, scaled by its transform."""

    def __init__(
        self,
        texture: pygame.Surface | None = None,
        z_order: int = 0,
        target: pygame.Surface | None = None,
    ) -> None:
        self.texture = texture
        self.target = target
        self.src_rect = Rect()
        self.des_rect = Rect()
        self.flip_x = False
        self.flip_y = False
        self.alpha = 1.0
        self.tint = (255, 255, 255, 255)
        self.z_order = z_order
        if texture is not None:
            self._fit_to(texture)

    def _fit_to(self, texture: pygame.Surface) -> None:
        w, h = texture.get_size()
        self.src_rect = Rect(0.0, 0.0, float(w), float(h))
        self.des_rect = Rect(0.0, 0.0, float(w), float(h))

    def set_texture(self, texture: pygame.Surface | None) -> None:
        """Use a new texture and reset both rectangles to its full size."""
        if texture is not None:
            self.texture = texture
            self._fit_to(texture)

    def draw(self) -> None:
        """Place the destination at the transform and draw, if there is a transform."""
        entity = self.entity
        if entity is None or not entity.has_component(TransformComponent):
            return
        transform = entity.get_component(TransformComponent)
        self.des_rect.x = transform.position.x
        self.des_rect.y = transform.position.y
        self.des_rect.w = self.src_rect.w * transform.scale.x
        self.des_rect.h = self.src_rect.h * transform.scale.y
        if self.target is not None:
            draw_texture(self.target, self.texture, self.src_rect, self.des_rect)

    def set_src_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.src_rect = Rect(x, y, w, h)

    def set_size(self, w: float, h: float) -> None:
        self.des_rect.w = w
        self.des_rect.h = h