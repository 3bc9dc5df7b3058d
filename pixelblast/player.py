"""A keyboard-controlled player drawn as a textured square."""

from __future__ import annotations

import logging

import pygame

from .common import Rect
from .input import Input
from .texture import draw as draw_texture

_log = logging.getLogger(__name__)

PLAYER_SIZE = 50.0


class Player:
    """Moves with the arrow or WASD keys and stays inside the target surface."""

    def __init__(
        self,
        target: pygame.Surface,
        x: int,
        y: int,
        speed: float,
        texture: pygame.Surface | None = None,
    ) -> None:
        self.target = target
        self.speed = speed
        self.rect = Rect(float(x), float(y), PLAYER_SIZE, PLAYER_SIZE)
        self.texture = texture
        self._input: Input | None = None
        if texture is None:
            _log.warning("no player texture; the player will not be drawn")

    def set_input_handler(self, input_handler: Input | None) -> None:
        self._input = input_handler

    def update(self, delta_time: float) -> None:
        """Move by the held keys, then clamp to the target's bounds."""
        keys = self._input
        if keys is None:
            return
        step = self.speed * delta_time
        if keys.is_key_down(pygame.K_UP) or keys.is_key_down(pygame.K_w):
            self.rect.y -= step
        if keys.is_key_down(pygame.K_DOWN) or keys.is_key_down(pygame.K_s):
            self.rect.y += step
        if keys.is_key_down(pygame.K_LEFT) or keys.is_key_down(pygame.K_a):
            self.rect.x -= step
        if keys.is_key_down(pygame.K_RIGHT) or keys.is_key_down(pygame.K_d):
            self.rect.x += step

        window_w, window_h = self.target.get_size()
        self.rect.x = max(self.rect.x, 0.0)
        self.rect.y = max(self.rect.y, 0.0)
        if self.rect.x + self.rect.w > window_w:
            self.rect.x = float(window_w) - self.rect.w
        if self.rect.y + self.rect.h > window_h:
            self.rect.y = float(window_h) - self.rect.h

    def render(self) -> None:
        """Draw the whole texture stretched over the player's rectangle."""
        if self.texture is None:
            return
        w, h = self.texture.get_size()
        draw_texture(self.target, self.texture, Rect(0.0, 0.0, w, h), self.rect)