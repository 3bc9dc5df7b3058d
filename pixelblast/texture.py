"""Loading images and drawing parts of them onto a target surface."""

from __future__ import annotations

import logging
from os import PathLike

import pygame

from .common import Rect

_log = logging.getLogger(__name__)


def load_texture(path: str | PathLike[str]) -> pygame.Surface | None:
    """Load an image file; return None if it cannot be read."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        _log.warning("could not load texture %s: %s", path, exc)
        return None


def draw(
    target: pygame.Surface,
    texture: pygame.Surface | None,
    src: Rect,
    dest: Rect,
) -> None:
    """Draw the src area of texture onto target, stretched to fill dest."""
    if texture is None:
        return
    area = pygame.Rect(round(src.x), round(src.y), round(src.w), round(src.h))
    area = area.clip(texture.get_rect())
    size = (round(dest.w), round(dest.h))
    if area.width <= 0 or area.height <= 0 or size[0] <= 0 or size[1] <= 0:
        return
    piece = texture.subsurface(area)
    if piece.get_size() != size:
        piece = pygame.transform.scale(piece, size)
    target.blit(piece, (round(dest.x), round(dest.y)))