"""The game: window, main scene and per-frame steps."""

from __future__ import annotations

import os
import time
from os import PathLike
from pathlib import Path
from types import TracebackType

import pygame

from .ecs import Manager
from .input import Input
from .map import Map
from .sprite_component import SpriteComponent
from .texture import load_texture
from .transform_component import TransformComponent

DEFAULT_ASSETS_DIR = Path("..") / "assets"


class GameError(RuntimeError):
    """The game could not be set up."""


class Game:
    """Owns the window, the entities and the tile map."""

    def __init__(self, assets_dir: str | PathLike[str] = DEFAULT_ASSETS_DIR) -> None:
        self.assets_dir = Path(assets_dir)
        self.input = Input()
        self.manager = Manager()
        self.map: Map | None = None
        self.screen: pygame.Surface | None = None
        self.delta_time = 0.0
        self._running = False
        self._last_tick = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def __enter__(self) -> Game:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clean()

    def init(self, title: str, width: int, height: int, fullscreen: bool) -> None:
        """Open a centred window and build the scene; raise GameError on failure."""
        flags = pygame.FULLSCREEN if fullscreen else 0
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            pygame.init()
            screen = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            pygame.quit()
            raise GameError(f"could not create the window: {exc}") from exc
        pygame.display.set_caption(title)
        self.screen = screen

        player = self.manager.add_entity()
        player.add_component(TransformComponent, 400.0, 300.0, 3.0, 3.0, 0.0)
        player_texture = load_texture(self.assets_dir / "player.png")
        sprite = player.add_component(SpriteComponent, player_texture, 1, screen)
        sprite.set_size(64, 44)

        self.map = Map.from_directory(self.assets_dir)

        self._running = True
        self._last_tick = time.perf_counter()

    def handle_events(self) -> None:
        """Read pending events and stop when escape is held or quit is requested."""
        self.input.update()
        if self.input.is_key_down(pygame.K_ESCAPE):
            self._running = False

    def update(self) -> None:
        now = time.perf_counter()
        self.delta_time = now - self._last_tick
        self._last_tick = now
        self.manager.update()

    def render(self) -> None:
        if self.screen is None:
            return
        self.screen.fill((0, 0, 0))
        if self.map is not None:
            self.map.draw_map(self.screen)
        self.manager.draw()
        pygame.display.flip()

    def clean(self) -> None:
        """Close the window and shut pygame down."""
        self.screen = None
        pygame.quit()
        self._running = False