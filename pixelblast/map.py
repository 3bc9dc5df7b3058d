"""The tile map drawn behind everything else."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import pygame

from .common import Rect
from .texture import draw as draw_texture
from .texture import load_texture

ROWS = 20
COLS = 25
TILE_SIZE = 32

WATER = 0
GRASS = 1
DIRT = 2

_EMPTY = (0,) * COLS

LEVEL1: tuple[tuple[int, ...], ...] = (
    (_EMPTY,) * 3
    + (
        (0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    )
    + (_EMPTY,) * 13
)


class Map:
    """A fixed-size grid of water, grass and dirt tiles."""

    def __init__(
        self,
        dirt: pygame.Surface | None = None,
        grass: pygame.Surface | None = None,
        water: pygame.Surface | None = None,
    ) -> None:
        self._textures = {DIRT: dirt, GRASS: grass, WATER: water}
        self._tiles: list[list[int]] = []
        self.load_map(LEVEL1)
        self._src = Rect(0.0, 0.0, TILE_SIZE, TILE_SIZE)

    @classmethod
    def from_directory(cls, assets_dir: str | PathLike[str]) -> Map:
        """Build a map whose tile textures are read from an assets directory."""
        root = Path(assets_dir)
        return cls(
            dirt=load_texture(root / "dirt.png"),
            grass=load_texture(root / "grass.png"),
            water=load_texture(root / "water.png"),
        )

    @property
    def tiles(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    def load_map(self, tiles: Sequence[Sequence[int]]) -> None:
        """Copy a ROWS x COLS grid of tile types into the map."""
        rows = [list(row) for row in tiles]
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError(f"a map must have {ROWS} rows of {COLS} tiles")
        self._tiles = rows

    def draw_map(self, target: pygame.Surface) -> None:
        """Draw every tile; tiles of unknown type are left empty."""
        for row, line in enumerate(self._tiles):
            for col, tile in enumerate(line):
                if tile not in self._textures:
                    continue
                dest = Rect(col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE)
                draw_texture(target, self._textures[tile], self._src, dest)