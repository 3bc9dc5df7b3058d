import pygame

from pixelblast.common import Rect
from pixelblast.texture import draw, load_texture

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


def solid(size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


def test_load_round_trip(tmp_path):
    path = tmp_path / "tile.bmp"
    pygame.image.save(solid((5, 3), RED), str(path))
    texture = load_texture(str(path))
    assert texture.get_size() == (5, 3)
    assert tuple(texture.get_at((2, 1))) == RED


def test_load_missing_file_returns_none(tmp_path):
    assert load_texture(str(tmp_path / "missing.png")) is None


def test_draw_stretches_into_dest():
    target = solid((32, 32), BLACK)
    draw(target, solid((2, 2), RED), Rect(0, 0, 2, 2), Rect(10, 10, 4, 4))
    assert tuple(target.get_at((10, 10))) == RED
    assert tuple(target.get_at((13, 13))) == RED
    assert tuple(target.get_at((9, 9))) == BLACK
    assert tuple(target.get_at((14, 14))) == BLACK


def test_draw_uses_only_src_area():
    texture = solid((4, 2), BLACK)
    texture.fill(RED, pygame.Rect(2, 0, 2, 2))
    target = solid((16, 16), BLACK)
    draw(target, texture, Rect(2, 0, 2, 2), Rect(0, 0, 2, 2))
    assert tuple(target.get_at((0, 0))) == RED
    assert tuple(target.get_at((1, 1))) == RED


def test_draw_without_texture_leaves_target_unchanged():
    target = solid((8, 8), BLACK)
    draw(target, None, Rect(0, 0, 2, 2), Rect(0, 0, 8, 8))
    assert all(tuple(target.get_at((x, y))) == BLACK for x in range(8) for y in range(8))


def test_draw_with_empty_dest_draws_nothing():
    target = solid((8, 8), BLACK)
    draw(target, solid((2, 2), RED), Rect(0, 0, 2, 2), Rect(0, 0, 0, 0))
    assert tuple(target.get_at((0, 0))) == BLACK