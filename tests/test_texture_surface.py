import numpy as np
import pygame
import pytest

from rendering.texture_surface import TextureSurfaceCache, texture_to_surface
from textures import TextureRequest


def test_surface_matches_array():
    image = np.zeros((4, 6, 4), dtype=np.uint8)
    image[1, 2] = (10, 20, 30, 40)
    surf = texture_to_surface(image)
    assert surf.get_size() == (6, 4)
    assert tuple(surf.get_at((2, 1))) == (10, 20, 30, 40)


def test_surface_owns_its_pixels():
    image = np.full((2, 2, 4), 200, dtype=np.uint8)
    surf = texture_to_surface(image)
    image[...] = 0
    assert tuple(surf.get_at((0, 0))) == (200, 200, 200, 200)


def test_empty_image_gives_empty_surface():
    assert texture_to_surface(np.zeros((0, 0, 4), dtype=np.uint8)).get_size() == (0, 0)


def test_rejects_non_rgba():
    with pytest.raises(ValueError):
        texture_to_surface(np.zeros((4, 4, 3), dtype=np.uint8))


def test_surface_cache():
    cache = TextureSurfaceCache(cache_size=4)
    req = TextureRequest("#f0cb88", "gas", resolution=16, seed=2)
    surf = cache.get(req)
    assert isinstance(surf, pygame.Surface)
    assert surf.get_size() == (16, 16)
    assert cache.get(req) is surf
    assert len(cache) == 1


def test_surface_cache_failure_is_none():
    cache = TextureSurfaceCache()
    assert cache.get(TextureRequest(resolution=0)) is None
