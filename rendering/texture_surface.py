"""
Texture Surface - bridge between synthesized RGBA arrays and pygame.

Textures are produced as numpy uint8 (h, w, 4) arrays; this module turns
them into pygame Surfaces and keeps the converted surfaces cached per
request, the same way the other renderers cache their sprites.
"""

from __future__ import annotations
import logging
from typing import Optional

import numpy as np
import pygame

from textures.cache import TextureCache
from textures.request import TextureRequest

logger = logging.getLogger(__name__)


def texture_to_surface(image: np.ndarray) -> pygame.Surface:
    """
    (h, w, 4) uint8 RGBA array -> pygame.Surface with per-pixel alpha.

    The pixel buffer is copied, so the array can be discarded afterwards.
    An empty image gives a 0x0 surface.
    """
    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"Expected an (h, w, 4) RGBA array, got shape {image.shape}")
    h, w = image.shape[:2]
    if h == 0 or w == 0:
        return pygame.Surface((0, 0), pygame.SRCALPHA)
    buf = np.ascontiguousarray(image, dtype=np.uint8).tobytes()
    return pygame.image.frombuffer(buf, (w, h), "RGBA").copy()


class TextureSurfaceCache:
    """
    Request -> pygame.Surface memo on top of a TextureCache.

    Surfaces are converted once; failed syntheses yield None and are retried
    on the next lookup.
    """

    def __init__(self, cache_size: int = 32, textures: Optional[TextureCache] = None):
        self._textures = textures if textures is not None else TextureCache(cache_size)
        self._cache: dict[TextureRequest, pygame.Surface] = {}
        self._cache_size = max(int(cache_size), 1)

    def get(self, request: TextureRequest) -> Optional[pygame.Surface]:
        if request in self._cache:
            return self._cache[request]

        image = self._textures.get(request)
        if image.size == 0:
            logger.warning("No texture available for %s request", request.type.value)
            return None
        surf = texture_to_surface(image)

        if len(self._cache) >= self._cache_size:
            self._cache.pop(next(iter(self._cache)))
        self._cache[request] = surf
        return surf

    def clear(self) -> None:
        self._cache.clear()
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._cache)
