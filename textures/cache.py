"""
Bounded memo of synthesized textures keyed by TextureRequest.

Unseeded requests are cached as well, so the first image drawn for them
is the one every later lookup sees.
Failed syntheses (empty images) are not cached.
"""

from __future__ import annotations
import logging
from typing import Dict

import numpy as np

from .request import TextureRequest
from .synthesizer import synthesize

logger = logging.getLogger(__name__)


class TextureCache:
    """FIFO cache: when full, the oldest entry is dropped."""

    def __init__(self, cache_size: int = 32):
        self._cache: Dict[TextureRequest, np.ndarray] = {}
        self._cache_size = max(int(cache_size), 1)
        self.hits = 0
        self.misses = 0

    def get(self, request: TextureRequest) -> np.ndarray:
        """Cached image for `request` (read-only array), synthesizing on a miss."""
        if request in self._cache:
            self.hits += 1
            return self._cache[request]

        self.misses += 1
        image = synthesize(request)
        if image.size == 0:
            return image

        image.setflags(write=False)
        if len(self._cache) >= self._cache_size:
            evicted = next(iter(self._cache))
            self._cache.pop(evicted)
            logger.debug("Evicted %s texture from cache", evicted.type.value)
        self._cache[request] = image
        return image

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, request: TextureRequest) -> bool:
        return request in self._cache

    def __len__(self) -> int:
        return len(self._cache)
