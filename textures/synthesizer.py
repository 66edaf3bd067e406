"""
Texture synthesis entry point.

    image = synthesize(TextureRequest("#f0b578", "gas", resolution=512, seed=7))

Dispatches on the request's TextureType to one generator per surface
family, applies the per-type brightness/contrast post-process and returns
an (res, res, 4) uint8 RGBA array owned by the caller.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from . import earth, gas, mars, rings, rocky, sun, venus
from .canvas import new_surface, to_uint8
from .request import TextureRequest, TextureType
from .seeding import rng_for

logger = logging.getLogger(__name__)

Generator = Callable[[np.ndarray, TextureRequest, np.random.Generator], None]

GENERATORS: Dict[TextureType, Generator] = {
    TextureType.ROCKY:   rocky.paint_rocky,
    TextureType.MERCURY: rocky.paint_mercury,
    TextureType.GAS:     gas.paint_gas,
    TextureType.SUN:     sun.paint_sun,
    TextureType.RINGS:   rings.paint_rings,
    TextureType.EARTH:   earth.paint_earth,
    TextureType.MARS:    mars.paint_mars,
    TextureType.VENUS:   venus.paint_venus,
}

# (brightness, contrast) applied after drawing
DEFAULT_BRIGHTNESS_CONTRAST: Tuple[float, float] = (0.1, 0.2)
BRIGHTNESS_CONTRAST: Dict[TextureType, Tuple[float, float]] = {
    TextureType.SUN:   (0.2, 0.1),
    TextureType.GAS:   (0.15, 0.25),
    TextureType.EARTH: (0.12, 0.3),
    TextureType.MARS:  (0.15, 0.35),
}


def blank_image() -> np.ndarray:
    return np.zeros((0, 0, 4), dtype=np.uint8)


def apply_brightness_contrast(surface: np.ndarray, brightness: float, contrast: float) -> None:
    """Brighten then stretch contrast around mid-grey, in 0–255 units, in place."""
    rgb = surface[..., :3].astype(np.float64) * 255.0
    rgb = np.minimum(255.0, rgb * (1.0 + brightness))
    factor = 259.0 * (contrast + 1.0) / (255.0 * (1.0 - contrast))
    rgb = np.clip(factor * (rgb - 128.0) + 128.0, 0.0, 255.0)
    surface[..., :3] = rgb / 255.0


def _generator_for(request: TextureRequest) -> Generator:
    if request.type is TextureType.ROCKY and request.is_moon:
        return rocky.paint_moon
    return GENERATORS[request.type]


def _acquire_surface(resolution) -> Optional[np.ndarray]:
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 1:
        logger.error("Could not create a %r px drawing surface", resolution)
        return None
    try:
        return new_surface(int(resolution))
    except (MemoryError, ValueError) as exc:
        logger.error("Could not create a %d px drawing surface: %s", resolution, exc)
        return None


def synthesize(request: TextureRequest) -> np.ndarray:
    """
    Draw the texture described by `request`.

    Returns a fresh (res, res, 4) uint8 array. If no drawing surface can be
    obtained an error is logged and an empty (0, 0, 4) array is returned.
    """
    surface = _acquire_surface(request.resolution)
    if surface is None:
        return blank_image()

    t0 = time.perf_counter()
    surface[..., :3] = request.base_rgb
    surface[..., 3] = 1.0

    rng = rng_for(request.seed, request.type.value)
    _generator_for(request)(surface, request, rng)

    brightness, contrast = BRIGHTNESS_CONTRAST.get(request.type, DEFAULT_BRIGHTNESS_CONTRAST)
    apply_brightness_contrast(surface, brightness, contrast)

    logger.debug("Synthesized %s texture %dx%d in %.2fs",
                 request.type.value, request.resolution, request.resolution,
                 time.perf_counter() - t0)
    return to_uint8(surface)
