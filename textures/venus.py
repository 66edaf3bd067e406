"""Venus: a dense, pale cloud deck with faint latitude banding and swirls."""

from __future__ import annotations
import math

import numpy as np

from .canvas import RadialGradient, fill_ellipse, put_pixels
from .colour import TRANSPARENT, lerp, offset_hsl, parse_colour, rgba, where
from .noise import colatitude, fractal_noise, sphere_coordinates
from .request import TextureRequest

CLOUD  = parse_colour("#e0c48f")
DARK   = parse_colour("#a89466")
BRIGHT = parse_colour("#f0d8a0")

SWIRLS = 6
SWIRL_STOPS = ((0.0, rgba(240, 230, 180, 0.15)), (0.5, rgba(220, 200, 140, 0.1)), (1.0, TRANSPARENT))


def venus_layer(resolution: int, detail: float) -> np.ndarray:
    xs, ys, zs = sphere_coordinates(resolution)
    d = detail
    broad   = fractal_noise(xs * d,       ys * d,       zs * d,       6, 0.6)
    swirls  = fractal_noise(xs * d * 0.5, ys * d * 0.5, zs * d * 0.5, 3, 0.7)
    details = fractal_noise(xs * d * 4,   ys * d * 4,   zs * d * 4,   2, 0.5)
    pattern = broad * 0.5 + swirls * 0.3 + details * 0.2

    rgb = where(pattern > 0.6, lerp(CLOUD, BRIGHT, (pattern - 0.6) * 2.0),
                where(pattern < 0.4, lerp(CLOUD, DARK, (0.4 - pattern) * 2.0), CLOUD))
    phi = colatitude(resolution)
    return offset_hsl(rgb, dl=np.sin(phi * 8.0) * 0.05)


def paint_venus(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    put_pixels(surface, venus_layer(res, request.detail))
    for _ in range(SWIRLS):
        x = rng.random() * res
        y = rng.random() * res
        size = rng.random() * res * 0.2 + res * 0.1
        rotation = rng.random() * math.pi
        fill_ellipse(surface, x, y, size, size * 0.4, rotation,
                     RadialGradient(x, y, 0.0, size, SWIRL_STOPS))
