"""
Mars: rust plains with dust, crater rims and floors, polar caps and two
landmark features (Olympus Mons, Valles Marineris).
"""

from __future__ import annotations
import math

import numpy as np

from .canvas import RadialGradient, fill_circle, fill_ellipse, put_pixels
from .colour import TRANSPARENT, lerp, offset_hsl, parse_colour, rgba, where
from .noise import fractal_noise, sphere_coordinates
from .request import TextureRequest

RUST  = parse_colour("#c1440e")
DARK  = parse_colour("#6b2308")
DUST  = parse_colour("#e07a26")
POLAR = parse_colour("#f0f0f0")

POLAR_LATITUDE = 0.85

OLYMPUS_STOPS = ((0.0, rgba(230, 180, 100, 0.7)), (0.3, rgba(210, 140, 60, 0.5)),
                 (0.7, rgba(180, 90, 40, 0.3)), (1.0, TRANSPARENT))
VALLES_COLOUR = rgba(100, 30, 10, 0.6)


def mars_layer(resolution: int, detail: float) -> np.ndarray:
    xs, ys, zs = sphere_coordinates(resolution)
    d = detail
    relief = fractal_noise(xs * d,     ys * d,     zs * d,     8, 0.55)
    crater = fractal_noise(xs * d * 3, ys * d * 3, zs * d * 3, 4, 0.8)
    dust   = fractal_noise(xs * d * 2, ys * d * 2, zs * d * 2, 6, 0.4)
    lat = np.abs(zs)

    terrain = lerp(RUST, DUST, dust * 0.5)
    terrain = where(relief > 0.6, offset_hsl(DUST, 0.0, 0.1, 0.1), terrain)
    terrain = where(crater < 0.3, DARK, terrain)
    terrain = where(crater > 0.7, offset_hsl(DUST, 0.0, -0.1, 0.1), terrain)
    terrain = offset_hsl(terrain, dl=lat * 0.3)

    polar = where(lat < 0.9, lerp(POLAR, DUST, np.clip((0.9 - lat) * 10.0, 0.0, 1.0)), POLAR)
    return where(lat > POLAR_LATITUDE, polar, terrain)


def paint_mars(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    put_pixels(surface, mars_layer(res, request.detail))

    ox, oy, orad = res * 0.3, res * 0.4, res * 0.12
    fill_circle(surface, ox, oy, orad, RadialGradient(ox, oy, 0.0, orad, OLYMPUS_STOPS))
    fill_ellipse(surface, res * 0.6, res * 0.5, res * 0.3, res * 0.05, math.pi * 0.2, VALLES_COLOUR)
