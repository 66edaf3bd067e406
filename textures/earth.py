"""
Earth: continents and oceans from fractal noise, climate-tinted land,
mountain snow, polar caps, a cloud layer and a specular glint.

Earth uses its own fixed palette; the request's base colour is ignored.
"""

from __future__ import annotations

import numpy as np

from .canvas import RadialGradient, fill, put_pixels
from .colour import lerp, offset_hsl, parse_colour, rgba, where
from .noise import fractal_noise, sphere_coordinates
from .request import TextureRequest

OCEAN   = parse_colour("#1a4da8")
LAND    = parse_colour("#2d8a4f")
SNOW    = parse_colour("#ffffff")
CLOUD   = parse_colour("#f8f8f8")
DESERT  = parse_colour("#d9c27e")
SHALLOW = parse_colour("#4ac7e7")

LAND_BIAS       = 0.2
POLAR_LATITUDE  = 0.8
CLOUD_THRESHOLD = 0.65

GLINT_STOPS = ((0.0, rgba(255, 255, 255, 0.2)), (0.5, rgba(255, 255, 255, 0.1)),
               (1.0, rgba(255, 255, 255, 0.0)))


def earth_layer(resolution: int, detail: float) -> np.ndarray:
    """Surface colour including clouds, (res, res, 3)."""
    xs, ys, zs = sphere_coordinates(resolution)
    d = detail
    continent = fractal_noise(xs * 2, ys * 2, zs * 2, 8, 0.65)
    relief    = fractal_noise(xs * d * 3, ys * d * 3, zs * d * 3, 4, 0.5)
    climate   = fractal_noise(xs * 3 + 100, ys * 3 + 100, zs * 3 + 100, 3, 0.7)
    height = continent * 0.7 + relief * 0.3 - LAND_BIAS
    lat = np.abs(zs)

    land = where((lat < 0.3) & (climate > 0.5), DESERT,
                 where((lat > 0.5) & (lat < 0.7), offset_hsl(LAND, 0.05, 0.2, -0.1), LAND))
    land = where(height > 0.3, lerp(land, SNOW, np.clip((height - 0.3) * 3.0, 0.0, 0.8)), land)
    land = where(relief < 0.4, offset_hsl(land, 0.05, 0.3, -0.1), land)

    ocean = offset_hsl(OCEAN, 0.0, 0.1, np.abs(height) * 2.0 * 0.15 - 0.15)
    ocean = where(height > -0.1, lerp(ocean, SHALLOW, 0.3), ocean)

    # Ice caps fade into the terrain at their edge
    polar = lerp(SNOW, LAND, np.clip(0.9 - lat, 0.0, 1.0))

    rgb = where(lat > POLAR_LATITUDE, polar, where(height > 0.0, land, ocean))

    clouds = fractal_noise(xs * 5 + 100, ys * 5 + 100, zs * 5 + 100, 4, 0.6)
    cover = np.clip((clouds - CLOUD_THRESHOLD) * 3.0, 0.0, 0.7)
    return where(clouds > CLOUD_THRESHOLD, lerp(rgb, CLOUD, cover), rgb)


def paint_earth(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    put_pixels(surface, earth_layer(res, request.detail))
    fill(surface, RadialGradient(res * 0.6, res * 0.4, 0.0, res * 0.2, GLINT_STOPS))
