"""
The Sun: limb-darkened disc, granulation plasma, flares and a corona.

Unlike the planets the sun texture is a face-on disc, so plasma noise is
sampled on the visible hemisphere behind each pixel instead of on an
equirectangular map. `time_seed` shifts the plasma noise, which animates
the surface when re-synthesized with a growing value.
"""

from __future__ import annotations
import math

import numpy as np

from .canvas import (RadialGradient, fill, fill_circle, fill_circular_segment,
                     fill_ellipse)
from .colour import TRANSPARENT, offset_hsl, parse_colour, rgba, where, with_alpha
from .noise import fractal_noise
from .request import TextureRequest

FLARES = 12

FLARE_STOPS = ((0.0, rgba(255, 250, 220, 0.9)), (0.3, rgba(255, 200, 100, 0.7)),
               (0.6, rgba(255, 140, 60, 0.5)), (1.0, TRANSPARENT))
CORONA_STOPS = ((0.0, rgba(255, 220, 120, 0.4)), (0.3, rgba(255, 180, 80, 0.25)),
                (0.6, rgba(255, 150, 50, 0.15)), (1.0, TRANSPARENT))


def _disc_stops(base_rgb):
    return (
        (0.0,  with_alpha(parse_colour("#fffdf8"), 1.0)),
        (0.2,  with_alpha(parse_colour("#fff5e0"), 1.0)),
        (0.5,  with_alpha(base_rgb, 1.0)),
        (0.8,  with_alpha(parse_colour("#ff7700"), 1.0)),
        (0.95, with_alpha(parse_colour("#ff4400"), 1.0)),
        (1.0,  with_alpha(parse_colour("#ff2200"), 1.0)),
    )


def plasma_field(resolution: int, detail: float, time_seed: float = 0.0):
    """Plasma value per pixel and the mask of pixels inside the disc."""
    idx = np.arange(resolution, dtype=np.float64) / resolution - 0.5
    nx = idx[np.newaxis, :]
    ny = idx[:, np.newaxis]
    r = np.hypot(nx, ny) * 2.0
    inside = r <= 1.0

    theta = np.arctan2(ny, nx)
    phi = np.arccos(np.clip(r, 0.0, 1.0))
    x = np.sin(phi) * np.cos(theta)
    y = np.sin(phi) * np.sin(theta)
    z = np.cos(phi)

    d = detail
    n1 = fractal_noise(x * d + time_seed, y * d, z * d, 4, 0.5)
    n2 = fractal_noise(x * d * 2, y * d * 2 + time_seed, z * d * 3, 2, 0.7)
    n3 = fractal_noise(x * d * 4, y * d * 4, z * d * 5, 2, 0.8)
    return n1 * 0.5 + n2 * 0.3 + n3 * 0.2, inside


def paint_sun(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    c = res / 2.0
    fill(surface, RadialGradient(c, c, 0.0, c, _disc_stops(request.base_rgb)))

    plasma, inside = plasma_field(res, request.detail, request.time_seed)
    rgb = surface[..., :3].astype(np.float64)
    rgb = where(inside & (plasma > 0.7), offset_hsl(rgb, 0.0, -0.3, 0.3), rgb)
    rgb = where(inside & (plasma < 0.3), offset_hsl(rgb, 0.05, 0.3, -0.1), rgb)
    surface[..., :3] = np.clip(rgb, 0.0, 1.0)

    for _ in range(FLARES):
        angle = rng.random() * 2.0 * math.pi
        distance = res * 0.35 + rng.random() * res * 0.15
        x = c + math.cos(angle) * distance
        y = c + math.sin(angle) * distance
        paint = RadialGradient(x, y, 0.0, res * 0.2, FLARE_STOPS)
        if rng.random() > 0.5:
            start = rng.random() * 2.0 * math.pi
            sweep = rng.random() * math.pi / 2.0 + math.pi / 4.0
            fill_circular_segment(surface, x, y, res * 0.15, start, start + sweep, paint)
        else:
            rx = res * 0.1 + rng.random() * res * 0.08
            ry = res * 0.05 + rng.random() * res * 0.04
            fill_ellipse(surface, x, y, rx, ry, rng.random() * 2.0 * math.pi, paint)

    fill_circle(surface, c, c, res * 0.75, RadialGradient(c, c, res * 0.45, res * 0.75, CORONA_STOPS))
