"""
Planetary ring texture: a transparent square with an annulus of banded,
semi-transparent ring material, dark gaps, scattered ring particles and a
faint glow.
"""

from __future__ import annotations
import math

import numpy as np

from .canvas import RadialGradient, clear, fill_circle
from .colour import TRANSPARENT, offset_hsl, rgba, scale, where, with_alpha
from .noise import fractal_noise
from .request import TextureRequest

INNER_FRACTION = 0.30
OUTER_FRACTION = 0.47

# Normalised radii of the dark divisions (Cassini, Encke, ...)
RING_GAPS      = (0.70, 0.77, 0.82, 0.905)
GAP_HALF_WIDTH = 0.01
PARTICLE_GAP_CLEARANCE = 0.015

PARTICLES = 120
GLOW_STOPS = ((0.0, rgba(255, 240, 220, 0.1)), (0.5, rgba(255, 220, 180, 0.05)), (1.0, TRANSPARENT))


def in_gap(nr, half_width: float = GAP_HALF_WIDTH):
    nr = np.asarray(nr, dtype=np.float64)
    hit = np.zeros(nr.shape, dtype=bool)
    for gap in RING_GAPS:
        hit |= np.abs(nr - gap) < half_width
    return hit


def ring_layer(resolution: int, base_rgb, detail: float):
    """(rgb, alpha) of the ring annulus before particles and glow."""
    c = resolution / 2.0
    inner = resolution * INNER_FRACTION
    outer = resolution * OUTER_FRACTION
    yy, xx = np.mgrid[0:resolution, 0:resolution].astype(np.float64)
    dx, dy = xx + 0.5 - c, yy + 0.5 - c
    r = np.hypot(dx, dy)
    angle = np.arctan2(dy, dx)
    nr = (r - inner) / (outer - inner)

    d = detail
    n = fractal_noise(np.cos(angle) * d, np.sin(angle) * d, nr * d, 3, 0.5)
    rgb = offset_hsl(base_rgb, dl=(n - 0.5) * 0.25)
    rgb = where(nr < 0.3, np.clip(scale(base_rgb, 0.7), 0.0, 1.0), rgb)
    rgb = where(nr > 0.8, np.clip(scale(base_rgb, 1.3), 0.0, 1.0), rgb)

    opacity = 0.8 + np.sin(nr * math.pi * 15.0) * 0.15
    band = (r >= inner) & (r <= outer) & ~in_gap(nr)
    alpha = np.where(band, opacity, 0.0)
    return rgb, alpha


def paint_rings(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    base = request.base_rgb
    clear(surface)
    rgb, alpha = ring_layer(res, base, request.detail)
    surface[..., :3] = rgb
    surface[..., 3] = alpha

    c = res / 2.0
    inner = res * INNER_FRACTION
    outer = res * OUTER_FRACTION
    px = res / 1024.0
    for _ in range(PARTICLES):
        angle = rng.random() * 2.0 * math.pi
        r = inner + rng.random() * (outer - inner)
        nr = (r - inner) / (outer - inner)
        if in_gap(nr, PARTICLE_GAP_CLEARANCE):
            continue
        size = max((rng.random() * 3.0 + 1.0) * px, 0.5)
        colour = offset_hsl(base, dl=rng.random() * 0.5 - 0.2)
        fill_circle(surface, c + math.cos(angle) * r, c + math.sin(angle) * r, size,
                    with_alpha(colour, 0.95))

    fill_circle(surface, c, c, outer, RadialGradient(c, c, inner, outer, GLOW_STOPS))
