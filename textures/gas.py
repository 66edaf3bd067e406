"""
Gas giants: latitude bands modulated by turbulence, storms, swirls and a
soft limb highlight.

Warm bases (red > blue, Jupiter/Saturn) get 12 bands, red-brown storms and
amber swirls; cool bases (Uranus/Neptune) get 8 bands, white storms and
blue-white swirls. Storm ovals have a 10-30 px semi-major axis at 1024 px,
scaled with the resolution and never below 1.5 px.
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from .canvas import RadialGradient, fill, fill_ellipse, put_pixels
from .colour import TRANSPARENT, hsl_to_rgb, rgb_to_hsl, rgba
from .noise import fractal_noise, sphere_coordinates
from .request import TextureRequest

WARM_BANDS = 12
COOL_BANDS = 8

STORM_THRESHOLD = 0.85      # of the mid-scale turbulence, rescaled to [0, 1]
STORM_CHANCE    = 0.03
MAX_STORMS      = 12
STORM_COLOURS   = (rgba(196, 116, 48, 0.8), rgba(255, 255, 255, 0.8))

SWIRLS = 5
WARM_SWIRL = ((0.0, rgba(255, 200, 100, 0.4)), (0.7, rgba(180, 100, 40, 0.15)), (1.0, TRANSPARENT))
COOL_SWIRL = ((0.0, rgba(220, 255, 255, 0.4)), (0.7, rgba(50, 120, 220, 0.15)), (1.0, TRANSPARENT))
HIGHLIGHT  = ((0.0, rgba(255, 255, 255, 0.15)), (0.5, rgba(255, 255, 255, 0.05)),
              (1.0, rgba(255, 255, 255, 0.0)))


def is_warm(base_rgb) -> bool:
    return float(base_rgb[0]) > float(base_rgb[2])


def band_count(base_rgb) -> int:
    return WARM_BANDS if is_warm(base_rgb) else COOL_BANDS


def gas_bands(resolution: int, base_rgb, noise_intensity: float,
              detail: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Banded cloud layer.

    Returns (rgb, turbulence2) where rgb is (res, res, 3) and turbulence2 is
    the mid-scale noise field used to place storms.
    """
    xs, ys, zs = sphere_coordinates(resolution)
    d = detail
    n = band_count(base_rgb)
    v = (np.arange(resolution, dtype=np.float64) / resolution)[:, np.newaxis]
    band = np.floor(v * n).astype(np.int64) % n

    n1 = fractal_noise(xs * d,     ys * d,     zs * d,     4, 0.5)
    n2 = fractal_noise(xs * d * 2, ys * d * 2, zs * d * 3, 2, 0.7)
    n3 = fractal_noise(xs * d * 4, ys * d * 4, zs * d * 5, 2, 0.8)
    turbulence = (n1 * 0.5 + n2 * 0.3 + n3 * 0.2) * noise_intensity * 1.5

    base_hue, _, _ = rgb_to_hsl(base_rgb)
    band_offset = np.sin(band / n * 2.0 * math.pi) * 0.15
    hue = base_hue + band_offset + turbulence * 0.08
    sat = 0.7 + (band % 2) * 0.2 + turbulence * 0.15
    light = 0.55 + band_offset * 0.5 + turbulence * 0.15
    return hsl_to_rgb(hue, sat, light), n2


def _storm_sites(turbulence: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    lo, hi = float(turbulence.min()), float(turbulence.max())
    norm = (turbulence - lo) / (hi - lo) if hi > lo else np.zeros_like(turbulence)
    candidates = (norm > STORM_THRESHOLD) & (rng.random(turbulence.shape) < STORM_CHANCE)
    ys, xs = np.nonzero(candidates)
    if len(xs) > MAX_STORMS:
        keep = rng.choice(len(xs), size=MAX_STORMS, replace=False)
        ys, xs = ys[keep], xs[keep]
    return np.stack([xs, ys], axis=-1)


def paint_gas(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    base = request.base_rgb
    warm = is_warm(base)
    rgb, turbulence = gas_bands(res, base, request.noise_intensity, request.detail)
    put_pixels(surface, rgb)

    px = res / 1024.0
    colour = STORM_COLOURS[0] if warm else STORM_COLOURS[1]
    for x, y in _storm_sites(turbulence, rng):
        size = max((rng.random() * 20.0 + 10.0) * px, 1.5)
        fill_ellipse(surface, x + 0.5, y + 0.5, size, size * 0.6, 0.0, colour)

    stops = WARM_SWIRL if warm else COOL_SWIRL
    for _ in range(SWIRLS):
        x = rng.random() * res
        y = rng.random() * res
        radius = rng.random() * res / 3.0 + res / 10.0
        rotation = rng.random() * math.pi
        fill_ellipse(surface, x, y, radius, radius * 0.6, rotation,
                     RadialGradient(x, y, 0.0, radius, stops))

    fill(surface, RadialGradient(res * 0.3, res * 0.3, 0.0, res * 0.6, HIGHLIGHT))
