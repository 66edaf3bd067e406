"""
Rocky surfaces: generic rocky bodies, Earth's Moon and Mercury.

The Moon and Mercury share one cratered-terrain recipe (highlands, maria
floors, bright rims) plus impact craters with ejecta rays; they differ in
palette, crater density and ray behaviour.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from .canvas import (LinearGradient, RadialGradient, fill_circle, fill_polygon,
                     put_pixels, stroke_circle)
from .colour import (TRANSPARENT, offset_hsl, parse_colour, rgba, scale, where,
                     with_alpha)
from .noise import fractal_noise, sphere_coordinates
from .request import TextureRequest

ROCKY_CRATERS = 15


@dataclass(frozen=True)
class CraterPalette:
    base:  str
    dark:  str
    light: str
    rim:   str
    ray:   tuple          # 0–255 RGB of ejecta rays
    craters: int          # impact craters drawn
    ray_min_size: float   # crater radius (fraction of res) needed for rays
    ray_chance: float     # probability a large crater gets rays
    ray_length: tuple     # ray length range, multiples of crater size


MOON_PALETTE = CraterPalette(
    base="#c8c8c8", dark="#505050", light="#e0e0e0", rim="#d0d0d0",
    ray=(220, 220, 220), craters=35,
    ray_min_size=0.05, ray_chance=0.3, ray_length=(6.0, 14.0),
)

MERCURY_PALETTE = CraterPalette(
    base="#a59784", dark="#6e6259", light="#cfc0b3", rim="#d7c9b8",
    ray=(215, 201, 184), craters=25,
    ray_min_size=0.06, ray_chance=1.0, ray_length=(4.0, 10.0),
)

# (x, y, radius) as fractions of the resolution
LUNAR_MARIA = ((0.30, 0.30, 0.15), (0.60, 0.40, 0.12), (0.50, 0.70, 0.10))
MARE_COLOUR = rgba(80, 80, 80, 0.4)


# ---------------------------------------------------------------------------
# Generic rocky body
# ---------------------------------------------------------------------------

def paint_rocky(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    res = surface.shape[0]
    base = request.base_rgb
    d = request.detail
    xs, ys, zs = sphere_coordinates(res)

    n = fractal_noise(xs * d, ys * d, zs * d, 6, 0.5)
    rgb = offset_hsl(base, dl=(n - 0.5) * request.noise_intensity * 2.0)

    # Thin noise contour reads as old, eroded crater walls
    crater = fractal_noise(xs * d * 2, ys * d * 2, zs * d * 2, 3, 0.7)
    rgb = where((crater > 0.7) & (crater < 0.75), offset_hsl(rgb, dl=-0.2), rgb)
    put_pixels(surface, rgb)

    dark = with_alpha(scale(base, 0.7), 1.0)
    light = with_alpha(scale(base, 1.2), 1.0)
    for _ in range(ROCKY_CRATERS):
        x = rng.random() * res
        y = rng.random() * res
        size = rng.random() * res / 10.0 + res / 30.0
        fill_circle(surface, x, y, size, dark)
        hx, hy = x - size / 4.0, y - size / 4.0
        glint = RadialGradient(hx, hy, 0.0, size / 2.0, ((0.0, light), (1.0, TRANSPARENT)))
        fill_circle(surface, hx, hy, size / 2.0, glint)


# ---------------------------------------------------------------------------
# Cratered bodies (Moon, Mercury)
# ---------------------------------------------------------------------------

def cratered_terrain(resolution: int, palette: CraterPalette, detail: float,
                     noise_intensity: float) -> np.ndarray:
    """Base terrain colour (res, res, 3) before impact craters are drawn."""
    xs, ys, zs = sphere_coordinates(resolution)
    d = detail
    large  = fractal_noise(xs * d * 0.5, ys * d * 0.5, zs * d * 0.5, 4, 0.5)
    medium = fractal_noise(xs * d * 2,   ys * d * 2,   zs * d * 2,   5, 0.6)
    small  = fractal_noise(xs * d * 6,   ys * d * 6,   zs * d * 6,   3, 0.7)
    combined = large * 0.4 + medium * 0.4 + small * 0.2

    base = parse_colour(palette.base)
    rgb = offset_hsl(base, dl=(combined - 0.5) * 0.4 * noise_intensity)
    rgb = where(large > 0.6, parse_colour(palette.light), rgb)
    rgb = where((medium < 0.3) & (small < 0.4), parse_colour(palette.dark), rgb)
    rgb = where((medium > 0.7) & (small > 0.6), parse_colour(palette.rim), rgb)
    return rgb


def ejecta_rays(surface: np.ndarray, rng: np.random.Generator, cx: float, cy: float,
                size: float, palette: CraterPalette) -> None:
    """Bright tapered streaks radiating from a fresh crater."""
    count = int(rng.integers(6, 14))
    lo, hi = palette.ray_length
    length = size * (rng.random() * (hi - lo) + lo)
    r, g, b = palette.ray
    stops = ((0.0, rgba(r, g, b, 0.7)), (0.5, rgba(r, g, b, 0.3)), (1.0, rgba(r, g, b, 0.0)))

    for k in range(count):
        angle = k * 2.0 * math.pi / count + rng.random() * 0.5
        reach = size + length * 0.5
        ex, ey = cx + math.cos(angle) * reach, cy + math.sin(angle) * reach
        tip = size * 0.4
        points = [
            (cx, cy),
            (cx + math.cos(angle - 0.2) * size, cy + math.sin(angle - 0.2) * size),
            (ex + math.cos(angle + 0.1) * tip, ey + math.sin(angle + 0.1) * tip),
            (ex + math.cos(angle - 0.1) * tip, ey + math.sin(angle - 0.1) * tip),
            (cx + math.cos(angle + 0.2) * size, cy + math.sin(angle + 0.2) * size),
        ]
        fill_polygon(surface, points, LinearGradient(cx, cy, ex, ey, stops))


def impact_craters(surface: np.ndarray, rng: np.random.Generator, palette: CraterPalette) -> None:
    res = surface.shape[0]
    floor = with_alpha(parse_colour(palette.dark), 1.0)
    rim = with_alpha(parse_colour(palette.rim), 1.0)
    for _ in range(palette.craters):
        x = rng.random() * res
        y = rng.random() * res
        size = rng.random() * res * 0.1 + res * 0.02
        fill_circle(surface, x, y, size, floor)
        stroke_circle(surface, x, y, size * 0.9, size * 0.15, rim)
        if size > res * palette.ray_min_size and rng.random() < palette.ray_chance:
            ejecta_rays(surface, rng, x, y, size, palette)


def paint_cratered(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator,
                   palette: CraterPalette) -> None:
    res = surface.shape[0]
    put_pixels(surface, cratered_terrain(res, palette, request.detail, request.noise_intensity))
    impact_craters(surface, rng, palette)


def paint_moon(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    paint_cratered(surface, request, rng, MOON_PALETTE)
    res = surface.shape[0]
    for fx, fy, fr in LUNAR_MARIA:
        fill_circle(surface, fx * res, fy * res, fr * res, MARE_COLOUR)


def paint_mercury(surface: np.ndarray, request: TextureRequest, rng: np.random.Generator) -> None:
    paint_cratered(surface, request, rng, MERCURY_PALETTE)
