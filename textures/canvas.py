"""
canvas.py
=========
Minimal 2D drawing surface for texture synthesis.

The surface is a float32 (H, W, 4) numpy array holding straight (non
premultiplied) RGBA in [0, 1]. Shapes are painted with "source-over"
compositing, each one only touching its own bounding box:

    fill / fill_circle / stroke_circle / fill_ellipse /
    fill_polygon / fill_circular_segment

A paint is either a solid RGBA tuple or a RadialGradient / LinearGradient.
Gradient stops are interpolated in premultiplied space, so a stop of
TRANSPARENT fades the neighbouring colour out instead of towards black.
Pixel centres sit at (x + 0.5, y + 0.5).
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

RGBA = Tuple[float, float, float, float]
Stops = Tuple[Tuple[float, RGBA], ...]


# ── Surface ───────────────────────────────────────────────────────────────────

def new_surface(resolution: int, colour: Optional[Sequence[float]] = None) -> np.ndarray:
    """Allocate a square surface, transparent or filled with an opaque colour."""
    surface = np.zeros((resolution, resolution, 4), dtype=np.float32)
    if colour is not None:
        surface[..., :3] = np.clip(colour, 0.0, 1.0)
        surface[..., 3] = 1.0
    return surface


def clear(surface: np.ndarray) -> None:
    surface[...] = 0.0


def put_pixels(surface: np.ndarray, rgb: np.ndarray, alpha: float = 1.0) -> None:
    """Overwrite every pixel (no blending), like putImageData."""
    surface[..., :3] = np.clip(rgb, 0.0, 1.0)
    surface[..., 3] = alpha


def to_uint8(surface: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(surface * 255.0), 0, 255).astype(np.uint8)


# ── Paints ────────────────────────────────────────────────────────────────────

def sample_stops(stops: Stops, t) -> Tuple[np.ndarray, np.ndarray]:
    """Colour at gradient position(s) t (clamped to [0, 1]) -> (rgb, alpha)."""
    t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    offsets = [o for o, _ in stops]
    alpha = np.interp(t, offsets, [c[3] for _, c in stops])
    premul = [np.interp(t, offsets, [c[k] * c[3] for _, c in stops]) for k in range(3)]
    safe = np.where(alpha > 0, alpha, 1.0)
    rgb = np.stack([p / safe for p in premul], axis=-1)
    return rgb, alpha


@dataclass(frozen=True)
class RadialGradient:
    """Concentric radial gradient: t = 0 at radius r0, t = 1 at radius r1."""
    cx: float
    cy: float
    r0: float
    r1: float
    stops: Stops

    def sample(self, xx, yy):
        d = np.hypot(xx - self.cx, yy - self.cy)
        t = (d - self.r0) / max(self.r1 - self.r0, 1e-9)
        return sample_stops(self.stops, t)


@dataclass(frozen=True)
class LinearGradient:
    """Gradient along the segment (x0, y0) -> (x1, y1)."""
    x0: float
    y0: float
    x1: float
    y1: float
    stops: Stops

    def sample(self, xx, yy):
        dx, dy = self.x1 - self.x0, self.y1 - self.y0
        t = ((xx - self.x0) * dx + (yy - self.y0) * dy) / max(dx*dx + dy*dy, 1e-9)
        return sample_stops(self.stops, t)


Paint = Union[RGBA, Sequence[float], RadialGradient, LinearGradient]


def _sample_paint(paint: Paint, xx, yy) -> Tuple[np.ndarray, np.ndarray]:
    if isinstance(paint, (RadialGradient, LinearGradient)):
        return paint.sample(xx, yy)
    r, g, b, a = (tuple(paint) + (1.0,))[:4]
    rgb = np.broadcast_to(np.array([r, g, b], dtype=np.float64), xx.shape + (3,))
    return rgb, np.full(xx.shape, a, dtype=np.float64)


# ── Compositing ───────────────────────────────────────────────────────────────

def _blend(region: np.ndarray, src_rgb: np.ndarray, src_a: np.ndarray) -> None:
    """Source-over onto region (a view into the surface), in place."""
    dst_rgb = region[..., :3].astype(np.float64)
    dst_a = region[..., 3].astype(np.float64)
    src_a = np.clip(src_a, 0.0, 1.0)
    out_a = src_a + dst_a * (1.0 - src_a)
    safe = np.where(out_a > 0, out_a, 1.0)[..., np.newaxis]
    out_rgb = (np.clip(src_rgb, 0.0, 1.0) * src_a[..., np.newaxis]
               + dst_rgb * (dst_a * (1.0 - src_a))[..., np.newaxis]) / safe
    region[..., :3] = out_rgb
    region[..., 3] = out_a


def _paint_box(surface, x0, y0, x1, y1, coverage_fn, paint: Paint) -> None:
    H, W = surface.shape[:2]
    x0 = max(0, int(math.floor(x0))); x1 = min(W, int(math.ceil(x1)) + 1)
    y0 = max(0, int(math.floor(y0))); y1 = min(H, int(math.ceil(y1)) + 1)
    if x0 >= x1 or y0 >= y1:
        return
    yy, xx = np.mgrid[y0:y1, x0:x1].astype(np.float64)
    xx += 0.5
    yy += 0.5
    coverage = coverage_fn(xx, yy)
    if not np.any(coverage > 0):
        return
    rgb, a = _sample_paint(paint, xx, yy)
    _blend(surface[y0:y1, x0:x1], rgb, a * coverage)


# ── Shapes ────────────────────────────────────────────────────────────────────

def fill(surface: np.ndarray, paint: Paint) -> None:
    """Paint the whole surface (fillRect over the canvas)."""
    H, W = surface.shape[:2]
    _paint_box(surface, 0, 0, W - 1, H - 1, lambda xx, yy: np.ones_like(xx), paint)


def fill_circle(surface, cx, cy, radius, paint: Paint) -> None:
    """Anti-aliased disk."""
    if radius <= 0:
        return
    def cover(xx, yy):
        return np.clip(radius - np.hypot(xx - cx, yy - cy) + 0.5, 0.0, 1.0)
    _paint_box(surface, cx - radius - 1, cy - radius - 1,
               cx + radius + 1, cy + radius + 1, cover, paint)


def stroke_circle(surface, cx, cy, radius, width, paint: Paint) -> None:
    """Circle outline of the given line width, centred on the radius."""
    half = max(width, 1.0) / 2.0
    def cover(xx, yy):
        return np.clip(half - np.abs(np.hypot(xx - cx, yy - cy) - radius) + 0.5, 0.0, 1.0)
    ext = radius + half + 1
    _paint_box(surface, cx - ext, cy - ext, cx + ext, cy + ext, cover, paint)


def fill_ellipse(surface, cx, cy, rx, ry, rotation, paint: Paint) -> None:
    """Ellipse with semi-axes rx, ry rotated by `rotation` radians."""
    if rx <= 0 or ry <= 0:
        return
    cos_r, sin_r = math.cos(rotation), math.sin(rotation)
    def cover(xx, yy):
        dx, dy = xx - cx, yy - cy
        lx = dx * cos_r + dy * sin_r
        ly = -dx * sin_r + dy * cos_r
        q = np.sqrt((lx / rx) ** 2 + (ly / ry) ** 2)
        return np.clip((1.0 - q) * min(rx, ry) + 0.5, 0.0, 1.0)
    ext = max(rx, ry) + 1
    _paint_box(surface, cx - ext, cy - ext, cx + ext, cy + ext, cover, paint)


def fill_polygon(surface, points: Sequence[Tuple[float, float]], paint: Paint) -> None:
    """Even-odd filled polygon (no anti-aliasing)."""
    pts = [(float(x), float(y)) for x, y in points]
    if len(pts) < 3:
        return
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    def cover(xx, yy):
        inside = np.zeros(xx.shape, dtype=bool)
        n = len(pts)
        for k in range(n):
            xa, ya = pts[k]
            xb, yb = pts[(k + 1) % n]
            if ya == yb:
                continue
            crosses = (ya > yy) != (yb > yy)
            x_int = xa + (yy - ya) * (xb - xa) / (yb - ya)
            inside ^= crosses & (xx < x_int)
        return inside.astype(np.float64)
    _paint_box(surface, min(xs), min(ys), max(xs), max(ys), cover, paint)


def fill_circular_segment(surface, cx, cy, radius, start, end, paint: Paint) -> None:
    """
    Region between an arc (start -> end, radians) and its chord, i.e. what
    a canvas fills for a lone arc() path.
    """
    if radius <= 0:
        return
    sweep = min(abs(end - start), 2.0 * math.pi)
    mid = (start + end) / 2.0
    mx, my = math.cos(mid), math.sin(mid)
    chord = radius * math.cos(sweep / 2.0)
    def cover(xx, yy):
        dx, dy = xx - cx, yy - cy
        disk = np.clip(radius - np.hypot(dx, dy) + 0.5, 0.0, 1.0)
        beyond = np.clip(dx * mx + dy * my - chord + 0.5, 0.0, 1.0)
        return disk * beyond
    _paint_box(surface, cx - radius - 1, cy - radius - 1,
               cx + radius + 1, cy + radius + 1, cover, paint)
