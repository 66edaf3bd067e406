"""
Colour helpers working on float RGB in [0, 1].

Every function accepts either a single colour (shape (3,)) or a whole image
(shape (..., 3)) so that per-pixel colour maths stays vectorised.
"""

from __future__ import annotations
from typing import Sequence, Tuple, Union

import numpy as np

ColourLike = Union[str, Sequence[float]]


def parse_colour(value: ColourLike) -> np.ndarray:
    """
    "#rrggbb", "#rgb" or an (r, g, b) tuple of 0–255 ints -> float RGB (3,).
    Raises ValueError for anything else.
    """
    if isinstance(value, str):
        s = value.strip().lstrip("#")
        if len(s) == 3:
            s = "".join(c * 2 for c in s)
        if len(s) != 6:
            raise ValueError(f"Unsupported colour string: {value!r}")
        try:
            comps = [int(s[i:i + 2], 16) for i in (0, 2, 4)]
        except ValueError as exc:
            raise ValueError(f"Unsupported colour string: {value!r}") from exc
    else:
        comps = list(value)
        if len(comps) != 3:
            raise ValueError(f"Expected an (r, g, b) triple, got {value!r}")
    return np.clip(np.array(comps, dtype=np.float64) / 255.0, 0.0, 1.0)


def to_hex(rgb) -> str:
    r, g, b = (int(round(c * 255)) for c in np.clip(rgb, 0.0, 1.0))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgba(r: float, g: float, b: float, a: float = 1.0) -> Tuple[float, float, float, float]:
    """CSS-style rgba(0–255, 0–255, 0–255, 0–1) -> float RGBA."""
    return (r / 255.0, g / 255.0, b / 255.0, a)


def with_alpha(rgb, a: float) -> Tuple[float, float, float, float]:
    r, g, b = (float(c) for c in np.clip(rgb, 0.0, 1.0))
    return (r, g, b, a)


TRANSPARENT = (0.0, 0.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# HSL
# ---------------------------------------------------------------------------

def rgb_to_hsl(rgb) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    cmax = np.max(rgb, axis=-1)
    cmin = np.min(rgb, axis=-1)
    delta = cmax - cmin
    l = (cmax + cmin) / 2.0

    safe = np.where(delta > 0, delta, 1.0)
    s = np.where(delta > 0,
                 np.where(l <= 0.5, delta / np.where(cmax + cmin > 0, cmax + cmin, 1.0),
                          delta / np.where(2.0 - cmax - cmin > 0, 2.0 - cmax - cmin, 1.0)),
                 0.0)

    h = np.where(cmax == r, (g - b) / safe + np.where(g < b, 6.0, 0.0),
        np.where(cmax == g, (b - r) / safe + 2.0,
                 (r - g) / safe + 4.0))
    h = np.where(delta > 0, h / 6.0, 0.0)
    return h, s, l


def _hue_to_rgb(p, q, t):
    t = np.mod(t, 1.0)
    return np.where(t < 1.0 / 6.0, p + (q - p) * 6.0 * t,
           np.where(t < 0.5, q,
           np.where(t < 2.0 / 3.0, p + (q - p) * 6.0 * (2.0 / 3.0 - t),
                    p)))


def hsl_to_rgb(h, s, l) -> np.ndarray:
    """Hue wraps modulo 1, saturation and lightness are clamped to [0, 1]."""
    h = np.mod(np.asarray(h, dtype=np.float64), 1.0)
    s = np.clip(np.asarray(s, dtype=np.float64), 0.0, 1.0)
    l = np.clip(np.asarray(l, dtype=np.float64), 0.0, 1.0)
    h, s, l = np.broadcast_arrays(h, s, l)

    q = np.where(l <= 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q
    rgb = np.stack([_hue_to_rgb(p, q, h + 1.0 / 3.0),
                    _hue_to_rgb(p, q, h),
                    _hue_to_rgb(p, q, h - 1.0 / 3.0)], axis=-1)
    grey = (s == 0)[..., np.newaxis]
    return np.where(grey, l[..., np.newaxis], rgb)


def offset_hsl(rgb, dh=0.0, ds=0.0, dl=0.0) -> np.ndarray:
    """Shift hue/saturation/lightness; offsets broadcast against the image."""
    h, s, l = rgb_to_hsl(rgb)
    return hsl_to_rgb(h + dh, s + ds, l + dl)


# ---------------------------------------------------------------------------
# Mixing
# ---------------------------------------------------------------------------

def lerp(a, b, t) -> np.ndarray:
    """Linear mix a -> b; t is a scalar or a per-pixel array."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    if t.ndim > 0:
        t = t[..., np.newaxis]
    return a + (b - a) * t


def scale(rgb, k: float) -> np.ndarray:
    """Multiply every channel (no clamping, like a canvas colour multiply)."""
    return np.asarray(rgb, dtype=np.float64) * k


def broadcast_colour(rgb, shape: Tuple[int, int]) -> np.ndarray:
    """A single colour painted over an (h, w) grid -> (h, w, 3) array."""
    return np.broadcast_to(np.asarray(rgb, dtype=np.float64), shape + (3,)).copy()


def where(mask, a, b) -> np.ndarray:
    """Per-pixel colour choice: mask (h, w) picks a over b, (h, w, 3) out."""
    return np.where(np.asarray(mask)[..., np.newaxis], a, b)
