"""
Gradient noise for procedural planet surfaces.

improved_noise() is a Perlin-style 3D gradient noise evaluated on whole numpy
arrays at once; fractal_noise() sums octaves of it. Both return values in
[0, 1] (0.5 is the mean).

Textures sample the noise on the unit sphere (sphere_coordinates) so that the
equirectangular image wraps seamlessly at the left/right edge and the poles.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np


# Ken Perlin's reference permutation (constant, never mutated)
PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240,
    21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33, 88,
    237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83,
    111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80,
    73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182,
    189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9, 129, 22,
    39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228, 251, 34, 242, 193, 238, 210,
    144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157, 184, 84,
    204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78,
    66, 215, 61, 156, 180,
)

# Doubled so that p[i + 1] never needs wrapping
_P = np.array(PERMUTATION + PERMUTATION, dtype=np.int64)
_P.setflags(write=False)


def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t, a, b):
    return a + t * (b - a)


def _grad(h, x, y, z):
    """Dot product with one of 16 pseudo-random gradient directions."""
    h = h & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, z)
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


def improved_noise(x, y, z) -> np.ndarray:
    """Gradient noise at (x, y, z); arrays broadcast. Output in [0, 1]."""
    x, y, z = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                                  np.asarray(y, dtype=np.float64),
                                  np.asarray(z, dtype=np.float64))
    fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
    X = fx.astype(np.int64) & 255
    Y = fy.astype(np.int64) & 255
    Z = fz.astype(np.int64) & 255
    x = x - fx
    y = y - fy
    z = z - fz

    u, v, w = _fade(x), _fade(y), _fade(z)

    A  = _P[X] + Y
    AA = _P[A] + Z
    AB = _P[A + 1] + Z
    B  = _P[X + 1] + Y
    BA = _P[B] + Z
    BB = _P[B + 1] + Z

    # Hash the 8 cube corners
    g1 = _grad(_P[AA],     x,       y,       z)
    g2 = _grad(_P[BA],     x - 1.0, y,       z)
    g3 = _grad(_P[AB],     x,       y - 1.0, z)
    g4 = _grad(_P[BB],     x - 1.0, y - 1.0, z)
    g5 = _grad(_P[AA + 1], x,       y,       z - 1.0)
    g6 = _grad(_P[BA + 1], x - 1.0, y,       z - 1.0)
    g7 = _grad(_P[AB + 1], x,       y - 1.0, z - 1.0)
    g8 = _grad(_P[BB + 1], x - 1.0, y - 1.0, z - 1.0)

    v5 = _lerp(v, _lerp(u, g1, g2), _lerp(u, g3, g4))
    v6 = _lerp(v, _lerp(u, g5, g6), _lerp(u, g7, g8))
    return (_lerp(w, v5, v6) + 1.0) / 2.0


def fractal_noise(x, y, z, octaves: int, persistence: float) -> np.ndarray:
    """
    Fractal (fBm) noise: `octaves` samples, frequency x2 and amplitude
    x persistence per octave, normalised by the total amplitude.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    total = np.zeros(np.broadcast(x, y, z).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0
    for _ in range(max(int(octaves), 1)):
        total += improved_noise(x * frequency, y * frequency, z * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2.0
    return total / max_value


def sphere_coordinates(resolution: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Unit-sphere point for every pixel of an equirectangular image.

    u = x/res -> θ = 2πu (longitude), v = y/res -> φ = πv (colatitude);
    returns (sinφ cosθ, sinφ sinθ, cosφ), each of shape (res, res).
    """
    idx = np.arange(resolution, dtype=np.float64) / resolution
    theta = idx[np.newaxis, :] * 2.0 * np.pi
    phi = idx[:, np.newaxis] * np.pi
    xs = np.sin(phi) * np.cos(theta)
    ys = np.sin(phi) * np.sin(theta)
    zs = np.broadcast_to(np.cos(phi), xs.shape)
    return xs, ys, np.array(zs)


def colatitude(resolution: int) -> np.ndarray:
    """φ (radians) of every row, shape (res, 1)."""
    return (np.arange(resolution, dtype=np.float64) / resolution * np.pi)[:, np.newaxis]
