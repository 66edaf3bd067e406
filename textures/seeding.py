"""
Deterministic RNG seeding for texture synthesis.

A request seed is hashed together with a per-texture salt so that two
texture families drawn with the same seed do not share random streams.
"""

from __future__ import annotations
import zlib
from typing import Optional

import numpy as np


def splitmix64(x: int) -> int:
    """
    SplitMix64 hash function for deterministic RNG seeding

    Args:
        x: Input seed (64-bit integer)

    Returns:
        Hashed 64-bit integer
    """
    x = (x + 0x9E3779B97F4A7C15) & 0xFFFFFFFFFFFFFFFF
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & 0xFFFFFFFFFFFFFFFF
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & 0xFFFFFFFFFFFFFFFF
    return (z ^ (z >> 31)) & 0xFFFFFFFFFFFFFFFF


def hash_u64(*vals: int) -> int:
    """Hash multiple 64-bit integers into one."""
    x = 0xA5A5A5A5A5A5A5A5
    for v in vals:
        x ^= (v & 0xFFFFFFFFFFFFFFFF)
        x = splitmix64(x)
    return x


def salt(name: str) -> int:
    """Stable 32-bit salt for a texture family name."""
    return zlib.crc32(name.encode("utf-8"))


def rng_from_seed(seed_u64: int) -> np.random.Generator:
    return np.random.default_rng(seed_u64 & 0xFFFFFFFFFFFFFFFF)


def rng_for(seed: Optional[int], name: str) -> np.random.Generator:
    """
    Random generator for one texture family.

    seed=None gives a fresh OS-entropy generator (non-reproducible output).
    """
    if seed is None:
        return np.random.default_rng()
    return rng_from_seed(hash_u64(int(seed), salt(name)))
