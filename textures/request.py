from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .colour import ColourLike, parse_colour

logger = logging.getLogger(__name__)


DEFAULT_RESOLUTION      = 1024
DEFAULT_NOISE_INTENSITY = 0.5
DEFAULT_DETAIL          = 4.0


class TextureType(str, Enum):
    ROCKY   = "rocky"
    GAS     = "gas"
    SUN     = "sun"
    RINGS   = "rings"
    EARTH   = "earth"
    MARS    = "mars"
    VENUS   = "venus"
    MERCURY = "mercury"


@dataclass(frozen=True)
class TextureRequest:
    """
    Everything that determines a synthesized texture.

    Hashable, so it doubles as a cache key. Out-of-range knobs are clamped
    rather than rejected; an unknown type or an unparseable colour raises
    ValueError.

        base_color      : "#rrggbb", "#rgb" or (r, g, b) 0–255
        noise_intensity : 0..1, strength of the noise-driven variation
        resolution      : output is resolution x resolution RGBA
        detail          : base noise frequency on the unit sphere
        is_moon         : rocky request rendered as Earth's Moon
        seed            : fixes every random choice (None = non-reproducible)
        time_seed       : offset of the sun plasma noise (animation phase)
    """
    base_color:      ColourLike = "#ffffff"
    type:            TextureType = TextureType.ROCKY
    noise_intensity: float = DEFAULT_NOISE_INTENSITY
    resolution:      int = DEFAULT_RESOLUTION
    detail:          float = DEFAULT_DETAIL
    is_moon:         bool = False
    seed:            Optional[int] = None
    time_seed:       float = 0.0

    def __post_init__(self):
        if not isinstance(self.type, TextureType):
            try:
                object.__setattr__(self, "type", TextureType(str(self.type).lower()))
            except ValueError:
                raise ValueError(f"Unknown texture type: {self.type!r}") from None

        parse_colour(self.base_color)
        if not isinstance(self.base_color, str):
            object.__setattr__(self, "base_color", tuple(int(c) for c in self.base_color))

        intensity = min(max(float(self.noise_intensity), 0.0), 1.0)
        if intensity != self.noise_intensity:
            logger.debug("noise_intensity %r clamped to %.2f", self.noise_intensity, intensity)
        object.__setattr__(self, "noise_intensity", intensity)
        object.__setattr__(self, "detail", max(float(self.detail), 0.0))

    @property
    def base_rgb(self) -> np.ndarray:
        return parse_colour(self.base_color)
