"""Procedural planet texture synthesis."""

from .request import DEFAULT_RESOLUTION, TextureRequest, TextureType
from .synthesizer import BRIGHTNESS_CONTRAST, blank_image, synthesize
from .cache import TextureCache

__all__ = [
    "DEFAULT_RESOLUTION",
    "TextureRequest",
    "TextureType",
    "BRIGHTNESS_CONTRAST",
    "blank_image",
    "synthesize",
    "TextureCache",
]
