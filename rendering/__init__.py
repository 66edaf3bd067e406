"""pygame rendering helpers."""

from .texture_surface import TextureSurfaceCache, texture_to_surface

__all__ = ["TextureSurfaceCache", "texture_to_surface"]
