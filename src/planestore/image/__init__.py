"""Image plane entity."""

from .image import Image

__all__ = ["Image"]
