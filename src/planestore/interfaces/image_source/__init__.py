"""Image source interface and related errors."""

from .errors import ImageSourceError, SourceUnavailableError
from .image_source import ImageSource, SourcedPlane

__all__ = [
    "ImageSource",
    "ImageSourceError",
    "SourcedPlane",
    "SourceUnavailableError",
]
