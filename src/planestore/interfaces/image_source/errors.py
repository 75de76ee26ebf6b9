"""Errors raised by ImageSource implementations."""

from planestore.domain.errors import PlaneStoreError


class ImageSourceError(PlaneStoreError):
    """Base class for ImageSource errors."""


class SourceUnavailableError(ImageSourceError):
    """Raised when an image source cannot produce a new plane.

    Attributes:
        source (str): A short description of the source that failed.
        reason (str): Why no plane could be produced.
    """

    def __init__(self, source: str, reason: str):
        super().__init__(f"Image source '{source}' is unavailable: {reason}")
        self.source = source
        self.reason = reason
