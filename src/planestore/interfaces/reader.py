"""Read-only interface over a dataset of image planes.

Besides the `Reader` ABC, this module defines the result type returned by
`Reader.get_image`: a request either yields `ImageFound` or
`ImageUnavailable`, so "no image" can never be mistaken for a successful
``None``.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from planestore.domain.errors import PlaneStoreError

if TYPE_CHECKING:
    from planestore.domain.coords import Coords, Position
    from planestore.domain.metadata import DisplaySettings, SummaryMetadata
    from planestore.image import Image

# pylint: disable=too-few-public-methods


class ImageUnavailableError(PlaneStoreError):
    """Raised when unwrapping a result that carries no image."""

    def __init__(self, coords: Coords, reason: str) -> None:
        super().__init__(f"No image available at <{coords}>: {reason}")
        self.coords = coords
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ImageFound:
    """Successful `Reader.get_image` outcome."""

    image: Image
    ok: Literal[True] = True

    def unwrap(self) -> Image:
        return self.image


@dataclass(frozen=True, slots=True)
class ImageUnavailable:
    """Failed `Reader.get_image` outcome.

    Attributes:
        coords: The coordinate that was requested.
        reason: Human-readable explanation.
        error: The underlying exception, when one was raised.
    """

    coords: Coords
    reason: str
    error: BaseException | None = None
    ok: Literal[False] = False

    def unwrap(self) -> Image:
        """Raise `ImageUnavailableError`; there is no image to return."""
        raise ImageUnavailableError(self.coords, self.reason) from self.error


type ImageResult = ImageFound | ImageUnavailable


class Reader(abc.ABC):
    """Interface for reading image planes and dataset metadata.

    Callers address planes by `Coords` and do not need to know whether a
    plane already existed or had to be produced on demand.
    """

    @abc.abstractmethod
    def get_image(self, coords: Coords) -> ImageResult:
        """Return the image at ``coords``.

        Args:
            coords (Coords): The full coordinate of the requested plane.

        Returns:
            ImageResult: `ImageFound` carrying the image, or
            `ImageUnavailable` carrying the reason no image could be provided.
        """

    @abc.abstractmethod
    def get_images_matching(self, pattern: Coords) -> list[Image]:
        """Return every available image whose coords match ``pattern``.

        Axes absent from ``pattern`` are wildcards; an empty pattern matches
        every image. Order is unspecified. Never raises for "no match".
        """

    @abc.abstractmethod
    def get_max_index(self, axis: str) -> Position:
        """Return the largest index seen on ``axis``, or ``NO_POSITION``."""

    @abc.abstractmethod
    def get_axes(self) -> frozenset[str]:
        """Return every axis seen on any available image."""

    @abc.abstractmethod
    def get_summary_metadata(self) -> SummaryMetadata:
        """Return the current dataset-wide metadata."""

    @abc.abstractmethod
    def get_display_settings(self) -> DisplaySettings:
        """Return the dataset's display settings."""
