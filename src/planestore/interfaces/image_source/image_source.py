"""Interface for a producer of fresh image planes."""

import abc
from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from planestore.domain.metadata import Metadata


@dataclass(frozen=True, slots=True, eq=False)
class SourcedPlane:
    """A freshly produced pixel plane and its native acquisition metadata.

    ``pixels`` is a ``(height, width)`` or ``(height, width, components)``
    integer array. Ownership passes to whoever wraps it in an `Image`.
    """

    pixels: npt.NDArray[np.integer]
    metadata: Metadata = field(default_factory=Metadata)


class ImageSource(abc.ABC):
    """Interface for anything that can produce one new image plane on demand.

    This might be a live camera, a file replay, or a synthetic generator. The
    store calls `snap` once per cache miss and never retries, times out, or
    cancels the call; any such policy belongs to the implementation.
    """

    @property
    def name(self) -> str:
        """Short human-readable description used in logs and errors."""
        return type(self).__name__

    @abc.abstractmethod
    def snap(self) -> SourcedPlane:
        """Produce one fresh image plane.

        Returns:
            SourcedPlane: The new pixel data and its metadata.

        Raises:
            SourceUnavailableError: If no new plane can be produced.
        """
