"""Synthetic image source producing noise-over-gradient planes.

Stands in for a camera when no hardware is attached. Every `snap` yields a
new plane: a horizontal intensity ramp plus uniform noise, scaled to the
configured sample width. Planes are reproducible for a given ``seed``.
"""

from __future__ import annotations

import itertools
import logging
import uuid
from datetime import datetime, timezone

import numpy as np

from planestore.domain.metadata import Metadata
from planestore.interfaces.image_source import ImageSource, SourcedPlane

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments

CAMERA_NAME = "Synthetic"
DTYPES = {1: np.uint8, 2: np.uint16}


class SyntheticImageSource(ImageSource):
    """Generate fresh random planes on demand.

    Args:
        width: Plane width in pixels.
        height: Plane height in pixels.
        bytes_per_pixel: Sample width, 1 (8-bit) or 2 (16-bit).
        num_components: Interleaved components per pixel (e.g. 3 for RGB).
        seed: Seed for the random generator; ``None`` draws fresh entropy.
        exposure_ms: Nominal exposure reported in each plane's metadata.

    Raises:
        ValueError: If the geometry or sample width is invalid.
    """

    def __init__(
        self,
        width: int = 512,
        height: int = 512,
        bytes_per_pixel: int = 2,
        num_components: int = 1,
        seed: int | None = None,
        exposure_ms: float = 10.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Synthetic plane dimensions must be positive.")
        if bytes_per_pixel not in DTYPES:
            raise ValueError(
                f"Unsupported bytes_per_pixel {bytes_per_pixel}; expected 1 or 2."
            )
        if num_components < 1:
            raise ValueError("Synthetic planes need at least one component.")
        self.width = width
        self.height = height
        self.bytes_per_pixel = bytes_per_pixel
        self.num_components = num_components
        self.exposure_ms = exposure_ms
        self._dtype = DTYPES[bytes_per_pixel]
        self._rng = np.random.default_rng(seed)
        self._counter = itertools.count()

    @property
    def bit_depth(self) -> int:
        return 8 * self.bytes_per_pixel

    def snap(self) -> SourcedPlane:
        frame = next(self._counter)
        max_value = np.iinfo(self._dtype).max
        shape: tuple[int, ...] = (self.height, self.width)
        if self.num_components > 1:
            shape = (*shape, self.num_components)

        ramp = np.linspace(0.0, 0.5, self.width, dtype=np.float64)[np.newaxis, :]
        if self.num_components > 1:
            ramp = ramp[..., np.newaxis]
        noise = self._rng.random(shape)
        pixels = ((ramp + 0.5 * noise) * max_value).astype(self._dtype)

        metadata = (
            Metadata.builder()
            .uuid(str(uuid.uuid4()))
            .camera(CAMERA_NAME)
            .exposure_ms(self.exposure_ms)
            .elapsed_time_ms(frame * self.exposure_ms)
            .binning(1)
            .bit_depth(self.bit_depth)
            .received_time(datetime.now(timezone.utc))
            .build()
        )
        logger.debug("Synthesized plane %d (%s, %s)", frame, shape, pixels.dtype)
        return SourcedPlane(pixels=pixels, metadata=metadata)
