"""Immutable image plane positioned in a dataset.

An `Image` pairs a flat, read-only pixel buffer with its geometry
(width, height, bytes per sample, number of interleaved components), the
`Coords` it occupies in the dataset, and its acquisition `Metadata`.

Copies made with `copy_at_coords`, `copy_with_metadata` or `copy_with` are
*shallow*: they share the pixel buffer (and, unless replaced, the metadata)
with the original. The buffer is read-only, so sharing is safe. The only
accessor that allocates pixel data is `get_raw_pixels_for_component`.

Note:
    Samples are always decoded as unsigned integers of ``bytes_per_pixel``
    width, whatever signedness the buffer's dtype declares. A camera that
    writes 16-bit samples into an ``int16`` array therefore still reports
    intensities in ``[0, 65535]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from planestore.domain.coords import Coords
from planestore.domain.errors import InvalidComponentError, OutOfBoundsError
from planestore.domain.metadata import Metadata

# pylint: disable=too-many-arguments,too-many-instance-attributes

SUPPORTED_BYTES_PER_PIXEL = (1, 2, 4)

PixelBuffer = npt.NDArray[np.integer]


@dataclass(frozen=True, slots=True, eq=False)
class Image:
    """A single 2D image plane with coordinates and metadata."""

    pixels: PixelBuffer  # flat, interleaved: (y * width + x) * num_components + c
    width: int
    height: int
    bytes_per_pixel: int
    num_components: int = 1
    coords: Coords = field(default_factory=Coords)
    metadata: Metadata = field(default_factory=Metadata)

    def __post_init__(self):
        """Validate geometry and buffer after initialization."""

        if self.width <= 0 or self.height <= 0:
            raise ValueError("Image dimensions must be positive.")
        if self.num_components < 1:
            raise ValueError("Image must have at least one component.")
        if self.bytes_per_pixel not in SUPPORTED_BYTES_PER_PIXEL:
            raise ValueError(
                f"Unsupported bytes_per_pixel {self.bytes_per_pixel}; "
                f"expected one of {SUPPORTED_BYTES_PER_PIXEL}."
            )
        self._validate_pixels()

    @classmethod
    def from_array(
        cls,
        array: npt.ArrayLike,
        coords: Coords | None = None,
        metadata: Metadata | None = None,
    ) -> Image:
        """Wrap a ``(height, width)`` or ``(height, width, components)`` array.

        The array is flattened without copying when it is already C-contiguous
        and the flat view is marked read-only. Callers hand ownership of the
        data to the new image and must not write to the original afterwards.

        Raises:
            ValueError: If the array is not 2D/3D or not of an integer dtype.
        """

        arr = np.asarray(array)
        if arr.ndim == 2:
            height, width = arr.shape
            num_components = 1
        elif arr.ndim == 3:
            height, width, num_components = arr.shape
        else:
            raise ValueError("Image array must be 2D or 3D (height, width[, c]).")

        flat = np.ascontiguousarray(arr).reshape(-1)
        flat.setflags(write=False)
        return cls(
            pixels=flat,
            width=width,
            height=height,
            bytes_per_pixel=flat.dtype.itemsize,
            num_components=num_components,
            coords=coords if coords is not None else Coords(),
            metadata=metadata if metadata is not None else Metadata(),
        )

    # --- Shallow copies ---

    def copy_at_coords(self, coords: Coords) -> Image:
        """Return a copy placed at ``coords``, sharing pixels and metadata."""
        return self.copy_with(coords, self.metadata)

    def copy_with_metadata(self, metadata: Metadata) -> Image:
        """Return a copy using ``metadata``, sharing pixels and coords."""
        return self.copy_with(self.coords, metadata)

    def copy_with(self, coords: Coords, metadata: Metadata) -> Image:
        """Return a copy at ``coords`` with ``metadata``, sharing pixels."""
        return Image(
            pixels=self.pixels,
            width=self.width,
            height=self.height,
            bytes_per_pixel=self.bytes_per_pixel,
            num_components=self.num_components,
            coords=coords,
            metadata=metadata,
        )

    # --- Pixel access ---

    def get_raw_pixels(self) -> PixelBuffer:
        """Return the shared (read-only) pixel buffer."""
        return self.pixels

    def get_raw_pixels_for_component(self, component: int) -> PixelBuffer:
        """Return a fresh buffer holding only ``component``'s samples.

        Unlike `get_raw_pixels`, this always copies, even for single-component
        images, because multi-component data has to be de-interleaved.

        Raises:
            InvalidComponentError: If ``component`` is out of range.
        """
        self._check_component(component)
        if self.num_components == 1:
            return self.pixels.copy()
        return self.pixels[component :: self.num_components].copy()

    def as_array(self) -> PixelBuffer:
        """Return a read-only ``(height, width[, c])`` view of the buffer."""
        if self.num_components == 1:
            return self.pixels.reshape(self.height, self.width)
        return self.pixels.reshape(self.height, self.width, self.num_components)

    def get_intensity_at(self, x: int, y: int) -> int:
        """Return the intensity of component 0 at ``(x, y)``."""
        return self.get_component_intensity_at(x, y, 0)

    def get_component_intensity_at(self, x: int, y: int, component: int) -> int:
        """Return the unsigned sample of ``component`` at ``(x, y)``.

        Raises:
            OutOfBoundsError: If ``(x, y)`` lies outside the image.
            InvalidComponentError: If ``component`` is out of range.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        self._check_component(component)
        index = (y * self.width + x) * self.num_components + component
        return int(self._unsigned_view()[index])

    def get_intensity_string_at(self, x: int, y: int) -> str:
        """Describe the pixel at ``(x, y)``: ``"12"`` or ``"[12/34/56]"``."""
        if self.num_components == 1:
            return str(self.get_intensity_at(x, y))
        values = (
            str(self.get_component_intensity_at(x, y, c))
            for c in range(self.num_components)
        )
        return "[" + "/".join(values) + "]"

    # --- Accessors ---

    def get_metadata(self) -> Metadata:
        return self.metadata

    def get_coords(self) -> Coords:
        return self.coords

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def get_bytes_per_pixel(self) -> int:
        return self.bytes_per_pixel

    def get_num_components(self) -> int:
        return self.num_components

    def __repr__(self) -> str:
        return (
            f"Image({self.width}x{self.height}, "
            f"bytes_per_pixel={self.bytes_per_pixel}, "
            f"num_components={self.num_components}, coords=<{self.coords}>)"
        )

    # --- Internals ---

    def _unsigned_view(self) -> PixelBuffer:
        return self.pixels.view(np.dtype(f"u{self.bytes_per_pixel}"))

    def _check_component(self, component: int) -> None:
        if not 0 <= component < self.num_components:
            raise InvalidComponentError(component, self.num_components)

    def _validate_pixels(self) -> None:
        """Validate the pixel buffer against the declared geometry.

        The buffer must be a flat, read-only, native-endian integer array
        holding exactly ``width * height * num_components`` samples of
        ``bytes_per_pixel`` bytes each.
        """

        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise ValueError("Image.pixels must be a numpy array.")
        if pixels.ndim != 1:
            raise ValueError("Image.pixels must be a flat (1D) array.")
        if not np.issubdtype(pixels.dtype, np.integer):
            raise ValueError("Image.pixels must have an integer dtype.")
        if not pixels.dtype.isnative:
            raise ValueError("Image.pixels must use native-endian dtype.")
        if pixels.dtype.itemsize != self.bytes_per_pixel:
            raise ValueError(
                f"Image.pixels item size {pixels.dtype.itemsize} does not match "
                f"bytes_per_pixel {self.bytes_per_pixel}."
            )
        expected = self.width * self.height * self.num_components
        if pixels.size != expected:
            raise ValueError(
                f"Image.pixels holds {pixels.size} samples; expected {expected} "
                f"({self.width}x{self.height}x{self.num_components})."
            )
        if pixels.flags.writeable:
            raise ValueError("Image.pixels must be immutable.")
