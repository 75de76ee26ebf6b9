"""Lazy, caching image store.

`ImageStore` is the `Reader` implementation at the heart of PLANESTORE. It
maps `Coords` to `Image`s and produces missing planes on demand:

* **hit**: the cached image is returned; nothing else happens.
* **miss**: the injected `ImageSource` is asked for one fresh plane, which
  is wrapped as an `Image` at the requested coords, cached forever and
  returned. If the source fails, the failure is logged and returned as
  `ImageUnavailable`; the cache is left untouched.

Alongside the cache the store tracks, per axis, the largest index ever
inserted (`get_max_index`). Cache insert and tracker update happen inside one
critical section, so no reader ever sees one without the other.

Dataset-wide `SummaryMetadata` is replaced wholesale whenever a
`NewSummaryMetadataEvent` arrives on the `EventChannel` the store was built
with.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from planestore.domain.coords import NO_POSITION, Coords, Position
from planestore.domain.metadata import DisplaySettings, SummaryMetadata
from planestore.image import Image
from planestore.interfaces.reader import (
    ImageFound,
    ImageResult,
    ImageUnavailable,
    Reader,
)

from .events import NewSummaryMetadataEvent

if TYPE_CHECKING:
    from planestore.interfaces.image_source import ImageSource

    from .event_channel import EventChannel

logger = logging.getLogger(__name__)

__all__ = ["ImageFound", "ImageResult", "ImageStore", "ImageUnavailable"]


class ImageStore(Reader):
    """Generate-on-first-request, cache-forever store of image planes.

    Args:
        source: Produces a fresh plane on every cache miss.
        channel: Event channel delivering dataset-wide metadata updates. The
            store subscribes to `NewSummaryMetadataEvent` once, here.
        display_settings: Fixed display settings reported for the dataset.
        summary_metadata: Initial summary metadata (empty by default).

    Note:
        The source is called outside the store's lock. If two threads miss the
        same coords at once, the first insert wins and the other plane is
        discarded, so each coords still maps to exactly one image.
    """

    def __init__(
        self,
        source: ImageSource,
        channel: EventChannel,
        display_settings: DisplaySettings | None = None,
        summary_metadata: SummaryMetadata | None = None,
    ) -> None:
        self._source = source
        self._images: dict[Coords, Image] = {}
        self._max_index = Coords()
        self._lock = threading.Lock()
        self._summary_metadata = summary_metadata or SummaryMetadata()
        self._display_settings = display_settings or DisplaySettings()
        channel.subscribe(NewSummaryMetadataEvent, self.on_new_summary)

    # --- Reader ---

    def get_image(self, coords: Coords) -> ImageResult:
        with self._lock:
            cached = self._images.get(coords)
        if cached is not None:
            logger.debug("Cache hit at <%s>", coords)
            return ImageFound(cached)

        logger.debug(
            "Cache miss at <%s>; requesting plane from %s", coords, self._source.name
        )
        try:
            plane = self._source.snap()
            image = Image.from_array(
                plane.pixels, coords=coords, metadata=plane.metadata
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("Failed to generate a new image at <%s>", coords)
            return ImageUnavailable(coords, reason=str(e) or type(e).__name__, error=e)

        with self._lock:
            if (existing := self._images.get(coords)) is not None:
                logger.debug("Discarding duplicate plane at <%s>", coords)
                return ImageFound(existing)
            self._insert(image)
        logger.debug("Cached new image %r", image)
        return ImageFound(image)

    def get_images_matching(self, pattern: Coords) -> list[Image]:
        with self._lock:
            images = list(self._images.values())
        return [image for image in images if image.coords.matches(pattern)]

    def get_max_index(self, axis: str) -> Position:
        with self._lock:
            return self._max_index.get_position_at(axis)

    def get_axes(self) -> frozenset[str]:
        with self._lock:
            return self._max_index.get_axes()

    def get_summary_metadata(self) -> SummaryMetadata:
        return self._summary_metadata

    def get_display_settings(self) -> DisplaySettings:
        return self._display_settings

    # --- Extras ---

    def get_max_indices(self) -> Coords:
        """Return the whole max-index tracker as one `Coords`."""
        with self._lock:
            return self._max_index

    def get_num_images(self) -> int:
        with self._lock:
            return len(self._images)

    def has_image(self, coords: Coords) -> bool:
        """Return True if an image is cached at ``coords`` (never materializes)."""
        with self._lock:
            return coords in self._images

    # --- Event handlers ---

    def on_new_summary(self, event: NewSummaryMetadataEvent) -> None:
        """Replace the summary metadata with the event's payload."""
        # single rebind: readers see the old or the new record, never a mix
        self._summary_metadata = event.summary_metadata
        logger.info("Summary metadata replaced (name=%s)", event.summary_metadata.name)

    # --- Internals ---

    def _insert(self, image: Image) -> None:
        """Cache ``image`` and raise the tracker on every axis of its coords.

        Must be called with ``self._lock`` held. The new tracker is computed in
        full before either attribute changes.
        """
        coords = image.coords
        builder = self._max_index.copy()
        raised = False
        for axis in coords.get_axes():
            current = self._max_index.get_position_at(axis)
            index = coords.get_position_at(axis)
            # unset axes (NO_POSITION) always lose
            if current is NO_POSITION or index > current:
                builder.position(axis, index)
                raised = True
        if raised:
            self._max_index = builder.build()
        self._images[coords] = image
