"""In-memory implementation of the ImageSource interface."""

from collections import deque
from collections.abc import Iterable

from planestore.interfaces.image_source import (
    ImageSource,
    SourcedPlane,
    SourceUnavailableError,
)


class InMemoryImageSource(ImageSource):
    """Image source handing out prepared planes in FIFO order.

    This implementation is intended for testing and replay purposes. Once the
    queue is exhausted every `snap` raises `SourceUnavailableError`.
    """

    def __init__(self, planes: Iterable[SourcedPlane] = ()) -> None:
        self._planes: deque[SourcedPlane] = deque(planes)
        self.snap_count = 0

    def push(self, plane: SourcedPlane) -> None:
        """Queue one more plane."""
        self._planes.append(plane)

    def __len__(self) -> int:
        return len(self._planes)

    def snap(self) -> SourcedPlane:
        self.snap_count += 1
        if not self._planes:
            raise SourceUnavailableError(self.name, "no planes left in queue")
        return self._planes.popleft()
