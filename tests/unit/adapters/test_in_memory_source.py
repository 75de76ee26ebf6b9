"""Unit tests for InMemoryImageSource."""

import pytest

from planestore.adapters.image_source import InMemoryImageSource
from planestore.interfaces.image_source import SourceUnavailableError

# pylint: disable=magic-value-comparison


def test_hands_out_planes_in_order(queued_source):
    """Planes come out first-in, first-out."""
    values = [int(queued_source.snap().pixels[0, 0]) for _ in range(3)]
    assert values == [10, 20, 30]
    assert len(queued_source) == 0
    assert queued_source.snap_count == 3


def test_exhausted_queue_raises(queued_source):
    """Once empty, every snap raises SourceUnavailableError."""
    for _ in range(3):
        queued_source.snap()
    with pytest.raises(SourceUnavailableError, match="no planes left in queue") as exc:
        queued_source.snap()
    assert exc.value.source == "InMemoryImageSource"
    assert queued_source.snap_count == 4


def test_push_appends(make_plane):
    """push() queues planes behind the existing ones."""
    source = InMemoryImageSource([make_plane(1)])
    source.push(make_plane(2))
    assert len(source) == 2
    assert int(source.snap().pixels[0, 0]) == 1
    assert int(source.snap().pixels[0, 0]) == 2
