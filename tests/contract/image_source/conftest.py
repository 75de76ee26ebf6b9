"""Fixtures for image_source contract tests."""

from collections.abc import Iterable

import numpy as np
import pytest

from planestore.adapters.image_source import InMemoryImageSource, SyntheticImageSource
from planestore.domain.metadata import Metadata
from planestore.interfaces.image_source import ImageSource, SourcedPlane

PLANES_PER_SOURCE = 5


@pytest.fixture(params=["synthetic", "synthetic-rgb", "in_memory"])
def image_source(request: pytest.FixtureRequest) -> Iterable[ImageSource]:
    """Return a fresh ImageSource able to produce PLANES_PER_SOURCE planes.

    Supported params:
      - `"synthetic"` → 16-bit SyntheticImageSource
      - `"synthetic-rgb"` → 8-bit, 3-component SyntheticImageSource
      - `"in_memory"` → InMemoryImageSource pre-filled with planes
    """

    match request.param:
        case "synthetic":
            yield SyntheticImageSource(width=8, height=6, seed=1)
        case "synthetic-rgb":
            yield SyntheticImageSource(
                width=8, height=6, bytes_per_pixel=1, num_components=3, seed=1
            )
        case "in_memory":
            yield InMemoryImageSource(
                SourcedPlane(
                    pixels=np.full((6, 8), i, dtype=np.uint16),
                    metadata=Metadata(camera="Replay"),
                )
                for i in range(PLANES_PER_SOURCE)
            )
        case _:
            raise ValueError(f"unknown image source type: {request.param}")
