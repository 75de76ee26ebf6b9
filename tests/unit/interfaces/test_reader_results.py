"""Unit tests for the Reader result types."""

import numpy as np
import pytest

from planestore.domain.coords import Coords
from planestore.domain.errors import PlaneStoreError
from planestore.image import Image
from planestore.interfaces.reader import (
    ImageFound,
    ImageUnavailable,
    ImageUnavailableError,
)

# pylint: disable=magic-value-comparison


def test_found_unwraps_to_image():
    """ImageFound is ok and unwraps to its image."""
    image = Image.from_array(np.zeros((1, 1), dtype=np.uint8))
    result = ImageFound(image)
    assert result.ok is True
    assert result.unwrap() is image


def test_unavailable_is_not_ok_and_raises_on_unwrap():
    """ImageUnavailable is falsy on ok and raises on unwrap."""
    result = ImageUnavailable(Coords.of(z=1), reason="offline")
    assert result.ok is False
    assert result.error is None
    with pytest.raises(ImageUnavailableError) as exc:
        result.unwrap()
    assert str(exc.value) == "No image available at <z=1>: offline"
    assert exc.value.coords == Coords.of(z=1)
    assert exc.value.reason == "offline"
    assert isinstance(exc.value, PlaneStoreError)


def test_results_can_be_matched_structurally():
    """Callers can dispatch on the result type with match/case."""
    result = ImageUnavailable(Coords(), reason="nope")
    match result:
        case ImageFound(image=image):
            outcome = f"found {image}"
        case ImageUnavailable(reason=reason):
            outcome = f"missing: {reason}"
    assert outcome == "missing: nope"
