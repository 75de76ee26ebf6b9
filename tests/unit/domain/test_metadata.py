"""Unit tests for the metadata value records."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from planestore.domain.coords import Coords
from planestore.domain.metadata import DisplaySettings, Metadata, SummaryMetadata

# pylint: disable=magic-value-comparison


def test_metadata_builder_sets_fields():
    """The builder exposes one chainable setter per field."""
    now = datetime.now(timezone.utc)
    meta = (
        Metadata.builder()
        .camera("Cam")
        .exposure_ms(12.5)
        .binning(2)
        .received_time(now)
        .build()
    )
    assert meta.camera == "Cam"
    assert meta.exposure_ms == 12.5
    assert meta.binning == 2
    assert meta.received_time == now
    assert meta.uuid is None


def test_builder_rejects_unknown_field():
    """Typos in builder setters raise AttributeError."""
    with pytest.raises(AttributeError, match="no field named 'camra'"):
        Metadata.builder().camra("Cam")


def test_copy_prefills_builder():
    """copy() starts from the current values and leaves the original intact."""
    original = Metadata(camera="Cam", exposure_ms=10.0)
    changed = original.copy().exposure_ms(20.0).build()
    assert changed.camera == "Cam"
    assert changed.exposure_ms == 20.0
    assert original.exposure_ms == 10.0


def test_records_are_frozen():
    """Finished records cannot be modified."""
    meta = Metadata(camera="Cam")
    with pytest.raises(FrozenInstanceError):
        meta.camera = "Other"  # type: ignore[misc]


def test_user_data_is_read_only_copy():
    """user_data is decoupled from the input dict and cannot be mutated."""
    data = {"operator": "jb"}
    meta = Metadata(user_data=data)
    data["operator"] = "changed"
    assert meta.user_data["operator"] == "jb"
    with pytest.raises(TypeError):
        meta.user_data["operator"] = "x"  # type: ignore[index]


def test_summary_metadata_sequences_become_tuples():
    """Sequence fields are stored as tuples."""
    summary = (
        SummaryMetadata.builder()
        .name("run1")
        .channel_names(["DAPI", "GFP"])
        .axis_order(["time", "z"])
        .intended_dimensions(Coords.of(z=10))
        .build()
    )
    assert summary.channel_names == ("DAPI", "GFP")
    assert summary.axis_order == ("time", "z")
    assert summary.intended_dimensions == Coords.of(z=10)


def test_summary_metadata_equality():
    """Records with equal contents compare equal."""
    assert SummaryMetadata(name="a") == SummaryMetadata(name="a")
    assert SummaryMetadata(name="a") != SummaryMetadata(name="b")


def test_display_settings_colors_are_tuples():
    """Channel colors are normalized to tuples of tuples."""
    settings = DisplaySettings.builder().channel_colors([[255, 0, 0], [0, 255, 0]]).build()
    assert settings.channel_colors == ((255, 0, 0), (0, 255, 0))
    assert settings.copy().should_autostretch(True).build().channel_colors == (
        (255, 0, 0),
        (0, 255, 0),
    )
