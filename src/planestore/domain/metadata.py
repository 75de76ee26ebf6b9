"""Immutable metadata records for image planes, datasets and display.

The store treats these records as opaque values: it passes them through,
hands them to callers and swaps the dataset-wide `SummaryMetadata` as a
whole. Each record is a frozen dataclass assembled through a builder:

    ```py
    >>> meta = Metadata.builder().camera("Synthetic").exposure_ms(10.0).build()
    >>> meta.copy().exposure_ms(20.0).build().exposure_ms
    20.0
    ```

Mapping fields are stored as read-only proxies and sequence fields as
tuples, so a finished record never changes after `build()`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from datetime import datetime
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .coords import Coords

# pylint: disable=too-many-instance-attributes

R = TypeVar("R")

RGB = tuple[int, int, int]


def _freeze_mapping(obj: object, name: str) -> None:
    # copy to decouple from any external dict
    object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


def _freeze_sequence(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if value is not None:
        object.__setattr__(obj, name, tuple(value))


class RecordBuilder(Generic[R]):
    """Fluent builder for the frozen metadata records in this module.

    Each dataclass field of the target record is exposed as a chainable
    setter; unknown names raise `AttributeError` so typos surface early.
    """

    def __init__(self, record_type: type[R], values: Mapping[str, Any] | None = None):
        self._record_type = record_type
        self._field_names = frozenset(f.name for f in fields(record_type))  # type: ignore[arg-type]
        self._values: dict[str, Any] = dict(values or {})

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._field_names:
            raise AttributeError(
                f"{self._record_type.__name__} has no field named {name!r}"
            )

        def _setter(value: Any) -> RecordBuilder[R]:
            self._values[name] = value
            return self

        return _setter

    def build(self) -> R:
        return self._record_type(**self._values)


@dataclass(frozen=True, slots=True)
class Metadata:
    """Per-plane acquisition metadata."""

    uuid: str | None = None
    camera: str | None = None
    exposure_ms: float | None = None
    elapsed_time_ms: float | None = None
    binning: int | None = None
    bit_depth: int | None = None
    pixel_size_um: float | None = None
    received_time: datetime | None = None
    user_data: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "user_data")

    @staticmethod
    def builder() -> RecordBuilder[Metadata]:
        return RecordBuilder(Metadata)

    def copy(self) -> RecordBuilder[Metadata]:
        """Return a builder pre-filled with this record's values."""
        return RecordBuilder(Metadata, _as_values(self))


@dataclass(frozen=True, slots=True)
class SummaryMetadata:
    """Dataset-wide metadata, replaced as a whole when the dataset changes."""

    name: str | None = None
    prefix: str | None = None
    user_name: str | None = None
    microscope_name: str | None = None
    channel_names: Sequence[str] | None = None
    z_step_um: float | None = None
    wait_interval_ms: float | None = None
    axis_order: Sequence[str] | None = None
    intended_dimensions: Coords | None = None
    start_date: datetime | None = None
    user_data: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_sequence(self, "channel_names")
        _freeze_sequence(self, "axis_order")
        _freeze_mapping(self, "user_data")

    @staticmethod
    def builder() -> RecordBuilder[SummaryMetadata]:
        return RecordBuilder(SummaryMetadata)

    def copy(self) -> RecordBuilder[SummaryMetadata]:
        """Return a builder pre-filled with this record's values."""
        return RecordBuilder(SummaryMetadata, _as_values(self))


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Rendering hints for a dataset (colors, contrast, gamma)."""

    channel_colors: Sequence[RGB] | None = None
    channel_contrast_mins: Sequence[int] | None = None
    channel_contrast_maxes: Sequence[int] | None = None
    channel_gammas: Sequence[float] | None = None
    should_autostretch: bool | None = None
    extrema_percentage: float | None = None

    def __post_init__(self) -> None:
        for name in (
            "channel_colors",
            "channel_contrast_mins",
            "channel_contrast_maxes",
            "channel_gammas",
        ):
            _freeze_sequence(self, name)
        if self.channel_colors is not None:
            object.__setattr__(
                self, "channel_colors", tuple(tuple(c) for c in self.channel_colors)
            )

    @staticmethod
    def builder() -> RecordBuilder[DisplaySettings]:
        return RecordBuilder(DisplaySettings)

    def copy(self) -> RecordBuilder[DisplaySettings]:
        """Return a builder pre-filled with this record's values."""
        return RecordBuilder(DisplaySettings, _as_values(self))


def _as_values(record: object) -> dict[str, Any]:
    # shallow: nested values are already frozen
    return {f.name: getattr(record, f.name) for f in fields(record)}  # type: ignore[arg-type]


__all__ = [
    "DisplaySettings",
    "Metadata",
    "RecordBuilder",
    "SummaryMetadata",
]
