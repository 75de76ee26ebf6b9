"""Module defining Events delivered through the EventChannel."""

from dataclasses import dataclass

from planestore.domain.metadata import SummaryMetadata


@dataclass(frozen=True)
class Event:
    """Base class for all events."""


@dataclass(frozen=True)
class NewSummaryMetadataEvent(Event):
    """The dataset-wide summary metadata has been replaced."""

    summary_metadata: SummaryMetadata
