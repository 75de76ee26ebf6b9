"""Bootstrap the image store with its source and event channel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planestore import config
from planestore.adapters.image_source import SyntheticImageSource
from planestore.service_layer.event_channel import EventChannel
from planestore.service_layer.image_store import ImageStore

if TYPE_CHECKING:
    from planestore.domain.metadata import DisplaySettings
    from planestore.interfaces.image_source import ImageSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    store: ImageStore
    channel: EventChannel
    source: ImageSource


def build_image_source(source_config: config.SourceConfig) -> ImageSource:
    """Build the default synthetic image source from configuration."""
    return SyntheticImageSource(
        width=source_config.width,
        height=source_config.height,
        bytes_per_pixel=source_config.bytes_per_pixel,
        num_components=source_config.num_components,
        seed=source_config.seed,
    )


def bootstrap(
    source: ImageSource | None = None,
    channel: EventChannel | None = None,
    display_settings: DisplaySettings | None = None,
) -> AppContainer:
    """Wire an image store to its source and event channel.

    Args:
        source: Image source for cache misses; defaults to a synthetic source
            configured from the environment.
        channel: Event channel for summary-metadata updates; a new one is
            created when omitted.
        display_settings: Defaults to `config.default_display_settings()`.
    """
    if source is None:
        source = build_image_source(config.get_source_config())
    if channel is None:
        channel = EventChannel()
    if display_settings is None:
        display_settings = config.default_display_settings()

    store = ImageStore(source, channel, display_settings=display_settings)
    logger.debug("Bootstrapped image store over %s", source.name)
    return AppContainer(store=store, channel=channel, source=source)
