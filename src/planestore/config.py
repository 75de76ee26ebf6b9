"""Configuration utilities for PLANESTORE.

This module centralizes small helpers and constants related to application
configuration. Settings are read from ``PLANESTORE_*`` environment variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from planestore.domain.metadata import DisplaySettings

WIDTH_ENV = "PLANESTORE_WIDTH"  # pragma: no mutate
HEIGHT_ENV = "PLANESTORE_HEIGHT"  # pragma: no mutate
BYTES_PER_PIXEL_ENV = "PLANESTORE_BYTES_PER_PIXEL"  # pragma: no mutate
SEED_ENV = "PLANESTORE_SEED"  # pragma: no mutate
COMPONENTS_ENV = "PLANESTORE_COMPONENTS"  # pragma: no mutate

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
DEFAULT_BYTES_PER_PIXEL = 2

RED = (255, 0, 0)
GREEN = (0, 255, 0)


class InvalidConfigError(Exception):
    """Raised when a PLANESTORE_* environment variable holds an invalid value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


@dataclass(frozen=True)
class SourceConfig:
    """Settings for the default synthetic image source."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    bytes_per_pixel: int = DEFAULT_BYTES_PER_PIXEL
    num_components: int = 1
    seed: int | None = None


def _get_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    if not (raw := env.get(name)):
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidConfigError(name, raw, "expected an integer") from e
    if value < minimum:
        raise InvalidConfigError(name, raw, f"must be at least {minimum}")
    return value


def get_source_config(env: Mapping[str, str] | None = None) -> SourceConfig:
    """Read the synthetic source settings from the environment.

    Args:
        env: Mapping to read from; defaults to `os.environ`. Override in tests.

    Returns:
        SourceConfig: Settings with defaults filled in for unset variables.

    Raises:
        InvalidConfigError: If a variable is set but invalid.
    """
    env = os.environ if env is None else env
    bytes_per_pixel = _get_int(env, BYTES_PER_PIXEL_ENV, DEFAULT_BYTES_PER_PIXEL, 1)
    if bytes_per_pixel not in (1, 2):
        raise InvalidConfigError(
            BYTES_PER_PIXEL_ENV, str(bytes_per_pixel), "must be 1 or 2"
        )
    seed = _get_int(env, SEED_ENV, -1, 0) if env.get(SEED_ENV) else None
    return SourceConfig(
        width=_get_int(env, WIDTH_ENV, DEFAULT_WIDTH, 1),
        height=_get_int(env, HEIGHT_ENV, DEFAULT_HEIGHT, 1),
        bytes_per_pixel=bytes_per_pixel,
        num_components=_get_int(env, COMPONENTS_ENV, 1, 1),
        seed=seed,
    )


def default_display_settings() -> DisplaySettings:
    """Return the stock two-channel (red, green) display settings."""
    return DisplaySettings.builder().channel_colors((RED, GREEN)).build()
