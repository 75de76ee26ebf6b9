"""Contains concrete implementations of the ImageSource interface."""

from .in_memory import InMemoryImageSource
from .synthetic import SyntheticImageSource

__all__ = [
    "InMemoryImageSource",
    "SyntheticImageSource",
]
