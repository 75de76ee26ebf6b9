"""Domain layer for PLANESTORE.

Pure value types describing where an image plane lives in a dataset
(`Coords`) and the opaque metadata records that travel with planes and
datasets. Nothing here performs I/O or depends on outer layers.
"""

from .coords import NO_POSITION, Coords, CoordsBuilder
from .metadata import DisplaySettings, Metadata, SummaryMetadata

__all__ = [
    "NO_POSITION",
    "Coords",
    "CoordsBuilder",
    "DisplaySettings",
    "Metadata",
    "SummaryMetadata",
]
