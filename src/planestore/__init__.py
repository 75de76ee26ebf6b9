"""PLANESTORE

An in-process store of 2D image planes addressed by multi-axis coordinates.
Planes are produced on first request by an injected image source and cached
for the lifetime of the store, alongside per-image and per-dataset metadata.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
