"""Bootstrap (composition root) for PLANESTORE.

Assembles the application at runtime: wires a concrete image source and an
event channel into the image store, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `planestore.adapters`, `planestore.service_layer`,
  `planestore.interfaces`, `planestore.domain`, and `planestore.config`.
- Inner layers must not import `planestore.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_image_source

__all__ = ["AppContainer", "bootstrap", "build_image_source"]
