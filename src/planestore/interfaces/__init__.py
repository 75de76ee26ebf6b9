"""Interfaces (application boundary) for PLANESTORE.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (image sources, readers). Business rules stay
out of this package.

Dependency rule: may import `planestore.domain` and `planestore.image` only.
It may be imported by `planestore.service_layer`, `planestore.adapters`, and
`planestore.bootstrap`.
"""
