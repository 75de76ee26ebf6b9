"""Adapters (infrastructure) for PLANESTORE.

Provide concrete implementations of the interfaces (e.g., image sources that
wrap a generator, a queue of prepared planes, or an instrument).

Dependency rule: may import `planestore.domain`, `planestore.image` and
`planestore.interfaces`; the domain must not import this package.
"""
