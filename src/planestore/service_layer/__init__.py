"""Service layer for PLANESTORE.

Implements the stateful image store, its event channel and the events it
reacts to. Calls domain objects and the outbound ports defined in
`planestore.interfaces`.

Dependency rule: may import `planestore.domain`, `planestore.image` and
`planestore.interfaces`, but not `planestore.adapters` or
`planestore.entrypoints`.
"""
