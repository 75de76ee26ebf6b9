"""Entrypoints (inbound adapters) for PLANESTORE.

Expose the store to the outside world through the command line. Parse and
validate inputs, obtain a wired store from `planestore.bootstrap`, and present
results.

Dependency rule: may import `planestore.bootstrap`, `planestore.service_layer`
and `planestore.domain`; avoid importing `planestore.adapters` directly.
"""
