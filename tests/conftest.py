"""Global pytest fixtures for PLANESTORE."""

from __future__ import annotations

pytest_plugins = [
    "tests.fixtures.planes",
]
