"""Command-line interface for PLANESTORE."""
