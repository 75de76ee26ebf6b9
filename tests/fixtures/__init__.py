"""Shared fakes and fixtures for the PLANESTORE test suite."""
