"""Fixtures for end-to-end CLI tests.

Registers a test-only `log-demo` command on the `planestore` group that emits
one message per level, so console verbosity, logger overrides and the flight
recorder can be checked without depending on what `demo` happens to log.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from planestore.entrypoints.cli.main import planestore

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit messages on 'planestore.demo' and on a 'some.thirdparty' logger."""
    logger = logging.getLogger("planestore.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop ``name`` from the group and from any help sections click-extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach 'log-demo' to `planestore` for one test."""
    planestore.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(planestore, "log-demo")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
