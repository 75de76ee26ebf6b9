"""Unit tests for the ``--axis NAME=COUNT`` parser."""

import types

import click
import pytest

from planestore.entrypoints.cli.helpers.axis_parser import parse_axis_counts

# pylint: disable=magic-value-comparison


def test_parses_pairs_in_order():
    """Axes keep their order of first appearance."""
    out = parse_axis_counts(types.SimpleNamespace(), None, ("z=3", "channel=2"))
    assert list(out.items()) == [("z", 3), ("channel", 2)]


def test_later_count_wins():
    """A repeated axis takes the last count."""
    out = parse_axis_counts(types.SimpleNamespace(), None, "z=3, time=2 z=5")
    assert out == {"z": 5, "time": 2}


def test_empty_yields_no_axes():
    """No values means an empty grid."""
    assert not parse_axis_counts(types.SimpleNamespace(), None, ())


@pytest.mark.parametrize(
    "item, match",
    [
        ("z", "Expected NAME=COUNT"),
        ("=3", "Expected NAME=COUNT"),
        ("z=three", "Invalid count for axis 'z'"),
        ("z=0", "must be positive"),
    ],
)
def test_invalid_items_raise(item, match):
    """Malformed pairs and non-positive counts are rejected."""
    with pytest.raises(click.BadParameter, match=match):
        parse_axis_counts(types.SimpleNamespace(), None, (item,))
