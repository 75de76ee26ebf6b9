"""Parse ``--axis NAME=COUNT`` options into an ordered axis -> count mapping."""

import click

from ._items import split_items


def parse_axis_counts(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=COUNT pairs into a name->count dict.

    Order of first appearance is kept; a repeated axis takes the last count.

    Raises:
        click.BadParameter: If an item is malformed or COUNT is not a positive
            integer.
    """
    counts: dict[str, int] = {}
    for item in split_items(value):
        name, sep, count_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=COUNT, got {item!r}")
        try:
            count = int(count_str)
        except ValueError as e:
            raise click.BadParameter(
                f"Invalid count for axis {name!r}: {count_str!r}"
            ) from e
        if count < 1:
            raise click.BadParameter(f"Count for axis {name!r} must be positive")
        counts[name.strip()] = count
    return counts
