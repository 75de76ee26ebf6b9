"""``planestore demo``: exercise an image store over the synthetic source.

Requests every coordinate of a grid (``--axis NAME=COUNT``, repeatable) from
a freshly bootstrapped store, optionally publishes new summary metadata, and
prints the resulting per-axis maximum indices as a table.

Examples
    $ planestore demo --axis z=3 --axis channel=2
    $ planestore demo --axis time=5 --width 64 --height 64 --seed 1 --name run1
"""

from __future__ import annotations

import itertools
import logging

import click
from rich.console import Console
from rich.table import Table

from planestore.bootstrap import bootstrap, build_image_source
from planestore.config import SourceConfig
from planestore.domain.coords import Coords
from planestore.domain.metadata import SummaryMetadata
from planestore.service_layer.events import NewSummaryMetadataEvent

from .helpers import parse_axis_counts

logger = logging.getLogger(__name__)

DEFAULT_AXES = ("z=3", "channel=2")


def iter_grid(axis_counts: dict[str, int]):
    """Yield every `Coords` of the grid spanned by ``axis_counts``."""
    names = list(axis_counts)
    for indices in itertools.product(*(range(axis_counts[n]) for n in names)):
        yield Coords(dict(zip(names, indices)))


@click.command()
@click.option(
    "--axis",
    "axis_counts",
    multiple=True,
    callback=parse_axis_counts,
    default=DEFAULT_AXES,
    show_default=True,
    help="Axis to span as NAME=COUNT. Repeatable.",
)
@click.option("--width", type=click.IntRange(min=1), default=64, show_default=True)
@click.option("--height", type=click.IntRange(min=1), default=64, show_default=True)
@click.option(
    "--components",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Interleaved components per pixel (3 for RGB).",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible planes.")
@click.option("--name", default=None, help="Publish summary metadata with this name.")
def demo(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    axis_counts: dict[str, int],
    width: int,
    height: int,
    components: int,
    seed: int | None,
    name: str | None,
) -> None:
    """Fill an image store from the synthetic source and summarize it."""

    source_config = SourceConfig(
        width=width,
        height=height,
        bytes_per_pixel=1,
        num_components=components,
        seed=seed,
    )
    app = bootstrap(source=build_image_source(source_config))
    store = app.store

    if name is not None:
        app.channel.publish(
            NewSummaryMetadataEvent(
                SummaryMetadata.builder()
                .name(name)
                .axis_order(tuple(axis_counts))
                .intended_dimensions(Coords(axis_counts))
                .build()
            )
        )

    failures = 0
    for coords in iter_grid(axis_counts):
        if not store.get_image(coords).ok:
            failures += 1
    if failures:
        logger.warning("%d plane(s) could not be produced", failures)

    table = Table(title="Max index per axis")
    table.add_column("Axis")
    table.add_column("Max index", justify="right")
    for axis in sorted(store.get_axes()):
        table.add_row(axis, str(store.get_max_index(axis)))

    console = Console(highlight=False)
    console.print(table)
    console.print(f"Images cached: {store.get_num_images()}")
    console.print(f"Dataset: {store.get_summary_metadata().name or '<unnamed>'}")
    if images := store.get_images_matching(Coords()):
        first = min(images, key=lambda image: str(image.coords))
        console.print(
            f"Pixel (0, 0) at <{first.coords}>: {first.get_intensity_string_at(0, 0)}",
            markup=False,
        )
