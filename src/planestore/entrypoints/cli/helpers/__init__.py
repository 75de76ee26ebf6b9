"""Click callbacks shared by the PLANESTORE CLI."""

from .axis_parser import parse_axis_counts
from .log_level_parser import parse_log_level

__all__ = ["parse_axis_counts", "parse_log_level"]
