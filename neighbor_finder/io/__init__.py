"""I/O module for reading point coordinates."""

from neighbor_finder.io.point_reader import (
    load_points,
    parse_point_line,
    points_from_array,
    points_to_array,
    read_points_interactive,
)

__all__ = [
    "parse_point_line",
    "load_points",
    "read_points_interactive",
    "points_to_array",
    "points_from_array",
]
