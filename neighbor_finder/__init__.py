"""
neighbor_finder: 2d-tree neighbor search over integer points.

A 2d-tree spatial index with nearest-neighbor, range and radius queries,
plus a small front end that reads points from text and reports, for each
point, the distance to its nearest neighbor and how many points lie
within twice that distance.
"""

__version__ = "0.1.0"

# Import public API
from neighbor_finder.config import COORD_MAX, COORD_MIN, FinderConfig, load_config, save_config
from neighbor_finder.errors import ArgumentError, NeighborFinderError, ParseError, RangeError
from neighbor_finder.geometry import Point, Rectangle
from neighbor_finder.index import KdTree
from neighbor_finder.io import load_points, read_points_interactive
from neighbor_finder.reporting import NeighborResult, compute_neighbors, format_report_lines

__all__ = [
    "__version__",
    # Config
    "FinderConfig",
    "load_config",
    "save_config",
    "COORD_MIN",
    "COORD_MAX",
    # Errors
    "NeighborFinderError",
    "RangeError",
    "ArgumentError",
    "ParseError",
    # Core
    "Point",
    "Rectangle",
    "KdTree",
    # I/O
    "load_points",
    "read_points_interactive",
    # Reporting
    "NeighborResult",
    "compute_neighbors",
    "format_report_lines",
]
