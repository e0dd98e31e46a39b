"""Reporting module for neighbor queries, statistics and report output."""

from neighbor_finder.reporting.neighbors import (
    INSUFFICIENT_POINTS_MESSAGE,
    NeighborResult,
    compute_neighbors,
    format_report_lines,
)
from neighbor_finder.reporting.statistics import (
    summarize_distribution,
    calculate_neighbor_stats,
)
from neighbor_finder.reporting.report_writer import write_json_report

__all__ = [
    # neighbors
    "INSUFFICIENT_POINTS_MESSAGE",
    "NeighborResult",
    "compute_neighbors",
    "format_report_lines",
    # statistics
    "summarize_distribution",
    "calculate_neighbor_stats",
    # report_writer
    "write_json_report",
]
