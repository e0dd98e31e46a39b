"""
Per-point neighbor queries.

For every input point P the report finds the nearest distinct point at
distance R, then counts the other stored points within ``radius_factor * R``
of P.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from neighbor_finder.geometry import Point
from neighbor_finder.index import KdTree
from neighbor_finder.io.point_reader import points_to_array

logger = logging.getLogger(__name__)

INSUFFICIENT_POINTS_MESSAGE = "There are less than 2 points"


@dataclass
class NeighborResult:
    """Container for neighbor report results.

    Attributes
    ----------
    xy : np.ndarray
        (N, 2) int64 coordinates of the reported points, in input order.
    radius : np.ndarray
        (N,) distance from each point to its nearest distinct point.
    neighbor_count : np.ndarray
        (N,) number of other points within ``radius_factor * radius``.
    n_input : int
        Number of points supplied, duplicates included.
    n_distinct : int
        Number of distinct points stored in the index.
    radius_factor : float
        Multiplier used for the counting radius.
    timing : dict
        Wall-clock seconds for 'build' and 'query'.
    """

    xy: np.ndarray
    radius: np.ndarray
    neighbor_count: np.ndarray
    n_input: int
    n_distinct: int
    radius_factor: float = 2.0
    timing: Dict[str, float] = field(default_factory=dict)

    @property
    def n_points(self) -> int:
        """Number of reported points."""
        return len(self.radius)

    @property
    def sufficient(self) -> bool:
        """True when the index holds at least two distinct points."""
        return self.n_distinct >= 2


def compute_neighbors(
    points: List[Point],
    tree: Optional[KdTree] = None,
    radius_factor: float = 2.0,
    show_progress: bool = False,
) -> NeighborResult:
    """
    Run the nearest and radius queries for each point.

    Parameters
    ----------
    points : list of Point
        Input points; duplicates are allowed.
    tree : KdTree, optional
        Pre-built index over ``points``. Built here when omitted.
    radius_factor : float
        Multiplier applied to the nearest distance.
    show_progress : bool
        If True, display progress bar.

    Returns
    -------
    NeighborResult
        Per-point radii and counts. Empty when fewer than two distinct
        points are available.
    """
    t0 = time.perf_counter()
    if tree is None:
        tree = KdTree(points)
    build_time = time.perf_counter() - t0

    n_input = len(points)
    if tree.size < 2:
        logger.info(f"Only {tree.size} distinct point(s); skipping queries")
        return NeighborResult(
            xy=np.empty((0, 2), dtype=np.int64),
            radius=np.empty(0, dtype=np.float64),
            neighbor_count=np.empty(0, dtype=np.int32),
            n_input=n_input,
            n_distinct=tree.size,
            radius_factor=radius_factor,
            timing={"build": build_time, "query": 0.0},
        )

    radii = np.zeros(n_input, dtype=np.float64)
    counts = np.zeros(n_input, dtype=np.int32)

    t0 = time.perf_counter()
    n_done = 0
    for p in tqdm(points, desc="Querying", disable=not show_progress):
        nearest = tree.nearest(p)
        if nearest is None:
            break
        r = nearest.distance(p)
        radii[n_done] = r
        # The query point is stored, so it is always in its own circle
        counts[n_done] = len(tree.radius(p, radius_factor * r)) - 1
        n_done += 1
    query_time = time.perf_counter() - t0

    logger.info(f"Queried {n_done} points in {query_time:.3f}s")

    return NeighborResult(
        xy=points_to_array(points[:n_done]),
        radius=radii[:n_done],
        neighbor_count=counts[:n_done],
        n_input=n_input,
        n_distinct=tree.size,
        radius_factor=radius_factor,
        timing={"build": build_time, "query": query_time},
    )


def format_report_lines(result: NeighborResult, precision: int = 2) -> List[str]:
    """
    Render one text line per reported point.

    Lines read ``{x=X, y=Y} radius = R.RR, has K neighbor(s)``. When
    fewer than two distinct points were available, a single notice line
    is returned instead.
    """
    if not result.sufficient:
        return [INSUFFICIENT_POINTS_MESSAGE]

    lines = []
    for (x, y), r, k in zip(result.xy, result.radius, result.neighbor_count):
        lines.append(f"{{x={x}, y={y}}} radius = {r:.{precision}f}, has {k} neighbor(s)")
    return lines
