"""
Shared pytest fixtures for neighbor_finder tests.

These fixtures provide consistent test data across all test modules.
"""

import numpy as np
import pytest
from pathlib import Path
from typing import List


# =============================================================================
# Point Fixtures
# =============================================================================

FIXTURE_COORDS = [
    (6, 6), (0, 6), (2, 7), (4, 8), (5, 10),
    (7, 10), (8, 8), (10, 7), (10, 5), (8, 4),
    (7, 2), (6, 0), (5, 2), (4, 4), (2, 5),
    (7, 5), (7, 3), (6, 5), (6, 12), (12, 6),
]


@pytest.fixture
def fixture_points() -> List:
    """The 20-point reference set."""
    from neighbor_finder.geometry import Point
    return [Point(x, y) for x, y in FIXTURE_COORDS]


@pytest.fixture
def fixture_tree(fixture_points):
    """KdTree built from the 20-point reference set."""
    from neighbor_finder.index import KdTree
    return KdTree(fixture_points)


@pytest.fixture
def random_xy() -> np.ndarray:
    """500 distinct random integer points."""
    rng = np.random.default_rng(42)  # Reproducible
    xy = rng.integers(-1000, 1000, size=(600, 2))
    xy = np.unique(xy, axis=0)[:500]
    rng.shuffle(xy)  # unique() sorts; keep insertion order random
    return xy


@pytest.fixture
def random_tree(random_xy):
    """KdTree over random_xy."""
    from neighbor_finder.index import KdTree
    from neighbor_finder.io import points_from_array
    return KdTree(points_from_array(random_xy))


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def points_file(tmp_path) -> Path:
    """Text file holding the 20-point reference set."""
    filepath = tmp_path / "points.txt"
    filepath.write_text("".join(f"{x} {y}\n" for x, y in FIXTURE_COORDS))
    return filepath


@pytest.fixture
def malformed_file(tmp_path) -> Path:
    """Text file with a malformed second line."""
    filepath = tmp_path / "bad.txt"
    filepath.write_text("1 2\n3 four\n5 6\n")
    return filepath


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def default_config():
    """Default configuration."""
    from neighbor_finder.config import FinderConfig
    return FinderConfig()
