"""
JSON report output for neighbor results.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from neighbor_finder import __version__
from neighbor_finder.config import FinderConfig, config_summary
from neighbor_finder.reporting.neighbors import NeighborResult
from neighbor_finder.reporting.statistics import calculate_neighbor_stats

logger = logging.getLogger(__name__)


def write_json_report(
    result: NeighborResult,
    output_path: Path,
    config: Optional[FinderConfig] = None,
    source_file: Optional[str] = None,
) -> Path:
    """
    Write a neighbor report as JSON.

    Parameters
    ----------
    result : NeighborResult
        Computed neighbor results.
    output_path : Path
        Destination file. Parent directories are created.
    config : FinderConfig, optional
        Configuration to embed in the report.
    source_file : str, optional
        Name of the input file.

    Returns
    -------
    Path
        The written path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    points = [
        {
            "x": int(x),
            "y": int(y),
            "radius": float(r),
            "neighbor_count": int(k),
        }
        for (x, y), r, k in zip(result.xy, result.radius, result.neighbor_count)
    ]

    report = {
        "generated": datetime.now().isoformat(timespec="seconds"),
        "version": __version__,
        "source_file": source_file,
        "radius_factor": result.radius_factor,
        "statistics": calculate_neighbor_stats(result),
        "timing": result.timing,
        "points": points,
    }
    if config is not None:
        report["config"] = config_summary(config)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)

    logger.info(f"Wrote JSON report: {output_path}")
    return output_path
