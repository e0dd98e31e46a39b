"""
Statistics computation for neighbor report results.

Summarizes nearest-neighbor distances and neighbor counts.
"""

import numpy as np
from typing import Dict, Optional, Sequence

from neighbor_finder.reporting.neighbors import NeighborResult

SUMMARY_QUANTILES = (50, 90, 99)


def summarize_distribution(
    values: np.ndarray,
    name: str,
    quantiles: Sequence[int] = SUMMARY_QUANTILES,
    decimals: Optional[int] = 4,
) -> Dict:
    """
    Summarize one per-point quantity of a neighbor report.

    Report arrays are always finite, so no NaN filtering is done.

    Parameters
    ----------
    values : np.ndarray
        (N,) radii or neighbor counts.
    name : str
        Label stored with the summary.
    quantiles : sequence of int
        Percentiles to report, in [0, 100].
    decimals : int, optional
        Rounding for float results. None keeps full precision.

    Returns
    -------
    dict
        'name', 'count', 'mean', 'std', 'min', 'max' and 'quantiles'
        (percentile -> value). Statistics are None when ``values`` is
        empty.
    """
    values = np.asarray(values, dtype=np.float64).ravel()
    summary = {"name": name, "count": int(values.size)}

    if values.size == 0:
        summary.update(mean=None, std=None, min=None, max=None)
        summary["quantiles"] = {q: None for q in quantiles}
        return summary

    def _fmt(v) -> float:
        v = float(v)
        return v if decimals is None else round(v, decimals)

    levels = np.percentile(values, list(quantiles)) if len(quantiles) else []
    summary.update(
        mean=_fmt(values.mean()),
        std=_fmt(values.std()),
        min=_fmt(values.min()),
        max=_fmt(values.max()),
    )
    summary["quantiles"] = {q: _fmt(v) for q, v in zip(quantiles, levels)}
    return summary


def calculate_neighbor_stats(result: NeighborResult) -> Dict:
    """
    Calculate statistics for a neighbor report.

    Returns
    -------
    dict
        - 'n_input', 'n_distinct', 'n_reported': Point counts
        - 'duplicates': Input points dropped as value-duplicates
        - 'isolated': Points with no neighbor inside the counting radius
        - 'radius', 'neighbor_count': Distribution summaries
    """
    return {
        "n_input": result.n_input,
        "n_distinct": result.n_distinct,
        "n_reported": result.n_points,
        "duplicates": result.n_input - result.n_distinct,
        "isolated": int((result.neighbor_count == 0).sum()),
        "radius": summarize_distribution(result.radius, "radius"),
        "neighbor_count": summarize_distribution(result.neighbor_count, "neighbor_count"),
    }
