"""
Point reader for neighbor_finder.

Parses text input with one point per line, written as two
whitespace-separated integers. File input is strict: the first malformed
line aborts the read. Interactive input is lenient: malformed lines are
reported and skipped.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import numpy as np

from neighbor_finder.config import DEFAULT_PROMPT
from neighbor_finder.errors import NeighborFinderError, ParseError
from neighbor_finder.geometry import Point

logger = logging.getLogger(__name__)


def parse_point_line(line: str, line_number: Optional[int] = None) -> Point:
    """
    Parse a single ``"X Y"`` line into a Point.

    Parameters
    ----------
    line : str
        Input line (surrounding whitespace is ignored).
    line_number : int, optional
        Line number included in error messages.

    Returns
    -------
    Point
        Parsed point.

    Raises
    ------
    ParseError
        If the line does not hold exactly two integers in range.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(
            f"expected 2 coordinates, got {len(tokens)}", line=line, line_number=line_number
        )

    try:
        x, y = int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise ParseError(f"coordinates must be integers: {line.strip()!r}", line=line, line_number=line_number) from e

    try:
        return Point(x, y)
    except NeighborFinderError as e:
        raise ParseError(str(e), line=line, line_number=line_number) from e


def load_points(filepath: Path) -> List[Point]:
    """
    Load points from a text file.

    Blank lines are ignored. Any malformed line aborts the whole read, so
    a partial point list is never returned.

    Parameters
    ----------
    filepath : Path
        Path to the input file.

    Returns
    -------
    list of Point
        Points in file order, duplicates included.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        On the first malformed line.
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    points = []
    with open(filepath) as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                points.append(parse_point_line(line, line_number))
            except ParseError as e:
                logger.error(f"Aborting read of {filepath}: {e}")
                raise

    logger.info(f"Loaded {len(points)} points from {filepath}")
    return points


def read_points_interactive(
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    end_token: str = "end",
    prompt: Optional[str] = DEFAULT_PROMPT,
) -> List[Point]:
    """
    Read points line by line until ``end_token`` or end of stream.

    Malformed lines are reported on ``out`` and skipped.

    Parameters
    ----------
    stream : TextIO, optional
        Input stream. Defaults to stdin.
    out : TextIO, optional
        Stream for the prompt and error messages. Defaults to stdout.
    end_token : str
        Line that stops reading.
    prompt : str, optional
        Message written before reading. None to skip it.

    Returns
    -------
    list of Point
        Valid points in input order.
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout

    if prompt:
        print(prompt, file=out)

    points = []
    for line in stream:
        stripped = line.strip()
        if stripped == end_token:
            break
        if not stripped:
            continue
        try:
            points.append(parse_point_line(line))
        except ParseError as e:
            logger.warning(f"Skipping invalid input: {e}")
            print(f"Invalid input({e}).", file=out)

    return points


def points_to_array(points: List[Point]) -> np.ndarray:
    """
    Convert points to an (N, 2) int64 array of XY coordinates.
    """
    if not points:
        return np.empty((0, 2), dtype=np.int64)
    return np.array([(p.x, p.y) for p in points], dtype=np.int64)


def points_from_array(xy: np.ndarray) -> List[Point]:
    """
    Convert an (N, 2) integer array into Points.

    Raises
    ------
    ValueError
        If the array does not have shape (N, 2) or is not integer typed.
    RangeError
        If any coordinate is out of range.
    """
    xy = np.asarray(xy)
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError(f"Points must have shape (N, 2), got {xy.shape}")
    if xy.size and not np.issubdtype(xy.dtype, np.integer):
        raise ValueError(f"Points must be integers, got dtype {xy.dtype}")
    return [Point(int(x), int(y)) for x, y in xy]
