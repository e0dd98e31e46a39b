"""
Exception types for neighbor_finder.

All errors derive from ValueError so callers catching ValueError keep
working, and from NeighborFinderError so they can be caught as a group.
"""

from typing import Optional


class NeighborFinderError(Exception):
    """Base class for all neighbor_finder errors."""


class RangeError(NeighborFinderError, ValueError):
    """Coordinate or rectangle bound outside the allowed range."""


class ArgumentError(NeighborFinderError, ValueError):
    """Missing or wrongly typed argument passed to the index."""


class ParseError(NeighborFinderError, ValueError):
    """Malformed line of textual point input.

    Parameters
    ----------
    message : str
        Description of the problem.
    line : str, optional
        The offending input line.
    line_number : int, optional
        1-based line number, when reading from a file.
    """

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
