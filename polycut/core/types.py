"""Type definitions for polycut operations.

This module defines the small value types passed between the cutting
functions and the enum used to select the intersection matching policy.
"""

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """A 2D point.

    Points sort lexicographically by ``(x, y)``, which is the order used
    when deduplicating intersections.
    """
    x: float
    y: float


class Line(NamedTuple):
    """An ordered pair of points.

    Treated as a finite segment when testing intersection containment and
    as an infinite line when classifying which side a vertex lies on.
    """
    p1: Point
    p2: Point


class MatchMode(Enum):
    """How the splitter matches an edge hit to a registered intersection.

    Attributes:
        EXACT: Exact coordinate equality, the recomputed point is inserted.
            Reproduces the reference behaviour but can drop an insertion
            when two float computations of the same crossing disagree.
        TOLERANCE: Both coordinate differences below epsilon, the
            registered point is inserted (default)

    Examples:
        >>> from polycut import CutConfig, MatchMode, largest_fragment_area
        >>> square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        >>> lines = [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]]
        >>> config = CutConfig(match_mode=MatchMode.EXACT)
        >>> largest_fragment_area(square, lines, config=config)
        0.375
    """
    EXACT = 'exact'
    TOLERANCE = 'tolerance'


__all__ = [
    'Point',
    'Line',
    'MatchMode',
]
