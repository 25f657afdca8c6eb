"""Line/segment intersection and polygon edge scanning.

All functions take an ``epsilon`` tolerance; :mod:`polycut.core.config`
holds the default.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .core.config import DEFAULT_EPSILON
from .core.types import Line, Point


def line_segment_intersection(
    line1: Line,
    line2: Line,
    epsilon: float = DEFAULT_EPSILON,
) -> Optional[Point]:
    """Intersect two finite segments.

    Solves the parametric system for ``t`` (along ``line1``) and ``u``
    (along ``line2``). Parallel and coincident segments never intersect.
    Parameters within ``epsilon`` outside ``[0, 1]`` are still accepted, so a
    segment passing through an endpoint of the other counts as a hit.

    Args:
        line1: First segment; the returned point is computed along it
        line2: Second segment
        epsilon: Tolerance for the parallel test and the parameter range

    Returns:
        Intersection point, or None

    Examples:
        >>> line_segment_intersection(
        ...     Line(Point(0, 0), Point(1, 1)), Line(Point(0, 1), Point(1, 0)))
        Point(x=0.5, y=0.5)
    """
    (x1, y1), (x2, y2) = line1
    (x3, y3), (x4, y4) = line2

    dx1 = x2 - x1
    dy1 = y2 - y1
    dx2 = x4 - x3
    dy2 = y4 - y3

    denom = dx1 * dy2 - dy1 * dx2
    if abs(denom) < epsilon:
        return None

    dx3 = x3 - x1
    dy3 = y3 - y1

    t = (dx3 * dy2 - dy3 * dx2) / denom
    u = (dx3 * dy1 - dy3 * dx1) / denom

    if -epsilon <= t <= 1.0 + epsilon and -epsilon <= u <= 1.0 + epsilon:
        return Point(x1 + t * dx1, y1 + t * dy1)
    return None


def point_line_side(line: Line, p: Point) -> float:
    """Signed cross product of ``p`` relative to the direction of ``line``.

    Positive on one side, negative on the other, zero on the (infinite) line.
    """
    p1, p2 = line
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return (p.x - p1.x) * dy - (p.y - p1.y) * dx


def polygon_edges(points: Sequence[Point]) -> List[Line]:
    """Return the edges of a closed ring, including last-to-first."""
    n = len(points)
    return [Line(points[i], points[(i + 1) % n]) for i in range(n)]


def as_points(points: np.ndarray) -> List[Point]:
    """Convert a vertex array to a list of :class:`Point`."""
    return [Point(float(x), float(y)) for x, y in points]


def find_intersections(
    polygon: np.ndarray,
    line: Line,
    epsilon: float = DEFAULT_EPSILON,
) -> List[Point]:
    """Find the distinct points where ``line`` crosses the polygon boundary.

    Every edge is intersected with the line. Hits are sorted by ``(x, y)``
    and neighbours closer than ``epsilon`` on both axes are merged, keeping
    the first. A line through a vertex therefore reports that vertex once.

    Args:
        polygon: ``(N, 2)`` vertex array
        line: Cutting line
        epsilon: Tolerance passed to the intersection test and used for
            deduplication

    Returns:
        Sorted list of distinct intersection points (any length)
    """
    hits = []
    for edge in polygon_edges(as_points(polygon)):
        point = line_segment_intersection(line, edge, epsilon)
        if point is not None:
            hits.append(point)

    hits.sort()

    distinct: List[Point] = []
    for point in hits:
        if distinct and _near(distinct[-1], point, epsilon):
            continue
        distinct.append(point)
    return distinct


def _near(a: Point, b: Point, epsilon: float) -> bool:
    return abs(a.x - b.x) < epsilon and abs(a.y - b.y) < epsilon


__all__ = [
    'line_segment_intersection',
    'point_line_side',
    'polygon_edges',
    'as_points',
    'find_intersections',
]
