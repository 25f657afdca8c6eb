"""Splitting a polygon into two fragments along a cutting line."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .core.config import CutConfig, resolve_config
from .core.coords import LineLike, PolygonLike, as_line, as_polygon_array
from .core.types import MatchMode, Point
from .intersect import (
    as_points,
    find_intersections,
    line_segment_intersection,
    point_line_side,
    polygon_edges,
)


def split_polygon(
    polygon: PolygonLike,
    line: LineLike,
    config: Optional[CutConfig] = None,
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Split a polygon into the fragments on either side of ``line``.

    The cut is made only when the line crosses the boundary at exactly two
    distinct points. Vertices are walked in order: each is appended to
    fragment A when it lies on or left of the line and to fragment B when
    it lies on or right of it, so vertices on the line land in both. After
    each vertex, a crossing on the outgoing edge is appended to both
    fragments, once per crossing point.

    Args:
        polygon: Simple polygon to split
        line: Cutting line (infinite for side classification, finite for
            the crossing test)
        config: Tolerance and matching policy (defaults when None)

    Returns:
        ``(fragment_a, fragment_b)`` vertex arrays, either possibly with
        fewer than 3 vertices, or None when the line does not cut the
        polygon at exactly two points

    Examples:
        >>> square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        >>> a, b = split_polygon(square, [(0.5, 0), (0.5, 1)])
        >>> len(a), len(b)
        (4, 4)
    """
    config = resolve_config(config)
    points = as_polygon_array(polygon)
    cut = as_line(line)
    epsilon = config.epsilon

    crossings = find_intersections(points, cut, epsilon)
    if len(crossings) != 2:
        return None

    fragment_a: List[Point] = []
    fragment_b: List[Point] = []
    inserted = [False, False]

    vertices = as_points(points)
    for current, edge in zip(vertices, polygon_edges(vertices)):
        side = point_line_side(cut, current)
        if side >= -epsilon:
            fragment_a.append(current)
        if side <= epsilon:
            fragment_b.append(current)

        hit = line_segment_intersection(cut, edge, epsilon)
        if hit is None:
            continue

        slot = _match_crossing(hit, crossings, inserted, config)
        if slot is None:
            continue

        point = hit if config.match_mode is MatchMode.EXACT else crossings[slot]
        fragment_a.append(point)
        fragment_b.append(point)
        inserted[slot] = True

    return _to_array(fragment_a), _to_array(fragment_b)


def _match_crossing(
    hit: Point,
    crossings: List[Point],
    inserted: List[bool],
    config: CutConfig,
) -> Optional[int]:
    # Slot 0 takes precedence; a slot already inserted never matches again.
    for slot, crossing in enumerate(crossings):
        if inserted[slot]:
            continue
        if config.match_mode is MatchMode.EXACT:
            if crossing.x == hit.x and crossing.y == hit.y:
                return slot
        elif (abs(crossing.x - hit.x) < config.epsilon
              and abs(crossing.y - hit.y) < config.epsilon):
            return slot
    return None


def _to_array(points: List[Point]) -> np.ndarray:
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array(points, dtype=float)


__all__ = ['split_polygon']
