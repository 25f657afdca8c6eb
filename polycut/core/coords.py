"""Conversions between the input forms polycut accepts.

Polygons are handled internally as ``(N, 2)`` float64 arrays without a
repeated closing vertex. Public functions also accept plain sequences of
``(x, y)`` pairs and Shapely geometries; this module normalizes them.
"""

from typing import Iterable, List, Sequence, Union

import numpy as np
from shapely.geometry import LineString, Polygon

from .errors import ValidationError
from .types import Line, Point

PolygonLike = Union[Polygon, np.ndarray, Sequence[Sequence[float]]]
LineLike = Union[Line, LineString, Sequence[Sequence[float]]]


def as_polygon_array(polygon: PolygonLike) -> np.ndarray:
    """Convert a polygon-like input to an ``(N, 2)`` float64 array.

    Shapely polygons contribute their exterior ring with the closing vertex
    removed. Z coordinates are dropped.

    Args:
        polygon: Shapely Polygon, numpy array, or sequence of ``(x, y)`` pairs

    Returns:
        Array of vertices in input order

    Raises:
        ValidationError: If the input cannot be read as 2D coordinates

    Examples:
        >>> as_polygon_array([(0, 0), (1, 0), (1, 1)]).shape
        (3, 2)
    """
    if isinstance(polygon, Polygon):
        if polygon.is_empty:
            return np.empty((0, 2), dtype=float)
        coords = np.asarray(polygon.exterior.coords, dtype=float)[:-1]
    else:
        try:
            coords = np.asarray(polygon, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Polygon coordinates are not numeric: {e}") from e

    if coords.size == 0:
        return np.empty((0, 2), dtype=float)
    if coords.ndim != 2 or coords.shape[1] < 2:
        raise ValidationError(
            f"Polygon must be a sequence of (x, y) pairs, got array of shape {coords.shape}"
        )
    if not np.all(np.isfinite(coords[:, :2])):
        raise ValidationError("Polygon coordinates must be finite")

    return np.array(coords[:, :2], dtype=float)


def as_line(line: LineLike) -> Line:
    """Convert a line-like input to a :class:`Line`.

    Raises:
        ValidationError: If the input does not hold exactly two 2D points
    """
    if isinstance(line, Line):
        raw = [line.p1, line.p2]
    elif isinstance(line, LineString):
        raw = list(line.coords)
    else:
        raw = line

    try:
        coords = np.asarray(raw, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Line coordinates are not numeric: {e}") from e

    if coords.ndim != 2 or coords.shape[0] != 2 or coords.shape[1] < 2:
        raise ValidationError(
            f"Line must be exactly two (x, y) points, got array of shape {coords.shape}"
        )
    if not np.all(np.isfinite(coords[:, :2])):
        raise ValidationError("Line coordinates must be finite")

    return Line(
        Point(float(coords[0, 0]), float(coords[0, 1])),
        Point(float(coords[1, 0]), float(coords[1, 1])),
    )


def as_lines(lines: Iterable[LineLike]) -> List[Line]:
    """Convert every entry of ``lines`` with :func:`as_line`, keeping order."""
    return [as_line(line) for line in lines]


def to_shapely_polygon(points: np.ndarray) -> Polygon:
    """Build a Shapely polygon from a vertex array.

    Arrays with fewer than 3 vertices give an empty polygon.
    """
    if len(points) < 3:
        return Polygon()
    return Polygon([(float(x), float(y)) for x, y in points])


__all__ = [
    'PolygonLike',
    'LineLike',
    'as_polygon_array',
    'as_line',
    'as_lines',
    'to_shapely_polygon',
]
