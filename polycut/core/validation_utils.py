"""Precondition checks for polygons passed to the cutting functions.

The splitting algorithm assumes a simple polygon. It has no way to detect
a violation itself, so these helpers use Shapely to check up front and
report problems as warnings rather than errors.
"""

import warnings

import numpy as np
from shapely.validation import explain_validity

from .coords import to_shapely_polygon
from .errors import PreconditionWarning


def has_minimum_vertices(points: np.ndarray, min_vertices: int = 3) -> bool:
    """Check if a vertex array has enough vertices to enclose an area.

    Examples:
        >>> has_minimum_vertices(np.array([[0, 0], [1, 0]]))
        False
    """
    return len(points) >= min_vertices


def is_simple_polygon(points: np.ndarray) -> bool:
    """Check if a vertex array describes a simple (non-self-intersecting) polygon.

    Arrays with fewer than 3 vertices are degenerate rather than
    self-intersecting and count as simple.

    Examples:
        >>> is_simple_polygon(np.array([[0, 0], [1, 0], [1, 1], [0, 1]]))
        True
        >>> is_simple_polygon(np.array([[0, 0], [1, 1], [0, 1], [1, 0]]))
        False
    """
    if not has_minimum_vertices(points):
        return True
    return to_shapely_polygon(points).is_valid


def warn_if_not_simple(points: np.ndarray, stacklevel: int = 3) -> bool:
    """Emit a :class:`PreconditionWarning` for a non-simple polygon.

    Args:
        points: Polygon vertices
        stacklevel: Passed to :func:`warnings.warn`; the default points at
            the caller of a function that calls this one directly

    Returns:
        True if the polygon passed the check
    """
    if is_simple_polygon(points):
        return True

    reason = explain_validity(to_shapely_polygon(points))
    warnings.warn(
        f"Polygon is not simple ({reason}); cut result is best-effort",
        PreconditionWarning,
        stacklevel=stacklevel,
    )
    return False


__all__ = [
    'has_minimum_vertices',
    'is_simple_polygon',
    'warn_if_not_simple',
]
