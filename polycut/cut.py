"""Cutting a polygon by a sequence of lines.

Lines are applied strictly in order. Each pass takes the current fragment
list, splits every fragment the line cuts in two and carries the rest over
unchanged, so area is never dropped by a line that misses or only touches
a fragment.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
from shapely.geometry import Polygon

from .core.config import CutConfig, resolve_config
from .core.coords import LineLike, PolygonLike, as_lines, as_polygon_array, to_shapely_polygon
from .core.types import Line
from .core.validation_utils import warn_if_not_simple
from .metrics import polygon_area
from .split import split_polygon


def cut_polygon(
    polygon: PolygonLike,
    lines: Iterable[LineLike],
    config: Optional[CutConfig] = None,
) -> List[np.ndarray]:
    """Cut a polygon by every line in turn and return all fragments.

    Args:
        polygon: Simple polygon to cut
        lines: Cutting lines, applied in order
        config: Tolerances and policies (defaults when None)

    Returns:
        Fragment vertex arrays, possibly including degenerate ones with
        fewer than 3 vertices

    Warns:
        PreconditionWarning: If ``config.check_simple`` is set and the
            polygon is not simple

    Examples:
        >>> square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        >>> len(cut_polygon(square, [[(0.5, 0), (0.5, 1)], [(0, 0.5), (1, 0.5)]]))
        4
    """
    config = resolve_config(config)
    points = _checked_points(polygon, config)
    return _cut_fragments(points, as_lines(lines), config)


def get_largest_polygon_area(
    polygon: PolygonLike,
    lines: Iterable[LineLike],
    config: Optional[CutConfig] = None,
) -> float:
    """Cut a polygon by ``lines`` and return the area of the largest fragment.

    Areas are rounded to ``config.area_precision`` digits. Returns 0.0 when
    no fragment encloses any area.

    Examples:
        >>> square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        >>> get_largest_polygon_area(square, [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]])
        0.375
    """
    config = resolve_config(config)
    points = _checked_points(polygon, config)
    fragments = _cut_fragments(points, as_lines(lines), config)
    return max(
        (polygon_area(fragment, config.area_precision) for fragment in fragments),
        default=0.0,
    )


largest_fragment_area = get_largest_polygon_area


def cut_polygon_geometries(
    polygon: PolygonLike,
    lines: Iterable[LineLike],
    config: Optional[CutConfig] = None,
) -> List[Polygon]:
    """Like :func:`cut_polygon` but return Shapely polygons.

    Degenerate fragments (fewer than 3 vertices) are left out.
    """
    config = resolve_config(config)
    points = _checked_points(polygon, config)
    return [
        to_shapely_polygon(fragment)
        for fragment in _cut_fragments(points, as_lines(lines), config)
        if len(fragment) >= 3
    ]


def _checked_points(polygon: PolygonLike, config: CutConfig) -> np.ndarray:
    # Only call from a public function so the warning points at its caller.
    points = as_polygon_array(polygon)
    if config.check_simple:
        warn_if_not_simple(points, stacklevel=4)
    return points


def _cut_fragments(
    points: np.ndarray,
    lines: List[Line],
    config: CutConfig,
) -> List[np.ndarray]:
    fragments = [points]
    for line in lines:
        next_fragments = []
        for fragment in fragments:
            halves = split_polygon(fragment, line, config)
            if halves is None:
                next_fragments.append(fragment)
            else:
                next_fragments.extend(halves)
        fragments = next_fragments
    return fragments


__all__ = [
    'cut_polygon',
    'get_largest_polygon_area',
    'largest_fragment_area',
    'cut_polygon_geometries',
]
