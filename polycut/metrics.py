"""Area measurement for polygons and cut fragments.

Areas are rounded to a fixed number of decimal digits so that fragments
produced through different float paths compare equal when they should.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

import numpy as np

from .core.config import DEFAULT_AREA_PRECISION
from .core.coords import PolygonLike, as_polygon_array


def polygon_area(
    polygon: PolygonLike,
    precision: int = DEFAULT_AREA_PRECISION,
) -> float:
    """Compute the unsigned area of a polygon with the shoelace formula.

    The ring is closed implicitly. The result is rounded half-up to
    ``precision`` decimal digits; fewer than 3 vertices give 0.0.

    Args:
        polygon: Polygon vertices
        precision: Decimal digits to keep

    Returns:
        Rounded area, independent of winding order

    Examples:
        >>> polygon_area([(0, 0), (1, 0), (1, 1), (0, 1)])
        1.0
        >>> polygon_area([(0, 0), (1, 0)])
        0.0
    """
    points = as_polygon_array(polygon)
    if len(points) < 3:
        return 0.0

    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    signed = float(np.sum(x * y_next - x_next * y))

    return _round_half_up(abs(signed / 2.0), precision)


def _round_half_up(value: float, precision: int) -> float:
    # Adding 0.5 before flooring is itself rounded near halves and above 2**52.
    scale = 10 ** precision
    scaled = value * scale
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / scale


def measure_fragments(
    fragments: Iterable[PolygonLike],
    original: Optional[PolygonLike] = None,
    precision: int = DEFAULT_AREA_PRECISION,
) -> Dict[str, Optional[float]]:
    """Return summary metrics for a set of fragments.

    Keys are ``count``, ``degenerate_count`` (fragments with fewer than 3
    vertices), ``total_area``, ``largest_area`` and ``area_ratio`` (total
    fragment area over ``original`` area, None without a usable original).
    """
    areas = []
    degenerate = 0
    for fragment in fragments:
        points = as_polygon_array(fragment)
        if len(points) < 3:
            degenerate += 1
        areas.append(polygon_area(points, precision))

    total_area = float(sum(areas))
    original_area = polygon_area(original, precision) if original is not None else None
    area_ratio: Optional[float] = None
    if original_area:
        area_ratio = total_area / original_area

    return {
        "count": len(areas),
        "degenerate_count": degenerate,
        "total_area": total_area,
        "largest_area": max(areas, default=0.0),
        "area_ratio": area_ratio,
    }


__all__ = [
    "polygon_area",
    "measure_fragments",
]
