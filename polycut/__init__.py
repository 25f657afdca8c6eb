"""Polycut - slicing simple polygons by straight lines.

This library cuts a polygon by an ordered list of lines and measures the
resulting fragments. Inputs may be plain coordinate sequences, numpy arrays
or Shapely geometries.
"""


# Cutting functions
from .cut import (
    cut_polygon,
    cut_polygon_geometries,
    get_largest_polygon_area,
    largest_fragment_area,
)

# Single-line split
from .split import split_polygon

# Intersection primitives
from .intersect import (
    line_segment_intersection,
    find_intersections,
    point_line_side,
)

# Measurement
from .metrics import polygon_area, measure_fragments

# Core types and configuration
from .core import (
    Point,
    Line,
    MatchMode,
    CutConfig,
)

# Core exceptions
from .core import (
    PolycutError,
    ValidationError,
    ConfigurationError,
    PreconditionWarning,
)

__all__ = [

    # Cutting
    'cut_polygon',
    'cut_polygon_geometries',
    'get_largest_polygon_area',
    'largest_fragment_area',
    'split_polygon',

    # Intersection
    'line_segment_intersection',
    'find_intersections',
    'point_line_side',

    # Measurement
    'polygon_area',
    'measure_fragments',

    # Core types
    'Point',
    'Line',
    'MatchMode',
    'CutConfig',

    # Core exceptions
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
    'PreconditionWarning',
]
