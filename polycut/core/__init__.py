"""Core types and utilities for polycut.

This module provides the value types, configuration, exceptions, and input
conversion helpers used throughout the library.
"""

from .types import (
    Point,
    Line,
    MatchMode,
)

from .config import (
    CutConfig,
    DEFAULT_EPSILON,
    DEFAULT_AREA_PRECISION,
)

from .errors import (
    PolycutError,
    ValidationError,
    ConfigurationError,
    PreconditionWarning,
)

__all__ = [
    # Value types
    'Point',
    'Line',
    'MatchMode',

    # Configuration
    'CutConfig',
    'DEFAULT_EPSILON',
    'DEFAULT_AREA_PRECISION',

    # Exceptions
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
    'PreconditionWarning',
]
