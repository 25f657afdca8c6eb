"""Settings shared by the cutting operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .types import MatchMode

DEFAULT_EPSILON = 1e-10
DEFAULT_AREA_PRECISION = 7


@dataclass(frozen=True)
class CutConfig:
    """Tolerances and policies for cutting a polygon.

    Attributes:
        epsilon: Tolerance used by every geometric test (parallel check,
            parametric range slack, deduplication, side classification)
        area_precision: Decimal digits kept when rounding polygon areas
        match_mode: Intersection matching policy used by the splitter
        check_simple: Emit a :class:`PreconditionWarning` when the input
            polygon is not simple
    """

    epsilon: float = DEFAULT_EPSILON
    area_precision: int = DEFAULT_AREA_PRECISION
    match_mode: MatchMode = MatchMode.TOLERANCE
    check_simple: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.match_mode, MatchMode):
            raise ConfigurationError(
                f"match_mode must be a MatchMode, got {self.match_mode!r}"
            )
        if (
            isinstance(self.epsilon, bool)
            or not isinstance(self.epsilon, (int, float))
            or not math.isfinite(self.epsilon)
            or self.epsilon < 0
        ):
            raise ConfigurationError(
                f"epsilon must be a finite non-negative number, got {self.epsilon!r}"
            )
        if isinstance(self.area_precision, bool) or not isinstance(self.area_precision, int):
            raise ConfigurationError(
                f"area_precision must be an int, got {self.area_precision!r}"
            )
        if self.area_precision < 0:
            raise ConfigurationError(
                f"area_precision must be non-negative, got {self.area_precision}"
            )


def resolve_config(config: Optional[CutConfig]) -> CutConfig:
    """Return ``config`` or the default settings when it is ``None``."""
    return config if config is not None else CutConfig()


__all__ = [
    'CutConfig',
    'DEFAULT_EPSILON',
    'DEFAULT_AREA_PRECISION',
    'resolve_config',
]
