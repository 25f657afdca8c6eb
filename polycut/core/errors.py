"""Exception and warning classes raised by polycut."""


class PolycutError(Exception):
    """Base class for all polycut errors."""


class ValidationError(PolycutError, ValueError):
    """Input could not be interpreted as a polygon or a cutting line."""


class ConfigurationError(PolycutError, ValueError):
    """A :class:`~polycut.core.config.CutConfig` value is out of range."""


class PreconditionWarning(UserWarning):
    """Input violates an assumption of the cutting algorithm.

    The computation still runs but its result is best-effort, e.g. when the
    polygon is self-intersecting.
    """


__all__ = [
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
    'PreconditionWarning',
]
