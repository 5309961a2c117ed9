"""Exception taxonomy for CurveFit.

Every failure raised by the fitting engine derives from ``CurveFitError`` so
callers can catch the whole family at once, or a single condition when they
need to react to it precisely.
"""

from __future__ import annotations


class CurveFitError(Exception):
    """Base class for all CurveFit-specific exceptions."""


class ConfigError(CurveFitError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(CurveFitError):
    """Data loading/saving errors (files, formats, permissions)."""


class SolverError(CurveFitError):
    """Base class for failures of a single polynomial solve.

    The fit orchestrator skips a shape whose solve raises one of these and
    only surfaces the error when no requested shape could be solved.
    """


class InsufficientDataError(SolverError):
    """Fewer observations than coefficients to estimate."""


class DegenerateFitError(SolverError):
    """Singular design matrix, or non-zero residual on constant data."""


class NumericalInstabilityError(SolverError):
    """Design matrix condition number beyond the configured threshold."""


class UnknownShapeError(CurveFitError, ValueError):
    """A shape name that is not part of the model catalog."""


class CeilingUnreachableError(CurveFitError):
    """Extrapolation hit its iteration cap before the trend reached the ceiling."""


__all__ = [
    "CeilingUnreachableError",
    "ConfigError",
    "CurveFitError",
    "DataIOError",
    "DegenerateFitError",
    "InsufficientDataError",
    "NumericalInstabilityError",
    "SolverError",
    "UnknownShapeError",
]
