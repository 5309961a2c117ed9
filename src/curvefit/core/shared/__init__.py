"""Shared building blocks: exceptions, reporting, typing aliases."""

from curvefit.core.shared.exceptions import (
    CeilingUnreachableError,
    ConfigError,
    CurveFitError,
    DataIOError,
    DegenerateFitError,
    InsufficientDataError,
    NumericalInstabilityError,
    SolverError,
    UnknownShapeError,
)
from curvefit.core.shared.reporter import (
    CompositeReporter,
    LoggingReporter,
    NullReporter,
    Reporter,
)

__all__ = [
    "CeilingUnreachableError",
    "CompositeReporter",
    "ConfigError",
    "CurveFitError",
    "DataIOError",
    "DegenerateFitError",
    "InsufficientDataError",
    "LoggingReporter",
    "NullReporter",
    "NumericalInstabilityError",
    "Reporter",
    "SolverError",
    "UnknownShapeError",
]
