"""Shape selection and extrapolation of the winning fit."""

from curvefit.core.fitting.extrapolation import (
    DEFAULT_MAX_ITERATIONS,
    Extrapolation,
    evaluate_extra_points,
    extrapolate,
)
from curvefit.core.fitting.orchestrator import BestFit, ShapeFit, fit_best, select_best

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "BestFit",
    "Extrapolation",
    "ShapeFit",
    "evaluate_extra_points",
    "extrapolate",
    "fit_best",
    "select_best",
]
