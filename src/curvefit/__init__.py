"""CurveFit - Polynomial trend fitting and ceiling extrapolation.

Public API:
    - fit: One-call fit of a dataset
    - FitService: Main fitting service

Configuration:
    - CurveFitConfig: Main configuration object
    - FitConfig, ExtrapolationConfig, OutputConfig: Sub-configurations

Domain Objects:
    - Dataset, Shape: Input data and the candidate shapes
    - OutputBundle: Trend, confidence band and ceiling of a fit
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

# Configuration
from curvefit.core.domain.config import (
    CurveFitConfig,
    ExtrapolationConfig,
    FitConfig,
    OutputConfig,
)

# Domain objects
from curvefit.core.domain.dataset import Dataset, Observation
from curvefit.core.domain.shapes import Shape, shape_for_degree, shape_for_name, shapes

# Algorithms
from curvefit.core.algorithms.polynomial import Polynomial
from curvefit.core.algorithms.solver import solve, solve_polynomial
from curvefit.core.fitting import BestFit, Extrapolation, ShapeFit, extrapolate, fit_best
from curvefit.core.results import CoefficientEstimate, OutputBundle

# Errors
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

# Services (primary API)
from curvefit.services import FitService, fit

__all__ = [
    # Version
    "__version__",
    # Services
    "FitService",
    "fit",
    # Configuration
    "CurveFitConfig",
    "ExtrapolationConfig",
    "FitConfig",
    "OutputConfig",
    # Domain
    "Dataset",
    "Observation",
    "Shape",
    "shape_for_degree",
    "shape_for_name",
    "shapes",
    # Algorithms
    "BestFit",
    "CoefficientEstimate",
    "Extrapolation",
    "OutputBundle",
    "Polynomial",
    "ShapeFit",
    "extrapolate",
    "fit_best",
    "solve",
    "solve_polynomial",
    # Errors
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
