"""Domain objects: shapes catalog, datasets and configuration."""

from curvefit.core.domain.shapes import (
    CATALOG,
    SHAPE_NAMES,
    Shape,
    shape_for_degree,
    shape_for_name,
    shapes,
)
from curvefit.core.domain.dataset import Dataset, Observation
from curvefit.core.domain.config import (
    CurveFitConfig,
    ExtrapolationConfig,
    FitConfig,
    OutputConfig,
)

__all__ = [
    "CATALOG",
    "SHAPE_NAMES",
    "CurveFitConfig",
    "Dataset",
    "ExtrapolationConfig",
    "FitConfig",
    "Observation",
    "OutputConfig",
    "Shape",
    "shape_for_degree",
    "shape_for_name",
    "shapes",
]
