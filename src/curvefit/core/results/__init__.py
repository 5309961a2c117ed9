"""Result models: coefficient estimates, fit statistics and the output bundle."""

from curvefit.core.results.bundle import OutputBundle
from curvefit.core.results.estimates import CoefficientEstimate
from curvefit.core.results.statistics import (
    ResidualStatistics,
    compute_degrees_of_freedom,
    compute_r_squared,
    compute_rss,
    compute_tss,
)

__all__ = [
    "CoefficientEstimate",
    "OutputBundle",
    "ResidualStatistics",
    "compute_degrees_of_freedom",
    "compute_r_squared",
    "compute_rss",
    "compute_tss",
]
