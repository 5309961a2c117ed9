"""Polynomial least-squares solver.

Given a dataset and a degree, computes the least-squares coefficients on
the design matrix ``x**0 .. x**degree`` (x being the observation index),
the coefficient standard errors from the residual variance, and R².

Conventions:
    - Points are weighted by ``1/sigma``. With ``weighting="sqrt"`` (the
      default) sigma is ``sqrt(y)`` for y > 1 and 1 otherwise, the usual
      counting-statistics assumption; ``weighting="none"`` is plain OLS.
    - R² is always ``1 - RSS/TSS`` on unweighted residuals, so it can be
      recomputed from the coefficients and the data alone.
    - A fit is exact when ``RSS <= exact_tolerance**2 * TSS``, i.e. the
      residual is negligible next to the variation of the data. R² is then
      exactly 1 and every standard error is zero. Residuals at the level of
      floating-point round-off (relative to ``max|y|``) also count as exact,
      which covers constant data.
    - A fit with zero residual degrees of freedom (n == degree + 1)
      interpolates the data and is reported the same way.
    - Constant data (TSS == 0) gives R² = 1 when the fit is exact and is
      degenerate otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

import numpy as np

from curvefit.core.algorithms.linear_algebra import LinearAlgebraHelper
from curvefit.core.results.estimates import CoefficientEstimate
from curvefit.core.results.statistics import (
    ResidualStatistics,
    compute_r_squared,
    compute_rss,
    compute_tss,
)
from curvefit.core.shared.exceptions import (
    DegenerateFitError,
    InsufficientDataError,
    NumericalInstabilityError,
)

if TYPE_CHECKING:
    from curvefit.core.domain.dataset import Dataset
    from curvefit.core.shared.typing import FloatArray

Weighting = Literal["sqrt", "none"]

MIN_DEGREE = 1
MAX_DEGREE = 6
DEFAULT_CONDITION_THRESHOLD = 1e10
DEFAULT_EXACT_TOLERANCE = 1e-9
DEFAULT_WEIGHTING: Weighting = "sqrt"
ROUNDOFF_ULPS = 1000


@dataclass(frozen=True, slots=True)
class PolynomialSolution:
    """Complete output of a single polynomial solve."""

    estimate: CoefficientEstimate
    r_squared: float
    statistics: ResidualStatistics
    condition_number: float

    @property
    def degree(self) -> int:
        return self.estimate.degree


def compute_sigma(values: FloatArray, weighting: Weighting) -> FloatArray:
    """Return the per-point standard deviation used to weight the fit."""
    if weighting == "none":
        return np.ones_like(values, dtype=float)
    if weighting == "sqrt":
        return np.where(values > 1.0, np.sqrt(np.maximum(values, 1.0)), 1.0)
    msg = f"Unknown weighting '{weighting}'"
    raise ValueError(msg)


def exact_threshold(values: FloatArray, tss: float, exact_tolerance: float) -> float:
    """Largest RSS for which a fit counts as exact.

    The threshold scales with TSS, so it does not depend on the units of y.
    A round-off floor of ``ROUNDOFF_ULPS`` units in the last place of
    ``max|y|`` per point keeps exactly reproducible data (constant data
    included) exact.
    """
    roundoff = ROUNDOFF_ULPS * np.finfo(float).eps * float(np.max(np.abs(values)))
    return max(exact_tolerance**2 * tss, values.size * roundoff**2)


def _check_inputs(n_points: int, degree: int) -> None:
    if not MIN_DEGREE <= degree <= MAX_DEGREE:
        msg = f"Degree must be between {MIN_DEGREE} and {MAX_DEGREE}, got {degree}"
        raise ValueError(msg)
    if n_points < degree + 1:
        msg = f"Degree {degree} needs at least {degree + 1} observations, got {n_points}"
        raise InsufficientDataError(msg)


def solve_polynomial(
    dataset: Dataset,
    degree: int,
    *,
    weighting: Weighting = DEFAULT_WEIGHTING,
    condition_threshold: float = DEFAULT_CONDITION_THRESHOLD,
    exact_tolerance: float = DEFAULT_EXACT_TOLERANCE,
) -> PolynomialSolution:
    """Fit a polynomial of the given degree to the dataset.

    Args:
        dataset: Observations to fit
        degree: Polynomial degree (1-6)
        weighting: Point weighting scheme, "sqrt" or "none"
        condition_threshold: Largest accepted condition number of the
            weighted, column-scaled design matrix
        exact_tolerance: Residual norm, relative to the spread of the data
            around its mean, below which the fit is exact

    Returns
    -------
        PolynomialSolution with coefficients, standard errors, R² and
        residual statistics

    Raises
    ------
        InsufficientDataError: If there are fewer than degree + 1 observations
        NumericalInstabilityError: If the design matrix is too ill-conditioned
        DegenerateFitError: If the design matrix is singular, or the data is
            constant but cannot be reproduced exactly
    """
    n_points = len(dataset)
    _check_inputs(n_points, degree)
    n_coefficients = degree + 1

    x = dataset.indices
    y = dataset.values
    weights = 1.0 / compute_sigma(y, weighting)

    design, scale = LinearAlgebraHelper.scaled_design_matrix(x, n_coefficients)
    weighted_design = design * weights[:, np.newaxis]

    condition_number = LinearAlgebraHelper.condition_number(weighted_design)
    if not np.isfinite(condition_number) or condition_number > condition_threshold:
        msg = (
            f"Design matrix for degree {degree} is ill-conditioned "
            f"(condition number {condition_number:.3g} > {condition_threshold:.3g})"
        )
        raise NumericalInstabilityError(msg)

    q, r = LinearAlgebraHelper.qr_decomposition(weighted_design)
    if LinearAlgebraHelper.is_rank_deficient(r):
        msg = f"Design matrix for degree {degree} is singular"
        raise DegenerateFitError(msg)

    scaled_coefficients = LinearAlgebraHelper.solve_coefficients(q, r, y * weights)
    residuals = y - design @ scaled_coefficients
    statistics = ResidualStatistics(
        n_points=n_points,
        n_params=n_coefficients,
        rss=compute_rss(residuals),
        tss=compute_tss(y),
        wssr=compute_rss(residuals * weights),
    )

    # Column k of the design matrix was divided by scale**k
    powers = scale ** np.arange(n_coefficients, dtype=float)
    coefficients = scaled_coefficients / powers

    exact = statistics.dof == 0 or statistics.rss <= exact_threshold(
        y, statistics.tss, exact_tolerance
    )

    if statistics.tss == 0.0 and not exact:
        msg = f"Constant data left a non-zero residual for degree {degree}"
        raise DegenerateFitError(msg)

    if exact:
        r_squared = 1.0
        standard_errors = np.zeros(n_coefficients)
    else:
        r_squared = compute_r_squared(statistics.rss, statistics.tss)
        covariance = statistics.residual_variance * LinearAlgebraHelper.unscaled_covariance(r)
        standard_errors = np.sqrt(np.clip(np.diag(covariance), 0.0, None)) / powers

    estimate = CoefficientEstimate(
        coefficients=tuple(float(c) for c in coefficients),
        standard_errors=tuple(float(e) for e in standard_errors),
    )
    return PolynomialSolution(
        estimate=estimate,
        r_squared=float(r_squared),
        statistics=statistics,
        condition_number=condition_number,
    )


def solve(
    dataset: Dataset,
    degree: int,
    *,
    weighting: Weighting = DEFAULT_WEIGHTING,
    condition_threshold: float = DEFAULT_CONDITION_THRESHOLD,
    exact_tolerance: float = DEFAULT_EXACT_TOLERANCE,
) -> tuple[CoefficientEstimate, float]:
    """Fit a polynomial and return only ``(estimate, r_squared)``.

    See ``solve_polynomial`` for the arguments and failure conditions.
    """
    solution = solve_polynomial(
        dataset,
        degree,
        weighting=weighting,
        condition_threshold=condition_threshold,
        exact_tolerance=exact_tolerance,
    )
    return solution.estimate, solution.r_squared


__all__ = [
    "DEFAULT_CONDITION_THRESHOLD",
    "DEFAULT_EXACT_TOLERANCE",
    "DEFAULT_WEIGHTING",
    "MAX_DEGREE",
    "MIN_DEGREE",
    "PolynomialSolution",
    "ROUNDOFF_ULPS",
    "Weighting",
    "compute_sigma",
    "exact_threshold",
    "solve",
    "solve_polynomial",
]
