"""Fit every candidate shape and select the best one by R².

For each shape the orchestrator builds three polynomials:

    trend   sum_k c[k] * x**k
    top     sum_k (c[k] + se[k]) * x**k
    bottom  sum_k (c[k] - se[k]) * x**k

The band perturbs each coefficient independently by one standard error.
It is an envelope, not a joint confidence region. Exact fits (R² == 1)
get no band: top and bottom equal the trend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from curvefit.core.algorithms.solver import (
    DEFAULT_CONDITION_THRESHOLD,
    DEFAULT_EXACT_TOLERANCE,
    DEFAULT_WEIGHTING,
    PolynomialSolution,
    Weighting,
    solve_polynomial,
)
from curvefit.core.domain.shapes import Shape, shapes
from curvefit.core.shared.exceptions import ConfigError, SolverError
from curvefit.core.shared.reporter import NullReporter, Reporter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from curvefit.core.algorithms.polynomial import Polynomial
    from curvefit.core.domain.dataset import Dataset
    from curvefit.core.results.estimates import CoefficientEstimate


@dataclass(frozen=True, slots=True)
class ShapeFit:
    """Fit of a single shape with its trend and confidence polynomials."""

    shape: Shape
    solution: PolynomialSolution
    trend: Polynomial
    top_confidence: Polynomial
    bottom_confidence: Polynomial

    @classmethod
    def from_solution(cls, shape: Shape, solution: PolynomialSolution) -> ShapeFit:
        estimate = solution.estimate
        trend = estimate.trend
        if solution.r_squared == 1.0:
            return cls(shape, solution, trend, trend, trend)
        return cls(
            shape=shape,
            solution=solution,
            trend=trend,
            top_confidence=trend.shifted(estimate.standard_errors, sign=1.0),
            bottom_confidence=trend.shifted(estimate.standard_errors, sign=-1.0),
        )

    @property
    def name(self) -> str:
        return self.shape.value

    @property
    def r_squared(self) -> float:
        return self.solution.r_squared

    @property
    def estimate(self) -> CoefficientEstimate:
        return self.solution.estimate

    @property
    def rss(self) -> float:
        return self.solution.statistics.rss

    @property
    def tss(self) -> float:
        return self.solution.statistics.tss

    @property
    def dof(self) -> int:
        return self.solution.statistics.dof

    @property
    def residual_variance(self) -> float:
        return self.solution.statistics.residual_variance

    @property
    def condition_number(self) -> float:
        return self.solution.condition_number

    @property
    def has_band(self) -> bool:
        return self.top_confidence != self.bottom_confidence

    def summary(self) -> dict[str, object]:
        return {
            "shape": self.name,
            "degree": self.shape.degree,
            "r_squared": self.r_squared,
            "formula": self.trend.format(),
            **self.estimate.to_dict(),
            **self.solution.statistics.to_dict(),
            "condition_number": self.condition_number,
        }


# The winning shape fit; same structure, kept as a name for readability
BestFit = ShapeFit


def select_best(fits: Iterable[ShapeFit]) -> ShapeFit:
    """Return the fit with the strictly greatest R², first one on ties."""
    best: ShapeFit | None = None
    for fit in fits:
        if best is None or fit.r_squared > best.r_squared:
            best = fit
    if best is None:
        msg = "No fits to select from"
        raise ValueError(msg)
    return best


def fit_best(
    dataset: Dataset,
    shape_selection: Iterable[str | Shape] | None = None,
    *,
    weighting: Weighting = DEFAULT_WEIGHTING,
    condition_threshold: float = DEFAULT_CONDITION_THRESHOLD,
    exact_tolerance: float = DEFAULT_EXACT_TOLERANCE,
    reporter: Reporter | None = None,
) -> tuple[BestFit, dict[Shape, ShapeFit]]:
    """Fit each selected shape and pick the best by R².

    Args:
        dataset: Observations to fit
        shape_selection: Shape names to consider (default: whole catalog).
            Shapes are always tried in catalog order.
        weighting: Point weighting passed to the solver
        condition_threshold: Solver condition number threshold
        exact_tolerance: Solver exact-fit tolerance
        reporter: Receives per-shape progress messages

    Returns
    -------
        Tuple of (best fit, fits of every solvable shape keyed by shape)

    Raises
    ------
        UnknownShapeError: If the selection names an unknown shape
        ConfigError: If the selection is empty
        SolverError: The last solver failure, when no shape could be solved
    """
    reporter = reporter or NullReporter()
    candidates = shapes(shape_selection)
    if not candidates:
        msg = "At least one shape must be selected"
        raise ConfigError(msg)

    fits: dict[Shape, ShapeFit] = {}
    last_error: SolverError | None = None

    for shape in candidates:
        reporter.action(f"Guessing {shape.value} fit...")
        try:
            solution = solve_polynomial(
                dataset,
                shape.degree,
                weighting=weighting,
                condition_threshold=condition_threshold,
                exact_tolerance=exact_tolerance,
            )
        except SolverError as exc:
            reporter.warning(f"Skipping {shape.value}: {exc}")
            last_error = exc
            continue

        fit = ShapeFit.from_solution(shape, solution)
        reporter.info(f"{shape.value}: R² = {fit.r_squared:.6f} ({fit.trend.format()})")
        fits[shape] = fit

    if not fits and last_error is not None:
        raise last_error

    best = select_best(fits.values())
    reporter.success(f"Best fit: {best.name} (R² = {best.r_squared:.6f})")
    return best, fits


__all__ = ["BestFit", "ShapeFit", "fit_best", "select_best"]
