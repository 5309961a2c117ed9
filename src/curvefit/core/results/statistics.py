"""Goodness-of-fit statistics for polynomial fits.

These helpers are the single source of truth for RSS, TSS, degrees of
freedom and R², shared by the solver and by result re-validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from curvefit.core.shared.typing import FloatArray


def compute_rss(residuals: FloatArray) -> float:
    """Compute the residual sum of squares."""
    return float(np.sum(residuals**2))


def compute_tss(values: FloatArray) -> float:
    """Compute the total sum of squares around the mean."""
    return float(np.sum((values - np.mean(values)) ** 2))


def compute_degrees_of_freedom(n_data: int, n_params: int) -> int:
    """Compute residual degrees of freedom.

    Unlike a reduced chi-squared helper, this is not clamped: zero means
    the data carries no information about the residual variance.
    """
    return n_data - n_params


def compute_r_squared(rss: float, tss: float) -> float:
    """Compute the coefficient of determination ``1 - RSS/TSS``.

    Only meaningful when ``tss > 0``; constant data is handled by the solver.
    """
    return 1.0 - rss / tss


@dataclass(frozen=True, slots=True)
class ResidualStatistics:
    """Residual summary of a single polynomial fit.

    Attributes
    ----------
        n_points: Number of observations
        n_params: Number of fitted coefficients
        rss: Residual sum of squares
        tss: Total sum of squares
        wssr: Weighted residual sum of squares (equals rss for unweighted fits)
    """

    n_points: int
    n_params: int
    rss: float
    tss: float
    wssr: float

    @property
    def dof(self) -> int:
        """Degrees of freedom (n_points - n_params)."""
        return compute_degrees_of_freedom(self.n_points, self.n_params)

    @property
    def residual_variance(self) -> float:
        """Residual variance WSSR/dof, zero when dof <= 0."""
        if self.dof <= 0:
            return 0.0
        return self.wssr / self.dof

    @property
    def rms(self) -> float:
        """Root mean square residual."""
        return float(np.sqrt(self.rss / self.n_points))

    def to_dict(self) -> dict[str, float | int]:
        return {
            "n_points": self.n_points,
            "n_params": self.n_params,
            "dof": self.dof,
            "rss": self.rss,
            "tss": self.tss,
            "wssr": self.wssr,
            "residual_variance": self.residual_variance,
            "rms": self.rms,
        }


__all__ = [
    "ResidualStatistics",
    "compute_degrees_of_freedom",
    "compute_r_squared",
    "compute_rss",
    "compute_tss",
]
