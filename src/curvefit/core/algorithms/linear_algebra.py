"""Linear algebra utilities for polynomial least squares.

Fits are solved on a column-scaled Vandermonde matrix through a reduced QR
decomposition, which keeps degree 4-6 fits well conditioned on long series.
"""

from __future__ import annotations

from typing import cast

import numpy as np
from scipy.linalg import qr, solve_triangular

from curvefit.core.shared.typing import FloatArray


class LinearAlgebraHelper:
    """Helper class for the linear algebra behind the polynomial solver."""

    @staticmethod
    def scaled_design_matrix(x: FloatArray, n_coefficients: int) -> tuple[FloatArray, float]:
        """Build the design matrix with columns ``(x/s)**0 .. (x/s)**degree``.

        Args:
            x: Sample positions
            n_coefficients: Number of columns (degree + 1)

        Returns
        -------
            Tuple of (design matrix, scale s)
        """
        scale = float(np.max(np.abs(x))) if x.size else 1.0
        if scale == 0.0:
            scale = 1.0
        design = np.vander(x / scale, n_coefficients, increasing=True)
        return design, scale

    @staticmethod
    def condition_number(design: FloatArray) -> float:
        """Return the 2-norm condition number of the design matrix."""
        return float(np.linalg.cond(design))

    @staticmethod
    def qr_decomposition(design: FloatArray) -> tuple[FloatArray, FloatArray]:
        """Perform reduced QR decomposition of the design matrix.

        Returns
        -------
            Tuple of (Q, R) with Q of shape (n_points, n_coeffs) and R upper
            triangular of shape (n_coeffs, n_coeffs)
        """
        q, r = qr(design, mode="economic")
        return cast("FloatArray", q), cast("FloatArray", r)

    @staticmethod
    def is_rank_deficient(r: FloatArray) -> bool:
        """Check the R factor for (numerically) zero pivots."""
        diagonal = np.abs(np.diag(r))
        if diagonal.size == 0:
            return True
        tolerance = diagonal.max() * max(r.shape) * np.finfo(float).eps
        return bool(np.any(diagonal <= tolerance))

    @staticmethod
    def solve_coefficients(q: FloatArray, r: FloatArray, values: FloatArray) -> FloatArray:
        """Solve ``R @ beta = Q.T @ y`` for the least-squares coefficients."""
        return cast("FloatArray", solve_triangular(r, q.T @ values, check_finite=False))

    @staticmethod
    def unscaled_covariance(r: FloatArray) -> FloatArray:
        """Return ``(X^T X)^-1`` computed from the R factor as ``R^-1 R^-T``."""
        r_inv = solve_triangular(r, np.eye(r.shape[0]), check_finite=False)
        return cast("FloatArray", r_inv @ r_inv.T)


__all__ = ["LinearAlgebraHelper"]
