"""Tests for the polynomial least-squares solver."""

import pytest

import numpy as np

from curvefit.core.algorithms.linear_algebra import LinearAlgebraHelper
from curvefit.core.algorithms.solver import (
    compute_sigma,
    exact_threshold,
    solve,
    solve_polynomial,
)
from curvefit.core.domain.dataset import Dataset
from curvefit.core.results.statistics import compute_r_squared, compute_rss, compute_tss
from curvefit.core.shared.exceptions import (
    InsufficientDataError,
    NumericalInstabilityError,
    SolverError,
)


class TestExactFits:
    """Data lying exactly on a polynomial."""

    def test_exact_line(self, linear_dataset):
        """y = 3 + 2x is recovered with R² == 1 and zero errors."""
        estimate, r_squared = solve(linear_dataset, 1)
        assert estimate.coefficients == pytest.approx((3.0, 2.0))
        assert r_squared == 1.0
        assert estimate.standard_errors == (0.0, 0.0)
        assert estimate.is_exact

    def test_higher_degree_on_exact_line(self, linear_dataset):
        """Extra coefficients of an exact line fit are (numerically) zero."""
        estimate, r_squared = solve(linear_dataset, 3)
        assert r_squared == 1.0
        assert estimate.coefficients[0] == pytest.approx(3.0)
        assert estimate.coefficients[1] == pytest.approx(2.0)
        assert estimate.coefficients[2] == pytest.approx(0.0, abs=1e-8)
        assert estimate.coefficients[3] == pytest.approx(0.0, abs=1e-8)

    def test_interpolating_fit_is_exact(self):
        """n == degree + 1 leaves no residual degrees of freedom."""
        dataset = Dataset.from_values([1.0, 4.0, 2.0])
        estimate, r_squared = solve(dataset, 2)
        assert r_squared == 1.0
        assert estimate.is_exact

    def test_constant_data(self):
        """Constant data is reproduced exactly by a flat line."""
        dataset = Dataset.from_values([5.0, 5.0, 5.0, 5.0])
        estimate, r_squared = solve(dataset, 1)
        assert r_squared == 1.0
        assert estimate.coefficients == pytest.approx((5.0, 0.0), abs=1e-9)


class TestWorkedExample:
    """The six-day usage example."""

    def test_linear_intercept_and_r_squared(self, usage_dataset):
        estimate, r_squared = solve(usage_dataset, 1)
        assert estimate.coefficients[0] == pytest.approx(997.27, abs=0.5)
        assert r_squared == pytest.approx(0.9998, abs=1e-4)

    def test_sqrt_weighting_matches_weighted_polyfit(self, usage_dataset):
        """Default weighting uses sigma = sqrt(y)."""
        x = usage_dataset.indices
        y = usage_dataset.values
        expected = np.polyfit(x, y, 1, w=1.0 / np.sqrt(y))[::-1]
        estimate, _ = solve(usage_dataset, 1)
        np.testing.assert_allclose(estimate.coefficients, expected, rtol=1e-9)

    def test_no_weighting_is_ordinary_least_squares(self, usage_dataset):
        x = usage_dataset.indices
        y = usage_dataset.values
        expected = np.polyfit(x, y, 1)[::-1]
        estimate, _ = solve(usage_dataset, 1, weighting="none")
        np.testing.assert_allclose(estimate.coefficients, expected, rtol=1e-9)


class TestStatistics:
    """Standard errors and R² bookkeeping."""

    @pytest.mark.parametrize(
        ("dataset_name", "degree"),
        [
            ("noisy_quadratic_dataset", 2),
            ("tiny_scale_dataset", 1),
            ("offset_noise_dataset", 1),
            ("tiny_quadratic_dataset", 2),
        ],
    )
    def test_r_squared_recomputes_from_coefficients(self, request, dataset_name, degree):
        """R² is 1 - RSS/TSS on the unweighted residuals, whatever the scale of y."""
        dataset = request.getfixturevalue(dataset_name)
        solution = solve_polynomial(dataset, degree)
        trend = solution.estimate.trend
        residuals = dataset.values - trend(dataset.indices)
        expected = compute_r_squared(compute_rss(residuals), compute_tss(dataset.values))
        assert solution.r_squared == pytest.approx(expected, abs=1e-4)
        assert solution.r_squared < 1.0
        assert not solution.estimate.is_exact

    def test_tiny_scale_is_not_exact(self, tiny_scale_dataset):
        """A poor fit on small numbers keeps its real R² and non-zero errors."""
        estimate, r_squared = solve(tiny_scale_dataset, 1)
        assert r_squared == pytest.approx(0.0446, abs=1e-3)
        assert all(error > 0 for error in estimate.standard_errors)

    def test_offset_noise_is_not_exact(self, offset_noise_dataset):
        """Tiny scatter around a large offset is noise, not an exact fit."""
        estimate, r_squared = solve(offset_noise_dataset, 1)
        assert r_squared < 0.5
        assert all(error > 0 for error in estimate.standard_errors)

    def test_exact_threshold_scales_with_tss(self):
        values = np.array([1e-10, 2e-10, 4e-10])
        tss = compute_tss(values)
        assert exact_threshold(values, tss, 1e-9) == pytest.approx(1e-18 * tss)

    def test_exact_threshold_floor_for_constant_data(self):
        values = np.full(4, 5.0)
        assert exact_threshold(values, 0.0, 1e-9) > 0.0

    def test_unweighted_standard_errors(self, noisy_quadratic_dataset):
        """Errors follow sigma² (XᵀX)⁻¹ for an unweighted fit."""
        x = noisy_quadratic_dataset.indices
        y = noisy_quadratic_dataset.values
        design = np.vander(x, 3, increasing=True)
        beta, *_ = np.linalg.lstsq(design, y, rcond=None)
        residuals = y - design @ beta
        sigma2 = residuals @ residuals / (len(y) - 3)
        expected = np.sqrt(np.diag(sigma2 * np.linalg.inv(design.T @ design)))

        estimate, _ = solve(noisy_quadratic_dataset, 2, weighting="none")
        np.testing.assert_allclose(estimate.coefficients, beta, rtol=1e-8)
        np.testing.assert_allclose(estimate.standard_errors, expected, rtol=1e-6)

    def test_standard_errors_positive_for_noisy_data(self, noisy_quadratic_dataset):
        estimate, r_squared = solve(noisy_quadratic_dataset, 2)
        assert all(error > 0 for error in estimate.standard_errors)
        assert 0.99 < r_squared < 1.0

    def test_statistics_summary(self, noisy_quadratic_dataset):
        solution = solve_polynomial(noisy_quadratic_dataset, 2)
        stats = solution.statistics
        assert stats.n_points == 30
        assert stats.n_params == 3
        assert stats.dof == 27
        assert stats.residual_variance == pytest.approx(stats.wssr / 27)
        assert solution.degree == 2


class TestFailures:
    """Inputs the solver must reject."""

    def test_too_few_points(self):
        dataset = Dataset.from_values([1.0, 2.0])
        with pytest.raises(InsufficientDataError):
            solve(dataset, 2)

    def test_insufficient_data_is_solver_error(self):
        assert issubclass(InsufficientDataError, SolverError)

    def test_dataset_needs_two_observations(self):
        with pytest.raises(InsufficientDataError):
            Dataset.from_values([1.0])

    def test_ill_conditioned(self, usage_dataset):
        with pytest.raises(NumericalInstabilityError, match="ill-conditioned"):
            solve(usage_dataset, 2, condition_threshold=1.0)

    @pytest.mark.parametrize("degree", [0, 7])
    def test_degree_out_of_range(self, usage_dataset, degree):
        with pytest.raises(ValueError, match="Degree"):
            solve(usage_dataset, degree)

    def test_degree_six_on_long_series(self):
        """Column scaling keeps high degrees usable on long series."""
        x = np.arange(200, dtype=float)
        dataset = Dataset.from_values(100.0 + 0.5 * x + 1e-3 * x**2)
        _, r_squared = solve(dataset, 6)
        assert r_squared == pytest.approx(1.0, abs=1e-9)


class TestSigma:
    """Tests for point weighting."""

    def test_sqrt_weighting(self):
        values = np.array([0.5, 1.0, 4.0, 100.0])
        np.testing.assert_allclose(compute_sigma(values, "sqrt"), [1.0, 1.0, 2.0, 10.0])

    def test_no_weighting(self):
        np.testing.assert_allclose(compute_sigma(np.array([4.0, 9.0]), "none"), [1.0, 1.0])

    def test_unknown_weighting(self):
        with pytest.raises(ValueError, match="weighting"):
            compute_sigma(np.array([1.0]), "log")  # type: ignore[arg-type]


class TestLinearAlgebraHelper:
    """Tests for the QR helpers."""

    def test_scaled_design_matrix(self):
        design, scale = LinearAlgebraHelper.scaled_design_matrix(np.arange(5.0), 3)
        assert scale == 4.0
        assert design.shape == (5, 3)
        np.testing.assert_allclose(design[-1], [1.0, 1.0, 1.0])

    def test_rank_deficient(self):
        design = np.column_stack([np.ones(4), np.zeros(4)])
        _, r = LinearAlgebraHelper.qr_decomposition(design)
        assert LinearAlgebraHelper.is_rank_deficient(r)

    def test_unscaled_covariance(self):
        design = np.vander(np.arange(6.0), 2, increasing=True)
        _, r = LinearAlgebraHelper.qr_decomposition(design)
        np.testing.assert_allclose(
            LinearAlgebraHelper.unscaled_covariance(r), np.linalg.inv(design.T @ design)
        )
