"""Tests for datasets and coefficient estimates."""

import math

import pytest

from curvefit.core.domain.dataset import Dataset, Observation
from curvefit.core.results.estimates import CoefficientEstimate
from curvefit.core.results.statistics import ResidualStatistics, compute_degrees_of_freedom
from curvefit.core.shared.exceptions import InsufficientDataError


class TestDataset:
    """Tests for Dataset construction."""

    def test_from_values(self):
        dataset = Dataset.from_values([1, 2, 3])
        assert len(dataset) == 3
        assert dataset.observations[1] == Observation(1, 2.0)
        assert list(dataset.indices) == [0.0, 1.0, 2.0]

    def test_from_pairs_ignores_x_for_fitting(self):
        dataset = Dataset.from_pairs([(100, 1.0), (250, 2.0)])
        assert list(dataset.indices) == [0.0, 1.0]
        assert dataset.data == [[100, 1.0], [250, 2.0]]

    def test_too_few_observations(self):
        with pytest.raises(InsufficientDataError):
            Dataset.from_values([])

    def test_non_contiguous_indices(self):
        with pytest.raises(ValueError, match="contiguous"):
            Dataset((Observation(0, 1.0), Observation(2, 2.0)))

    def test_non_finite_value(self):
        with pytest.raises(ValueError, match="non-finite"):
            Dataset.from_values([1.0, math.nan])

    def test_is_immutable(self):
        dataset = Dataset.from_values([1.0, 2.0])
        with pytest.raises(AttributeError):
            dataset.observations = ()  # type: ignore[misc]


class TestCoefficientEstimate:
    """Tests for CoefficientEstimate validation."""

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            CoefficientEstimate((1.0, 2.0), (0.1,))

    def test_negative_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            CoefficientEstimate((1.0,), (-0.1,))

    def test_trend(self):
        estimate = CoefficientEstimate((1.0, 2.0), (0.1, 0.2))
        assert estimate.trend(3.0) == pytest.approx(7.0)
        assert estimate.degree == 1
        assert not estimate.is_exact
        assert estimate.to_dict() == {"coefficients": [1.0, 2.0], "standard_errors": [0.1, 0.2]}


class TestResidualStatistics:
    """Tests for ResidualStatistics."""

    def test_degrees_of_freedom_not_clamped(self):
        assert compute_degrees_of_freedom(3, 4) == -1

    def test_zero_dof_has_zero_variance(self):
        stats = ResidualStatistics(n_points=3, n_params=3, rss=0.0, tss=4.0, wssr=0.0)
        assert stats.dof == 0
        assert stats.residual_variance == 0.0

    def test_rms(self):
        stats = ResidualStatistics(n_points=4, n_params=2, rss=16.0, tss=100.0, wssr=8.0)
        assert stats.rms == pytest.approx(2.0)
        assert stats.residual_variance == pytest.approx(4.0)
