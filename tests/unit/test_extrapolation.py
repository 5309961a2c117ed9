"""Tests for trend extrapolation."""

from datetime import date, timedelta

import pytest

from curvefit.core.domain.dataset import Dataset
from curvefit.core.fitting.extrapolation import extrapolate
from curvefit.core.fitting.orchestrator import fit_best
from curvefit.core.shared.exceptions import CeilingUnreachableError, ConfigError


@pytest.fixture
def usage_linear(usage_dataset):
    best, _ = fit_best(usage_dataset, ["Linear"])
    return best


class TestWithoutCeiling:
    """Sampling over the original observations."""

    def test_one_point_per_observation(self, usage_linear):
        result = extrapolate(usage_linear, 6)
        assert len(result) == 6
        assert [x for x, _ in result.trend] == [0, 1, 2, 3, 4, 5]
        assert result.ceiling == []

    def test_sequences_are_aligned(self, usage_linear):
        result = extrapolate(usage_linear, 6)
        assert len(result.top_confidence) == len(result.bottom_confidence) == 6
        for (_, y), (_, top), (_, bottom) in zip(
            result.trend, result.top_confidence, result.bottom_confidence, strict=True
        ):
            assert bottom <= y <= top

    def test_values_follow_trend(self, usage_linear):
        result = extrapolate(usage_linear, 6)
        assert result.trend[3][1] == pytest.approx(usage_linear.trend(3.0))


class TestWithCeiling:
    """Extrapolating up to a ceiling."""

    def test_runs_until_ceiling_reached(self, usage_linear):
        result = extrapolate(usage_linear, 6, ceiling=10000)
        values = [y for _, y in result.trend]
        assert len(values) > 6
        assert values[-1] >= 10000
        assert all(y < 10000 for y in values[:-1])

    def test_ceiling_is_constant(self, usage_linear):
        result = extrapolate(usage_linear, 6, ceiling=10000)
        assert len(result.ceiling) == len(result.trend)
        assert {y for _, y in result.ceiling} == {10000.0}

    def test_ceiling_below_first_value_emits_one_point(self, usage_linear):
        result = extrapolate(usage_linear, 6, ceiling=0)
        assert len(result) == 1
        assert result.ceiling == [(0, 0.0)]

    def test_unreachable_ceiling(self):
        dataset = Dataset.from_values([10.0, 8.0, 6.0, 4.0])
        best, _ = fit_best(dataset, ["Linear"])
        with pytest.raises(CeilingUnreachableError, match="50 points"):
            extrapolate(best, len(dataset), ceiling=100, max_iterations=50)


class TestCoordinateTransform:
    """Mapping the integer x to caller coordinates."""

    def test_arithmetic_progression(self, usage_linear):
        result = extrapolate(
            usage_linear, 6, ceiling=10000, coordinate_transform=lambda k: 1000 + 60 * k
        )
        for sequence in (
            result.trend,
            result.top_confidence,
            result.bottom_confidence,
            result.ceiling,
        ):
            assert [x for x, _ in sequence] == [1000 + 60 * k for k in range(len(sequence))]

    def test_dates(self, usage_linear):
        start = date(2024, 1, 1)
        result = extrapolate(
            usage_linear, 6, coordinate_transform=lambda k: start + timedelta(days=k)
        )
        assert result.trend[0][0] == start
        assert result.trend[-1][0] == date(2024, 1, 6)

    def test_values_use_integer_x(self, usage_linear):
        result = extrapolate(usage_linear, 6, coordinate_transform=lambda k: 100 * k)
        assert result.trend[2][1] == pytest.approx(usage_linear.trend(2.0))


class TestExtraPoints:
    """Evaluating the trend at extra x values."""

    def test_extra_points(self, usage_linear):
        result = extrapolate(usage_linear, 6, extra_x_values=[10, 12.5])
        assert [x for x, _ in result.extra_points] == [10, 12.5]
        assert result.extra_points[1][1] == pytest.approx(usage_linear.trend(12.5))

    def test_non_numeric_extra_point(self, usage_linear):
        with pytest.raises(ConfigError, match="2024-01-01"):
            extrapolate(usage_linear, 6, extra_x_values=["2024-01-01"])

    def test_extra_points_are_not_transformed(self, usage_linear):
        result = extrapolate(
            usage_linear, 6, coordinate_transform=lambda k: -k, extra_x_values=[7]
        )
        assert result.extra_points[0][0] == 7


class TestValidation:
    def test_zero_length(self, usage_linear):
        with pytest.raises(ValueError, match="dataset_length"):
            extrapolate(usage_linear, 0)

    def test_zero_iterations(self, usage_linear):
        with pytest.raises(ValueError, match="max_iterations"):
            extrapolate(usage_linear, 6, ceiling=10, max_iterations=0)
