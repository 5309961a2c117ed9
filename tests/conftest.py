"""Pytest fixtures for CurveFit tests."""

import pytest

import numpy as np

from curvefit.core.domain.dataset import Dataset


@pytest.fixture
def usage_pairs():
    """Six days of roughly linear growth."""
    return [(0, 1000.0), (1, 2003.0), (2, 3010.0), (3, 4084.0), (4, 5012.0), (5, 6075.0)]


@pytest.fixture
def usage_dataset(usage_pairs):
    """Usage pairs as a Dataset."""
    return Dataset.from_pairs(usage_pairs)


@pytest.fixture
def linear_dataset():
    """Exact line y = 3 + 2x."""
    return Dataset.from_values([3.0, 5.0, 7.0, 9.0, 11.0])


@pytest.fixture
def quadratic_dataset():
    """Exact parabola y = 1 + x + x^2 on x = 0..5."""
    return Dataset.from_values([1.0 + x + x**2 for x in range(6)])


@pytest.fixture
def noisy_quadratic_dataset():
    """Quadratic trend with Gaussian noise."""
    x = np.arange(30, dtype=float)
    rng = np.random.default_rng(42)
    y = 500.0 + 20.0 * x + 3.0 * x**2 + rng.normal(0, 15, x.size)
    return Dataset.from_values(y)


@pytest.fixture
def usage_file(tmp_path, usage_pairs):
    """Usage pairs written as an x+y file."""
    path = tmp_path / "usage.xy"
    path.write_text("".join(f"{x} {y}\n" for x, y in usage_pairs))
    return path


@pytest.fixture
def tiny_scale_dataset():
    """Poorly linear data around 1e-10."""
    return Dataset.from_values([1e-10, 5e-10, 2e-10, 8e-10, 3e-10, 9e-10, 1e-10])


@pytest.fixture
def offset_noise_dataset():
    """Large constant offset with tiny noise and no trend."""
    rng = np.random.default_rng(42)
    return Dataset.from_values(1000.0 + 1e-7 * rng.normal(size=20))


@pytest.fixture
def tiny_quadratic_dataset():
    """Quadratic trend at the 1e-12 scale with comparable noise."""
    x = np.arange(20, dtype=float)
    rng = np.random.default_rng(42)
    return Dataset.from_values(1e-12 * x**2 + 1e-12 * rng.normal(size=x.size))
