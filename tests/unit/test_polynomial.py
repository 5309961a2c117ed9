"""Tests for the polynomial evaluator."""

import pytest

import numpy as np

from curvefit.core.algorithms.polynomial import Polynomial


class TestEvaluation:
    """Tests for Horner evaluation."""

    def test_scalar(self):
        """1 + 2x + 3x^2 at x = 2 is 17."""
        poly = Polynomial((1.0, 2.0, 3.0))
        assert poly(2.0) == pytest.approx(17.0)

    def test_array(self):
        poly = Polynomial((1.0, 2.0, 3.0))
        x = np.array([0.0, 1.0, 2.0])
        np.testing.assert_allclose(poly(x), [1.0, 6.0, 17.0])

    def test_matches_numpy_polyval(self):
        """Horner result should match numpy for a degree-6 polynomial."""
        coefficients = (0.5, -1.0, 2.0, 0.25, -0.1, 0.01, 0.001)
        poly = Polynomial(coefficients)
        x = np.linspace(-3, 3, 13)
        expected = np.polynomial.polynomial.polyval(x, coefficients)
        np.testing.assert_allclose(poly(x), expected)

    def test_degree(self):
        assert Polynomial.from_coefficients([1, 2, 3, 4]).degree == 3


class TestShifted:
    """Tests for coefficient perturbation."""

    def test_shift_up_and_down(self):
        poly = Polynomial((10.0, 2.0))
        top = poly.shifted([1.0, 0.5], sign=1.0)
        bottom = poly.shifted([1.0, 0.5], sign=-1.0)
        assert top.coefficients == (11.0, 2.5)
        assert bottom.coefficients == (9.0, 1.5)

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="offsets"):
            Polynomial((1.0, 2.0)).shifted([1.0])


class TestFormat:
    """Tests for the human-readable formula."""

    def test_format(self):
        assert Polynomial((1.5, 2.0, -3.0)).format() == "1.5 + 2*x + -3*x^2"

    def test_str_uses_format(self):
        poly = Polynomial((1.0, 2.0))
        assert str(poly) == poly.format()
