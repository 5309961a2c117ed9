"""Coefficient estimates with one-sigma uncertainties."""

from __future__ import annotations

from dataclasses import dataclass

from curvefit.core.algorithms.polynomial import Polynomial


@dataclass(frozen=True, slots=True)
class CoefficientEstimate:
    """Fitted polynomial coefficients and their standard errors.

    Attributes
    ----------
        coefficients: Power-indexed coefficients, ``coefficients[k]`` multiplies ``x**k``
        standard_errors: One-sigma uncertainty per coefficient (zero for exact fits)
    """

    coefficients: tuple[float, ...]
    standard_errors: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.coefficients) != len(self.standard_errors):
            msg = "coefficients and standard_errors must have the same length"
            raise ValueError(msg)
        if any(error < 0 for error in self.standard_errors):
            msg = "standard errors must be non-negative"
            raise ValueError(msg)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def is_exact(self) -> bool:
        """True when every standard error is zero."""
        return all(error == 0.0 for error in self.standard_errors)

    @property
    def trend(self) -> Polynomial:
        """The fitted polynomial."""
        return Polynomial(self.coefficients)

    def to_dict(self) -> dict[str, list[float]]:
        return {
            "coefficients": list(self.coefficients),
            "standard_errors": list(self.standard_errors),
        }


__all__ = ["CoefficientEstimate"]
