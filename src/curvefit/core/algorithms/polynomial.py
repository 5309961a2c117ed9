"""Tagged polynomial evaluator.

Trend and confidence formulas are all polynomials in x, so a single
structure holding the power-indexed coefficients replaces one closure per
shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from curvefit.core.shared.typing import FloatArray


@dataclass(frozen=True, slots=True)
class Polynomial:
    """Polynomial with ``coefficients[k]`` multiplying ``x**k``."""

    coefficients: tuple[float, ...]

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float] | FloatArray) -> Polynomial:
        return cls(tuple(float(c) for c in coefficients))

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @overload
    def __call__(self, x: float) -> float: ...

    @overload
    def __call__(self, x: FloatArray) -> FloatArray: ...

    def __call__(self, x: float | FloatArray) -> float | FloatArray:
        """Evaluate with Horner's method."""
        if isinstance(x, np.ndarray):
            result = np.zeros_like(x, dtype=float)
            xs = x.astype(float)
        else:
            result = 0.0
            xs = float(x)
        for coefficient in reversed(self.coefficients):
            result = result * xs + coefficient
        return result

    def shifted(self, offsets: Sequence[float] | FloatArray, sign: float = 1.0) -> Polynomial:
        """Return the polynomial with each coefficient moved by ``sign * offsets[k]``."""
        if len(offsets) != len(self.coefficients):
            msg = f"Expected {len(self.coefficients)} offsets, got {len(offsets)}"
            raise ValueError(msg)
        return Polynomial(
            tuple(c + sign * float(o) for c, o in zip(self.coefficients, offsets, strict=True))
        )

    def format(self, precision: int = 6) -> str:
        """Human-readable formula, e.g. ``997.27 + 1016.54*x``."""
        terms = []
        for power, coefficient in enumerate(self.coefficients):
            value = f"{coefficient:.{precision}g}"
            if power == 0:
                terms.append(value)
            elif power == 1:
                terms.append(f"{value}*x")
            else:
                terms.append(f"{value}*x^{power}")
        return " + ".join(terms)

    def __str__(self) -> str:
        return self.format()


__all__ = ["Polynomial"]
