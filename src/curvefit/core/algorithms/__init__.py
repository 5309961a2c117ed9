"""Numerical routines: polynomial evaluation and least-squares linear algebra.

The solver lives in ``curvefit.core.algorithms.solver``.
"""

from curvefit.core.algorithms.linear_algebra import LinearAlgebraHelper
from curvefit.core.algorithms.polynomial import Polynomial

__all__ = ["LinearAlgebraHelper", "Polynomial"]
