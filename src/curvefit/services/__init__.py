"""Application service layer for CurveFit workflows.

This module provides high-level service facades that the CLI and other
adapters can use without knowing core implementation details.
"""

from curvefit.services.fit import FitService, as_dataset, fit

__all__ = ["FitService", "as_dataset", "fit"]
