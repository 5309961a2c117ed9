"""Fit service orchestrating the fitting engine."""

from curvefit.services.fit.service import FitService, as_dataset, fit

__all__ = ["FitService", "as_dataset", "fit"]
