"""Plotting module for CurveFit."""

from curvefit.plotting.figures import make_fit_figure, save_fit_figure

__all__ = ["make_fit_figure", "save_fit_figure"]
