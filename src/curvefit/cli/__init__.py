"""Command-line interface for CurveFit."""

from curvefit.cli.app import app

__all__ = ["app"]
