"""Figures for fitted curves.

All functions return matplotlib Figure objects for flexible usage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from pathlib import Path

    from matplotlib.figure import Figure

    from curvefit.core.results.bundle import OutputBundle


def make_fit_figure(bundle: OutputBundle, title: str | None = None) -> Figure:
    """Create a plot of the data, trend, confidence band and ceiling.

    Observations are drawn at their index, the same x used for the trend.

    Args:
        bundle: Fit result to plot
        title: Optional title (default: shape name and R²)

    Returns:
        Matplotlib Figure object
    """
    n_points = len(bundle.trend)
    xs = list(range(n_points))
    observed = [float(point[1]) for point in bundle.data]

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(range(len(observed)), observed, ".", markersize=8, label="Data")
    ax.plot(xs, [y for _, y in bundle.trend], "-", color="C1", label="Trend")
    ax.fill_between(
        xs,
        [y for _, y in bundle.bottom_confidence],
        [y for _, y in bundle.top_confidence],
        color="C1",
        alpha=0.2,
        label="Confidence",
    )
    if bundle.ceiling:
        ax.plot(xs, [y for _, y in bundle.ceiling], "--", color="gray", alpha=0.7, label="Ceiling")

    ax.set_title(
        title or f"{bundle.guess} (R² = {bundle.r_squared:.4f})",
        fontsize=12,
        fontweight="bold",
    )
    ax.set_xlabel("Index", fontsize=11)
    ax.set_ylabel("Value", fontsize=11)
    ax.grid(True, alpha=0.3)
    ax.legend()
    plt.tight_layout()
    return fig


def save_fit_figure(bundle: OutputBundle, path: Path) -> None:
    """Render the fit figure to an image file."""
    fig = make_fit_figure(bundle)
    try:
        fig.savefig(path, dpi=150)
    finally:
        plt.close(fig)


__all__ = ["make_fit_figure", "save_fit_figure"]
