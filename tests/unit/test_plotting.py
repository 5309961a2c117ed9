"""Headless tests for fit figures."""

import matplotlib.pyplot as plt

from curvefit import fit
from curvefit.plotting import make_fit_figure, save_fit_figure


class TestFitFigure:
    """Tests for make_fit_figure."""

    def test_default_title(self, usage_pairs):
        bundle = fit(usage_pairs, shape_selection=["Linear"])
        fig = make_fit_figure(bundle)
        try:
            assert fig.axes[0].get_title().startswith("Linear")
            labels = [line.get_label() for line in fig.axes[0].get_lines()]
            assert labels == ["Data", "Trend"]
        finally:
            plt.close(fig)

    def test_ceiling_line(self, usage_pairs):
        bundle = fit(usage_pairs, shape_selection=["Linear"], ceiling=10000)
        fig = make_fit_figure(bundle, title="Usage")
        try:
            assert fig.axes[0].get_title() == "Usage"
            labels = [line.get_label() for line in fig.axes[0].get_lines()]
            assert "Ceiling" in labels
        finally:
            plt.close(fig)

    def test_save(self, usage_pairs, tmp_path):
        bundle = fit(usage_pairs)
        path = tmp_path / "fit.png"
        save_fit_figure(bundle, path)
        assert path.exists()
