"""High-level fitting service facade.

This service provides the primary API for fitting operations.
CLI and other adapters should import only from this module.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from curvefit.core.domain.config import CurveFitConfig
from curvefit.core.domain.dataset import Dataset
from curvefit.core.fitting.extrapolation import extrapolate
from curvefit.core.fitting.orchestrator import fit_best
from curvefit.core.results.bundle import OutputBundle
from curvefit.core.shared.reporter import NullReporter, Reporter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from curvefit.core.shared.typing import CoordinateTransform


def as_dataset(data: Dataset | Sequence[Any]) -> Dataset:
    """Coerce caller data into a Dataset.

    Accepts a Dataset, a sequence of (x, y) pairs, or a sequence of y values.
    """
    if isinstance(data, Dataset):
        return data
    if len(data) and isinstance(data[0], (Sequence, np.ndarray)) and not isinstance(data[0], str):
        return Dataset.from_pairs(data)
    return Dataset.from_values(data)


class FitService:
    """Service for curve fitting and extrapolation.

    Example:
        service = FitService()
        bundle = service.fit([(0, 1000.0), (1, 2003.0), (2, 3010.0)], ceiling=10000)
        print(bundle.guess, bundle.r_squared)
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        """Initialize the fit service.

        Args:
            reporter: Reporter for status messages (default: silent)
        """
        self._reporter = reporter or NullReporter()

    def fit(
        self,
        data: Dataset | Sequence[Any],
        config: CurveFitConfig | None = None,
        *,
        ceiling: float | None = None,
        shape_selection: Iterable[str] | None = None,
        extra_x_values: Iterable[Any] | None = None,
        max_iterations: int | None = None,
        coordinate_transform: CoordinateTransform | None = None,
    ) -> OutputBundle:
        """Fit the best shape to the data and sample it.

        Keyword arguments override the matching configuration values.

        Args:
            data: Dataset, (x, y) pairs, or y values
            config: Fitting configuration (uses defaults if not provided)
            ceiling: Y value to extrapolate the trend up to
            shape_selection: Shape names to consider
            extra_x_values: Extra x values to evaluate the trend at
            max_iterations: Cap on points emitted while seeking the ceiling
            coordinate_transform: Maps each integer x to the emitted coordinate

        Returns
        -------
            OutputBundle with the trend, band, ceiling and fit quality

        Raises
        ------
            CurveFitError: On unknown shapes, unsolvable data or an
                unreachable ceiling
        """
        if config is None:
            config = CurveFitConfig()
        dataset = as_dataset(data)

        selection = (
            list(shape_selection) if shape_selection is not None else config.fitting.shapes
        )
        if ceiling is None:
            ceiling = config.extrapolation.ceiling
        extra = (
            list(extra_x_values)
            if extra_x_values is not None
            else config.extrapolation.extra_x_values
        )
        if max_iterations is None:
            max_iterations = config.extrapolation.max_iterations

        self._reporter.action(f"Fitting {len(dataset)} observations")
        best, fits = fit_best(
            dataset,
            selection,
            weighting=config.fitting.weighting,
            condition_threshold=config.fitting.condition_threshold,
            exact_tolerance=config.fitting.exact_tolerance,
            reporter=self._reporter,
        )

        if ceiling is not None:
            self._reporter.action(f"Extrapolating {best.name} trend up to {ceiling:g}")
        sequences = extrapolate(
            best,
            len(dataset),
            ceiling,
            coordinate_transform,
            extra_x_values=extra,
            max_iterations=max_iterations,
        )

        return OutputBundle(
            data=dataset.data,
            trend=sequences.trend,
            top_confidence=sequences.top_confidence,
            bottom_confidence=sequences.bottom_confidence,
            ceiling=sequences.ceiling,
            r_squared=best.r_squared,
            guess=best.name,
            evaluated_extra_points=sequences.extra_points or None,
            per_shape={shape.value: fit.r_squared for shape, fit in fits.items()},
            best=best,
        )

    def fit_file(
        self,
        path: Path,
        config: CurveFitConfig | None = None,
        **kwargs: Any,
    ) -> OutputBundle:
        """Load an x+y data file and fit it.

        Args:
            path: Whitespace-separated "x y" file
            config: Fitting configuration
            **kwargs: Forwarded to ``fit``

        Returns
        -------
            OutputBundle for the file's data
        """
        from curvefit.io.xy import load_xy_file

        self._reporter.action(f"Loading {path}")
        return self.fit(load_xy_file(path), config, **kwargs)


def fit(
    data: Dataset | Sequence[Any],
    config: CurveFitConfig | None = None,
    *,
    reporter: Reporter | None = None,
    **kwargs: Any,
) -> OutputBundle:
    """Fit the best shape to the data in one call.

    Shortcut for ``FitService(reporter).fit(data, config, **kwargs)``.
    """
    return FitService(reporter).fit(data, config, **kwargs)


__all__ = ["FitService", "as_dataset", "fit"]
