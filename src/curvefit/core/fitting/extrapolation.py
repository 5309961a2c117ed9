"""Sample a fitted shape into trend, confidence and ceiling point sequences.

Without a ceiling, one point is emitted per original observation
(x = 0 .. n-1). With a ceiling C the loop keeps going until the trend
reaches C: each step evaluates and emits the point at x, then stops if
``trend(x) >= C``. The first point at or above the ceiling is therefore the
last one emitted. A trend that never reaches C is cut off after
``max_iterations`` points with ``CeilingUnreachableError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from curvefit.core.shared.exceptions import CeilingUnreachableError, ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from curvefit.core.fitting.orchestrator import BestFit
    from curvefit.core.shared.typing import CoordinateTransform, Point

DEFAULT_MAX_ITERATIONS = 100_000


@dataclass(frozen=True)
class Extrapolation:
    """Point sequences produced from a fitted shape."""

    trend: list[Point] = field(default_factory=list)
    top_confidence: list[Point] = field(default_factory=list)
    bottom_confidence: list[Point] = field(default_factory=list)
    ceiling: list[Point] = field(default_factory=list)
    extra_points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.trend)


def evaluate_extra_points(best_fit: BestFit, x_values: Iterable[Any]) -> list[Point]:
    """Evaluate the trend only at caller-supplied x values.

    The x values are reported as given: they are neither transformed nor
    subject to the ceiling. They must be numeric, since the trend is a
    polynomial in the integer index.

    Raises
    ------
        ConfigError: If an x value cannot be converted to a float
    """
    points: list[Point] = []
    for x in x_values:
        try:
            position = float(x)
        except (TypeError, ValueError) as exc:
            msg = f"Extra x value {x!r} is not numeric"
            raise ConfigError(msg) from exc
        points.append((x, best_fit.trend(position)))
    return points


def extrapolate(
    best_fit: BestFit,
    dataset_length: int,
    ceiling: float | None = None,
    coordinate_transform: CoordinateTransform | None = None,
    *,
    extra_x_values: Iterable[Any] = (),
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Extrapolation:
    """Sample the best fit's polynomials over x = 0, 1, 2, ...

    Args:
        best_fit: Winning shape fit
        dataset_length: Number of original observations
        ceiling: Optional y value to extrapolate the trend up to
        coordinate_transform: Optional mapping of the integer x to the
            caller-facing coordinate of every emitted point
        extra_x_values: Additional x values to evaluate the trend at
        max_iterations: Maximum number of points emitted while seeking
            the ceiling

    Returns
    -------
        Extrapolation with the trend, band, ceiling and extra point sequences

    Raises
    ------
        CeilingUnreachableError: If the trend does not reach the ceiling
            within ``max_iterations`` points
        ConfigError: If an extra x value is not numeric
    """
    if dataset_length < 1:
        msg = f"dataset_length must be positive, got {dataset_length}"
        raise ValueError(msg)
    if max_iterations < 1:
        msg = f"max_iterations must be positive, got {max_iterations}"
        raise ValueError(msg)

    trend: list[Point] = []
    top: list[Point] = []
    bottom: list[Point] = []
    ceiling_line: list[Point] = []
    ceiling_value = None if ceiling is None else float(ceiling)

    x = 0
    while True:
        if ceiling_value is None and x >= dataset_length:
            break
        if ceiling_value is not None and x >= max_iterations:
            msg = (
                f"{best_fit.name} trend did not reach ceiling {ceiling_value:g} "
                f"within {max_iterations} points (last value {trend[-1][1]:g})"
            )
            raise CeilingUnreachableError(msg)

        y = best_fit.trend(float(x))
        coordinate = x if coordinate_transform is None else coordinate_transform(x)

        trend.append((coordinate, y))
        top.append((coordinate, best_fit.top_confidence(float(x))))
        bottom.append((coordinate, best_fit.bottom_confidence(float(x))))
        if ceiling_value is not None:
            ceiling_line.append((coordinate, ceiling_value))

        x += 1
        if ceiling_value is not None and y >= ceiling_value:
            break

    return Extrapolation(
        trend=trend,
        top_confidence=top,
        bottom_confidence=bottom,
        ceiling=ceiling_line,
        extra_points=evaluate_extra_points(best_fit, extra_x_values),
    )


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "Extrapolation",
    "evaluate_extra_points",
    "extrapolate",
]
