"""The single result artifact returned by a fit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from curvefit.core.fitting.orchestrator import BestFit
    from curvefit.core.shared.typing import Point


@dataclass(frozen=True)
class OutputBundle:
    """Fitted trend, confidence band and ceiling for one dataset.

    Attributes
    ----------
        data: The caller's original data, unchanged
        trend: Trend points
        top_confidence: Upper band points
        bottom_confidence: Lower band points
        ceiling: Ceiling points, empty when no ceiling was requested
        r_squared: R² of the winning shape
        guess: Name of the winning shape
        evaluated_extra_points: Trend evaluated at extra x values, or None
        per_shape: R² of every shape that could be solved, in catalog order
        best: The winning shape fit, for inspection
    """

    data: list[Any]
    trend: list[Point]
    top_confidence: list[Point]
    bottom_confidence: list[Point]
    ceiling: list[Point]
    r_squared: float
    guess: str
    evaluated_extra_points: list[Point] | None = None
    per_shape: dict[str, float] = field(default_factory=dict, compare=False)
    best: BestFit | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a mapping, omitting empty optional sequences."""
        result: dict[str, Any] = {
            "data": [list(point) for point in self.data],
            "trend": [list(point) for point in self.trend],
            "top_confidence": [list(point) for point in self.top_confidence],
            "bottom_confidence": [list(point) for point in self.bottom_confidence],
            "ceiling": [list(point) for point in self.ceiling],
            "r_squared": self.r_squared,
            "guess": self.guess,
        }
        if not self.ceiling:
            del result["ceiling"]
        if self.evaluated_extra_points:
            result["evaluated_extra_points"] = [list(p) for p in self.evaluated_extra_points]
        return result


__all__ = ["OutputBundle"]
