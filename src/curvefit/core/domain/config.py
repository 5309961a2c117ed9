"""Configuration models for CurveFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curvefit.core.algorithms.solver import (
    DEFAULT_CONDITION_THRESHOLD,
    DEFAULT_EXACT_TOLERANCE,
    DEFAULT_WEIGHTING,
    Weighting,
)
from curvefit.core.domain.shapes import SHAPE_NAMES, shapes
from curvefit.core.fitting.extrapolation import DEFAULT_MAX_ITERATIONS

OutputFormat = Literal["csv", "json", "txt"]
LogFormat = Literal["text", "json"]


class FitConfig(BaseModel):
    """Configuration for shape selection and the polynomial solver.

    Example:
        [fitting]
        shapes = ["Linear", "Quadratic"]
        weighting = "sqrt"
    """

    model_config = ConfigDict(extra="forbid")

    shapes: list[str] = Field(
        default_factory=lambda: list(SHAPE_NAMES),
        description="Candidate shapes: Linear, Quadratic, Cubic, Polynomial4-6.",
    )
    weighting: Weighting = Field(
        default=DEFAULT_WEIGHTING,
        description="Point weighting: 'sqrt' (sigma = sqrt(y)) or 'none' (plain least squares).",
    )
    condition_threshold: Annotated[float, Field(gt=0)] = Field(
        default=DEFAULT_CONDITION_THRESHOLD,
        description="Largest accepted condition number of the scaled design matrix.",
    )
    exact_tolerance: Annotated[float, Field(gt=0)] = Field(
        default=DEFAULT_EXACT_TOLERANCE,
        description=(
            "Residual norm, relative to the spread of y around its mean, "
            "below which a fit is exact."
        ),
    )

    @field_validator("shapes")
    @classmethod
    def validate_shapes(cls, v: list[str]) -> list[str]:
        """Reject unknown names and normalise to catalog order."""
        selected = shapes(v)
        if not selected:
            msg = "At least one shape must be selected"
            raise ValueError(msg)
        return [shape.value for shape in selected]


class ExtrapolationConfig(BaseModel):
    """Configuration for projecting the trend past the data."""

    model_config = ConfigDict(extra="forbid")

    ceiling: float | None = Field(
        default=None,
        description="Y value to extrapolate the trend up to. None stops at the last observation.",
    )
    max_iterations: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_MAX_ITERATIONS,
        description="Maximum number of points emitted while seeking the ceiling.",
    )
    extra_x_values: list[float] = Field(
        default_factory=list,
        description="Additional x values to evaluate the trend at.",
    )


class OutputConfig(BaseModel):
    """Configuration for output file generation."""

    model_config = ConfigDict(extra="forbid")

    directory: Path = Field(default=Path("Fits"), description="Output directory for results.")
    formats: list[OutputFormat] = Field(
        default=["json"],
        description="Output formats for results.",
    )
    save_figures: bool = Field(default=False, description="Save a PNG plot of the fit.")
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )


class CurveFitConfig(BaseModel):
    """Top-level CurveFit configuration.

    Example TOML configuration:
        [fitting]
        shapes = ["Linear", "Quadratic", "Cubic"]

        [extrapolation]
        ceiling = 10000.0
        max_iterations = 5000

        [output]
        directory = "Fits"
        formats = ["json", "csv"]
    """

    model_config = ConfigDict(extra="forbid")

    fitting: FitConfig = Field(default_factory=FitConfig)
    extrapolation: ExtrapolationConfig = Field(default_factory=ExtrapolationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "CurveFitConfig",
    "ExtrapolationConfig",
    "FitConfig",
    "LogFormat",
    "OutputConfig",
    "OutputFormat",
]
