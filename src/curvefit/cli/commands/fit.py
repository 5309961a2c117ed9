"""Fit command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated, get_args

import typer
from pydantic import ValidationError
from rich.markup import escape

from curvefit.core.domain.config import (
    CurveFitConfig,
    ExtrapolationConfig,
    FitConfig,
    OutputConfig,
    OutputFormat,
)
from curvefit.core.shared.exceptions import CurveFitError
from curvefit.io.config import load_config

# Valid output formats for CLI validation
VALID_OUTPUT_FORMATS = get_args(OutputFormat)  # ("csv", "json", "txt")


def build_config(
    base: CurveFitConfig,
    *,
    shapes: list[str] | None = None,
    weighting: str | None = None,
    ceiling: float | None = None,
    extra_x: list[float] | None = None,
    max_iterations: int | None = None,
    output: pathlib.Path | None = None,
    formats: list[str] | None = None,
    plot: bool | None = None,
) -> CurveFitConfig:
    """Return a copy of ``base`` with every explicitly given option applied.

    Sections are rebuilt through their models so overrides are validated.
    """
    fitting = base.fitting.model_dump()
    if shapes:
        fitting["shapes"] = shapes
    if weighting is not None:
        fitting["weighting"] = weighting

    extrapolation = base.extrapolation.model_dump()
    if ceiling is not None:
        extrapolation["ceiling"] = ceiling
    if extra_x:
        extrapolation["extra_x_values"] = extra_x
    if max_iterations is not None:
        extrapolation["max_iterations"] = max_iterations

    output_config = base.output.model_dump()
    if output is not None:
        output_config["directory"] = output
    if formats:
        output_config["formats"] = formats
    if plot is not None:
        output_config["save_figures"] = plot

    return CurveFitConfig(
        fitting=FitConfig(**fitting),
        extrapolation=ExtrapolationConfig(**extrapolation),
        output=OutputConfig(**output_config),
    )


def fit_command(
    data: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to x+y data file (one whitespace-separated pair per line)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    ceiling: Annotated[
        float | None,
        typer.Option(
            "--ceiling",
            "-C",
            help="Extrapolate the trend until it reaches this value",
        ),
    ] = None,
    shapes: Annotated[
        list[str] | None,
        typer.Option(
            "--shape",
            "-s",
            help="Candidate shape (can be specified multiple times). "
            "Default: Linear, Quadratic, Cubic, Polynomial4, Polynomial5, Polynomial6",
        ),
    ] = None,
    weighting: Annotated[
        str | None,
        typer.Option(
            "--weighting",
            help="Point weighting: sqrt (sigma = sqrt(y)) or none (plain least squares)",
        ),
    ] = None,
    extra_x: Annotated[
        list[float] | None,
        typer.Option(
            "--extra-x",
            "-x",
            help="Extra x value to evaluate the trend at (can be specified multiple times)",
        ),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option(
            "--max-iterations",
            help="Maximum number of points emitted while seeking the ceiling",
            min=1,
        ),
    ] = None,
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for results",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format(s): json, csv, txt. Can be specified multiple times.",
        ),
    ] = None,
    plot: Annotated[
        bool | None,
        typer.Option(
            "--plot/--no-plot",
            help="Save a PNG plot of the fit (default: config.output.save_figures)",
        ),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--log-file",
            help="Write a log file (.json for JSON lines)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show per-shape progress",
        ),
    ] = False,
) -> None:
    """Fit the best polynomial shape to x+y data and extrapolate it.

    Every candidate shape is fitted, the one with the highest R² wins, and
    its trend and confidence band are sampled at each observation (or up to
    the ceiling).

    Examples
    --------
    Basic usage:
        $ curvefit fit usage.xy

    Project a linear trend up to a capacity limit:
        $ curvefit fit usage.xy --shape Linear --ceiling 10000

    Using a configuration file:
        $ curvefit fit usage.xy --config curvefit.toml
    """
    import logging

    from curvefit.core.shared.reporter import CompositeReporter, LoggingReporter, Reporter
    from curvefit.io.output import write_outputs
    from curvefit.services import FitService
    from curvefit.ui import (
        ConsoleReporter,
        Verbosity,
        close_logging,
        error,
        log_dict,
        print_shape_table,
        print_summary,
        set_verbosity,
        setup_logging,
        success,
    )

    set_verbosity(Verbosity.VERBOSE if verbose else Verbosity.NORMAL)

    if formats:
        invalid_formats = [f for f in formats if f not in VALID_OUTPUT_FORMATS]
        if invalid_formats:
            msg = (
                f"Invalid format(s): {', '.join(invalid_formats)}. "
                f"Valid formats: {', '.join(VALID_OUTPUT_FORMATS)}"
            )
            raise typer.BadParameter(msg)

    try:
        base = load_config(config) if config is not None else CurveFitConfig()
        fit_config = build_config(
            base,
            shapes=shapes,
            weighting=weighting,
            ceiling=ceiling,
            extra_x=extra_x,
            max_iterations=max_iterations,
            output=output,
            formats=formats,
            plot=plot,
        )
    except (CurveFitError, ValidationError) as e:
        error(f"Invalid configuration: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    reporter: Reporter = ConsoleReporter()
    if log_file is not None:
        # Console output stays with ConsoleReporter; the logger only feeds the file
        setup_logging(
            log_file,
            verbose=False,
            level=logging.DEBUG,
            log_format=fit_config.output.log_format,
        )
        reporter = CompositeReporter([reporter, LoggingReporter()])

    try:
        bundle = FitService(reporter).fit_file(data, fit_config)
        written = write_outputs(bundle, fit_config.output)

        summary: dict[str, object] = {
            "Shape": bundle.guess,
            "R²": f"{bundle.r_squared:.6f}",
            "Observations": len(bundle.data),
            "Points": len(bundle.trend),
        }
        if bundle.best is not None:
            summary["Trend"] = bundle.best.trend.format()
        if bundle.ceiling:
            last_x, last_y = bundle.trend[-1]
            summary["Ceiling reached"] = f"x = {last_x} (trend {last_y:.6g})"
        log_dict(summary)
    except CurveFitError as e:
        error(f"{type(e).__name__}: {escape(str(e))}")
        raise typer.Exit(code=1) from e
    finally:
        close_logging()

    print_summary(summary, title="Fit Summary")
    print_shape_table(bundle)

    for path in written:
        success(f"Wrote [path]{path}[/path]")
