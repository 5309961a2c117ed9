"""Main Typer application for CurveFit.

Creates the application and registers the commands from the commands/
subpackage.
"""

from typing import Annotated

import typer

from curvefit.cli.callbacks import version_callback
from curvefit.cli.commands import fit_command, init_command, shapes_command

app = typer.Typer(
    name="curvefit",
    help="CurveFit - Polynomial trend fitting and ceiling extrapolation",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """CurveFit - Fit the best polynomial trend to x+y data.

    Selects the best shape by R², derives a confidence band, and projects
    the trend up to a ceiling.
    """


app.command(name="fit")(fit_command)
app.command(name="shapes")(shapes_command)
app.command(name="init")(init_command)
