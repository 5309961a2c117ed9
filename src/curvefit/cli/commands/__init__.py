"""CLI command modules for CurveFit.

Each module exports a command function with its Typer annotations;
app.py imports and registers them.
"""

from curvefit.cli.commands.fit import fit_command
from curvefit.cli.commands.init import init_command
from curvefit.cli.commands.shapes import shapes_command

__all__ = ["fit_command", "init_command", "shapes_command"]
