"""Shapes command implementation."""

from __future__ import annotations

from curvefit.core.domain.shapes import CATALOG
from curvefit.ui import console, create_table


def shapes_command() -> None:
    """List the candidate shapes in catalog order."""
    table = create_table("Shapes")
    table.add_column("Shape", style="key")
    table.add_column("Degree", justify="right")
    table.add_column("Formula", style="value")

    for shape in CATALOG:
        terms = ["a0", "a1*x"] + [f"a{k}*x^{k}" for k in range(2, shape.degree + 1)]
        table.add_row(shape.value, str(shape.degree), " + ".join(terms))

    console.print(table)
