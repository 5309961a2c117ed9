"""UI tables for displaying fit results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from curvefit.core.domain.shapes import shape_for_name

from .console import console

if TYPE_CHECKING:
    from curvefit.core.results.bundle import OutputBundle

__all__ = [
    "create_table",
    "print_shape_table",
    "print_summary",
]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_shape_table(bundle: OutputBundle, title: str = "Candidate Shapes") -> None:
    """Print R² for every solved shape, marking the winner."""
    table = create_table(title)
    table.add_column("Shape", style="key")
    table.add_column("Degree", justify="right")
    table.add_column("R²", style="number", justify="right")
    table.add_column("", justify="center")

    for name, r_squared in bundle.per_shape.items():
        marker = "[success]best[/success]" if name == bundle.guess else ""
        table.add_row(name, str(shape_for_name(name).degree), f"{r_squared:.6f}", marker)

    console.print(table)
