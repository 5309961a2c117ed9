"""Plain-text summary writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from curvefit.io.writers.csv_writer import format_float

if TYPE_CHECKING:
    from pathlib import Path

    from curvefit.core.results.bundle import OutputBundle


def format_summary(bundle: OutputBundle) -> str:
    """Render a human-readable summary of a bundle."""
    lines = [
        "# CurveFit Results",
        f"Shape:      {bundle.guess}",
        f"R-squared:  {format_float(bundle.r_squared, 8)}",
        f"Points:     {len(bundle.trend)} ({len(bundle.data)} observed)",
    ]
    if bundle.best is not None:
        lines.append(f"Trend:      {bundle.best.trend.format()}")
        if bundle.best.has_band:
            lines.append(f"Top:        {bundle.best.top_confidence.format()}")
            lines.append(f"Bottom:     {bundle.best.bottom_confidence.format()}")
    if bundle.ceiling:
        lines.append(f"Ceiling:    {format_float(bundle.ceiling[0][1])}")

    if bundle.per_shape:
        lines.extend(["", "# R-squared by shape"])
        lines.extend(
            f"{name:<12} {format_float(r_squared, 8)}" for name, r_squared in bundle.per_shape.items()
        )

    if bundle.evaluated_extra_points:
        lines.extend(["", "# Extra points"])
        lines.extend(f"{x} {format_float(y)}" for x, y in bundle.evaluated_extra_points)

    return "\n".join(lines) + "\n"


def write_txt(bundle: OutputBundle, path: Path) -> None:
    """Write a bundle summary as text."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_summary(bundle))


__all__ = ["format_summary", "write_txt"]
