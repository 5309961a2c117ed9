"""CSV writer for CurveFit results.

One row per emitted x with the trend, band and ceiling values side by side,
ready for pandas, R or a spreadsheet.
"""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from curvefit.core.results.bundle import OutputBundle

HEADER = ["x", "trend", "top_confidence", "bottom_confidence", "ceiling"]


def format_float(value: float, precision: int = 10) -> str:
    """Format a float compactly without losing meaningful digits."""
    return f"{value:.{precision}g}"


class CSVWriter:
    """Writer for ``fit.csv``."""

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def rows(self, bundle: OutputBundle) -> list[list[str]]:
        """Build the data rows for a bundle."""
        rows = []
        for i, (x, y) in enumerate(bundle.trend):
            ceiling = format_float(bundle.ceiling[i][1]) if bundle.ceiling else ""
            rows.append(
                [
                    str(x),
                    format_float(y),
                    format_float(bundle.top_confidence[i][1]),
                    format_float(bundle.bottom_confidence[i][1]),
                    ceiling,
                ]
            )
        return rows

    def write(self, bundle: OutputBundle, path: Path) -> None:
        """Write the bundle to a CSV file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as f:
            writer = csv.writer(f, delimiter=self.delimiter)
            f.write(f"# shape: {bundle.guess}\n")
            f.write(f"# r_squared: {format_float(bundle.r_squared)}\n")
            writer.writerow(HEADER)
            writer.writerows(self.rows(bundle))


def write_csv(bundle: OutputBundle, path: Path) -> None:
    """Write a bundle as CSV."""
    CSVWriter().write(bundle, path)


__all__ = ["HEADER", "CSVWriter", "format_float", "write_csv"]
