"""JSON output writer for CurveFit results.

Produces a machine-readable file with the serialized output bundle plus
the winning fit's coefficients and standard errors.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from curvefit.core.results.bundle import OutputBundle


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types, dates and Path objects."""

    def default(self, o: Any) -> Any:
        """Convert numpy types, dates and Path objects to Python types."""
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


class JSONWriter:
    """Writer for ``fit.json``."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def build(self, bundle: OutputBundle) -> dict[str, Any]:
        """Build the JSON document for a bundle."""
        document = bundle.to_dict()
        if bundle.per_shape:
            document["per_shape_r_squared"] = dict(bundle.per_shape)
        if bundle.best is not None:
            document["fit"] = bundle.best.summary()
        return document

    def write(self, bundle: OutputBundle, path: Path) -> None:
        """Write the bundle to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            json.dump(self.build(bundle), f, indent=self.indent, cls=NumpyEncoder)
            f.write("\n")


def write_json(bundle: OutputBundle, path: Path) -> None:
    """Write a bundle as JSON."""
    JSONWriter().write(bundle, path)


__all__ = ["JSONWriter", "NumpyEncoder", "write_json"]
