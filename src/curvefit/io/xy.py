"""Reading and writing x+y coordinate-pair files.

Each line holds one whitespace-separated "x y" pair. Tokens that look like
integers become ``int``, other numbers become ``float``, and anything else
is kept as the raw string (so x can be a label such as a date).
"""

from __future__ import annotations

import re
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

from curvefit.core.shared.exceptions import DataIOError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

_INTEGER = re.compile(r"^[+-]?\d+$")
_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def string_to_number(token: str) -> int | float | str:
    """Convert a token to int or float, returning it unchanged otherwise."""
    if _INTEGER.match(token):
        return int(token)
    if _DECIMAL.match(token):
        return float(token)
    return token


def load_xy_file(path: Path) -> list[tuple[Any, int | float]]:
    """Load an x+y file as a list of (x, y) pairs.

    Args:
        path: File to read

    Returns
    -------
        List of (x, y) pairs, y always numeric

    Raises
    ------
        DataIOError: If the file is missing or a line is malformed
    """
    path = Path(path)
    if not path.exists():
        msg = f"Data file not found: {path}"
        raise DataIOError(msg)

    pairs: list[tuple[Any, int | float]] = []
    with path.open() as f:
        for line_number, line in enumerate(f, start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) < 2:
                msg = f"{path}:{line_number}: expected 'x y', got {line.strip()!r}"
                raise DataIOError(msg)
            x, y = string_to_number(tokens[0]), string_to_number(tokens[1])
            if isinstance(y, str):
                msg = f"{path}:{line_number}: y value {y!r} is not a number"
                raise DataIOError(msg)
            pairs.append((x, y))
    return pairs


def append_xy_file(path: Path, x: Any, y: Any) -> None:
    """Append a single "x y" line to a file."""
    with Path(path).open("a") as f:
        f.write(f"{x} {y}\n")


def write_xy_file(data: Iterable[Sequence[Any]], path: Path | None = None) -> Path:
    """Write (x, y) pairs to a file.

    Args:
        data: Pairs to write
        path: Destination; a named temporary file is created when omitted
            and left on disk for the caller

    Returns
    -------
        Path of the written file
    """
    if path is None:
        with tempfile.NamedTemporaryFile(
            "w", prefix="curvefit", suffix=".xy", delete=False
        ) as f:
            path = Path(f.name)
            f.writelines(f"{point[0]} {point[1]}\n" for point in data)
        return path

    path = Path(path)
    with path.open("w") as f:
        f.writelines(f"{point[0]} {point[1]}\n" for point in data)
    return path


__all__ = ["append_xy_file", "load_xy_file", "string_to_number", "write_xy_file"]
