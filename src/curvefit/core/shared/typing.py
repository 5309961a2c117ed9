"""Shared typing aliases used across CurveFit."""

from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]

# Maps an internal integer index (0, 1, 2, ...) to a caller-facing x value
CoordinateTransform = Callable[[int], Any]

# A single emitted (x, y) point; x may be any caller-domain value
Point = tuple[Any, float]
