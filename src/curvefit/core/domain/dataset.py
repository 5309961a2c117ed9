"""Observations and datasets.

The x coordinate of an observation is positional: whatever x the caller
supplied is kept only for reporting, and fitting always uses 0..n-1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from curvefit.core.shared.exceptions import InsufficientDataError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from curvefit.core.shared.typing import FloatArray

MIN_OBSERVATIONS = 2


@dataclass(frozen=True, slots=True)
class Observation:
    """A single (index, value) observation."""

    index: int
    value: float


@dataclass(frozen=True)
class Dataset:
    """Ordered, immutable sequence of observations indexed 0..n-1.

    Attributes
    ----------
        observations: Observations with contiguous indices starting at 0
        source: The caller's original data, reported back unchanged
    """

    observations: tuple[Observation, ...]
    source: tuple[Any, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if len(self.observations) < MIN_OBSERVATIONS:
            msg = (
                f"A dataset needs at least {MIN_OBSERVATIONS} observations, "
                f"got {len(self.observations)}"
            )
            raise InsufficientDataError(msg)
        for position, observation in enumerate(self.observations):
            if observation.index != position:
                msg = f"Observation indices must be contiguous from 0 (position {position})"
                raise ValueError(msg)
            if not math.isfinite(observation.value):
                msg = f"Observation {position} has non-finite value {observation.value!r}"
                raise ValueError(msg)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Dataset:
        """Build a dataset from y values, one per contiguous index."""
        ys = [float(value) for value in values]
        observations = tuple(Observation(i, y) for i, y in enumerate(ys))
        return cls(observations=observations, source=tuple((i, y) for i, y in enumerate(ys)))

    @classmethod
    def from_pairs(cls, pairs: Sequence[Sequence[Any]]) -> Dataset:
        """Build a dataset from (x, y) pairs.

        The x values are discarded for fitting and replaced by the position
        of each pair; the pairs themselves are kept as ``source``.
        """
        observations = tuple(Observation(i, float(pair[1])) for i, pair in enumerate(pairs))
        return cls(observations=observations, source=tuple(tuple(pair) for pair in pairs))

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def indices(self) -> FloatArray:
        """Observation indices as floats."""
        return np.arange(len(self.observations), dtype=float)

    @property
    def values(self) -> FloatArray:
        """Observation values."""
        return np.array([obs.value for obs in self.observations], dtype=float)

    @property
    def data(self) -> list[list[Any]]:
        """Caller's original data as a list of [x, y] pairs."""
        return [list(point) for point in self.source]


__all__ = ["MIN_OBSERVATIONS", "Dataset", "Observation"]
