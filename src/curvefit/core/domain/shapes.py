"""Model catalog: the fixed set of candidate polynomial shapes.

Shapes are a closed enumeration. The declaration order below is the
canonical catalog order used for selection and tie-breaking.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from curvefit.core.shared.exceptions import UnknownShapeError

if TYPE_CHECKING:
    from collections.abc import Iterable


class Shape(str, Enum):
    """Named polynomial model family."""

    LINEAR = "Linear"
    QUADRATIC = "Quadratic"
    CUBIC = "Cubic"
    POLYNOMIAL4 = "Polynomial4"
    POLYNOMIAL5 = "Polynomial5"
    POLYNOMIAL6 = "Polynomial6"

    @property
    def degree(self) -> int:
        """Polynomial degree of the shape."""
        return SHAPE_DEGREES[self]

    @property
    def n_coefficients(self) -> int:
        """Number of coefficients (degree + 1)."""
        return self.degree + 1

    def __str__(self) -> str:
        return self.value


SHAPE_DEGREES: dict[Shape, int] = {
    Shape.LINEAR: 1,
    Shape.QUADRATIC: 2,
    Shape.CUBIC: 3,
    Shape.POLYNOMIAL4: 4,
    Shape.POLYNOMIAL5: 5,
    Shape.POLYNOMIAL6: 6,
}

CATALOG: tuple[Shape, ...] = tuple(Shape)
SHAPE_NAMES: tuple[str, ...] = tuple(shape.value for shape in CATALOG)


def shape_for_name(name: str | Shape) -> Shape:
    """Look up a shape by its catalog name.

    Raises
    ------
        UnknownShapeError: If the name is not part of the catalog
    """
    if isinstance(name, Shape):
        return name
    try:
        return Shape(name)
    except ValueError:
        msg = f"Unknown shape '{name}'. Known shapes: {', '.join(SHAPE_NAMES)}"
        raise UnknownShapeError(msg) from None


def shape_for_degree(degree: int) -> Shape:
    """Look up a shape by polynomial degree."""
    for shape, shape_degree in SHAPE_DEGREES.items():
        if shape_degree == degree:
            return shape
    msg = f"No shape with degree {degree}; degrees 1-6 are supported"
    raise UnknownShapeError(msg)


def shapes(selection: Iterable[str | Shape] | None = None) -> list[Shape]:
    """Return the candidate shapes in catalog order.

    Args:
        selection: Optional shape names to restrict the catalog to. Order
            and duplicates are ignored; the result always follows catalog
            order.

    Returns
    -------
        Ordered list of shapes

    Raises
    ------
        UnknownShapeError: If any name in the selection is not recognized
    """
    if selection is None:
        return list(CATALOG)

    wanted = {shape_for_name(name) for name in selection}
    return [shape for shape in CATALOG if shape in wanted]


__all__ = [
    "CATALOG",
    "SHAPE_DEGREES",
    "SHAPE_NAMES",
    "Shape",
    "shape_for_degree",
    "shape_for_name",
    "shapes",
]
