"""Geometric solids and the comparators used to order them."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from .comparators import Comparator, ascending, descending
from .errors import InvalidShapeError


class ShapeKind(Enum):
    """Closed set of supported solids, valued by their file-format name."""

    CONE = "Cone"
    CYLINDER = "Cylinder"
    PYRAMID = "Pyramid"
    SQUARE_PRISM = "SquarePrism"
    TRIANGULAR_PRISM = "TriangularPrism"
    PENTAGONAL_PRISM = "PentagonalPrism"
    OCTAGONAL_PRISM = "OctagonalPrism"

    @classmethod
    def parse(cls, name: str) -> "ShapeKind":
        """Look up a kind by its case-insensitive file-format name."""
        kind = _KINDS_BY_NAME.get(name.strip().lower())
        if kind is None:
            raise InvalidShapeError(f"Unknown shape type: {name}")
        return kind


_KINDS_BY_NAME: Dict[str, ShapeKind] = {kind.value.lower(): kind for kind in ShapeKind}

# Base area as a function of the radius (round kinds) or side length.
_BASE_AREA: Dict[ShapeKind, Callable[[float], float]] = {
    ShapeKind.CONE: lambda r: math.pi * r ** 2,
    ShapeKind.CYLINDER: lambda r: math.pi * r ** 2,
    ShapeKind.PYRAMID: lambda s: s ** 2,
    ShapeKind.SQUARE_PRISM: lambda s: s ** 2,
    ShapeKind.TRIANGULAR_PRISM: lambda s: math.sqrt(3) / 4 * s ** 2,
    ShapeKind.PENTAGONAL_PRISM: lambda s: 5 * s ** 2 * math.tan(math.radians(54)) / 4,
    ShapeKind.OCTAGONAL_PRISM: lambda s: 2 * (1 + math.sqrt(2)) * s ** 2,
}

# Kinds whose volume is a third of base area times height.
_POINTED = {ShapeKind.CONE, ShapeKind.PYRAMID}


@dataclass(frozen=True)
class Shape:
    """A solid described by its kind, height and one shape parameter.

    ``parameter`` is the radius for cones and cylinders and the side length
    for pyramids and prisms. Shapes carry no natural ordering; sort them with
    a comparator from :func:`shape_comparator`.
    """

    kind: ShapeKind
    height: float
    parameter: float

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ShapeKind):
            raise InvalidShapeError(f"Unknown shape type: {self.kind!r}")
        # NaN compares equal to everything and would break the ordering
        if not (math.isfinite(self.height) and math.isfinite(self.parameter)):
            raise InvalidShapeError(
                f"Shape dimensions must be finite: height={self.height}, "
                f"parameter={self.parameter}"
            )
        if self.height <= 0 or self.parameter <= 0:
            raise InvalidShapeError(
                f"Shape dimensions must be positive: height={self.height}, "
                f"parameter={self.parameter}"
            )

    @property
    def base_area(self) -> float:
        return _BASE_AREA[self.kind](self.parameter)

    @property
    def volume(self) -> float:
        volume = self.base_area * self.height
        if self.kind in _POINTED:
            return volume / 3.0
        return volume

    def __str__(self) -> str:
        return (
            f"{self.kind.value} [height={self.height:.3f}, "
            f"base area={self.base_area:.3f}, volume={self.volume:.3f}]"
        )


class CompareType(Enum):
    """Shape property used as the sort key."""

    HEIGHT = "height"
    AREA = "area"
    VOLUME = "volume"

    @classmethod
    def parse(cls, name: str) -> "CompareType":
        """Accept ``h``/``a``/``v`` or the full names, case-insensitive."""
        value = name.strip().lower()
        for member in cls:
            if value in (member.value, member.value[0]):
                return member
        raise ValueError(
            f"Invalid compare type: {name}. Valid options are: h/height, a/area, v/volume"
        )

    @property
    def description(self) -> str:
        return {
            CompareType.HEIGHT: "Height",
            CompareType.AREA: "Base Area",
            CompareType.VOLUME: "Volume",
        }[self]


_KEYS: Dict[CompareType, Callable[[Shape], float]] = {
    CompareType.HEIGHT: lambda shape: shape.height,
    CompareType.AREA: lambda shape: shape.base_area,
    CompareType.VOLUME: lambda shape: shape.volume,
}


def shape_comparator(compare_type: CompareType, descending_order: bool = True) -> Comparator:
    """Build a comparator ordering shapes by ``compare_type``.

    Descending is the default, matching what the command line reports.
    """
    key = _KEYS[compare_type]
    if descending_order:
        return descending(key)
    return ascending(key)
