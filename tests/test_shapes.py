import math

import pytest

from shapesort.errors import InvalidShapeError
from shapesort.shapes import CompareType, Shape, ShapeKind, shape_comparator
from shapesort.sorting import merge_sort


@pytest.mark.parametrize(
    "kind, base_area, volume",
    [
        (ShapeKind.CONE, math.pi * 4, math.pi * 4 * 3 / 3),
        (ShapeKind.CYLINDER, math.pi * 4, math.pi * 4 * 3),
        (ShapeKind.PYRAMID, 4.0, 4.0),
        (ShapeKind.SQUARE_PRISM, 4.0, 12.0),
        (ShapeKind.TRIANGULAR_PRISM, math.sqrt(3), math.sqrt(3) * 3),
        (ShapeKind.PENTAGONAL_PRISM, 5 * 4 * math.tan(math.radians(54)) / 4,
         5 * 4 * math.tan(math.radians(54)) / 4 * 3),
        (ShapeKind.OCTAGONAL_PRISM, 2 * (1 + math.sqrt(2)) * 4, 2 * (1 + math.sqrt(2)) * 4 * 3),
    ],
)
def test_shape_geometry(kind, base_area, volume):
    shape = Shape(kind, height=3.0, parameter=2.0)
    assert shape.base_area == pytest.approx(base_area)
    assert shape.volume == pytest.approx(volume)


@pytest.mark.parametrize("height, parameter", [(0, 1), (1, 0), (-1, 2), (2, -0.5)])
def test_shape_rejects_non_positive_dimensions(height, parameter):
    with pytest.raises(InvalidShapeError):
        Shape(ShapeKind.CONE, height, parameter)


@pytest.mark.parametrize("height, parameter", [(math.nan, 1), (1, math.inf), (math.inf, math.nan)])
def test_shape_rejects_non_finite_dimensions(height, parameter):
    with pytest.raises(InvalidShapeError, match="finite"):
        Shape(ShapeKind.CYLINDER, height, parameter)


def test_shape_kind_parse_is_case_insensitive():
    assert ShapeKind.parse("octagonalprism") is ShapeKind.OCTAGONAL_PRISM
    assert ShapeKind.parse("CYLINDER") is ShapeKind.CYLINDER
    assert ShapeKind.parse("SquarePrism") is ShapeKind.SQUARE_PRISM


def test_shape_kind_parse_unknown():
    with pytest.raises(InvalidShapeError):
        ShapeKind.parse("Sphere")


def test_shape_string_format():
    shape = Shape(ShapeKind.SQUARE_PRISM, 2.0, 3.0)
    assert str(shape) == "SquarePrism [height=2.000, base area=9.000, volume=18.000]"


def test_shapes_are_immutable():
    shape = Shape(ShapeKind.CONE, 1.0, 1.0)
    with pytest.raises(AttributeError):
        shape.height = 2.0


def test_shapes_have_no_natural_order():
    with pytest.raises(TypeError):
        Shape(ShapeKind.CONE, 1.0, 1.0) < Shape(ShapeKind.CONE, 2.0, 1.0)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("h", CompareType.HEIGHT),
        ("Height", CompareType.HEIGHT),
        ("a", CompareType.AREA),
        ("AREA", CompareType.AREA),
        ("v", CompareType.VOLUME),
        ("volume", CompareType.VOLUME),
    ],
)
def test_compare_type_parse(value, expected):
    assert CompareType.parse(value) is expected


def test_compare_type_parse_invalid():
    with pytest.raises(ValueError, match="h/height, a/area, v/volume"):
        CompareType.parse("x")


def test_shape_comparator_orders_by_property():
    tall_thin = Shape(ShapeKind.CYLINDER, 10.0, 1.0)
    short_wide = Shape(ShapeKind.CYLINDER, 1.0, 5.0)
    mid = Shape(ShapeKind.PYRAMID, 5.0, 2.0)
    shapes = [mid, short_wide, tall_thin]

    merge_sort(shapes, shape_comparator(CompareType.HEIGHT))
    assert shapes == [tall_thin, mid, short_wide]

    merge_sort(shapes, shape_comparator(CompareType.AREA))
    assert shapes == [short_wide, mid, tall_thin]

    merge_sort(shapes, shape_comparator(CompareType.VOLUME, descending_order=False))
    assert [s.volume for s in shapes] == sorted(s.volume for s in shapes)
