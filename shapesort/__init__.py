"""Comparator-driven sorting of geometric shapes."""

from .comparators import Comparator, ascending, descending, reverse, validate_input
from .errors import (
    InvalidInputError,
    InvalidShapeError,
    ShapeFileError,
    ShapeSortError,
    UnknownAlgorithmError,
)
from .sort_manager import SortAlgorithm, SortManager, get_sort_function, parse_algorithm, sort
from .sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

__all__ = [
    "Comparator",
    "InvalidInputError",
    "InvalidShapeError",
    "ShapeFileError",
    "ShapeSortError",
    "SortAlgorithm",
    "SortManager",
    "UnknownAlgorithmError",
    "ascending",
    "bubble_sort",
    "descending",
    "get_sort_function",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "parse_algorithm",
    "quick_sort",
    "reverse",
    "selection_sort",
    "sort",
    "validate_input",
]
