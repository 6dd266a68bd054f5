"""Comparator-driven in-place sorting algorithms."""

from .advanced.heap_sort import heap_sort
from .advanced.merge_sort import merge_sort
from .basic.bubble_sort import bubble_sort
from .basic.insertion_sort import insertion_sort
from .basic.quick_sort import quick_sort
from .basic.selection_sort import selection_sort

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]
