"""Merge sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input


def merge_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place with a top-down merge sort.

    Each merge copies the two halves into temporary buffers and writes the
    merged run back into ``data``. On ties the left buffer wins, which keeps
    the sort stable.

    Args:
        data: list to sort
        comparator: precedence comparator

    Time complexity: O(n log n)
    Space complexity: O(n) for the merge buffers
    """
    validate_input(data, comparator)
    if len(data) < 2:
        return
    _merge_sort(data, 0, len(data) - 1, comparator)


def _merge_sort(arr: List[Any], left: int, right: int, comparator: Comparator) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort(arr, left, mid, comparator)
        _merge_sort(arr, mid + 1, right, comparator)
        _merge(arr, left, mid, right, comparator)


def _merge(arr: List[Any], left: int, mid: int, right: int, comparator: Comparator) -> None:
    left_run = arr[left:mid + 1]
    right_run = arr[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_run) and j < len(right_run):
        if comparator(left_run[i], right_run[j]) >= 0:
            arr[k] = left_run[i]
            i += 1
        else:
            arr[k] = right_run[j]
            j += 1
        k += 1

    for item in left_run[i:]:
        arr[k] = item
        k += 1
    for item in right_run[j:]:
        arr[k] = item
        k += 1
