"""Quick sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input
from ...utils import swap


def quick_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place with a recursive quick sort.

    The pivot is always the last element of the range; there is no
    randomisation and no median-of-three. Inputs that are already ordered,
    or that contain many ties, therefore hit the quadratic worst case and a
    recursion depth proportional to ``len(data)``, which can exceed Python's
    recursion limit on large lists.

    Args:
        data: list to sort
        comparator: precedence comparator

    Time complexity:
        - average: O(n log n)
        - worst: O(n^2)
    Space complexity: O(log n) expected recursion depth, O(n) worst case
    """
    validate_input(data, comparator)
    _quicksort(data, 0, len(data) - 1, comparator)


def _quicksort(arr: List[Any], low: int, high: int, comparator: Comparator) -> None:
    if low < high:
        pivot = _partition(arr, low, high, comparator)
        _quicksort(arr, low, pivot - 1, comparator)
        _quicksort(arr, pivot + 1, high, comparator)


def _partition(arr: List[Any], low: int, high: int, comparator: Comparator) -> int:
    """Partition ``arr[low:high + 1]`` around its last element.

    Elements that belong before the pivot are moved to the front of the
    range; the pivot is then placed right after them.

    Returns:
        int: final index of the pivot
    """
    pivot = arr[high]
    i = low - 1

    for j in range(low, high):
        if comparator(arr[j], pivot) > 0:
            i += 1
            swap(arr, i, j)

    swap(arr, i + 1, high)
    return i + 1
