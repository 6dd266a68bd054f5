"""Helpers shared by the sorting algorithms."""
from typing import Any, List


def swap(items: List[Any], i: int, j: int) -> None:
    """Swap two elements of ``items`` in place.

    Args:
        items: list to operate on
        i: index of the first element
        j: index of the second element

    Time complexity: O(1)
    Space complexity: O(1)

    Example:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> arr
        [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]
