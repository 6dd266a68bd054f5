"""Bubble sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input
from ...utils import swap


def bubble_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place by repeatedly swapping adjacent pairs.

    A pair ``(j, j + 1)`` is swapped when ``comparator(data[j], data[j + 1])``
    is negative, so the element that belongs first bubbles towards the front
    while the one that belongs last settles at the end of each pass.

    Args:
        data: list to sort
        comparator: precedence comparator, see :mod:`shapesort.comparators`

    Raises:
        InvalidInputError: if ``data`` or ``comparator`` is missing

    Time complexity: O(n^2) worst and average, O(n) when already ordered
    Space complexity: O(1)

    Properties:
        - stable: equal elements keep their relative order
        - stops after the first pass that performs no swap
    """
    validate_input(data, comparator)
    n = len(data)

    for i in range(n - 1):
        swapped = False
        # the last i elements are already in place
        for j in range(0, n - i - 1):
            if comparator(data[j], data[j + 1]) < 0:
                swap(data, j, j + 1)
                swapped = True
        if not swapped:
            break
