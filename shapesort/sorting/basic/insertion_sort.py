"""Insertion sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input


def insertion_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place by inserting each element into the sorted prefix.

    Args:
        data: list to sort
        comparator: precedence comparator

    Time complexity:
        - worst case: O(n^2)
        - best case: O(n) when the input is already ordered
    Space complexity: O(1)
    """
    validate_input(data, comparator)

    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        # shift predecessors that belong after key one slot to the right
        while j >= 0 and comparator(data[j], key) < 0:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
