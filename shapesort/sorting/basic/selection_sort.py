"""Selection sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input
from ...utils import swap


def selection_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place by selecting the leading element of the suffix.

    For each position ``i`` the unsorted suffix is scanned for the element
    that belongs first under ``comparator``, which is then swapped into ``i``.

    Args:
        data: list to sort
        comparator: precedence comparator

    Time complexity: O(n^2) in every case
    Space complexity: O(1)

    Not stable: the long-distance swap can reorder equal elements.
    """
    validate_input(data, comparator)
    n = len(data)

    for i in range(n - 1):
        extreme = i
        for j in range(i + 1, n):
            if comparator(data[j], data[extreme]) > 0:
                extreme = j
        if extreme != i:
            swap(data, i, extreme)
