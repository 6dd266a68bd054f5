"""Heap sort."""
from typing import Any, List

from ...comparators import Comparator, validate_input
from ...utils import swap


def heap_sort(data: List[Any], comparator: Comparator) -> None:
    """Sort ``data`` in place with a binary heap.

    The heap keeps at its root the element that belongs *last* under
    ``comparator``; moving the root to the tail on every round fills the list
    from the back, giving the same order as the other algorithms.

    Args:
        data: list to sort
        comparator: precedence comparator

    Time complexity: O(n log n)
    Space complexity: O(1) besides O(log n) recursion in heapify
    """
    validate_input(data, comparator)
    n = len(data)

    # build the heap bottom-up
    for i in range(n // 2 - 1, -1, -1):
        _heapify(data, n, i, comparator)

    for i in range(n - 1, 0, -1):
        swap(data, 0, i)
        _heapify(data, i, 0, comparator)


def _heapify(arr: List[Any], n: int, i: int, comparator: Comparator) -> None:
    """Restore the heap property for the subtree rooted at ``i``.

    ``largest`` tracks the element that sorts furthest towards the end: a
    child is promoted when ``comparator(child, largest) < 0``. This inverts
    the textbook max-heap test ``> 0``, which would produce the reverse of
    the order given by the other algorithms.
    """
    largest = i
    left = 2 * i + 1
    right = 2 * i + 2

    if left < n and comparator(arr[left], arr[largest]) < 0:
        largest = left
    if right < n and comparator(arr[right], arr[largest]) < 0:
        largest = right
    if largest != i:
        swap(arr, i, largest)
        _heapify(arr, n, largest, comparator)
