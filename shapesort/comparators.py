"""Comparator contract shared by every sorting algorithm.

A comparator is a callable ``comparator(a, b) -> int`` that decides the
relative placement of two elements:

* a positive result means ``a`` belongs *before* ``b``;
* a negative result means ``a`` belongs *after* ``b``;
* zero means the two elements are tied.

Every algorithm in :mod:`shapesort.sorting` arranges its output so that
``comparator(out[i], out[i + 1]) >= 0`` holds for each adjacent pair. The
algorithms never flip direction themselves: ascending or descending output is
chosen by building the appropriate comparator with the helpers below.

The comparator must be a strict total order (consistent, transitive and
anti-symmetric) for the output to be sorted. A comparator that breaks the
contract yields an unspecified order, but the output is still a permutation
of the input.
"""
from typing import Any, Callable, List

from .errors import InvalidInputError

Comparator = Callable[[Any, Any], int]
KeyFunc = Callable[[Any], float]


def _three_way(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


def descending(key: KeyFunc) -> Comparator:
    """Comparator placing elements with larger ``key`` values first."""

    def compare(a: Any, b: Any) -> int:
        return _three_way(key(a), key(b))

    return compare


def ascending(key: KeyFunc) -> Comparator:
    """Comparator placing elements with smaller ``key`` values first."""

    def compare(a: Any, b: Any) -> int:
        return _three_way(key(b), key(a))

    return compare


def reverse(comparator: Comparator) -> Comparator:
    """Return a comparator producing the opposite order of ``comparator``."""

    def compare(a: Any, b: Any) -> int:
        return comparator(b, a)

    return compare


def validate_input(sequence: List[Any], comparator: Comparator) -> None:
    """Check the arguments of a sort call before anything is mutated.

    Raises:
        InvalidInputError: if ``sequence`` is not a list or ``comparator``
            is not callable.
    """
    if sequence is None:
        raise InvalidInputError("Sequence cannot be None")
    if not isinstance(sequence, list):
        raise InvalidInputError(
            f"Sequence must be a list, got {type(sequence).__name__}"
        )
    if comparator is None:
        raise InvalidInputError("Comparator cannot be None")
    if not callable(comparator):
        raise InvalidInputError("Comparator must be callable")
