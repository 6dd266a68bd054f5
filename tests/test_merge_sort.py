from shapesort.comparators import ascending, descending
from shapesort.sorting import merge_sort


def test_merge_sort_basic():
    data = [5, 1, 4, 2, 8]
    merge_sort(data, ascending(lambda x: x))
    assert data == [1, 2, 4, 5, 8]


def test_merge_sort_empty_list():
    data = []
    merge_sort(data, ascending(lambda x: x))
    assert data == []


def test_merge_sort_odd_length_descending():
    data = [2, 7, 1, 8, 2, 8, 1]
    merge_sort(data, descending(lambda x: x))
    assert data == [8, 8, 7, 2, 2, 1, 1]


def test_merge_sort_ties_keep_input_order():
    data = [("b", 1), ("a", 0), ("c", 1), ("d", 0)]
    merge_sort(data, descending(lambda pair: pair[1]))
    assert data == [("b", 1), ("c", 1), ("a", 0), ("d", 0)]


def test_merge_sort_sorts_list_in_place():
    data = [3, 2, 1]
    alias = data
    merge_sort(data, ascending(lambda x: x))
    assert alias is data
    assert alias == [1, 2, 3]
