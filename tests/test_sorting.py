import random

import pytest

from shapesort.comparators import ascending, descending
from shapesort.errors import InvalidInputError
from shapesort.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

ALL_SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, heap_sort]
STABLE_SORTS = [bubble_sort, insertion_sort, merge_sort]

by_value_desc = descending(lambda x: x)
by_value_asc = ascending(lambda x: x)


def _random_data(size: int, seed: int, high: int = 50) -> list:
    rng = random.Random(seed)
    return [rng.randint(0, high) for _ in range(size)]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_basic(sort_func):
    data = [5, 1, 4, 2, 8]
    sort_func(data, by_value_asc)
    assert data == [1, 2, 4, 5, 8]

    data = [5, 1, 4, 2, 8]
    sort_func(data, by_value_desc)
    assert data == [8, 5, 4, 2, 1]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_empty_and_single(sort_func):
    empty = []
    sort_func(empty, by_value_asc)
    assert empty == []

    single = [1]
    sort_func(single, by_value_asc)
    assert single == [1]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
@pytest.mark.parametrize("seed", range(5))
def test_sorting_is_permutation_and_ordered(sort_func, seed):
    data = _random_data(60, seed)
    expected = sorted(data)

    sort_func(data, by_value_asc)

    assert data == expected
    assert all(by_value_asc(a, b) >= 0 for a, b in zip(data, data[1:]))


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_keeps_element_identity(sort_func):
    items = [[3], [1], [2], [1]]
    original_ids = sorted(id(item) for item in items)

    sort_func(items, ascending(lambda item: item[0]))

    assert sorted(id(item) for item in items) == original_ids
    assert [item[0] for item in items] == [1, 1, 2, 3]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_is_idempotent(sort_func):
    data = _random_data(40, seed=7)
    sort_func(data, by_value_desc)
    once = list(data)

    sort_func(data, by_value_desc)

    assert data == once


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_already_ordered_input(sort_func):
    data = [1, 2, 3, 4, 5]
    sort_func(data, by_value_asc)
    assert data == [1, 2, 3, 4, 5]

    data = [5, 4, 3, 2, 1]
    sort_func(data, by_value_asc)
    assert data == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_duplicates(sort_func):
    data = [3, 1, 2, 3, 1]
    sort_func(data, by_value_asc)
    assert data == [1, 1, 2, 3, 3]


@pytest.mark.parametrize("sort_func", STABLE_SORTS)
def test_stable_sorts_preserve_tag_order(sort_func):
    rng = random.Random(3)
    records = [(rng.randint(0, 5), tag) for tag in range(50)]

    sort_func(records, ascending(lambda record: record[0]))

    assert records == sorted(records, key=lambda record: record[0])
    for (key_a, tag_a), (key_b, tag_b) in zip(records, records[1:]):
        if key_a == key_b:
            assert tag_a < tag_b


def test_all_sorts_agree_on_distinct_keys():
    rng = random.Random(11)
    base = rng.sample(range(1000), 100)
    results = []
    for sort_func in ALL_SORTS:
        data = list(base)
        sort_func(data, by_value_desc)
        results.append(data)

    assert all(result == results[0] for result in results)
    assert results[0] == sorted(base, reverse=True)


def test_concrete_heights():
    heights = [3.0, 1.0, 4.0, 1.5]
    quick_sort(heights, by_value_asc)
    assert heights == [1.0, 1.5, 3.0, 4.0]

    heights = [3.0, 1.0, 4.0, 1.5]
    bubble_sort(heights, by_value_desc)
    assert heights == [4.0, 3.0, 1.5, 1.0]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_rejects_missing_arguments(sort_func):
    with pytest.raises(InvalidInputError):
        sort_func(None, by_value_asc)

    data = [2, 1]
    with pytest.raises(InvalidInputError):
        sort_func(data, None)
    assert data == [2, 1]


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_sorting_rejects_non_list(sort_func):
    with pytest.raises(InvalidInputError):
        sort_func((2, 1), by_value_asc)


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_inconsistent_comparator_still_permutes(sort_func):
    rng = random.Random(5)
    data = list(range(30))

    sort_func(data, lambda a, b: rng.choice([-1, 0, 1]))

    assert sorted(data) == list(range(30))


@pytest.mark.parametrize("sort_func", ALL_SORTS)
def test_comparator_errors_propagate(sort_func):
    def broken(a, b):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        sort_func([2, 1, 3], broken)
