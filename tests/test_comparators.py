import pytest

from shapesort.comparators import ascending, descending, reverse, validate_input
from shapesort.errors import InvalidInputError


def test_descending_puts_larger_first():
    compare = descending(lambda x: x)
    assert compare(5, 3) > 0
    assert compare(3, 5) < 0
    assert compare(4, 4) == 0


def test_ascending_puts_smaller_first():
    compare = ascending(lambda x: x)
    assert compare(3, 5) > 0
    assert compare(5, 3) < 0
    assert compare(4, 4) == 0


def test_comparators_return_unit_values():
    compare = descending(lambda x: x)
    assert compare(100.0, 1.0) == 1
    assert compare(1.0, 100.0) == -1


def test_reverse_flips_order():
    compare = reverse(descending(len))
    assert compare("a", "abc") > 0
    assert compare("abc", "a") < 0


def test_validate_input_accepts_empty_list():
    validate_input([], ascending(lambda x: x))


@pytest.mark.parametrize(
    "sequence, comparator",
    [
        (None, lambda a, b: 0),
        ([1], None),
        ((1, 2), lambda a, b: 0),
        ([1], "not callable"),
    ],
)
def test_validate_input_rejects(sequence, comparator):
    with pytest.raises(InvalidInputError):
        validate_input(sequence, comparator)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        validate_input(None, None)
