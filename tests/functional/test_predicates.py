import pytest
from crazylambdas.functional.predicates import (
    is_empty_predicate,
    length_in_range_predicate,
)


def test_is_empty_predicate():
    is_empty = is_empty_predicate()

    assert is_empty("") is True
    assert is_empty("fasdfa") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hi", False),
        ("Hola", True),
        ("Amigo", True),
        ("Lalaland", True),
        ("Lambda rocks!", False),
    ],
)
def test_length_in_range_predicate(text, expected):
    in_range = length_in_range_predicate(4, 10)
    assert in_range(text) is expected


def test_length_in_range_predicate_bounds_are_inclusive():
    in_range = length_in_range_predicate(4, 10)

    assert in_range("a" * 3) is False
    assert in_range("a" * 4) is True
    assert in_range("a" * 10) is True
    assert in_range("a" * 11) is False


def test_length_in_range_predicate_single_length():
    in_range = length_in_range_predicate(0, 0)

    assert in_range("")
    assert not in_range("x")


def test_length_in_range_predicate_rejects_inverted_bounds():
    with pytest.raises(ValueError, match="must not exceed"):
        length_in_range_predicate(10, 4)


def test_length_in_range_predicate_rejects_negative_bounds():
    with pytest.raises(ValueError):
        length_in_range_predicate(-1, 4)
