import pytest
from decimal import Decimal
from prelude import InvalidArgument
from prelude.functional.aggregates import maximum, mean, minimum, product, sum


def test_sum():
    assert sum([]) == 0
    assert sum([1, 2, 3]) == 6
    assert sum((0.5, 0.25)) == 0.75


def test_product():
    assert product([2, 3, 4]) == 24
    assert product([5]) == 5


def test_product_of_empty_sequence_is_zero():
    assert product([]) == 0


def test_mean():
    assert mean([1, 2, 3, 4]) == 2.5
    assert mean([Decimal("1"), Decimal("2")]) == Decimal("1.5")
    assert mean([]) is None


def test_minimum_and_maximum():
    assert minimum([3, 1, 2]) == 1
    assert maximum([3, 1, 2]) == 3
    assert minimum(["b", "a", "c"]) == "a"
    assert maximum([7]) == 7


def test_minimum_returns_first_of_equal_elements():
    first = [1]
    second = [1]
    result = minimum([[2], first, second])
    assert result is first


@pytest.mark.parametrize("op", [minimum, maximum])
def test_extrema_of_empty_sequence_fail(op):
    with pytest.raises(InvalidArgument):
        op([])


@pytest.mark.parametrize("op", [sum, product, mean, minimum, maximum])
def test_aggregates_reject_non_sequence(op):
    with pytest.raises(InvalidArgument):
        op(12)
