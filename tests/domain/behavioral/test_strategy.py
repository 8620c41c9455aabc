import pytest

from patterncatalog.domain.behavioral.strategy import (
    ConditionalSum,
    always_true,
    is_even,
    is_odd,
    sum_with_condition,
)

NUMBERS = list(range(1, 9))


@pytest.mark.parametrize(
    "condition, expected",
    [(is_even, 20), (is_odd, 16), (always_true, 36)],
)
def test_sum_with_condition(condition, expected):
    assert sum_with_condition(NUMBERS, condition) == expected


def test_arbitrary_caller_supplied_condition():
    assert sum_with_condition(NUMBERS, lambda n: n > 5) == 6 + 7 + 8


def test_conditional_sum_strategy_object():
    strategy = ConditionalSum(is_even)

    assert strategy.apply(NUMBERS) == 20
    assert strategy(NUMBERS) == 20
    assert strategy.condition is is_even


def test_empty_sequence_sums_to_zero():
    assert sum_with_condition([], always_true) == 0
