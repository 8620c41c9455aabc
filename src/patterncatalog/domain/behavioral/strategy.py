"""Strategy - behavior injected as a callable policy."""
from __future__ import annotations

from typing import Callable, Iterable

Condition = Callable[[int], bool]


def sum_with_condition(integers: Iterable[int], condition: Condition) -> int:
    """Sum the integers the condition accepts."""
    return sum(value for value in integers if condition(value))


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_odd(value: int) -> bool:
    return value % 2 != 0


def always_true(value: int) -> bool:
    return True


class ConditionalSum:
    """A summing strategy bound to one condition.

    The condition is the only thing that varies; callers swap behavior by
    constructing another ConditionalSum, never by changing this class.
    """

    def __init__(self, condition: Condition):
        self._condition = condition

    @property
    def condition(self) -> Condition:
        return self._condition

    def apply(self, integers: Iterable[int]) -> int:
        return sum_with_condition(integers, self._condition)

    def __call__(self, integers: Iterable[int]) -> int:
        return self.apply(integers)
