"""
Comparators, predicates and comparator helpers.

A comparator is a strict ordering predicate ``compare(a, b) -> bool``
answering "does a come before b". Values are compared by payload and only
against Values of the same kind; any other elements use ``<`` / ``>``.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Any

from .errors import KindMismatchError
from .sequence import Value

T = TypeVar("T")

CompareFunc = Callable[[T, T], bool]
Predicate = Callable[[T], bool]


def _operands(a: Any, b: Any) -> tuple[Any, Any]:
    a_is_value = isinstance(a, Value)
    b_is_value = isinstance(b, Value)
    if not (a_is_value or b_is_value):
        return a, b
    if not (a_is_value and b_is_value):
        raise KindMismatchError(f"cannot compare {a!r} with {b!r}")
    if a.kind is not b.kind:
        raise KindMismatchError(
            f"cannot compare kind {a.kind.__name__} with kind {b.kind.__name__}"
        )
    return a.value, b.value


def less(a: Any, b: Any) -> bool:
    """Ascending order: a comes first when it is smaller."""
    x, y = _operands(a, b)
    return x < y


def greater(a: Any, b: Any) -> bool:
    """Descending order: a comes first when it is larger."""
    x, y = _operands(a, b)
    return x > y


def larger_value(a: Value, b: Value) -> Value:
    """Accumulator keeping the Value with the larger payload; ties keep ``a``."""
    return b if less(a, b) else a


class CountingCompare(Generic[T]):
    """
    Counts calls to a comparator.

    Useful for checking how many comparisons an algorithm spends. The
    counter is not synchronised: share an instance with one caller at a
    time, unlike the comparators themselves.

    Example:
        counted = CountingCompare(greater)
        insertion_sort(items, counted)
        print(f"{counted.calls} comparisons")
    """

    def __init__(self, compare: CompareFunc[T]):
        self._compare = compare
        self.calls = 0

    def __call__(self, a: T, b: T) -> bool:
        self.calls += 1
        return self._compare(a, b)

    def reset(self) -> None:
        self.calls = 0
