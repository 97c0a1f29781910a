"""
Higher-order operations over sequences: transform, accumulate, filter,
and predicate combinators.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Iterable, Any

from .compare import CompareFunc, Predicate, less
from .sequence import Seq, as_seq
from .signature import accepts

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


def transform(items: Iterable[T], func: Callable[[T], U]) -> Seq[U]:
    """Apply ``func`` to every element, preserving order."""
    return Seq.of(func(x) for x in as_seq(items))


def accumulate(items: Iterable[T], func: Callable[[A, T], A], init: A) -> A:
    """
    Left fold: ``func(...func(func(init, s0), s1)..., sn)``.

    Returns ``init`` for an empty sequence.

    Example:
        accumulate(value_list(int, 1, 3, 2), larger_value, Value(int, 0))
        # Value(int, 3)
    """
    result = init
    for x in as_seq(items):
        result = func(result, x)
    return result


def filter(items: Iterable[T], predicate: Predicate[T]) -> Seq[T]:
    """Keep elements satisfying ``predicate``, in their original order."""
    if not accepts(predicate, 1):
        raise TypeError(f"predicate {predicate!r} must take one argument")
    return Seq.of(x for x in as_seq(items) if predicate(x))


def not_(predicate: Predicate[T]) -> Predicate[T]:
    """Logical complement of ``predicate``."""
    def negated(x: T) -> bool:
        return not predicate(x)
    return negated


def threshold(reference: Any, compare: CompareFunc) -> Predicate:
    """Predicate holding for elements that ``reference`` strictly precedes."""
    def after_reference(x: Any) -> bool:
        return compare(reference, x)
    return after_reference


def above(reference: Any) -> Predicate:
    """``x > reference``."""
    return threshold(reference, less)


def at_most(reference: Any) -> Predicate:
    """``x <= reference``."""
    return not_(above(reference))
