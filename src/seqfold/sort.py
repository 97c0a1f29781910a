"""
Binary search and the two sort strategies built on sequence primitives.

Comparators answer "does a come before b". ``lower_bound`` and
``insertion_sort`` default to ``greater`` and so produce descending order;
``quicksort`` defaults to ``less`` and produces ascending order. Pass the
other comparator explicitly to flip either one.
"""

from __future__ import annotations
from typing import TypeVar, Iterable
import logging

from .compare import CompareFunc, greater, less
from .primitives import filter, not_, threshold
from .sequence import Seq, as_seq, concat, join
from .signature import accepts

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_COMPARE: CompareFunc = greater
DEFAULT_PARTITION_COMPARE: CompareFunc = less


def _check_compare(compare: CompareFunc) -> None:
    if not accepts(compare, 2):
        raise TypeError(f"comparator {compare!r} must take two arguments")


def lower_bound(
    items: Iterable[T],
    sought: T,
    compare: CompareFunc[T] = DEFAULT_COMPARE,
    lo: int = 0,
    hi: int | None = None,
) -> int:
    """
    Index at which ``sought`` can be inserted keeping ``items`` ordered.

    ``items[lo:hi]`` must already be ordered by ``compare``. The result is
    the first index whose element ``sought`` strictly precedes, so equal
    elements stay in front of it. Returns ``hi`` when there is none.

    Example:
        lower_bound(Seq(5, 4, 2, 1), 3)        # 2
        lower_bound(Seq(1, 2, 4, 5), 3, less)  # 2

    Raises:
        IndexError: bounds outside ``0 <= lo <= hi <= len(items)``.
        TypeError: ``compare`` does not take two arguments.
    """
    seq = as_seq(items)
    if hi is None:
        hi = len(seq)
    if not 0 <= lo <= hi <= len(seq):
        raise IndexError(
            f"search bounds [{lo}, {hi}) invalid for sequence of length {len(seq)}"
        )
    _check_compare(compare)
    return _search(seq, sought, compare, lo, hi)


def _search(seq: Seq[T], sought: T, compare: CompareFunc[T], lo: int, hi: int) -> int:
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if compare(sought, seq[mid]):
            hi = mid
        else:
            lo = mid + 1
    return lo


def insertion_sort(items: Iterable[T], compare: CompareFunc[T] = DEFAULT_COMPARE) -> Seq[T]:
    """
    Sort by binary insertion.

    Each element is placed into the already sorted prefix at the slot found
    by ``lower_bound``, then the sequence is rebuilt around it. This spends
    O(log k) comparisons per insertion and O(k) to splice, so O(n log n)
    comparisons overall. Equal elements keep their input order.
    """
    seq = as_seq(items)
    _check_compare(compare)
    n = len(seq)
    logger.debug("insertion_sort: %d elements", n)

    for i in range(1, n):
        incoming = seq[i]
        pos = _search(seq, incoming, compare, 0, i)
        if pos == i:
            continue
        seq = concat(seq.slice(0, pos), Seq(incoming), seq.slice(pos, i), seq.slice(i + 1, n))
        logger.debug("insertion_sort: moved element %d to %d", i, pos)
    return seq


def quicksort(items: Iterable[T], compare: CompareFunc[T] = DEFAULT_PARTITION_COMPARE) -> Seq[T]:
    """
    Sort by partitioning around the first element.

    Elements the pivot precedes go after it, all others (including its
    equals) before it. Both parts are sorted and joined with the pivot
    between them. Worst case O(n^2) comparisons on inputs already in order;
    stack depth stays O(log n) since only the smaller part is recursed into.
    """
    seq = as_seq(items)
    _check_compare(compare)
    if seq.is_empty():
        return seq
    return _partition_sort(seq, compare)


def _partition_sort(seq: Seq[T], compare: CompareFunc[T]) -> Seq[T]:
    # sorted pieces left of the pending part, and right of it (innermost last)
    head: list[Seq[T]] = []
    tail: list[Seq[T]] = []

    while not seq.is_empty():
        pivot = seq.front()
        rest = seq.pop_front()
        after_pivot = threshold(pivot, compare)
        lower = filter(rest, not_(after_pivot))
        upper = filter(rest, after_pivot)
        logger.debug("quicksort: pivot %r, %d lower, %d upper", pivot, len(lower), len(upper))

        if len(lower) <= len(upper):
            head.append(join(pivot, _partition_sort(lower, compare), Seq()))
            seq = upper
        else:
            tail.append(join(pivot, Seq(), _partition_sort(upper, compare)))
            seq = lower

    return concat(*head, *reversed(tail))
