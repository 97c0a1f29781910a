"""
Immutable sequence with structural decomposition primitives.

A Seq never changes after construction. Every operation that looks like a
mutation (push, pop, reverse, slicing) returns a new Seq and leaves the
source valid.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Iterable, Iterator, Any, overload
from dataclasses import dataclass

from .errors import EmptySequenceError, KindMismatchError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Value(Generic[T]):
    """
    Typed constant carrier: one constant of a declared scalar kind.

    Example:
        Value(int, 3)
    """
    kind: type
    value: T

    def __post_init__(self) -> None:
        if not isinstance(self.value, self.kind):
            raise KindMismatchError(
                f"{self.value!r} is not of kind {self.kind.__name__}"
            )

    def __repr__(self) -> str:
        return f"Value({self.kind.__name__}, {self.value!r})"


class Seq(Generic[T]):
    """
    Ordered, immutable, fixed-length sequence.

    Backed by a tuple, so sub-sequences may share elements with their
    source without any aliasing hazard.

    Example:
        s = Seq(3, 1, 2)
        s.push_back(4)      # Seq(3, 1, 2, 4)
        s.pop_front()       # Seq(1, 2)
        s                   # still Seq(3, 1, 2)
    """

    __slots__ = ("_items",)

    def __init__(self, *items: T):
        object.__setattr__(self, "_items", items)

    @classmethod
    def of(cls, items: Iterable[T]) -> Seq[T]:
        """Build a Seq from any iterable."""
        return cls(*items)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Seq(*self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash((Seq, self._items))

    def __repr__(self) -> str:
        return f"Seq({', '.join(repr(x) for x in self._items)})"

    def to(self, factory: Callable[[Iterable[T]], R]) -> R:
        """Convert into another container, e.g. ``seq.to(list)``."""
        return factory(self._items)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def nth(self, index: int) -> T:
        """Element at ``index``; only ``0 <= index < len`` is accepted."""
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for sequence of length {len(self._items)}"
            )
        return self._items[index]

    def front(self) -> T:
        if not self._items:
            raise EmptySequenceError("front() of empty sequence")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise EmptySequenceError("back() of empty sequence")
        return self._items[-1]

    def push_front(self, item: T) -> Seq[T]:
        return Seq(item, *self._items)

    def push_back(self, item: T) -> Seq[T]:
        return Seq(*self._items, item)

    def pop_front(self) -> Seq[T]:
        if not self._items:
            raise EmptySequenceError("pop_front() of empty sequence")
        return Seq(*self._items[1:])

    def pop_back(self) -> Seq[T]:
        if not self._items:
            raise EmptySequenceError("pop_back() of empty sequence")
        return Seq(*self._items[:-1])

    def reverse(self) -> Seq[T]:
        return Seq(*reversed(self._items))

    def slice(self, start: int, stop: int) -> Seq[T]:
        """
        Elements in ``[start, stop)``.

        Unlike ``seq[start:stop]``, bounds are not clamped: anything outside
        ``0 <= start <= stop <= len`` raises IndexError.
        """
        if not 0 <= start <= stop <= len(self._items):
            raise IndexError(
                f"slice [{start}, {stop}) out of range for sequence of length {len(self._items)}"
            )
        return Seq(*self._items[start:stop])


def as_seq(items: Iterable[T]) -> Seq[T]:
    """Return ``items`` if it is already a Seq, else build one from it."""
    if isinstance(items, Seq):
        return items
    return Seq.of(items)


def value_list(kind: type, *values: Any) -> Seq[Value]:
    """Seq of Values sharing one kind: ``value_list(int, 1, 2, 3)``."""
    return Seq.of(Value(kind, v) for v in values)


def type_list(*types: type) -> Seq[type]:
    """Seq of type markers: ``type_list(int, bool, float)``."""
    for t in types:
        if not isinstance(t, type):
            raise KindMismatchError(f"{t!r} is not a type")
    return Seq(*types)


def concat(*seqs: Iterable[T]) -> Seq[T]:
    """Concatenate sequences in order."""
    items: list[T] = []
    for s in seqs:
        items.extend(s)
    return Seq.of(items)


def join(delim: T, *seqs: Iterable[T]) -> Seq[T]:
    """
    Concatenate sequences with ``delim`` between each consecutive pair.

    Example:
        join(0, Seq(1), Seq(2, 3), Seq(4))  # Seq(1, 0, 2, 3, 0, 4)
    """
    items: list[T] = []
    for i, s in enumerate(seqs):
        if i:
            items.append(delim)
        items.extend(s)
    return Seq.of(items)
