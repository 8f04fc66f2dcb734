"""Streams of values drawn from a supplier."""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Optional, TypeVar

from streamkit.iterator import ArrayIterator
from streamkit.supplier import Supplier

T = TypeVar("T")

_NOTHING = object()


class _FilteredSupplier(Supplier[T]):
    """Supplies the values of another supplier that match a predicate."""

    def __init__(self, source: Supplier[T], predicate: Callable[[T], bool]) -> None:
        self._source = source
        self._predicate = predicate
        self._pending: Any = _NOTHING

    def has_next(self) -> bool:
        while self._pending is _NOTHING and self._source.has_next():
            candidate = self._source.next()
            if self._predicate(candidate):
                self._pending = candidate
        return self._pending is not _NOTHING

    def next(self) -> T:
        if not self.has_next():
            raise IndexError("supplier is exhausted")
        value, self._pending = self._pending, _NOTHING
        return value


class IteratorStream(Generic[T]):
    """A one-shot stream over the values of a supplier."""

    def __init__(self, iterator: Supplier[T]) -> None:
        self._iterator = iterator

    def for_each(self, func: Callable[[T], Any]) -> None:
        for value in self._iterator:
            func(value)

    def filter(self, predicate: Callable[[T], bool]) -> "IteratorStream[T]":
        return IteratorStream(_FilteredSupplier(self._iterator, predicate))

    def reduce(self, func: Callable[[T, T], T]) -> Optional[T]:
        """Fold the values with func; return None if there are none."""
        values = iter(self._iterator)
        first = next(values, _NOTHING)
        if first is _NOTHING:
            return None
        return functools.reduce(func, values, first)


def of(*args: T) -> IteratorStream[T]:
    """Return a stream over the given values."""
    return IteratorStream(ArrayIterator(args))