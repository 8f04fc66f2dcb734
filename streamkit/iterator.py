"""Iteration over a sequence through the supplier interface."""

from __future__ import annotations

from typing import Sequence, TypeVar

from streamkit.supplier import Supplier

T = TypeVar("T")


class ArrayIterator(Supplier[T]):
    """Supplies the items of a sequence in order, without copying it."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items
        self._index = -1

    def has_next(self) -> bool:
        return self._index + 1 < len(self._items)

    def next(self) -> T:
        if not self.has_next():
            raise IndexError("iterator is exhausted")
        self._index += 1
        return self._items[self._index]