"""List interface and its array-backed implementation."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, List as _PyList, TypeVar

from streamkit.iterator import ArrayIterator

T = TypeVar("T")
K = TypeVar("K")


class List(ABC, Generic[T]):
    """Ordered collection whose element equality is given by a function."""

    @abstractmethod
    def add(self, element: T) -> None:
        """Append an element at the back."""

    @abstractmethod
    def push(self, element: T) -> None:
        """Insert an element at the front."""

    @abstractmethod
    def remove(self, element: T) -> bool:
        """Remove the first equal element; return whether one was found."""

    @abstractmethod
    def contains(self, element: T) -> bool:
        """Return whether an equal element is present."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __getitem__(self, index: int) -> T: ...

    @abstractmethod
    def __setitem__(self, index: int, element: T) -> None: ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def index_of(self, element: T) -> int:
        """Return the index of the first equal element, or -1."""

    @abstractmethod
    def last_index_of(self, element: T) -> int:
        """Return the index of the last equal element, or -1."""

    @abstractmethod
    def first(self) -> T:
        """Return the first element."""

    @abstractmethod
    def last(self) -> T:
        """Return the last element."""

    @abstractmethod
    def sub_list(self, start: int, stop: int) -> "List[T]":
        """Return the elements from start up to stop as a new list."""

    def is_empty(self) -> bool:
        return len(self) == 0


def _check_index(index: Any, size: int) -> int:
    index = operator.index(index)
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for size {size}")
    return index


def _check_range(start: int, stop: int, size: int) -> None:
    if not 0 <= start <= stop <= size:
        raise IndexError(f"range [{start}:{stop}] out of bounds for size {size}")


class Array(List[T]):
    """Array-backed list. Not safe for concurrent modification."""

    def __init__(
        self,
        equals: Callable[[T, T], bool] = operator.eq,
        capacity: int = 0,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._elements: _PyList[T] = []
        self._equals = equals
        self._capacity = capacity

    @classmethod
    def _from_elements(cls, elements, equals, capacity=0) -> "Array[T]":
        array = cls(equals, capacity)
        array._elements = list(elements)
        return array

    @property
    def equals(self) -> Callable[[T, T], bool]:
        return self._equals

    @property
    def capacity(self) -> int:
        """Reserved room; never less than the current size."""
        return max(self._capacity, len(self._elements))

    def add(self, element: T) -> None:
        self._elements.append(element)

    def push(self, element: T) -> None:
        self._elements.insert(0, element)

    def remove(self, element: T) -> bool:
        index = self.index_of(element)
        if index == -1:
            return False
        del self._elements[index]
        return True

    def contains(self, element: T) -> bool:
        return any(self._equals(e, element) for e in self._elements)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._elements) + "]"

    def __repr__(self) -> str:
        return f"Array({self._elements!r})"

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> T:
        return self._elements[_check_index(index, len(self._elements))]

    def __setitem__(self, index: int, element: T) -> None:
        self._elements[_check_index(index, len(self._elements))] = element

    def clear(self) -> None:
        self._capacity = self.capacity
        self._elements = []

    def index_of(self, element: T) -> int:
        return next(
            (i for i, e in enumerate(self._elements) if self._equals(e, element)),
            -1,
        )

    def last_index_of(self, element: T) -> int:
        last = len(self._elements) - 1
        return next(
            (
                last - i
                for i, e in enumerate(reversed(self._elements))
                if self._equals(e, element)
            ),
            -1,
        )

    def first(self) -> T:
        if not self._elements:
            raise IndexError("first of empty array")
        return self._elements[0]

    def last(self) -> T:
        if not self._elements:
            raise IndexError("last of empty array")
        return self._elements[-1]

    def sub_list(self, start: int, stop: int) -> "Array[T]":
        return Array._from_elements(self.sub_slice(start, stop), self._equals)

    def sub_slice(self, start: int, stop: int) -> _PyList[T]:
        _check_range(start, stop, len(self._elements))
        return self._elements[start:stop]

    def add_all(self, other: "Array[T]") -> None:
        self._elements.extend(other._elements)

    def remove_all(self, other: "Array[T]") -> None:
        for element in list(other._elements):
            self.remove(element)

    def retain_all(self, other: "Array[T]") -> None:
        self._elements = [e for e in self._elements if other.contains(e)]

    def is_empty(self) -> bool:
        return not self._elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        if len(self) != len(other):
            return False
        if self._elements:
            head = self._elements[0]
            if not other._equals(head, head):
                return False
        return all(
            self._equals(mine, theirs)
            for mine, theirs in zip(self._elements, other._elements)
        )

    __hash__ = None  # type: ignore[assignment]

    def clone(self) -> "Array[T]":
        """Return a shallow copy."""
        return Array._from_elements(self._elements, self._equals, self._capacity)

    def to_list(self) -> _PyList[T]:
        return list(self._elements)

    def for_each(self, func: Callable[[T], Any]) -> None:
        for element in self._elements:
            func(element)

    def filter(self, predicate: Callable[[T], bool]) -> "Array[T]":
        """Return the matching elements.

        Each match is pushed to the front, so the result is in reverse order.
        """
        filtered: Array[T] = Array(self._equals, self.capacity)
        for element in self._elements:
            if predicate(element):
                filtered.push(element)
        return filtered

    def iterator(self) -> ArrayIterator[T]:
        return ArrayIterator(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)


def map_array(
    array: Array[T],
    func: Callable[[T], K],
    new_equals: Callable[[K, K], bool] = operator.eq,
) -> Array[K]:
    """Apply func to every element into a new array.

    Each result is pushed to the front, so the output is in reverse order.
    """
    mapped: Array[K] = Array(new_equals, array.capacity)
    for element in array:
        mapped.push(func(element))
    return mapped