"""Doubly linked implementation of the list interface."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, Optional, TypeVar

from streamkit.array import List

E = TypeVar("E")


@dataclass(eq=False)
class Node(Generic[E]):
    """One link of a linked list."""

    value: E
    next: Optional["Node[E]"] = field(default=None, repr=False)
    prev: Optional["Node[E]"] = field(default=None, repr=False)


class Linked(List[E]):
    """Doubly linked list. Not safe for concurrent modification."""

    def __init__(self, equals: Callable[[E, E], bool] = operator.eq) -> None:
        self._equals = equals
        self._head: Optional[Node[E]] = None
        self._tail: Optional[Node[E]] = None
        self._length = 0

    @property
    def equals(self) -> Callable[[E, E], bool]:
        return self._equals

    def _nodes(self) -> Iterator[Node[E]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> Node[E]:
        index = operator.index(index)
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for size {self._length}")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push(self, element: E) -> None:
        node = Node(element, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def add(self, element: E) -> None:
        node = Node(element, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def remove(self, element: E) -> bool:
        for node in self._nodes():
            if self._equals(node.value, element):
                if node.prev is None:
                    self._head = node.next
                else:
                    node.prev.next = node.next
                if node.next is None:
                    self._tail = node.prev
                else:
                    node.next.prev = node.prev
                self._length -= 1
                return True
        return False

    def contains(self, element: E) -> bool:
        return self.index_of(element) != -1

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> E:
        return self._node_at(index).value

    def __setitem__(self, index: int, element: E) -> None:
        self._node_at(index).value = element

    def clear(self) -> None:
        self._head = self._tail = None
        self._length = 0

    def index_of(self, element: E) -> int:
        return next((i for i, v in enumerate(self) if self._equals(v, element)), -1)

    def last_index_of(self, element: E) -> int:
        return max((i for i, v in enumerate(self) if self._equals(v, element)), default=-1)

    def first(self) -> E:
        if self._head is None:
            raise IndexError("first of empty list")
        return self._head.value

    def last(self) -> E:
        if self._tail is None:
            raise IndexError("last of empty list")
        return self._tail.value

    def sub_list(self, start: int, stop: int) -> "Linked[E]":
        """Return elements start..stop as a new list, in reverse order."""
        if not 0 <= start <= stop <= self._length:
            raise IndexError(f"range [{start}:{stop}] out of bounds for size {self._length}")
        sub: Linked[E] = Linked(self._equals)
        for i, value in enumerate(self):
            if i >= stop:
                break
            if i >= start:
                sub.push(value)
        return sub

    def __iter__(self) -> Iterator[E]:
        return (node.value for node in self._nodes())