"""Pull-style value suppliers, including one that reads from a connection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Supplier(ABC, Generic[T]):
    """A source of values that says whether another value is available."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True while another value can be taken."""

    @abstractmethod
    def next(self) -> T:
        """Take the next value."""

    def __iter__(self) -> Iterator[T]:
        while self.has_next():
            yield self.next()


class SocketSupplier(Supplier[bytes]):
    """Supplies chunks read from a connection by a reading function.

    The supplier always reads one chunk ahead so that ``has_next`` can
    answer without blocking. Any exception raised by the reading function
    is kept in ``error`` and ends the supply.
    """

    def __init__(self, conn: Any, read_func: Callable[[Any], bytes]) -> None:
        self.conn = conn
        self._read_func = read_func
        self.error: Optional[BaseException] = None
        self._pending: Optional[bytes] = None
        self._read_ahead()

    def _read_ahead(self) -> None:
        try:
            self._pending = self._read_func(self.conn)
            self.error = None
        except Exception as exc:
            self._pending = None
            self.error = exc

    def has_next(self) -> bool:
        return self.error is None

    def next(self) -> Optional[bytes]:
        """Return the chunk read ahead and read the following one."""
        result = self._pending
        self._read_ahead()
        return result